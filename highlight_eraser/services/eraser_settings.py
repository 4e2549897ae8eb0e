from __future__ import annotations

from typing import Any, Dict, Optional

from PySide6.QtCore import QObject, Signal, Property

from highlight_eraser.config import DEFAULT_HOLD_PAN_RATE, LOW_HOLD_PAN_RATE


class EraserSettings(QObject):
    hold_pan_rate_changed = Signal(float)

    def __init__(self, hold_pan_rate: Optional[float] = None, low_pan_rate: bool = False, parent=None):
        super().__init__(parent)
        self._low_pan_rate = low_pan_rate
        self._hold_pan_rate: Optional[float] = None
        if hold_pan_rate is not None:
            self._hold_pan_rate = self._validate_rate(hold_pan_rate)

    @staticmethod
    def _validate_rate(rate) -> float:
        rate = float(rate)
        if rate <= 0:
            raise ValueError(f"hold_pan_rate must be positive, got {rate}")
        return rate

    @property
    def default_hold_pan_rate(self) -> float:
        return LOW_HOLD_PAN_RATE if self._low_pan_rate else DEFAULT_HOLD_PAN_RATE

    @Property(float, notify=hold_pan_rate_changed)
    def hold_pan_rate(self) -> float:
        if self._hold_pan_rate is None:
            return self.default_hold_pan_rate
        return self._hold_pan_rate

    @hold_pan_rate.setter
    def hold_pan_rate(self, rate):
        rate = self._validate_rate(rate)
        if rate == self._hold_pan_rate:
            return
        self._hold_pan_rate = rate
        self.hold_pan_rate_changed.emit(rate)

    # --- Serialization ---
    def to_dict(self) -> Dict[str, Any]:
        if self._hold_pan_rate is None:
            return {}
        return {"hold_pan_rate": self._hold_pan_rate}

    @classmethod
    def from_dict(cls, data: Optional[dict], low_pan_rate: bool = False) -> "EraserSettings":
        data = data or {}
        return cls(hold_pan_rate=data.get("hold_pan_rate"), low_pan_rate=low_pan_rate)
