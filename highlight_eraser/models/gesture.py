from __future__ import annotations

from time import monotonic
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from PySide6.QtCore import QPointF


class GestureKind(Enum):
    TAP = "tap"
    DOUBLE_TAP = "double_tap"
    HOLD = "hold"
    HOLD_PAN = "hold_pan"
    HOLD_RELEASE = "hold_release"
    PAN = "pan"
    PAN_RELEASE = "pan_release"
    SWIPE = "swipe"
    PINCH = "pinch"
    SPREAD = "spread"

    @classmethod
    def coerce(cls, value) -> "GestureKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown gesture kind {value!r}") from None

    @property
    def is_contact(self) -> bool:
        """Kinds whose position is an erase point."""
        return self in CONTACT_KINDS

    @property
    def is_continuous(self) -> bool:
        return self in CONTINUOUS_KINDS

    @property
    def is_release(self) -> bool:
        return self in (GestureKind.HOLD_RELEASE, GestureKind.PAN_RELEASE)


CONTACT_KINDS = frozenset({GestureKind.HOLD, GestureKind.HOLD_PAN, GestureKind.PAN})
CONTINUOUS_KINDS = frozenset({GestureKind.HOLD_PAN, GestureKind.PAN})


@dataclass
class GestureEvent:
    """A gesture already classified by the input layer."""
    kind: GestureKind
    pos: Optional[QPointF] = None
    time: float = field(default_factory=monotonic)
    args: Any = None
    sampled: bool = True    # False when the zone's rate drops this position

    def __post_init__(self):
        self.kind = GestureKind.coerce(self.kind)
