from __future__ import annotations

import logging
from typing import Set

from PySide6.QtCore import QObject, Signal, Property

logger = logging.getLogger(__name__)


class EraserSession(QObject):
    """
    Eraser mode flag plus the ids deleted during the current activation.

    ``set_active`` is the only way to change the flag; every deactivation
    path goes through it so that ``deleted_ids`` never outlives an
    activation.
    """
    active_changed = Signal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._active = False
        self._deleted_ids: Set[str] = set()

    @Property(bool, notify=active_changed)
    def active(self) -> bool:
        return self._active

    @property
    def deleted_ids(self) -> Set[str]:
        return self._deleted_ids

    def set_active(self, active: bool) -> bool:
        """Return True when the flag actually changed."""
        active = bool(active)
        if self._active == active:
            return False

        logger.info("Eraser state changing from %s to %s", self._active, active)
        self._active = active
        if not active:
            self._deleted_ids.clear()
            logger.debug("Cleared deleted highlights tracking")

        self.active_changed.emit(active)
        return True

    # --- Dedup bookkeeping ---
    def is_deleted(self, stable_id: str) -> bool:
        return stable_id in self._deleted_ids

    def mark_deleted(self, stable_id: str) -> None:
        self._deleted_ids.add(stable_id)

    def unmark_deleted(self, stable_id: str) -> None:
        self._deleted_ids.discard(stable_id)
