from __future__ import annotations

from dataclasses import dataclass, field

from PySide6.QtCore import QRectF


@dataclass(eq=False)
class HighlightBox:
    """
    On-screen rectangle for (one line of) a highlight.

    - list_position: index of the owning annotation in the store's list.
      Several boxes share a position when a highlight spans lines.
    - rect: page coordinates.
    """
    list_position: int
    rect: QRectF = field(default_factory=QRectF)
    color: str = "yellow"

    def __repr__(self) -> str:
        r = self.rect
        return (f"HighlightBox(list_position={self.list_position}, "
                f"rect=({r.x()}, {r.y()}, {r.width()}, {r.height()}))")
