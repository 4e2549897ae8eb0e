from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from PySide6.QtCore import QPointF

from highlight_eraser.models.highlight_box import HighlightBox
from highlight_eraser.utils.geometry_helpers import inside_box

logger = logging.getLogger(__name__)


class HighlightBoxIndex:
    """
    Live, ordered list of the highlight boxes visible on the current page.

    The view layer refills it on every render; the erase engine repairs it
    in place after each deletion so that every box keeps pointing at the
    right entry of the annotation list.
    """

    def __init__(self, boxes: Optional[Iterable[HighlightBox]] = None):
        self._boxes: List[HighlightBox] = list(boxes or [])

    def __len__(self) -> int:
        return len(self._boxes)

    def __iter__(self) -> Iterator[HighlightBox]:
        return iter(self._boxes)

    def __getitem__(self, i: int) -> HighlightBox:
        return self._boxes[i]

    def __contains__(self, box: HighlightBox) -> bool:
        # identity, not equality: distinct boxes may share position and rect
        return any(b is box for b in self._boxes)

    # ---------------------------
    # Mutation
    # ---------------------------
    def replace(self, boxes: Iterable[HighlightBox]) -> None:
        self._boxes[:] = list(boxes)

    def clear(self) -> None:
        self._boxes.clear()

    # ---------------------------
    # Queries
    # ---------------------------
    def positions(self) -> List[int]:
        return [b.list_position for b in self._boxes]

    def boxes_at(self, page_pos: QPointF) -> List[HighlightBox]:
        return [b for b in self._boxes if inside_box(page_pos, b.rect)]

    # ---------------------------
    # Repair
    # ---------------------------
    def repair(self, deleted_position: int) -> None:
        """
        Bring the index in line with the annotation list after the entry at
        ``deleted_position`` was removed: drop every box of that entry and
        shift every later box down by one.
        """
        if deleted_position is None or deleted_position < 0:
            logger.warning("Invalid deleted position: %s", deleted_position)
            return

        before = len(self._boxes)
        self._boxes[:] = [b for b in self._boxes if b.list_position != deleted_position]
        removed = before - len(self._boxes)
        if removed == 0:
            logger.warning("No boxes found at position %d", deleted_position)

        shifted = 0
        for box in self._boxes:
            if box.list_position > deleted_position:
                box.list_position -= 1
                shifted += 1

        logger.debug("Repaired highlight boxes: removed %d, shifted %d", removed, shifted)
