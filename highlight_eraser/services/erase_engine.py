from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from PySide6.QtCore import QPointF

if TYPE_CHECKING:
    from highlight_eraser.services.annotation_store import AnnotationStore
    from highlight_eraser.services.eraser_session import EraserSession
    from highlight_eraser.views.page_view import PageView

logger = logging.getLogger(__name__)


class EraseEngine:
    """Deletes the highlights under a screen position."""

    def __init__(self, session: "EraserSession", view: Optional["PageView"] = None,
                 store: Optional["AnnotationStore"] = None):
        self.session = session
        self.view = view
        self.store = store

    def erase_at(self, surface_pos: QPointF) -> bool:
        """
        Delete every highlight whose box contains ``surface_pos``.

        Returns True if at least one highlight was deleted. The hit boxes are
        collected up front; repairs mutate the live index (and the shared box
        objects) as the walk goes, so boxes dropped by an earlier repair are
        skipped and the survivors carry their corrected position.
        """
        if self.view is None or surface_pos is None:
            return False
        boxes = getattr(self.view, "visible_boxes", None)
        if not boxes:
            return False
        if self.store is None or self.store.annotations is None:
            logger.warning("Annotation store not available")
            return False

        page_pos = self.view.screen_to_page(surface_pos)
        hits = boxes.boxes_at(page_pos)
        # fallback ids use the position the box had when the call started
        hit_positions = {id(b): b.list_position for b in hits}
        deleted: List[int] = []

        for box in hits:
            if box not in boxes:
                continue

            position = box.list_position
            annotation = self.store.get(position)
            if annotation is None:
                logger.warning("No annotation found for box position %s", position)
                continue

            stable_id = annotation.stable_id(hit_positions[id(box)])
            if self.session.is_deleted(stable_id):
                logger.debug("Skipping already-deleted highlight: %s", stable_id)
                continue

            self.session.mark_deleted(stable_id)
            try:
                self.store.delete_at(position)
            except Exception as e:
                self.session.unmark_deleted(stable_id)
                logger.warning("Failed to delete highlight at position %d: %s", position, e)
                continue

            logger.info("Deleted highlight at position %d", position)
            deleted.append(position)
            boxes.repair(position)

        if deleted:
            self.view.set_dirty()
        return bool(deleted)
