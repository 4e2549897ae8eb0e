# highlight_eraser/views/page_view.py
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, QPointF, Signal
from PySide6.QtGui import QTransform

from highlight_eraser.models.highlight_box import HighlightBox
from highlight_eraser.services.highlight_box_index import HighlightBoxIndex


class PageView(QObject):
    """
    View-side state for the page on screen: the page->screen transform,
    the boxes of the highlights drawn on it, and a redraw sink.
    """
    redraw_requested = Signal()
    page_changed = Signal(int)

    def __init__(self, page: int = 1, zoom: float = 1.0, offset: Optional[QPointF] = None, parent=None):
        super().__init__(parent)
        self._page = page
        self._zoom = zoom
        self._offset = offset if offset is not None else QPointF(0, 0)
        self.visible_boxes = HighlightBoxIndex()

    # ---------- Transform ----------
    @property
    def page_to_screen(self) -> QTransform:
        t = QTransform()
        t.translate(self._offset.x(), self._offset.y())
        t.scale(self._zoom, self._zoom)
        return t

    def screen_to_page(self, pos: QPointF) -> QPointF:
        inverse, ok = self.page_to_screen.inverted()
        if not ok:
            return QPointF(pos)
        return inverse.map(pos)

    @property
    def zoom(self) -> float:
        return self._zoom

    @zoom.setter
    def zoom(self, value: float):
        if value <= 0:
            raise ValueError(f"zoom must be positive, got {value}")
        self._zoom = value

    @property
    def offset(self) -> QPointF:
        return self._offset

    @offset.setter
    def offset(self, value: QPointF):
        self._offset = QPointF(value)

    # ---------- Page / boxes ----------
    @property
    def page(self) -> int:
        return self._page

    @page.setter
    def page(self, new: int):
        if new == self._page:
            return
        self._page = new
        self.visible_boxes.clear()
        self.page_changed.emit(new)

    def rebuild_visible_boxes(self, store) -> HighlightBoxIndex:
        """One box per line rectangle of every annotation on the current page."""
        boxes = []
        for position, annotation in enumerate(store.annotations):
            if annotation.page != self._page:
                continue
            for rect in annotation.line_rects:
                boxes.append(HighlightBox(position, rect, annotation.color))
        self.visible_boxes.replace(boxes)
        return self.visible_boxes

    def set_dirty(self):
        self.redraw_requested.emit()
