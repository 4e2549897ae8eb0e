import os
import sys

import pytest

# Headless Qt
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
from PySide6.QtCore import QPointF, QRectF
from PySide6.QtWidgets import QApplication

_app = QApplication.instance() or QApplication(sys.argv)

from highlight_eraser.models.annotation import Annotation
from highlight_eraser.models.highlight_box import HighlightBox
from highlight_eraser.services.annotation_store import AnnotationStore
from highlight_eraser.services.eraser_session import EraserSession
from highlight_eraser.views.page_view import PageView


class RecordingStore(AnnotationStore):
    """Store that records delete calls and can be told to fail."""

    def __init__(self, annotations=None, fail_positions=()):
        super().__init__(annotations)
        self.deleted_calls = []
        self.fail_positions = set(fail_positions)

    def delete_at(self, position):
        self.deleted_calls.append((position, self.annotations[position].datetime))
        if position in self.fail_positions:
            raise RuntimeError(f"store refused position {position}")
        return super().delete_at(position)


def make_annotations(*ids, page=1):
    return [Annotation(page=page, datetime=i) for i in ids]


def box(position, x=0, y=0, w=10, h=10):
    return HighlightBox(position, QRectF(x, y, w, h))


P = QPointF(5, 5)


@pytest.fixture
def session():
    s = EraserSession()
    s.set_active(True)
    return s


@pytest.fixture
def view():
    return PageView(page=1)


@pytest.fixture
def redraws(view):
    calls = []
    view.redraw_requested.connect(lambda: calls.append(True))
    return calls
