# highlight_eraser/services/eraser_factory.py
from __future__ import annotations

from typing import Optional

from highlight_eraser.services.annotation_store import AnnotationStore
from highlight_eraser.services.eraser_controller import EraserController
from highlight_eraser.services.eraser_settings import EraserSettings
from highlight_eraser.services.reader_hub import ReaderHub
from highlight_eraser.services.touch_zones import TouchZoneRegistry
from highlight_eraser.views.page_view import PageView


def create_eraser(
    width: float,
    height: float,
    *,
    hub: Optional[ReaderHub] = None,
    zones: Optional[TouchZoneRegistry] = None,
    store: Optional[AnnotationStore] = None,
    view: Optional[PageView] = None,
    footer=None,
    settings: Optional[EraserSettings] = None,
    parent=None,
) -> EraserController:
    """
    Wire an eraser into a reader. Collaborators the host does not pass in
    are created empty; the view's boxes follow the store on page changes.
    """
    hub = hub if hub is not None else ReaderHub(parent)
    zones = zones if zones is not None else TouchZoneRegistry(width, height, parent)
    store = store if store is not None else AnnotationStore(parent=parent)
    view = view if view is not None else PageView(parent=parent)

    view.rebuild_visible_boxes(store)
    view.page_changed.connect(lambda _page: view.rebuild_visible_boxes(store))

    return EraserController(hub, zones, view=view, store=store, footer=footer,
                            settings=settings, parent=parent)
