"""
Eraser mode for the reader.

While the eraser key is held every gesture on the page is captured here:
nothing reaches page turning, menus, or highlight creation, and any contact
(hold, hold_pan, pan) deletes the highlights under it. Releasing the key,
suspending, opening a menu, or closing the document leaves eraser mode.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from PySide6.QtCore import QObject, Slot

from highlight_eraser.config import (
    ERASER_KEY,
    FOOTER_INDICATOR,
    FOOTER_INDICATOR_TEXT,
    FULL_SCREEN,
    ZONE_OVERRIDES,
)
from highlight_eraser.models.gesture import CONTINUOUS_KINDS, GestureEvent, GestureKind
from highlight_eraser.services.erase_engine import EraseEngine
from highlight_eraser.services.eraser_session import EraserSession
from highlight_eraser.services.eraser_settings import EraserSettings
from highlight_eraser.services.touch_zones import TouchZone, TouchZoneRegistry

if TYPE_CHECKING:
    from highlight_eraser.services.annotation_store import AnnotationStore
    from highlight_eraser.services.reader_hub import ReaderHub
    from highlight_eraser.views.page_view import PageView

logger = logging.getLogger(__name__)

ZONE_PREFIX = "eraser_"


class EraserController(QObject):
    def __init__(
        self,
        hub: "ReaderHub",
        zones: TouchZoneRegistry,
        *,
        view: Optional["PageView"] = None,
        store: Optional["AnnotationStore"] = None,
        footer=None,
        settings: Optional[EraserSettings] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.hub = hub
        self.zones = zones
        self.footer = footer
        self.settings = settings or EraserSettings(parent=self)

        self.session = EraserSession(self)
        self.engine = EraseEngine(self.session, view, store)
        self._footer_func = None

        self.session.active_changed.connect(self._on_active_changed)
        self.settings.hold_pan_rate_changed.connect(self._on_hold_pan_rate_changed)
        hub.key_pressed.connect(self.on_key_press)
        hub.key_released.connect(self.on_key_release)
        hub.suspended.connect(self.on_suspend)
        hub.resumed.connect(self.on_resume)
        hub.config_menu_opening.connect(self.on_show_config_menu)
        hub.document_closed.connect(self.on_close_document)
        hub.reader_ready.connect(self.on_reader_ready)

    # ---------- State ----------
    @property
    def is_active(self) -> bool:
        return self.session.active

    def set_active(self, active: bool) -> bool:
        return self.session.set_active(active)

    @Slot(bool)
    def _on_active_changed(self, active: bool):
        if not active:
            self.zones.reset_sampling()
        self.hub.refresh_additional_content.emit()

    @Slot(float)
    def _on_hold_pan_rate_changed(self, rate: float):
        for kind in CONTINUOUS_KINDS:
            zone = self.zones.get(ZONE_PREFIX + kind.value)
            if zone is not None:
                zone.rate = rate

    # ---------- Gestures ----------
    def handle_gesture(self, event: GestureEvent) -> bool:
        """True consumes the gesture; False lets normal handling proceed."""
        if not self.session.active:
            return False

        logger.debug("Blocking gesture %s in eraser mode", event.kind.value)
        # a position dropped by the zone's rate is still consumed
        if event.pos is not None and event.kind.is_contact and event.sampled:
            self.engine.erase_at(event.pos)
        return True

    def build_touch_zones(self) -> List[TouchZone]:
        # hold is a single contact; only pans are rate limited
        return [
            TouchZone(
                id=ZONE_PREFIX + kind.value,
                ges=kind,
                screen_zone=dict(FULL_SCREEN),
                overrides=ZONE_OVERRIDES,
                rate=self.settings.hold_pan_rate if kind.is_continuous else None,
                handler=self.handle_gesture,
            )
            for kind in GestureKind
        ]

    @property
    def zone_ids(self) -> List[str]:
        return [ZONE_PREFIX + kind.value for kind in GestureKind]

    # ---------- Host notifications ----------
    @Slot()
    def on_reader_ready(self):
        # registered late so the overridden reader zones already exist
        if not any(zid in self.zones for zid in self.zone_ids):
            self.zones.register_touch_zones(self.build_touch_zones())
            logger.info("Registered %d eraser touch zones", len(self.zone_ids))
        self.register_footer_indicator()

    @Slot(str)
    def on_key_press(self, key: str) -> bool:
        if key == ERASER_KEY:
            logger.info("Eraser button pressed")
            self.set_active(True)
        return False

    @Slot(str)
    def on_key_release(self, key: str) -> bool:
        if key == ERASER_KEY and self.session.active:
            logger.info("Eraser button released")
            self.set_active(False)
            return True
        return False

    @Slot()
    def on_suspend(self):
        # a key held through sleep never delivers its release
        if self.session.active:
            logger.info("Deactivated eraser mode on suspend")
            self.set_active(False)

    @Slot()
    def on_resume(self):
        self.set_active(False)

    @Slot()
    def on_show_config_menu(self) -> bool:
        # the menu may swallow the key release
        if self.session.active:
            logger.warning("Menu opened while eraser active, resetting state")
            self.set_active(False)
        return False

    @Slot()
    def on_close_document(self):
        self.set_active(False)
        self.zones.unregister_touch_zones(self.zone_ids)
        self.unregister_footer_indicator()

    # ---------- Footer ----------
    def footer_text(self) -> Optional[str]:
        if not self.session.active:
            return None
        prefix = None
        if self.footer is not None:
            prefix = getattr(self.footer, "settings", {}).get("item_prefix")
        return FOOTER_INDICATOR.get(prefix, FOOTER_INDICATOR_TEXT)

    def register_footer_indicator(self):
        if self.footer is None or self._footer_func is not None:
            return
        self._footer_func = self.footer_text
        self.footer.add_additional_content(self._footer_func)

    def unregister_footer_indicator(self):
        if self.footer is None or self._footer_func is None:
            return
        self.footer.remove_additional_content(self._footer_func)
        self._footer_func = None
