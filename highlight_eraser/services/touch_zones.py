from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from PySide6.QtCore import QObject

from highlight_eraser.config import FULL_SCREEN, OVERRIDE_ALL
from highlight_eraser.models.gesture import GestureEvent, GestureKind
from highlight_eraser.utils.geometry_helpers import inside_box, zone_rect

logger = logging.getLogger(__name__)

Handler = Callable[[GestureEvent], bool]


@dataclass
class TouchZone:
    """
    A handler bound to one gesture kind over a ratio-based screen region.

    - overrides: ids of zones this one must be tried before. OVERRIDE_ALL
      puts it ahead of every zone that does not carry the wildcard itself.
    - rate: at most this many events per second are marked as samples.
      The handler still sees every event; ``event.sampled`` tells them apart.
    """
    id: str
    ges: GestureKind
    handler: Handler
    screen_zone: Dict[str, float] = field(default_factory=lambda: dict(FULL_SCREEN))
    overrides: Tuple[str, ...] = ()
    rate: Optional[float] = None
    _last_sample: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        self.ges = GestureKind.coerce(self.ges)
        self.overrides = tuple(self.overrides)
        if self.rate is not None and self.rate <= 0:
            raise ValueError(f"Touch zone {self.id!r}: rate must be positive, got {self.rate}")

    @property
    def overrides_all(self) -> bool:
        return OVERRIDE_ALL in self.overrides

    def take_sample(self, event: GestureEvent) -> bool:
        if self.rate is None:
            return True
        last = self._last_sample
        if last is not None and event.time - last < 1.0 / self.rate:
            return False
        self._last_sample = event.time
        return True

    def reset_sampling(self) -> None:
        self._last_sample = None


class TouchZoneRegistry(QObject):
    """
    Ordered handler table for gesture dispatch.

    Zones are tried in a stable topological order where each zone comes
    before the zones it overrides; unrelated zones keep registration order.
    The first handler returning True consumes the event. A release event
    restarts sampling on every rate-limited zone.
    """

    def __init__(self, width: float, height: float, parent=None):
        super().__init__(parent)
        self.width = width
        self.height = height
        self._zones: Dict[str, TouchZone] = {}
        self._order: List[str] = []

    def __contains__(self, zone_id: str) -> bool:
        return zone_id in self._zones

    def __len__(self) -> int:
        return len(self._zones)

    def get(self, zone_id: str) -> Optional[TouchZone]:
        return self._zones.get(zone_id)

    @property
    def order(self) -> List[str]:
        return list(self._order)

    def reset_sampling(self) -> None:
        for zone in self._zones.values():
            zone.reset_sampling()

    # ---------------------------
    # Registration
    # ---------------------------
    def register_touch_zones(self, zones: Iterable[TouchZone]) -> None:
        zones = list(zones)
        seen = set()
        for zone in zones:
            if zone.id in self._zones or zone.id in seen:
                raise ValueError(f"Touch zone {zone.id!r} is already registered")
            seen.add(zone.id)

        candidate = dict(self._zones)
        for zone in zones:
            candidate[zone.id] = zone
        order = self._resolve_order(candidate)

        self._zones = candidate
        self._order = order
        logger.debug("Registered %d touch zones; %d total", len(zones), len(self._zones))

    def unregister_touch_zones(self, zone_ids: Iterable[str]) -> None:
        removed = [zid for zid in zone_ids if self._zones.pop(zid, None) is not None]
        if not removed:
            return
        self._order = [zid for zid in self._order if zid in self._zones]
        logger.debug("Unregistered touch zones: %s", ", ".join(removed))

    @staticmethod
    def _resolve_order(zones: Dict[str, TouchZone]) -> List[str]:
        ids = list(zones)
        wildcard = {zid for zid in ids if zones[zid].overrides_all}

        # edge a -> b: a is tried before b
        successors: Dict[str, set] = {zid: set() for zid in ids}
        for zid in ids:
            zone = zones[zid]
            for target in zone.overrides:
                if target in zones and target != zid:
                    successors[zid].add(target)
            if zid in wildcard:
                successors[zid].update(other for other in ids if other not in wildcard)

        indegree = {zid: 0 for zid in ids}
        for zid in ids:
            for target in successors[zid]:
                indegree[target] += 1

        order: List[str] = []
        ready = [zid for zid in ids if indegree[zid] == 0]
        rank = {zid: i for i, zid in enumerate(ids)}
        while ready:
            ready.sort(key=rank.__getitem__)
            zid = ready.pop(0)
            order.append(zid)
            for target in successors[zid]:
                indegree[target] -= 1
                if indegree[target] == 0:
                    ready.append(target)

        if len(order) != len(ids):
            stuck = sorted(set(ids) - set(order), key=rank.__getitem__)
            raise ValueError(f"Cyclic touch zone overrides between: {', '.join(stuck)}")
        return order

    # ---------------------------
    # Dispatch
    # ---------------------------
    def _matches(self, zone: TouchZone, event: GestureEvent) -> bool:
        if zone.ges is not event.kind:
            return False
        if event.pos is None:
            return True
        return inside_box(event.pos, zone_rect(zone.screen_zone, self.width, self.height))

    def handlers_for(self, event: GestureEvent) -> List[TouchZone]:
        return [self._zones[zid] for zid in self._order if self._matches(self._zones[zid], event)]

    def dispatch(self, event: GestureEvent) -> bool:
        """Return True when some handler consumed the event."""
        if event.kind.is_release:
            self.reset_sampling()
        for zone in self.handlers_for(event):
            event.sampled = zone.take_sample(event)
            if zone.handler(event):
                logger.debug("Gesture %s consumed by zone %s", event.kind.value, zone.id)
                return True
        return False
