from typing import Optional

from PySide6.QtCore import QPointF, QRectF


def inside_box(pos: Optional[QPointF], rect: QRectF) -> bool:
    """Closed containment: a point lying on an edge is inside."""
    if pos is None or rect is None:
        return False
    x, y = pos.x(), pos.y()
    return (rect.x() <= x <= rect.x() + rect.width()
            and rect.y() <= y <= rect.y() + rect.height())


def zone_rect(screen_zone: dict, width: float, height: float) -> QRectF:
    """Resolve a ratio-based screen zone against the screen size."""
    return QRectF(
        screen_zone.get("ratio_x", 0) * width,
        screen_zone.get("ratio_y", 0) * height,
        screen_zone.get("ratio_w", 1) * width,
        screen_zone.get("ratio_h", 1) * height,
    )


def rect_to_list(rect: QRectF) -> list:
    return [rect.x(), rect.y(), rect.width(), rect.height()]


def rect_from_list(values) -> QRectF:
    x, y, w, h = (float(v) for v in values)
    return QRectF(x, y, w, h)
