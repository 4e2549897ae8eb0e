from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from PySide6.QtCore import QRectF

from highlight_eraser.utils.geometry_helpers import rect_from_list, rect_to_list


@dataclass
class Annotation:
    """A persisted highlight record."""
    page: int
    datetime: Optional[str] = None      # creation timestamp, unique per document
    text: str = ""
    color: str = "yellow"
    drawer: str = "lighten"
    line_rects: List[QRectF] = field(default_factory=list)   # page coordinates

    def stable_id(self, list_position: int) -> str:
        """
        Identity used to deduplicate deletions. Falls back to position and
        page when the record has no timestamp.
        """
        if self.datetime:
            return self.datetime
        page = self.page if self.page is not None else "unknown"
        return f"idx_{list_position}_page_{page}"

    # --- Serialization ---
    def to_dict(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "datetime": self.datetime,
            "text": self.text,
            "color": self.color,
            "drawer": self.drawer,
            "line_rects": [rect_to_list(r) for r in self.line_rects],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Annotation":
        return cls(
            page=data.get("page", data.get("pageno")),
            datetime=data.get("datetime"),
            text=data.get("text", ""),
            color=data.get("color", "yellow"),
            drawer=data.get("drawer", "lighten"),
            line_rects=[rect_from_list(r) for r in data.get("line_rects", [])],
        )
