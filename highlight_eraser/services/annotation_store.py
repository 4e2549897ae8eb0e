from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from PySide6.QtCore import QObject, Signal

from highlight_eraser.models.annotation import Annotation

logger = logging.getLogger(__name__)


class AnnotationStore(QObject):
    """Ordered, authoritative list of a document's highlights."""
    annotation_removed = Signal(int)

    def __init__(self, annotations: Optional[Iterable[Annotation]] = None, parent=None):
        super().__init__(parent)
        self._annotations: List[Annotation] = list(annotations or [])

    @property
    def annotations(self) -> List[Annotation]:
        return self._annotations

    def __len__(self) -> int:
        return len(self._annotations)

    def get(self, position: int) -> Optional[Annotation]:
        if position is None or not 0 <= position < len(self._annotations):
            return None
        return self._annotations[position]

    def add(self, annotation: Annotation) -> int:
        """Insert after every annotation on the same or an earlier page."""
        position = len(self._annotations)
        for i, existing in enumerate(self._annotations):
            if existing.page > annotation.page:
                position = i
                break
        self._annotations.insert(position, annotation)
        return position

    def delete_at(self, position: int) -> Annotation:
        """Remove by position; later entries shift down by one."""
        if not 0 <= position < len(self._annotations):
            raise IndexError(f"No annotation at position {position} (have {len(self._annotations)})")
        removed = self._annotations.pop(position)
        self.annotation_removed.emit(position)
        return removed

    # --- Persistence ---
    def to_dict(self) -> dict:
        return {"annotations": [a.to_dict() for a in self._annotations]}

    @classmethod
    def from_dict(cls, data: dict, parent=None) -> "AnnotationStore":
        return cls([Annotation.from_dict(a) for a in data.get("annotations", [])], parent=parent)

    def save(self, path: Union[str, Path]) -> None:
        path = Path(path)
        with path.open("w", encoding="utf-8") as fh:
            json.dump(self.to_dict(), fh, indent=2, ensure_ascii=False)
        logger.info("Saved %d annotations to %s", len(self._annotations), path)

    @classmethod
    def load(cls, path: Union[str, Path], parent=None) -> "AnnotationStore":
        path = Path(path)
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        return cls.from_dict(data, parent=parent)
