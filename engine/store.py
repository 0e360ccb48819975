"""
store.py — Saved Visualizations
=================================
In-memory, thread-safe home for traces users choose to keep.  Steps are
stored exactly as received (already-serialized dicts); the store never
looks inside them.

    store = VisualizationStore()
    saved = store.save("bubble-sort", {"array": [3, 1]}, steps)
    store.get(saved.id)
    store.list(limit=20, offset=0)
"""

import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from errors import InvalidInput, NotFound


@dataclass(frozen=True)
class SavedVisualization:
    id:           str
    algorithm_id: str
    input_data:   Dict[str, Any]
    steps:        List[Any]
    user_id:      Optional[str] = None
    is_public:    bool = False
    created_at:   datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":          self.id,
            "algorithmId": self.algorithm_id,
            "inputData":   self.input_data,
            "steps":       self.steps,
            "userId":      self.user_id,
            "isPublic":    self.is_public,
            "createdAt":   self.created_at.isoformat(),
        }


class VisualizationStore:

    def __init__(self):
        self._items: Dict[str, SavedVisualization] = {}
        self._lock = threading.Lock()

    def save(
        self,
        algorithm_id: str,
        input_data: Dict[str, Any],
        steps: List[Any],
        user_id: Optional[str] = None,
        is_public: bool = False,
    ) -> SavedVisualization:
        saved = SavedVisualization(
            id=str(uuid.uuid4()),
            algorithm_id=algorithm_id,
            input_data=dict(input_data),
            steps=list(steps),
            user_id=user_id,
            is_public=bool(is_public),
        )
        with self._lock:
            self._items[saved.id] = saved
        return saved

    def get(self, vis_id: str) -> SavedVisualization:
        with self._lock:
            saved = self._items.get(vis_id)
        if saved is None:
            raise NotFound(f"Visualization not found: {vis_id}")
        return saved

    def list(self, limit: int = 20, offset: int = 0, is_public: Optional[bool] = True) -> List[SavedVisualization]:
        """Page over saved items in insertion order.  is_public=None returns all."""
        if limit < 0 or offset < 0:
            raise InvalidInput("limit and offset must be non-negative")
        with self._lock:
            items = [v for v in self._items.values() if is_public is None or v.is_public == is_public]
        return items[offset:offset + limit]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


__all__ = ["SavedVisualization", "VisualizationStore"]
