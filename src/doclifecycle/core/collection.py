"""
In-memory collection storing document snapshots keyed by id.
"""

from __future__ import annotations

import copy
from threading import RLock
from typing import Any, Dict, Optional


class Collection:
    """
    Stores a deep copy of each saved document's data keyed by document id.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._store: Dict[str, Dict[str, Any]] = {}
        self._lock = RLock()

    def __repr__(self) -> str:
        return f"<Collection {self.name} ({len(self)} documents)>"

    def insert(self, document_id: str, data: Dict[str, Any]) -> None:
        with self._lock:
            if document_id in self._store:
                raise KeyError(f"Duplicate id '{document_id}' in collection '{self.name}'")
            self._store[document_id] = copy.deepcopy(data)

    def update(self, document_id: str, data: Dict[str, Any]) -> None:
        # Upsert: a document removed elsewhere is written back.
        with self._lock:
            self._store[document_id] = copy.deepcopy(data)

    def delete(self, document_id: str) -> bool:
        with self._lock:
            return self._store.pop(document_id, None) is not None

    def get(self, document_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            data = self._store.get(document_id)
            return copy.deepcopy(data) if data is not None else None

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, document_id: object) -> bool:
        with self._lock:
            return document_id in self._store
