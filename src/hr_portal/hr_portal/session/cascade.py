from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, List

from ..core.enums import Collection


@dataclass(frozen=True)
class PendingDeletion:
    account_id: Any
    collection: Collection
    record_id: Any
    error: str


class CascadeLog:
    """Dependent-record deletions that failed during a cascade and still need retrying."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: List[PendingDeletion] = []

    def add(self, entry: PendingDeletion) -> None:
        with self._lock:
            self._entries = [
                e for e in self._entries if (e.collection, e.record_id) != (entry.collection, entry.record_id)
            ]
            self._entries.append(entry)

    def discard(self, entry: PendingDeletion) -> None:
        with self._lock:
            self._entries = [
                e for e in self._entries if (e.collection, e.record_id) != (entry.collection, entry.record_id)
            ]

    def pending(self) -> List[PendingDeletion]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
