"""
Exclusive Guards

An exclusive guard serializes every operation that observes and then
mutates the same entity. The unit of work acquires guards by key
(``"unit:42"``, ``"booking:7"``) and releases them only after the
transaction has committed or rolled back.

Two layers are used in this project:
1. KeyedLock (this module): an in-process mutex per key. Serializes
   request threads of one process on any database backend.
2. Row locks (SELECT ... FOR UPDATE) taken by the ORM repositories.
   Serialize across processes on PostgreSQL.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict

logger = logging.getLogger(__name__)


class AbstractGuard(ABC):
    """Acquire/release an exclusive hold on an entity key."""

    @abstractmethod
    def acquire(self, key: str, timeout: float | None = None) -> bool:
        """Block until the key is held. Returns False on timeout."""

    @abstractmethod
    def release(self, key: str) -> None:
        """Release a key previously acquired by the current thread."""


class _Entry:
    __slots__ = ("lock", "holders")

    def __init__(self):
        self.lock = threading.Lock()
        self.holders = 0


class KeyedLock(AbstractGuard):
    """
    In-process mutex keyed by entity id

    Entries are reference counted and dropped once nobody holds or waits
    for them, so the table does not grow with the number of units.
    """

    def __init__(self):
        self._entries: Dict[str, _Entry] = {}
        self._table_lock = threading.Lock()

    def acquire(self, key: str, timeout: float | None = None) -> bool:
        with self._table_lock:
            entry = self._entries.get(key)
            if entry is None:
                entry = self._entries[key] = _Entry()
            entry.holders += 1

        acquired = entry.lock.acquire(timeout=-1 if timeout is None else timeout)
        if not acquired:
            self._forget(key, entry)
            logger.warning(f"Timed out waiting for exclusive guard on {key}")
        return acquired

    def release(self, key: str) -> None:
        with self._table_lock:
            entry = self._entries.get(key)
        if entry is None:
            raise RuntimeError(f"Guard {key} is not held")
        entry.lock.release()
        self._forget(key, entry)

    def _forget(self, key: str, entry: _Entry) -> None:
        with self._table_lock:
            entry.holders -= 1
            if entry.holders == 0 and self._entries.get(key) is entry:
                del self._entries[key]

    def __len__(self) -> int:
        with self._table_lock:
            return len(self._entries)


def guard_key(entity: str, entity_id) -> str:
    return f"{entity}:{entity_id}"


# Process-wide guard shared by every unit of work
entity_guard = KeyedLock()
