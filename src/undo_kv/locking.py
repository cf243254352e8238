from __future__ import annotations

from collections.abc import Hashable, Iterator
from contextlib import contextmanager
from threading import RLock

from undo_kv.ports.store import UndoableStore


class LockedKvStore(UndoableStore):
    # Whole-store exclusive lock; each call is one atomic read-modify-write over map and stacks.
    def __init__(self, inner: UndoableStore) -> None:
        self._inner = inner
        self._lock = RLock()

    @property
    def inner(self) -> UndoableStore:
        return self._inner

    @contextmanager
    def locked(self) -> Iterator[UndoableStore]:
        # Group several calls atomically; re-entrant, so the wrapper's own methods still work inside.
        with self._lock:
            yield self

    def get(self, key: Hashable, default: object = None) -> object:
        with self._lock:
            return self._inner.get(key, default)

    def contains(self, key: Hashable) -> bool:
        with self._lock:
            return self._inner.contains(key)

    def set(self, key: Hashable, value: object) -> None:
        with self._lock:
            self._inner.set(key, value)

    def remove(self, key: Hashable) -> None:
        with self._lock:
            self._inner.remove(key)

    def undo(self) -> None:
        with self._lock:
            self._inner.undo()

    def redo(self) -> None:
        with self._lock:
            self._inner.redo()

    def can_undo(self) -> bool:
        with self._lock:
            return self._inner.can_undo()

    def can_redo(self) -> bool:
        with self._lock:
            return self._inner.can_redo()

    def clear_history(self) -> None:
        with self._lock:
            self._inner.clear_history()

    @property
    def count(self) -> int:
        with self._lock:
            return self._inner.count

    @property
    def undo_depth(self) -> int:
        with self._lock:
            return self._inner.undo_depth

    @property
    def redo_depth(self) -> int:
        with self._lock:
            return self._inner.redo_depth
