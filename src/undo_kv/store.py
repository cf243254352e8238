from __future__ import annotations

from collections.abc import Hashable

from undo_kv.domain.history import ABSENT, HistoryAction, HistoryEntry
from undo_kv.observability.logging import LogMessage, LogSink
from undo_kv.ports.store import UndoableStore


class UndoableKvStore(UndoableStore):
    """In-memory key-value map with linear undo/redo over set and remove.

    Every applied set/remove pushes one HistoryEntry onto the undo stack and
    drops all pending redo history. Undo and redo move that entry between the
    two stacks, swapping its captured value with the one they displace.

    Log sink errors propagate after the change is committed: the map and
    stacks already hold the new state when emit raises.

    Not thread-safe; wrap in LockedKvStore when shared between threads.
    """

    def __init__(self, *, log_sink: LogSink | None = None) -> None:
        self._map: dict[Hashable, object] = {}
        self._undo: list[HistoryEntry] = []
        self._redo: list[HistoryEntry] = []
        self._log_sink = log_sink

    def get(self, key: Hashable, default: object = None) -> object:
        """Return the value at key, or default when the key is absent.

        A stored None and a missing key both read as None unless a default is
        given; use `key in store` or pass a sentinel default to tell them apart.
        """
        return self._map.get(key, default)

    def contains(self, key: Hashable) -> bool:
        return key in self._map

    @property
    def count(self) -> int:
        return len(self._map)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def set(self, key: Hashable, value: object) -> None:
        if value is ABSENT:
            raise ValueError(f"Cannot store the absent marker at {key!r}")
        self._record(HistoryEntry.for_set(key, self._map.get(key, ABSENT)))
        self._map[key] = value
        self._log("set", key)

    def remove(self, key: Hashable) -> None:
        if key not in self._map:
            return
        self._record(HistoryEntry.for_remove(key, self._map[key]))
        del self._map[key]
        self._log("remove", key)

    def undo(self) -> None:
        if not self._undo:
            return
        entry = self._undo.pop()
        current = self._map.get(entry.key, ABSENT)
        if entry.action is HistoryAction.SET and not entry.has_captured:
            # Undoing an insertion.
            self._map.pop(entry.key, None)
        else:
            self._map[entry.key] = entry.captured
        entry.replace(current)
        self._redo.append(entry)
        self._log("undo", entry.key)

    def redo(self) -> None:
        if not self._redo:
            return
        entry = self._redo.pop()
        current = self._map.get(entry.key, ABSENT)
        if entry.action is HistoryAction.SET:
            self._map[entry.key] = entry.captured
        else:
            self._map.pop(entry.key, None)
        entry.replace(current)
        self._undo.append(entry)
        self._log("redo", entry.key)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def clear_history(self) -> None:
        # Live map is kept; only the ability to step back/forward is dropped.
        self._undo.clear()
        self._redo.clear()

    def _record(self, entry: HistoryEntry) -> None:
        self._undo.append(entry)
        self._redo.clear()

    def _log(self, op: str, key: Hashable) -> None:
        if self._log_sink is None:
            return
        self._log_sink.emit(
            LogMessage(
                level="debug",
                message=f"store.{op}",
                fields={
                    "op": op,
                    "key": key,
                    "undo_depth": len(self._undo),
                    "redo_depth": len(self._redo),
                },
            )
        )
