from __future__ import annotations

from pathlib import Path

from undo_kv.config.models import LoggingSection, StoreAppConfig
from undo_kv.locking import LockedKvStore
from undo_kv.observability.logging import JsonlLogSink, LogSink, StdoutLogSink
from undo_kv.ports.store import UndoableStore
from undo_kv.store import UndoableKvStore


def build_log_sink(section: LoggingSection) -> LogSink | None:
    # Caller owns the returned sink; JSONL sinks must be closed by whoever opened them.
    if section.sink == "stdout":
        return StdoutLogSink()
    if section.sink == "jsonl":
        assert section.path is not None
        return JsonlLogSink(Path(section.path))
    return None


def build_store(config: StoreAppConfig | None = None, *, log_sink: LogSink | None = None) -> UndoableStore:
    # An explicit log_sink wins over the configured one.
    if config is None:
        config = StoreAppConfig()
    if log_sink is None:
        log_sink = build_log_sink(config.logging)
    store: UndoableStore = UndoableKvStore(log_sink=log_sink)
    if config.store.thread_safe:
        store = LockedKvStore(store)
    return store
