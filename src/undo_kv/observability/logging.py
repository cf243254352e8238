from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class LogMessage:
    # One store event (store.set, store.remove, store.undo, store.redo); fields carry op, key and stack depths.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")


@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Deliver one structured log message."""
        raise NotImplementedError("LogSink is a port; use a concrete sink.")


class StdoutLogSink:
    # Prints each store event as a compact JSON line; keys that JSON cannot encode fall back to repr.
    def emit(self, message: LogMessage) -> None:
        print(json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=repr))


class JsonlLogSink:
    # Appends store events to a JSONL file and flushes after each one; emit after close raises ValueError.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        payload = json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=repr)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()


def log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
