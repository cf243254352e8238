from __future__ import annotations

from collections.abc import Hashable
from typing import TypeVar

from undo_kv.domain.history import ABSENT
from undo_kv.ports.store import UndoableStore

T = TypeVar("T")


class WrongValueTypeError(TypeError):
    # Stored value exists but is not the type the caller asked for; distinct from a missing key.
    def __init__(self, key: Hashable, expected: type, actual: type) -> None:
        super().__init__(f"Value at {key!r} is {actual.__name__}, expected {expected.__name__}")
        self.key = key
        self.expected = expected
        self.actual = actual


def get_as(store: UndoableStore, key: Hashable, expected: type[T]) -> T | None:
    # Absent keys and stored None both read as None; anything else must match `expected`.
    value = store.get(key, ABSENT)
    if value is ABSENT or value is None:
        return None
    if not isinstance(value, expected):
        raise WrongValueTypeError(key, expected, type(value))
    return value


def require_as(store: UndoableStore, key: Hashable, expected: type[T]) -> T:
    # Like get_as, but a missing key is a KeyError and a stored None must match `expected`.
    value = store.get(key, ABSENT)
    if value is ABSENT:
        raise KeyError(key)
    if not isinstance(value, expected):
        raise WrongValueTypeError(key, expected, type(value))
    return value
