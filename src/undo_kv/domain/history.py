from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum
from typing import Final


class _Absent(Enum):
    # Single-member enum gives a picklable, identity-comparable marker.
    ABSENT = "ABSENT"

    def __repr__(self) -> str:
        return "ABSENT"


# Marks "no value at this key"; distinct from every storable value, None included.
ABSENT: Final = _Absent.ABSENT


class HistoryAction(str, Enum):
    SET = "SET"
    REMOVE = "REMOVE"


@dataclass(slots=True)
class HistoryEntry:
    # One recorded mutation; moves between the undo and redo stacks, never copied.
    key: Hashable
    action: HistoryAction
    captured: object

    @classmethod
    def for_set(cls, key: Hashable, prior: object) -> HistoryEntry:
        # prior is ABSENT when the set is an insertion.
        return cls(key=key, action=HistoryAction.SET, captured=prior)

    @classmethod
    def for_remove(cls, key: Hashable, prior: object) -> HistoryEntry:
        if prior is ABSENT:
            raise ValueError(f"Remove entry for {key!r} requires a captured value")
        return cls(key=key, action=HistoryAction.REMOVE, captured=prior)

    @property
    def has_captured(self) -> bool:
        return self.captured is not ABSENT

    def replace(self, value: object) -> object:
        """Store the value just displaced and return the one held before.

        Both undo and redo call this after touching the map, so the field always
        holds the value the next opposite operation must write back.
        """
        previous = self.captured
        self.captured = value
        return previous
