from __future__ import annotations

from collections.abc import Hashable


class UndoableStore:
    # Keyed state port with linear undo/redo; implemented by the plain and locked stores.
    def get(self, key: Hashable, default: object = None) -> object:
        raise NotImplementedError("UndoableStore.get must be implemented")

    def set(self, key: Hashable, value: object) -> None:
        raise NotImplementedError("UndoableStore.set must be implemented")

    def remove(self, key: Hashable) -> None:
        raise NotImplementedError("UndoableStore.remove must be implemented")

    def undo(self) -> None:
        raise NotImplementedError("UndoableStore.undo must be implemented")

    def redo(self) -> None:
        raise NotImplementedError("UndoableStore.redo must be implemented")

    def can_undo(self) -> bool:
        raise NotImplementedError("UndoableStore.can_undo must be implemented")

    def can_redo(self) -> bool:
        raise NotImplementedError("UndoableStore.can_redo must be implemented")

    def clear_history(self) -> None:
        raise NotImplementedError("UndoableStore.clear_history must be implemented")

    def contains(self, key: Hashable) -> bool:
        raise NotImplementedError("UndoableStore.contains must be implemented")

    @property
    def count(self) -> int:
        raise NotImplementedError("UndoableStore.count must be implemented")

    @property
    def undo_depth(self) -> int:
        raise NotImplementedError("UndoableStore.undo_depth must be implemented")

    @property
    def redo_depth(self) -> int:
        raise NotImplementedError("UndoableStore.redo_depth must be implemented")

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.count
