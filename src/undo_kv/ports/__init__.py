from .store import UndoableStore

__all__ = ["UndoableStore"]
