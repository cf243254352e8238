from .access import WrongValueTypeError, get_as, require_as
from .domain import ABSENT, HistoryAction, HistoryEntry
from .factory import build_log_sink, build_store
from .locking import LockedKvStore
from .ports import UndoableStore
from .store import UndoableKvStore

__all__ = [
    "ABSENT",
    "HistoryAction",
    "HistoryEntry",
    "LockedKvStore",
    "UndoableKvStore",
    "UndoableStore",
    "WrongValueTypeError",
    "build_log_sink",
    "build_store",
    "get_as",
    "require_as",
]
