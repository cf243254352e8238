from .history import ABSENT, HistoryAction, HistoryEntry

# Public domain exports keep imports explicit across layers.
__all__ = ["ABSENT", "HistoryAction", "HistoryEntry"]
