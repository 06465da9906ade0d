"""In-memory undo/redo history engine for document editors."""

from .history import (
    Action,
    HistoryOptions,
    HistoryOptionsError,
    HistoryState,
    HistoryStore,
    with_history,
)

__all__ = [
    "history",
    "runtime",
    "Action",
    "HistoryOptions",
    "HistoryOptionsError",
    "HistoryState",
    "HistoryStore",
    "with_history",
]

__version__ = "0.1.0"
