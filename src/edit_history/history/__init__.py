"""Undo/redo history for pure reducers.

Import from here everywhere else:
    from edit_history.history import with_history, HistoryState, HistoryStore
"""

from .actions import (
    CONTROL_TYPES,
    CREATE_UNDO_LEVEL,
    EMPTY_ACTION,
    REDO,
    UNDO,
    Action,
    action_type,
    create_undo_level,
    redo,
    undo,
)
from .enhancer import HistoryReducer, Reducer, with_history
from .options import HistoryOptions, HistoryOptionsError
from .selectors import (
    get_future,
    get_past,
    get_present,
    has_pending_edit,
    has_redo,
    has_undo,
    redo_depth,
    undo_depth,
)
from .state import HistoryState
from .store import HistoryStore, Listener

__all__ = [
    # actions
    "Action",
    "CONTROL_TYPES",
    "CREATE_UNDO_LEVEL",
    "EMPTY_ACTION",
    "REDO",
    "UNDO",
    "action_type",
    "create_undo_level",
    "redo",
    "undo",
    # enhancer & options
    "HistoryReducer",
    "Reducer",
    "with_history",
    "HistoryOptions",
    "HistoryOptionsError",
    # state & selectors
    "HistoryState",
    "get_future",
    "get_past",
    "get_present",
    "has_pending_edit",
    "has_redo",
    "has_undo",
    "redo_depth",
    "undo_depth",
    # store
    "HistoryStore",
    "Listener",
]
