"""Read-only getters over a ``HistoryState``."""

from __future__ import annotations

from typing import Any, Tuple

from .state import HistoryState


def get_present(state: HistoryState) -> Any:
    return state.present


def get_past(state: HistoryState) -> Tuple[Any, ...]:
    return state.past


def get_future(state: HistoryState) -> Tuple[Any, ...]:
    return state.future


def has_pending_edit(state: HistoryState) -> bool:
    return state.has_pending_edit


def has_undo(state: HistoryState) -> bool:
    """True when dispatching ``UNDO`` would change the state."""

    return len(state.past) > 1 or state.has_pending_edit


def has_redo(state: HistoryState) -> bool:
    return len(state.future) > 0


def undo_depth(state: HistoryState) -> int:
    """Number of consecutive ``UNDO`` dispatches that would each change state."""

    return len(state.past) - 1 + (1 if state.has_pending_edit else 0)


def redo_depth(state: HistoryState) -> int:
    return len(state.future)


__all__ = [
    "get_future",
    "get_past",
    "get_present",
    "has_pending_edit",
    "has_redo",
    "has_undo",
    "redo_depth",
    "undo_depth",
]
