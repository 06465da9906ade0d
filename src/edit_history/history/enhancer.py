"""Reducer enhancer adding undo/redo history to an arbitrary reducer."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Optional

from edit_history.runtime import telemetry

from .actions import CREATE_UNDO_LEVEL, EMPTY_ACTION, REDO, UNDO, action_type
from .options import HistoryOptions, HistoryOptionsError
from .state import HistoryState

Reducer = Callable[[Any, Any], Any]
HistoryReducer = Callable[[Optional[HistoryState], Any], HistoryState]

LOGGER_NAME = "edit_history.history"


def _trace(event: str, state: HistoryState) -> HistoryState:
    telemetry.record_event(
        event,
        level="debug",
        data={"past": len(state.past), "future": len(state.future)},
        logger_name=LOGGER_NAME,
    )
    return state


def _undo(state: HistoryState) -> HistoryState:
    past, present, future = state.past, state.present, state.future

    # A pending edit is undone back to the last checkpoint.
    if past[-1] is not present:
        return HistoryState(past=past, present=past[-1], future=(present, *future))

    # The first checkpoint is the oldest reachable document.
    if len(past) < 2:
        return state

    return HistoryState(past=past[:-1], present=past[-2], future=(present, *future))


def _redo(state: HistoryState) -> HistoryState:
    if not state.future:
        return state
    nearest = state.future[0]
    return HistoryState(
        past=(*state.past, nearest), present=nearest, future=state.future[1:]
    )


def _create_undo_level(state: HistoryState) -> HistoryState:
    if state.past[-1] is state.present:
        return state
    return HistoryState(past=(*state.past, state.present), present=state.present)


_CONTROL_HANDLERS = {
    UNDO: ("history.undo", _undo),
    REDO: ("history.redo", _redo),
    CREATE_UNDO_LEVEL: ("history.checkpoint", _create_undo_level),
}


def with_history(
    reducer: Reducer,
    options: HistoryOptions | Mapping[str, Any] | None = None,
    *,
    reset_types: Iterable[str] | None = None,
) -> HistoryReducer:
    """Wrap ``reducer`` so its state is tracked as a ``HistoryState``.

    Edits produced by ``reducer`` stay provisional in ``present`` until a
    ``CREATE_UNDO_LEVEL`` action commits them to ``past``. ``UNDO``, ``REDO``
    and ``CREATE_UNDO_LEVEL`` are handled here and never reach ``reducer``.
    Action types listed in ``reset_types`` replace the whole history with a
    single checkpoint of the reducer's result.

    Whenever nothing changes the returned reducer hands back the exact state
    object it received. Exceptions raised by ``reducer`` propagate as-is.
    """

    if options is not None and reset_types is not None:
        raise HistoryOptionsError(
            "Pass reset_types either directly or via options, not both.",
            option="reset_types",
        )
    resolved = (
        HistoryOptions(reset_types=reset_types)
        if reset_types is not None
        else HistoryOptions.coerce(options)
    )

    initial_state = HistoryState.initial(reducer(None, EMPTY_ACTION))

    def history_reducer(state: Optional[HistoryState], action: Any) -> HistoryState:
        if state is None:
            state = initial_state

        type_ = action_type(action)
        control = _CONTROL_HANDLERS.get(type_)
        if control is not None:
            event, handler = control
            next_state = handler(state)
            if next_state is state:
                return state
            return _trace(event, next_state)

        present = state.present
        next_present = reducer(present, action)

        if resolved.is_reset(type_):
            return _trace("history.reset", HistoryState.initial(next_present))

        if next_present is present:
            return state

        return HistoryState(past=state.past, present=next_present, future=state.future)

    history_reducer.options = resolved  # type: ignore[attr-defined]
    history_reducer.initial_state = initial_state  # type: ignore[attr-defined]
    return history_reducer


__all__ = ["HistoryReducer", "Reducer", "with_history"]
