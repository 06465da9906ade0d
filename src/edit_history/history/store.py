"""Single-threaded store owning a history state and its listeners."""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Mapping, Optional

from edit_history.runtime import telemetry

from . import selectors
from .actions import EMPTY_ACTION, action_type, create_undo_level, redo, undo
from .enhancer import LOGGER_NAME, Reducer, with_history
from .options import HistoryOptions
from .state import HistoryState

Listener = Callable[[HistoryState, HistoryState], None]


class HistoryStore:
    """Threads dispatched actions through a history-enhanced reducer.

    Usage:
        store = HistoryStore(reducer, reset_types={"SETUP_DOCUMENT"})
        store.dispatch(Action("INSERT", {"text": "a"}))
        store.create_undo_level()
        store.undo(); store.redo()

    Listeners run only when a dispatch produced a new state object.
    """

    def __init__(
        self,
        reducer: Reducer,
        options: HistoryOptions | Mapping[str, Any] | None = None,
        *,
        reset_types: Optional[Iterable[str]] = None,
    ) -> None:
        self._reducer = with_history(reducer, options, reset_types=reset_types)
        self._state: HistoryState = self._reducer(None, EMPTY_ACTION)
        self._listeners: List[Listener] = []
        self._dispatching = False

    @property
    def state(self) -> HistoryState:
        return self._state

    @property
    def present(self) -> Any:
        return self._state.present

    @property
    def options(self) -> HistoryOptions:
        return self._reducer.options  # type: ignore[attr-defined]

    def dispatch(self, action: Any) -> HistoryState:
        if self._dispatching:
            raise RuntimeError("Cannot dispatch while another dispatch is in progress.")

        previous = self._state
        type_ = action_type(action)
        with telemetry.span(
            "history::dispatch",
            logger_name=LOGGER_NAME,
            component="history",
            metadata={"action": type_},
        ) as handle:
            self._dispatching = True
            try:
                current = self._reducer(previous, action)
            finally:
                self._dispatching = False
            handle.add_metadata("changed", current is not previous)

        if current is previous:
            return current

        self._state = current
        self._notify(current, previous)
        return current

    def undo(self) -> HistoryState:
        return self.dispatch(undo())

    def redo(self) -> HistoryState:
        return self.dispatch(redo())

    def create_undo_level(self) -> HistoryState:
        return self.dispatch(create_undo_level())

    def can_undo(self) -> bool:
        return selectors.has_undo(self._state)

    def can_redo(self) -> bool:
        return selectors.has_redo(self._state)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable removes it again."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, current: HistoryState, previous: HistoryState) -> None:
        self._dispatching = True
        try:
            for listener in list(self._listeners):
                listener(current, previous)
        finally:
            self._dispatching = False


__all__ = ["HistoryStore", "Listener"]
