from __future__ import annotations

from typing import Any, List, Optional, Tuple

import pytest

from edit_history.history import (
    Action,
    HistoryState,
    HistoryStore,
    action_type,
)


def blocks_reducer(state: Optional[Tuple[str, ...]], action: Any) -> Tuple[str, ...]:
    if state is None:
        return ()
    kind = action_type(action)
    if kind == "INSERT_BLOCK":
        return (*state, action.get("uid"))
    if kind == "RESET_BLOCKS":
        return tuple(action.get("blocks", ()))
    if kind == "BROKEN":
        raise KeyError("missing block")
    return state


def insert(uid: str) -> Action:
    return Action("INSERT_BLOCK", {"uid": uid})


def make_store() -> HistoryStore:
    return HistoryStore(blocks_reducer, reset_types={"RESET_BLOCKS"})


def test_store_starts_from_initial_history() -> None:
    store = make_store()

    assert store.state == HistoryState(past=((),), present=(), future=())
    assert store.can_undo() is False
    assert store.can_redo() is False
    assert store.options.reset_types == frozenset({"RESET_BLOCKS"})


def test_store_apply_checkpoint_undo_redo() -> None:
    store = make_store()

    store.dispatch(insert("a"))
    store.create_undo_level()
    store.dispatch(insert("b"))
    store.create_undo_level()
    assert store.present == ("a", "b")

    store.undo()
    assert store.present == ("a",)
    assert store.can_redo() is True

    store.redo()
    assert store.present == ("a", "b")
    assert store.can_redo() is False


def test_reset_action_truncates_history() -> None:
    store = make_store()
    store.dispatch(insert("a"))
    store.create_undo_level()

    store.dispatch(Action("RESET_BLOCKS", {"blocks": ["x", "y"]}))

    assert store.state.past == (("x", "y"),)
    assert store.can_undo() is False


def test_listeners_only_see_real_changes() -> None:
    store = make_store()
    calls: List[Tuple[HistoryState, HistoryState]] = []
    store.subscribe(lambda current, previous: calls.append((current, previous)))

    before = store.state
    store.undo()
    store.dispatch(Action("SELECT_BLOCK"))
    assert calls == []

    store.dispatch(insert("a"))

    assert len(calls) == 1
    assert calls[0][1] is before
    assert calls[0][0] is store.state


def test_unsubscribe_stops_notifications() -> None:
    store = make_store()
    calls: List[HistoryState] = []
    unsubscribe = store.subscribe(lambda current, previous: calls.append(current))

    store.dispatch(insert("a"))
    unsubscribe()
    unsubscribe()
    store.dispatch(insert("b"))

    assert len(calls) == 1


def test_reducer_error_leaves_state_untouched() -> None:
    store = make_store()
    store.dispatch(insert("a"))
    before = store.state
    calls: List[HistoryState] = []
    store.subscribe(lambda current, previous: calls.append(current))

    with pytest.raises(KeyError):
        store.dispatch(Action("BROKEN"))

    assert store.state is before
    assert calls == []
    store.dispatch(insert("b"))
    assert store.present == ("a", "b")


def test_dispatch_from_listener_is_rejected() -> None:
    store = make_store()
    errors: List[Exception] = []

    def listener(current: HistoryState, previous: HistoryState) -> None:
        try:
            store.undo()
        except RuntimeError as exc:
            errors.append(exc)

    store.subscribe(listener)
    store.dispatch(insert("a"))

    assert len(errors) == 1
    assert store.present == ("a",)
