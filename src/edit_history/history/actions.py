"""Action records and the control actions understood by the history enhancer."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

UNDO = "UNDO"
REDO = "REDO"
CREATE_UNDO_LEVEL = "CREATE_UNDO_LEVEL"

CONTROL_TYPES = frozenset({UNDO, REDO, CREATE_UNDO_LEVEL})


@dataclass(frozen=True, slots=True)
class Action:
    """Dispatched intent: a type identifier plus an arbitrary payload."""

    type: Optional[str] = None
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    def __hash__(self) -> int:
        # payload values may be unhashable; equal actions share a type
        return hash((Action, self.type))

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default)


EMPTY_ACTION = Action()


def action_type(action: Any) -> Optional[str]:
    """Return the type of ``action``, or ``None`` when it has none.

    Accepts ``Action`` instances, any object exposing ``type`` and plain
    mappings carrying a ``"type"`` key.
    """

    if isinstance(action, Mapping):
        return action.get("type")
    return getattr(action, "type", None)


_UNDO = Action(UNDO)
_REDO = Action(REDO)
_CREATE_UNDO_LEVEL = Action(CREATE_UNDO_LEVEL)


def undo() -> Action:
    return _UNDO


def redo() -> Action:
    return _REDO


def create_undo_level() -> Action:
    return _CREATE_UNDO_LEVEL


__all__ = [
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
]
