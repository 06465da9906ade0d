"""Enhancer options and their validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from .actions import CONTROL_TYPES

_OPTION_ALIASES = {"reset_types": "reset_types", "resetTypes": "reset_types"}


class HistoryOptionsError(ValueError):
    """Raised when ``with_history`` receives options it cannot honor."""

    def __init__(self, message: str, *, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option


def _normalize_reset_types(values: Iterable[str] | None) -> frozenset[str]:
    if values is None:
        return frozenset()
    if isinstance(values, (str, bytes)):
        raise HistoryOptionsError(
            "reset_types must be a collection of action types, not a single string",
            option="reset_types",
        )
    try:
        items = tuple(values)
    except TypeError as exc:
        raise HistoryOptionsError(
            f"reset_types must be iterable, got {type(values).__name__}",
            option="reset_types",
        ) from exc

    for item in items:
        if not isinstance(item, str) or not item:
            raise HistoryOptionsError(
                f"reset_types entries must be non-empty strings, got {item!r}",
                option="reset_types",
            )
    control = sorted(CONTROL_TYPES.intersection(items))
    if control:
        raise HistoryOptionsError(
            f"Control actions cannot reset history: {control}",
            option="reset_types",
        )
    return frozenset(items)


@dataclass(frozen=True, slots=True)
class HistoryOptions:
    """Options recognized by ``with_history``.

    ``reset_types`` lists the action types whose dispatch collapses the
    history to a single checkpoint of the resulting document.
    """

    reset_types: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "reset_types", _normalize_reset_types(self.reset_types)
        )

    def is_reset(self, type_: Optional[str]) -> bool:
        return type_ is not None and type_ in self.reset_types

    @classmethod
    def coerce(cls, value: Any = None) -> "HistoryOptions":
        """Build options from ``None``, an instance or an option mapping."""

        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise HistoryOptionsError(
                f"Options must be a mapping or HistoryOptions, got {type(value).__name__}"
            )

        kwargs: dict[str, Any] = {}
        for key, item in value.items():
            name = _OPTION_ALIASES.get(key)
            if name is None:
                raise HistoryOptionsError(f"Unknown option '{key}'", option=str(key))
            if name in kwargs:
                raise HistoryOptionsError(
                    f"Option '{name}' given more than once", option=name
                )
            kwargs[name] = item
        return cls(**kwargs)


__all__ = ["HistoryOptions", "HistoryOptionsError"]
