"""History record threaded through the enhanced reducer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True, slots=True)
class HistoryState:
    """Immutable ``past``/``present``/``future`` record.

    ``past`` is oldest first and never empty. Its last entry is the latest
    checkpoint; while no provisional edit is pending it is the very same
    object as ``present``. ``future`` is nearest-redo first.
    """

    past: Tuple[Any, ...]
    present: Any
    future: Tuple[Any, ...] = ()

    @classmethod
    def initial(cls, document: Any) -> "HistoryState":
        return cls(past=(document,), present=document, future=())

    @property
    def checkpoint(self) -> Any:
        return self.past[-1]

    @property
    def has_pending_edit(self) -> bool:
        return self.present is not self.past[-1]


__all__ = ["HistoryState"]
