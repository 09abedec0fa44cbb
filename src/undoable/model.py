from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Tuple

HISTORY_KEYS = frozenset(("past", "present", "future"))


@dataclass(frozen=True)
class History:
    """
    The undo timeline: past (oldest first), present, future (next redo first).

    Only past/present/future take part in equality; latest_unfiltered and
    group are bookkeeping for filtering and grouping.
    """
    past: Tuple[Any, ...] = ()
    present: Any = None
    future: Tuple[Any, ...] = ()
    latest_unfiltered: Any = field(default=None, compare=False, repr=False)
    group: Optional[Any] = field(default=None, compare=False)

    @property
    def index(self) -> int:
        """Position of present within the full timeline."""
        return len(self.past)

    @property
    def length(self) -> int:
        return len(self.past) + len(self.future) + 1

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def as_dict(self) -> dict:
        return {"past": list(self.past), "present": self.present, "future": list(self.future)}


def new_history(past: Sequence[Any], present: Any, future: Sequence[Any],
                group: Optional[Any] = None) -> History:
    return History(
        past=tuple(past),
        present=present,
        future=tuple(future),
        latest_unfiltered=present,
        group=group,
    )


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def is_history(value: Any) -> bool:
    """True for a History, or a mapping with exactly past/present/future."""
    if isinstance(value, History):
        return True
    if not isinstance(value, Mapping) or set(value.keys()) != HISTORY_KEYS:
        return False
    return _is_sequence(value["past"]) and _is_sequence(value["future"])


def as_history(value: Any) -> History:
    """
    Adapter at the host boundary: already-wrapped values pass through,
    history-shaped mappings are converted, anything else becomes present.
    """
    if isinstance(value, History):
        return value
    if is_history(value):
        return new_history(value["past"], value["present"], value["future"])
    return new_history((), value, ())
