"""
Pure transitions over History. None of them mutate their input; a transition
that cannot apply returns the very same History object.
"""
from __future__ import annotations
from dataclasses import replace
from numbers import Integral
from typing import Any, Optional

from .model import History, new_history


def insert(history: History, next_state: Any, limit: Optional[int] = None,
           group: Optional[Any] = None) -> History:
    """Record next_state as the new present, pushing the old one onto past."""
    if group is not None and group == history.group:
        # same group: collapse into the current entry
        return new_history(history.past, next_state, (), group)

    past = history.past
    if limit is None or limit < 0:
        past = past + (history.present,)
    elif limit > 0:
        past = (past + (history.present,))[-limit:]
    else:
        past = ()
    return new_history(past, next_state, (), group)


def undo(history: History) -> History:
    if not history.past:
        return history
    return new_history(
        history.past[:-1],
        history.past[-1],
        (history.present,) + history.future,
    )


def redo(history: History) -> History:
    if not history.future:
        return history
    return new_history(
        history.past + (history.present,),
        history.future[0],
        history.future[1:],
    )


def jump_to_past(history: History, index: Any) -> History:
    if not _in_range(index, len(history.past)):
        return history
    past = history.past
    return new_history(
        past[:index],
        past[index],
        past[index + 1:] + (history.present,) + history.future,
    )


def jump_to_future(history: History, index: Any) -> History:
    if not _in_range(index, len(history.future)):
        return history
    future = history.future
    return new_history(
        history.past + (history.present,) + future[:index],
        future[index],
        future[index + 1:],
    )


def jump(history: History, steps: Any) -> History:
    """Negative steps go back, positive steps go forward; overshooting is a no-op."""
    if not _is_int(steps) or steps == 0:
        return history
    if steps > 0:
        return jump_to_future(history, steps - 1)
    return jump_to_past(history, len(history.past) + steps)


def clear_history(history: History) -> History:
    if not history.past and not history.future:
        return history
    return replace(history, past=(), future=(), group=None)


# ----- helpers -----

def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _in_range(index: Any, size: int) -> bool:
    return _is_int(index) and 0 <= index < size
