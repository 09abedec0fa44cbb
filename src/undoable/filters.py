"""
Filters decide whether a base-reducer result is recorded into history.

Every filter has the signature ``(action, next_state, history) -> bool``;
True means "record". Action types may be given as exact strings, compiled
regular expressions, or a list/tuple/set mixing both:

    undoable(counter, filter=exclude_action(["DECREMENT", re.compile(r"HOVER_.*")]))
"""
from __future__ import annotations
import logging
import operator
import re
from typing import Any, Callable, Iterable, Optional, Tuple, Union

from .commands import action_type
from .model import History
from .protocol import Filter, GroupBy

log = logging.getLogger(__name__)

Matcher = Union[str, re.Pattern]
Types = Union[Matcher, Iterable[Matcher]]


def accept_all(action: Any, next_state: Any, history: History) -> bool:
    return True


def exclude_action(types: Types) -> Filter:
    """Record everything except actions whose type matches `types`."""
    matchers = _as_matchers(types)

    def _filter(action: Any, next_state: Any, history: History) -> bool:
        return not _matches(action_type(action), matchers)

    return _filter


def include_action(types: Types) -> Filter:
    """Record only actions whose type matches `types`."""
    matchers = _as_matchers(types)

    def _filter(action: Any, next_state: Any, history: History) -> bool:
        return _matches(action_type(action), matchers)

    return _filter


def combine_filters(*filters: Filter) -> Filter:
    """AND of all given filters; stops at the first rejection."""
    def _filter(action: Any, next_state: Any, history: History) -> bool:
        return all(f(action, next_state, history) for f in filters)

    return _filter


def distinct_state(comparator: Callable[[Any, Any], bool] = operator.eq) -> Filter:
    """Skip results that compare equal to the current present."""
    def _filter(action: Any, next_state: Any, history: History) -> bool:
        return not comparator(next_state, history.present)

    return _filter


def group_by_action_types(types: Types) -> GroupBy:
    """
    Group consecutive actions of a matching type into one history entry.
    The action type is the group key; non-matching actions return None.
    """
    matchers = _as_matchers(types)

    def _group_by(action: Any, next_state: Any, history: History) -> Optional[str]:
        t = action_type(action)
        return t if _matches(t, matchers) else None

    return _group_by


# ----- helpers -----

def _as_matchers(types: Any) -> Tuple[Matcher, ...]:
    if types is None:
        return ()
    if isinstance(types, (str, re.Pattern)):
        return (types,)
    if isinstance(types, Iterable):
        return tuple(types)
    log.warning("action types %r are not a string, pattern or list; matching them as a single value", types)
    return (types,)


def _matches(t: Optional[str], matchers: Tuple[Matcher, ...]) -> bool:
    if t is None:
        return False
    for m in matchers:
        if isinstance(m, re.Pattern):
            if isinstance(t, str) and m.fullmatch(t):
                return True
        elif m == t:
            return True
    return False
