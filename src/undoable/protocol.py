from __future__ import annotations
from typing import Protocol, Optional, Any

from .model import History


class Reducer(Protocol):
    """
    Base reducer contract: pure (state, action) -> new state.

    Called with state=None it must return its own default state.
    """
    def __call__(self, state: Any, action: Any) -> Any: ...


class Filter(Protocol):
    """Return True to record the transition into history."""
    def __call__(self, action: Any, next_state: Any, history: History) -> bool: ...


class GroupBy(Protocol):
    """Return a group key; equal consecutive keys share one history entry. None never groups."""
    def __call__(self, action: Any, next_state: Any, history: History) -> Optional[Any]: ...
