from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from .commands import Action, ActionCreators, INIT, REPLACE
from .model import History


@dataclass
class Store:
    """
    Small host container around an undoable reducer.

    Usage:
        store = Store(undoable(counter, limit=100))
        store.dispatch(Action("INCREMENT"))
        store.undo(); store.redo()
    """
    reducer: Callable[[Any, Any], History]
    initial_state: Any = None
    state: Optional[History] = field(default=None, init=False)
    _listeners: List[Callable[[], None]] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        self.state = self.reducer(self.initial_state, Action(INIT))

    def dispatch(self, action: Any) -> History:
        before = self.state
        self.state = self.reducer(self.state, action)
        if self.state is not before:
            for listener in list(self._listeners):
                listener()
        return self.state

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Call `listener` after every dispatch that changes the state; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def replace_reducer(self, reducer: Callable[[Any, Any], History]) -> History:
        """Swap the reducer; the current history is handed to the new one as-is."""
        self.reducer = reducer
        return self.dispatch(Action(REPLACE))

    @property
    def present(self) -> Any:
        return self.state.present

    # --- shortcuts ---

    def undo(self) -> History:
        return self.dispatch(ActionCreators.undo())

    def redo(self) -> History:
        return self.dispatch(ActionCreators.redo())

    def jump(self, steps: int) -> History:
        return self.dispatch(ActionCreators.jump(steps))

    def clear_history(self) -> History:
        return self.dispatch(ActionCreators.clear_history())
