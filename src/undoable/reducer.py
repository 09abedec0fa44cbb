from __future__ import annotations
from dataclasses import replace
from typing import Any, Mapping, Optional, Union

from . import buffer
from .commands import (
    Undo, Redo, Jump, JumpToPast, JumpToFuture, ClearHistory,
    action_type,
)
from .config import UndoConfig, resolve_config
from .debug import DebugTrace
from .model import History, as_history
from .protocol import Reducer


class UndoableReducer:
    """
    Wraps a base reducer with undo/redo history.

        counter = undoable(count_reducer, limit=100)
        h = counter(None, Action("@@undoable/INIT"))   # History(past=(), present=0, future=())
        h = counter(h, Action("INCREMENT"))
        h = counter(h, ActionCreators.undo())

    Calling with state=None returns the initial history. The first non-None
    state is adopted as-is when it is already a History (or a mapping with
    past/present/future) and wrapped otherwise; that first history is what
    init actions reset to.

    The captured initial history belongs to the instance. Sharing one
    UndoableReducer between stores means the second store starts from (and
    resets to) the first store's initial history; build one per store with
    undoable() instead.
    """

    def __init__(self, reducer: Reducer, config: Union[UndoConfig, Mapping[str, Any], None] = None,
                 **overrides: Any):
        self.reducer = reducer
        self.config = resolve_config(config, **overrides)
        self._initial: Optional[History] = None

    def __call__(self, state: Any = None, action: Any = None) -> History:
        cfg = self.config
        trace = DebugTrace(cfg.debug, action, state)

        # --- Uninitialized ---
        if state is None:
            trace.note("uninitialized: returning initial history")
            return trace.end(self._initial_history(action))

        history = as_history(state)
        if self._initial is None and not cfg.ignore_initial_state:
            trace.note("adopting first state as initial history")
            self._initial = history

        # --- Reinit ---
        if action_type(action) in cfg.init_types:
            trace.note("init type: resetting history")
            return trace.end(self._initial_history(action))

        # --- Control commands (base reducer is not called) ---
        if isinstance(action, Undo):
            return trace.end(buffer.undo(history))
        if isinstance(action, Redo):
            return trace.end(buffer.redo(history))
        if isinstance(action, JumpToPast):
            return trace.end(buffer.jump_to_past(history, action.index))
        if isinstance(action, JumpToFuture):
            return trace.end(buffer.jump_to_future(history, action.index))
        if isinstance(action, Jump):
            return trace.end(buffer.jump(history, action.steps))
        if isinstance(action, ClearHistory):
            return trace.end(buffer.clear_history(history))

        # --- Default: run the base reducer and maybe record ---
        next_state = self.reducer(history.present, action)

        if next_state is history.present and not cfg.never_skip_reducer:
            trace.note("base reducer returned present unchanged: not recorded")
            return trace.end(self._skip(history, next_state))

        if not cfg.filter(action, next_state, history):
            trace.note("filtered out: not recorded")
            return trace.end(self._skip(history, next_state))

        group = cfg.group_by(action, next_state, history) if cfg.group_by else None
        if group is not None and group == history.group:
            trace.note("grouped with current entry %r", group)
        return trace.end(buffer.insert(history, next_state, cfg.limit, group))

    def _initial_history(self, action: Any) -> History:
        if self._initial is None:
            self._initial = as_history(self.reducer(None, action))
        return self._initial

    def _skip(self, history: History, next_state: Any) -> History:
        """Remember the unrecorded result; past and future stay untouched."""
        if self.config.sync_filter:
            if next_state is history.present:
                return history
            return replace(history, present=next_state, latest_unfiltered=next_state)
        if next_state is history.latest_unfiltered:
            return history
        return replace(history, latest_unfiltered=next_state)


def undoable(reducer: Reducer, config: Union[UndoConfig, Mapping[str, Any], None] = None,
             **overrides: Any) -> UndoableReducer:
    """Factory: `undoable(reducer, limit=10, filter=exclude_action("HOVER"))`."""
    return UndoableReducer(reducer, config, **overrides)
