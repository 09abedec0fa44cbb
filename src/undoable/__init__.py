"""
Public API for the undoable package.

Import from here everywhere else, so you can refactor internals freely:
    from undoable import (
        undoable, UndoableReducer, UndoConfig, load_config,
        History, is_history, as_history,
        Action, ActionCreators, ActionTypes,
        exclude_action, include_action, combine_filters, distinct_state,
        group_by_action_types, Store,
    )
"""
from .model import History, is_history, as_history, new_history
from .commands import (
    Command, Action, ActionTypes, ActionCreators,
    Undo, Redo, Jump, JumpToPast, JumpToFuture, ClearHistory,
    INIT, REPLACE, action_type,
)
from .filters import (
    accept_all, exclude_action, include_action, combine_filters,
    distinct_state, group_by_action_types,
)
from .protocol import Reducer, Filter, GroupBy
from .config import UndoConfig, DEFAULT_INIT_TYPES, resolve_config, load_config
from .reducer import UndoableReducer, undoable
from .store import Store

__all__ = [
    # model
    "History", "is_history", "as_history", "new_history",
    # commands
    "Command", "Action", "ActionTypes", "ActionCreators",
    "Undo", "Redo", "Jump", "JumpToPast", "JumpToFuture", "ClearHistory",
    "INIT", "REPLACE", "action_type",
    # filters
    "accept_all", "exclude_action", "include_action", "combine_filters",
    "distinct_state", "group_by_action_types",
    # protocol, config, reducer, store
    "Reducer", "Filter", "GroupBy",
    "UndoConfig", "DEFAULT_INIT_TYPES", "resolve_config", "load_config",
    "UndoableReducer", "undoable", "Store",
]
