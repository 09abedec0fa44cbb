from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Mapping, Optional


class ActionTypes(str, Enum):
    UNDO = "UNDO"
    REDO = "REDO"
    JUMP = "JUMP"
    JUMP_TO_PAST = "JUMP_TO_PAST"
    JUMP_TO_FUTURE = "JUMP_TO_FUTURE"
    CLEAR_HISTORY = "CLEAR_HISTORY"


INIT = "@@undoable/INIT"
REPLACE = "@@undoable/REPLACE"


class Command:
    """Marker base class for history control commands (never seen by the base reducer)."""
    type: ClassVar[ActionTypes]


@dataclass(frozen=True)
class Undo(Command):
    type: ClassVar[ActionTypes] = ActionTypes.UNDO


@dataclass(frozen=True)
class Redo(Command):
    type: ClassVar[ActionTypes] = ActionTypes.REDO


@dataclass(frozen=True)
class Jump(Command):
    """Move `steps` entries: negative towards the past, positive towards the future."""
    steps: int
    type: ClassVar[ActionTypes] = ActionTypes.JUMP


@dataclass(frozen=True)
class JumpToPast(Command):
    index: int  # 0-based into history.past
    type: ClassVar[ActionTypes] = ActionTypes.JUMP_TO_PAST


@dataclass(frozen=True)
class JumpToFuture(Command):
    index: int  # 0-based into history.future
    type: ClassVar[ActionTypes] = ActionTypes.JUMP_TO_FUTURE


@dataclass(frozen=True)
class ClearHistory(Command):
    type: ClassVar[ActionTypes] = ActionTypes.CLEAR_HISTORY


@dataclass(frozen=True)
class Action:
    """Plain host action: a type tag plus an optional payload."""
    type: str
    payload: Any = None


class ActionCreators:
    """
    Builders for the control commands:
        store.dispatch(ActionCreators.undo())
        store.dispatch(ActionCreators.jump(-2))
    """

    @staticmethod
    def undo() -> Undo:
        return Undo()

    @staticmethod
    def redo() -> Redo:
        return Redo()

    @staticmethod
    def jump(steps: int) -> Jump:
        return Jump(steps)

    @staticmethod
    def jump_to_past(index: int) -> JumpToPast:
        return JumpToPast(index)

    @staticmethod
    def jump_to_future(index: int) -> JumpToFuture:
        return JumpToFuture(index)

    @staticmethod
    def clear_history() -> ClearHistory:
        return ClearHistory()


def action_type(action: Any) -> Optional[str]:
    """Type tag of any action: mapping key, attribute, or None."""
    if isinstance(action, Mapping):
        t = action.get("type")
    else:
        t = getattr(action, "type", None)
    if isinstance(t, Enum):
        return t.value
    return t
