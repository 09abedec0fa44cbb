from __future__ import annotations
import logging
from typing import Any, List

from .commands import action_type
from .model import History

log = logging.getLogger(__name__)


class DebugTrace:
    """
    One reducer call (action, branch notes, before/after), logged as a block on end().
    Built per call, so nested calls to the same reducer keep separate traces.
    """

    def __init__(self, enabled: bool, action: Any, state: Any):
        self.enabled = enabled
        self._lines: List[str] = []
        if enabled:
            self._lines = [
                f"action {action_type(action)!r}: {action!r}",
                f"  before: {_fmt(state)}",
            ]

    def note(self, message: str, *args: Any):
        if not self.enabled:
            return
        self._lines.append("  " + (message % args if args else message))

    def end(self, history: History) -> History:
        if self.enabled:
            self._lines.append(f"  after:  {_fmt(history)}")
            log.debug("\n".join(self._lines))
        return history


def _fmt(state: Any) -> str:
    if isinstance(state, History):
        return f"past={list(state.past)!r} present={state.present!r} future={list(state.future)!r}"
    return repr(state)
