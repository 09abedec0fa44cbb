# tests/conftest.py
import sys
from pathlib import Path
import pytest

# Make "src" importable
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from undoable import Store, action_type, undoable


def count_reducer(state=None, action=None):
    if state is None:
        state = 0
    t = action_type(action)
    if t == "INCREMENT":
        return state + 1
    if t == "DECREMENT":
        return state - 1
    return state


def tenfold_reducer(state=None, action=None):
    if state is None:
        state = 10
    t = action_type(action)
    if t == "INCREMENT":
        return state + 10
    if t == "DECREMENT":
        return state - 10
    return state


@pytest.fixture
def counter():
    return count_reducer


@pytest.fixture
def tenfold():
    return tenfold_reducer


@pytest.fixture
def store():
    # Fresh store per test
    return Store(undoable(count_reducer, limit=100))
