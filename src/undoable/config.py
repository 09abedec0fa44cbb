"""
Configuration for undoable reducers.

Options are resolved once, when the reducer is built. Bad values never raise:
each one falls back to a permissive default and logs a warning.

A config can also be read from YAML:

    # undo.yaml
    limit: 50
    init_types: [RESET]
    exclude: [HOVER, /SELECT_.*/]
    distinct: true

    reducer = undoable(counter, load_config("undo.yaml"))
"""
from __future__ import annotations
import logging
import math
import re
from dataclasses import dataclass, fields, replace
from numbers import Integral, Real
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml

from .commands import INIT
from .protocol import Filter, GroupBy
from .filters import accept_all, combine_filters, distinct_state, exclude_action, include_action, group_by_action_types

log = logging.getLogger(__name__)

DEFAULT_INIT_TYPES: Tuple[str, ...] = (INIT,)


@dataclass(frozen=True)
class UndoConfig:
    """
    Every option with its default:
      limit                 None → unbounded; <0 unbounded; 0 disables recording
      filter                accept_all
      group_by              None (never group)
      init_types            ("@@undoable/INIT",)
      debug                 False
      never_skip_reducer    False → an identical base-reducer result is not recorded
      sync_filter           False → filtered-out results do not update present
      ignore_initial_state  False → first state seen becomes the reinit target
    """
    limit: Optional[int] = None
    filter: Filter = accept_all
    group_by: Optional[GroupBy] = None
    init_types: Tuple[str, ...] = DEFAULT_INIT_TYPES
    debug: bool = False
    never_skip_reducer: bool = False
    sync_filter: bool = False
    ignore_initial_state: bool = False

    def __post_init__(self):
        object.__setattr__(self, "limit", _normalize_limit(self.limit))
        object.__setattr__(self, "init_types", _normalize_init_types(self.init_types))
        if not callable(self.filter):
            log.warning("filter %r is not callable; recording every action", self.filter)
            object.__setattr__(self, "filter", accept_all)
        if self.group_by is not None and not callable(self.group_by):
            log.warning("group_by %r is not callable; grouping disabled", self.group_by)
            object.__setattr__(self, "group_by", None)
        for name in ("debug", "never_skip_reducer", "sync_filter", "ignore_initial_state"):
            object.__setattr__(self, name, bool(getattr(self, name)))


_FIELD_NAMES = frozenset(f.name for f in fields(UndoConfig))


def resolve_config(config: Union[UndoConfig, Mapping[str, Any], None] = None, **overrides: Any) -> UndoConfig:
    """Build an UndoConfig from an UndoConfig, a plain mapping, or keywords."""
    if isinstance(config, UndoConfig):
        base = config
    elif isinstance(config, Mapping):
        base = UndoConfig(**_known_keys(config))
    else:
        if config is not None:
            log.warning("ignoring config of type %s", type(config).__name__)
        base = UndoConfig()
    if overrides:
        base = replace(base, **_known_keys(overrides))
    return base


def load_config(path: Optional[Union[str, Path]]) -> UndoConfig:
    """
    Read an UndoConfig from a YAML file. A missing file yields the defaults.
    Besides the plain options, the file may declare filters and grouping:
      exclude / include   list of action types (``/regex/`` for patterns)
      distinct            true → skip results equal to present
      group_by_types      list of action types to group consecutively
    """
    if not path:
        return UndoConfig()
    p = Path(path)
    if not p.exists():
        log.warning("config not found: %s (using defaults)", p)
        return UndoConfig()
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{p}: expected a mapping at top level, got {type(data).__name__}")

    data = dict(data)
    filters = []
    if "exclude" in data:
        filters.append(exclude_action(_parse_types(data.pop("exclude"))))
    if "include" in data:
        filters.append(include_action(_parse_types(data.pop("include"))))
    if data.pop("distinct", False):
        filters.append(distinct_state())
    if filters:
        data["filter"] = filters[0] if len(filters) == 1 else combine_filters(*filters)
    if "group_by_types" in data:
        data["group_by"] = group_by_action_types(_parse_types(data.pop("group_by_types")))
    return resolve_config(data)


# ----- helpers -----

def _known_keys(options: Mapping[str, Any]) -> Dict[str, Any]:
    known = {}
    for k, v in options.items():
        if k in _FIELD_NAMES:
            known[k] = v
        else:
            log.warning("unknown config key %r ignored", k)
    return known


def _normalize_limit(limit: Any) -> Optional[int]:
    if limit is None or isinstance(limit, bool):
        return None
    if isinstance(limit, Integral):
        return int(limit) if limit >= 0 else None
    if isinstance(limit, Real) and math.isfinite(limit):
        log.warning("limit %r is not an integer; truncating", limit)
        return _normalize_limit(int(limit))
    log.warning("limit %r is not a finite number; history is unbounded", limit)
    return None


def _normalize_init_types(init_types: Any) -> Tuple[str, ...]:
    if init_types is None:
        return ()
    if isinstance(init_types, str):
        return (init_types,)
    if isinstance(init_types, (list, tuple, set, frozenset)):
        kept = tuple(t for t in init_types if isinstance(t, str))
        if len(kept) != len(init_types):
            log.warning("non-string init_types dropped from %r", init_types)
        return kept
    log.warning("init_types %r is not a string or a list; no init types", init_types)
    return ()


def _parse_types(raw: Any):
    """YAML list of action types; '/.../' entries become regular expressions."""
    if raw is None:
        items = []
    elif isinstance(raw, (list, tuple, set)):
        items = list(raw)
    else:
        if not isinstance(raw, str):
            log.warning("action types %r are not a string or a list; using it as one type", raw)
        items = [raw]
    out = []
    for item in items:
        s = str(item)
        if len(s) >= 2 and s.startswith("/") and s.endswith("/"):
            out.append(re.compile(s[1:-1]))
        else:
            out.append(s)
    return out
