import logging
import re

import pytest

from undoable import (
    Action, UndoConfig, DEFAULT_INIT_TYPES, accept_all,
    resolve_config, load_config, undoable,
)


def test_defaults():
    cfg = UndoConfig()
    assert cfg.limit is None
    assert cfg.filter is accept_all
    assert cfg.group_by is None
    assert cfg.init_types == DEFAULT_INIT_TYPES == ("@@undoable/INIT",)
    assert cfg.debug is False
    assert cfg.never_skip_reducer is False
    assert cfg.sync_filter is False
    assert cfg.ignore_initial_state is False


def test_resolve_from_mapping_and_overrides():
    cfg = resolve_config({"limit": 5, "init_types": ["RESET"]}, debug=True)
    assert cfg.limit == 5
    assert cfg.init_types == ("RESET",)
    assert cfg.debug is True


@pytest.mark.parametrize("limit, expected", [
    (-1, None),
    (0, 0),
    (3.7, 3),
    ("ten", None),
    (True, None),
])
def test_bad_limit_degrades(limit, expected):
    assert UndoConfig(limit=limit).limit == expected


@pytest.mark.parametrize("init_types, expected", [
    ("RE-INITIALIZE", ("RE-INITIALIZE",)),
    (None, ()),
    (42, ()),
    (["A", 1, "B"], ("A", "B")),
])
def test_bad_init_types_degrade(init_types, expected):
    assert UndoConfig(init_types=init_types).init_types == expected


def test_non_callable_filter_and_group_by_fall_back(caplog):
    with caplog.at_level(logging.WARNING, logger="undoable"):
        cfg = UndoConfig(filter="nope", group_by=3)
    assert cfg.filter is accept_all
    assert cfg.group_by is None
    assert "not callable" in caplog.text


def test_unknown_keys_are_ignored(caplog):
    with caplog.at_level(logging.WARNING, logger="undoable"):
        cfg = resolve_config({"limit": 2, "undoType": "MY_UNDO"})
    assert cfg.limit == 2
    assert "undoType" in caplog.text


def test_erroneous_configuration_still_runs(counter):
    r = undoable(counter, limit="x", init_types=7, filter=None)
    h = r(None, Action("@@undoable/INIT"))
    h = r(h, Action("INCREMENT"))
    assert h.past == (0,)
    assert h.present == 1


def test_load_config_missing_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "nope.yaml") == UndoConfig()
    assert load_config(None) == UndoConfig()


def test_load_config_from_yaml(tmp_path, counter):
    p = tmp_path / "undo.yaml"
    p.write_text(
        "limit: 2\n"
        "init_types: [RESET]\n"
        "exclude: [DECREMENT, /HOVER_.*/]\n"
        "group_by_types: [DRAG]\n"
        "debug: true\n",
        encoding="utf-8",
    )
    cfg = load_config(p)
    assert cfg.limit == 2
    assert cfg.init_types == ("RESET",)
    assert cfg.debug is True
    assert cfg.filter(Action("DECREMENT"), 0, None) is False
    assert cfg.filter(Action("HOVER_ICON"), 0, None) is False
    assert cfg.filter(Action("INCREMENT"), 0, None) is True
    assert cfg.group_by(Action("DRAG"), 0, None) == "DRAG"

    r = undoable(counter, cfg)
    h = r(None, Action("RESET"))
    for a in ("INCREMENT", "INCREMENT", "DECREMENT", "INCREMENT"):
        h = r(h, Action(a))
    assert h.past == (1, 2)
    assert h.present == 3


def test_load_config_rejects_non_mapping(tmp_path):
    p = tmp_path / "undo.yaml"
    p.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)


def test_patterns_in_yaml_are_compiled(tmp_path):
    p = tmp_path / "undo.yaml"
    p.write_text("include: ['/EDIT_[A-Z]+/']\n", encoding="utf-8")
    cfg = load_config(p)
    assert cfg.filter(Action("EDIT_TITLE"), 0, None) is True
    assert cfg.filter(Action("EDIT_"), 0, None) is False


def test_regex_init_types_are_dropped():
    cfg = UndoConfig(init_types=[re.compile("RESET"), "CLEAR"])
    assert cfg.init_types == ("CLEAR",)


@pytest.mark.parametrize("key", ["exclude", "include", "group_by_types"])
@pytest.mark.parametrize("value", ["5", "true", "~"])
def test_scalar_or_null_type_lists_in_yaml_still_run(tmp_path, counter, key, value):
    p = tmp_path / "undo.yaml"
    p.write_text(f"{key}: {value}\n", encoding="utf-8")
    cfg = load_config(p)

    r = undoable(counter, cfg)
    h = r(None, Action("@@undoable/INIT"))
    h = r(h, Action("INCREMENT"))
    h = r(h, Action("INCREMENT"))
    # nothing matches INCREMENT: include records nothing, the others record everything
    expected_past = () if key == "include" else (0, 1)
    assert h.past == expected_past
    assert h.present == (0 if key == "include" else 2)
