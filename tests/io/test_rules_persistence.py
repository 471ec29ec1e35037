from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from common import settings
from tint.core.config import EngineConfig
from tint.core.rules import Rule, RuleKind
from tint.io.persistence import default_prefs_path, load_rules, parse_rules, save_rules

RED = (1.0, 0.0, 0.0, 1.0)
YELLOW = (1.0, 1.0, 0.0, 1.0)
MAGENTA = (1.0, 0.0, 1.0, 1.0)
BLACK = (0.0, 0.0, 0.0, 1.0)


def test_save_writes_hex_colors_and_flags(tmp_path: Path) -> None:
    rules = [
        Rule(RuleKind.TAG, "Enemy", RED),
        Rule(RuleKind.LAYER, "8", YELLOW, override_label_color=True, label_color=BLACK),
    ]
    config = EngineConfig(allow_multiple_matches=False, use_gradient_blend=True, label_indent=(14.0, 3.0))
    path = save_rules(rules, config, tmp_path / "prefs" / "rules.json")
    assert path == tmp_path / "prefs" / "rules.json"

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["version"] == 1
    assert data["allow_multiple_matches"] is False
    assert data["label_indent"] == 14.0
    assert data["rules"][0] == {
        "kind": "tag",
        "text": "Enemy",
        "color": "#FF0000FF",
        "override_label_color": False,
        "label_color": "#000000FF",
    }
    assert data["rules"][1]["kind"] == "layer"
    assert data["rules"][1]["color"] == "#FFFF00FF"


def test_load_restores_saved_rules(tmp_path: Path) -> None:
    rules = [Rule(RuleKind.NAME, "Boss", RED, override_label_color=True, label_color=YELLOW)]
    path = save_rules(rules, EngineConfig(label_indent=(9.0, 0.0)), tmp_path / "rules.json")
    loaded, config = load_rules(path)
    assert loaded == rules
    assert config.label_indent == (9.0, 0.0)
    assert config.use_gradient_blend is True


def test_bad_colors_fall_back_with_error_log(caplog: pytest.LogCaptureFixture) -> None:
    doc = {
        "rules": [
            {"kind": "tag", "text": "A", "color": "#12", "label_color": "nope"},
            {"kind": "tag", "text": "B", "color": "#00FF00FF", "label_color": "#FFFFFFFF"},
        ]
    }
    with caplog.at_level(logging.ERROR, logger="tint.io.persistence"):
        rules, _ = parse_rules(doc)
    assert rules[0].color == MAGENTA
    assert rules[0].label_color == BLACK
    assert rules[1].color == (0.0, 1.0, 0.0, 1.0)
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 2


def test_unknown_kind_and_non_object_rules_are_skipped() -> None:
    rules, _ = parse_rules(
        {"rules": [{"kind": "shape", "text": "x"}, "junk", {"kind": "Type", "text": "int"}]}
    )
    assert [r.kind for r in rules] == [RuleKind.TYPE]


def test_missing_and_corrupt_files_give_defaults(tmp_path: Path) -> None:
    assert load_rules(tmp_path / "none.json") == ([], EngineConfig())
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert load_rules(broken) == ([], EngineConfig())
    assert parse_rules(["not", "a", "dict"]) == ([], EngineConfig())


def test_save_failure_returns_none(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    # 親がファイルなのでディレクトリを作れない
    assert save_rules([Rule()], EngineConfig(), blocker / "rules.json") is None


def test_default_path_follows_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TINT_PREFS_PATH", str(tmp_path / "custom.json"))
    settings.reload_from_env()
    try:
        assert default_prefs_path() == tmp_path / "custom.json"
        save_rules([Rule(RuleKind.TAG, "Player", RED)], EngineConfig())
        loaded, _ = load_rules()
        assert loaded[0].text == "Player"
    finally:
        monkeypatch.delenv("TINT_PREFS_PATH")
        settings.reload_from_env()
    monkeypatch.chdir(tmp_path)
    assert default_prefs_path() == tmp_path / "data" / "tint" / "rules.json"


def test_save_with_unconvertible_color_returns_none(tmp_path: Path) -> None:
    target = tmp_path / "rules.json"
    assert save_rules([Rule(RuleKind.TAG, "Enemy", RED)], EngineConfig(), target) == target
    before = target.read_text(encoding="utf-8")
    bad = Rule(RuleKind.TAG, "Enemy", (0.5, 0.5))  # type: ignore[arg-type]
    assert save_rules([bad], EngineConfig(), target) is None
    assert target.read_text(encoding="utf-8") == before
