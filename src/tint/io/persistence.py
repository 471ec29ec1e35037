"""
どこで: `tint.io.persistence`。
何を: ルール集合とエンジン設定を JSON に保存/復元する。
なぜ: 次回起動時に前回のルールを反映するため（コア自体はストレージに触れない）。

仕様（要点）:
- 保存先: 既定 `<cwd>/data/tint/rules.json`。環境変数 `TINT_PREFS_PATH` で上書き可。
- 色は "#RRGGBBAA" で保存。読込時に解釈できない色は、ルール色=マゼンタ / ラベル色=黒 に
  置き換えて ERROR ログを出す（ルール自体は残す）。
- 未知の kind のルールは読み飛ばす（ERROR ログ）。
- ラベルインデントは x のみ保存（設定画面が横方向のみ扱うため）。
- 失敗はフェイルソフト: 保存は None を返し、読込は既定値を返す。
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Sequence

from common.types import RGBA
from util.color import parse_hex_color_str, to_hex_rgba
from util.constants import FALLBACK_LABEL_COLOR, FALLBACK_RULE_COLOR

from ..core.config import EngineConfig
from ..core.rules import Rule, RuleKind

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def default_prefs_path() -> Path:
    from common.settings import get as _get_settings

    configured = _get_settings().PREFS_PATH
    if configured is not None:
        return configured
    return Path.cwd() / "data" / "tint" / "rules.json"


def _rule_to_json(rule: Rule) -> dict[str, Any]:
    return {
        "kind": RuleKind.parse(rule.kind).value,
        "text": rule.text,
        "color": to_hex_rgba(rule.color),
        "override_label_color": bool(rule.override_label_color),
        "label_color": to_hex_rgba(rule.label_color),
    }


def _parse_color(raw: Any, fallback: RGBA, what: str, index: int) -> RGBA:
    try:
        return parse_hex_color_str(str(raw))
    except ValueError:
        logger.error("failed to parse the %s for rule at index %d: %r", what, index, raw)
        return fallback


def _rule_from_json(raw: Any, index: int) -> Rule | None:
    if not isinstance(raw, dict):
        logger.error("rule at index %d is not an object: %r", index, raw)
        return None
    try:
        kind = RuleKind.parse(raw.get("kind", RuleKind.TAG))
    except ValueError:
        logger.error("unknown rule kind at index %d: %r", index, raw.get("kind"))
        return None
    return Rule(
        kind=kind,
        text=str(raw.get("text", "")),
        color=_parse_color(raw.get("color"), FALLBACK_RULE_COLOR, "color", index),
        override_label_color=bool(raw.get("override_label_color", False)),
        label_color=_parse_color(raw.get("label_color"), FALLBACK_LABEL_COLOR, "label color", index),
    )


def dump_rules(rules: Sequence[Rule], config: EngineConfig) -> dict[str, Any]:
    """ルールと設定を JSON 化可能な辞書へ変換する。"""
    return {
        "version": FORMAT_VERSION,
        "saved_at": datetime.now(timezone.utc).isoformat(),
        "allow_multiple_matches": bool(config.allow_multiple_matches),
        "use_gradient_blend": bool(config.use_gradient_blend),
        "label_indent": float(config.label_indent[0]),
        "rules": [_rule_to_json(r) for r in rules],
    }


def parse_rules(data: Any) -> tuple[list[Rule], EngineConfig]:
    """`dump_rules` 形式の辞書からルールと設定を復元する。"""
    if not isinstance(data, dict):
        logger.error("rules document is not an object; using defaults")
        return [], EngineConfig()
    config = EngineConfig.from_mapping(
        {k: data[k] for k in ("allow_multiple_matches", "use_gradient_blend", "label_indent") if k in data}
    )
    raw_rules = data.get("rules", [])
    if not isinstance(raw_rules, list):
        logger.error("'rules' is not a list; ignoring")
        raw_rules = []
    rules = [r for i, raw in enumerate(raw_rules) if (r := _rule_from_json(raw, i)) is not None]
    return rules, config


def save_rules(
    rules: Sequence[Rule], config: EngineConfig, path: Path | None = None
) -> Path | None:
    """ルールと設定を JSON に保存する。

    失敗時は None を返す（フェイルソフト）。色が変換できない場合も既存ファイルには触れない。
    """
    target = path if path is not None else default_prefs_path()
    try:
        document = dump_rules(rules, config)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as f:
            json.dump(document, f, ensure_ascii=False, indent=2)
    except (OSError, ValueError):
        logger.exception("failed to save coloring rules to %s", target)
        return None
    return target


def load_rules(path: Path | None = None) -> tuple[list[Rule], EngineConfig]:
    """JSON からルールと設定を読み込む。

    ファイルが無い/壊れている場合は空のルールと既定設定を返す。
    """
    source = path if path is not None else default_prefs_path()
    if not source.exists():
        return [], EngineConfig()
    try:
        with source.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        logger.exception("failed to load coloring rules from %s", source)
        return [], EngineConfig()
    return parse_rules(data)


__all__ = [
    "FORMAT_VERSION",
    "default_prefs_path",
    "dump_rules",
    "parse_rules",
    "save_rules",
    "load_rules",
]
