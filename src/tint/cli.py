"""
どこで: `tint.cli`（`python -m tint.cli` / `hierarchy-tint`）。
何を: 保存済みルールで仮想の項目を注釈し、結果（一致色・ラベル色・スウォッチ PNG）を確認する。
なぜ: ホスト（ツリー表示）を起動せずにルール設定を検証できるようにするため。

使い方:
    hierarchy-tint preview --rules data/tint/rules.json --tag Enemy --name Boss --out boss.png
    hierarchy-tint check --rules data/tint/rules.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from common.logging import setup_default_logging
from common.types import Rect
from util.color import to_hex_rgba

from .core.annotate import AnnotationEngine
from .core.errors import MalformedRuleError
from .core.matcher import parse_layer
from .core.rules import RuleKind, SceneItem
from .io.persistence import default_prefs_path, load_rules

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hierarchy-tint", description="hierarchy coloring rules")
    parser.add_argument("--log-level", default=None, help="logging level (default: TINT_LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="command", required=True)

    preview = sub.add_parser("preview", help="annotate a synthetic item with the saved rules")
    preview.add_argument("--rules", type=Path, default=None, help="rules JSON (default: prefs path)")
    preview.add_argument("--tag", default="Untagged")
    preview.add_argument("--layer", type=int, default=0)
    preview.add_argument("--name", default="GameObject")
    preview.add_argument("--inactive", action="store_true", help="treat the item as inactive")
    preview.add_argument("--out", type=Path, default=None, help="write the swatch as PNG")

    check = sub.add_parser("check", help="report rules that cannot be matched")
    check.add_argument("--rules", type=Path, default=None, help="rules JSON (default: prefs path)")
    return parser


def _cmd_preview(args: argparse.Namespace) -> int:
    rules, config = load_rules(args.rules)
    logger.debug("loaded %d rules", len(rules))
    item = SceneItem(name=args.name, tag=args.tag, layer=args.layer, active=not args.inactive)
    engine = AnnotationEngine()
    instr = engine.annotate(item, Rect(0.0, 0.0, 200.0, 16.0), rules, config)
    if instr is None:
        print(json.dumps({"matched": False, "rules": len(rules)}))
        return 1
    report = {
        "matched": True,
        "fingerprint": instr.swatch.fingerprint,
        "colors": [to_hex_rgba(c) for c in instr.matched_colors],
        "label_color": to_hex_rgba(instr.label_color),
    }
    if args.out is not None:
        from .export.image import save_swatch_png

        report["png"] = str(save_swatch_png(instr.swatch, args.out))
    print(json.dumps(report, ensure_ascii=False))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    rules, _ = load_rules(args.rules)
    problems: list[str] = []
    for i, rule in enumerate(rules):
        if rule.kind == RuleKind.LAYER:
            try:
                parse_layer(rule.text)
            except MalformedRuleError as e:
                problems.append(f"#{i}: {e}")
        elif rule.kind == RuleKind.TYPE and not rule.text.strip():
            problems.append(f"#{i}: empty type descriptor never matches")
    for p in problems:
        print(p)
    print(f"{len(rules)} rules, {len(problems)} problems ({args.rules or default_prefs_path()})")
    return 1 if problems else 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)
    if args.command == "preview":
        return _cmd_preview(args)
    return _cmd_check(args)


if __name__ == "__main__":
    sys.exit(main())
