"""
どこで: `tint.core.annotate`。
何を: 1 項目に対する注釈パイプライン（ルール照合 → 色の集約 → スウォッチ取得 → ラベル色決定）。
なぜ: ホストの描画コールバックから 1 回呼ぶだけで描画指示が得られるようにするため。

処理の流れ:
1) ルールが空なら None。
2) ルールを順に照合。一致した色を追加し、最初に見つかった上書きラベル色を記録。
   `allow_multiple_matches=False` なら最初の一致で打ち切る。
   解釈できないルール（MalformedRuleError）は読み飛ばし、診断を出して続行する。
3) 一致が無ければ None。
4) フィンガープリントで SwatchCache を引き、無ければ生成。
5) ラベル色 = 上書き色 or 最初の一致色の反対色。非アクティブ項目は 0.5 倍。
6) 背景矩形（右へ余白付き）とラベル矩形（インデント分ずらす）を返す。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from common.types import RGBA, Rect
from util.color import scale_color
from util.constants import BACK_RECT_PADDING, INACTIVE_LABEL_SCALE

from ..render.contrast import invert
from ..render.swatch_cache import SwatchCache, fingerprint
from ..render.types import Swatch
from .config import EngineConfig
from .errors import MalformedRuleError
from .matcher import matches
from .rules import Item, Rule
from .type_lookup import TypeResolver, resolve_type

logger = logging.getLogger(__name__)

DiagnosticHook = Callable[[MalformedRuleError], None]


@dataclass(frozen=True)
class DrawInstruction:
    """ホストが即時描画 API で描くための指示。"""

    swatch_rect: Rect
    swatch: Swatch
    label_rect: Rect
    label_color: RGBA
    label_text: str
    matched_colors: tuple[RGBA, ...] = ()
    bold: bool = True


@dataclass(frozen=True)
class MatchResult:
    """照合パスの結果（一致色列と上書きラベル色）。"""

    colors: tuple[RGBA, ...]
    label_override: RGBA | None


class AnnotationEngine:
    """ルール照合とスウォッチキャッシュを束ねる注釈エンジン。

    ルール列と設定は呼び出しごとに受け取り、保持しない。
    保持する状態は SwatchCache のみ。
    """

    def __init__(
        self,
        cache: SwatchCache | None = None,
        *,
        resolver: TypeResolver = resolve_type,
        on_diagnostic: DiagnosticHook | None = None,
    ) -> None:
        self.cache = cache if cache is not None else SwatchCache()
        self.resolver = resolver
        self.on_diagnostic = on_diagnostic

    def _report(self, err: MalformedRuleError) -> None:
        logger.warning("skipping malformed rule #%s: %s", err.index, err)
        if self.on_diagnostic is not None:
            self.on_diagnostic(err)

    def collect(self, item: Item, rules: Sequence[Rule], config: EngineConfig) -> MatchResult:
        """ルールを順に照合し、一致色列と上書きラベル色を返す。"""
        colors: list[RGBA] = []
        label_override: RGBA | None = None
        for index, rule in enumerate(rules):
            try:
                hit = matches(rule, item, self.resolver)
            except MalformedRuleError as e:
                self._report(e.with_index(index))
                continue
            if not hit:
                continue
            colors.append(rule.color)
            if label_override is None and rule.override_label_color:
                label_override = rule.label_color
            if not config.allow_multiple_matches:
                break
        return MatchResult(colors=tuple(colors), label_override=label_override)

    def annotate(
        self, item: Item, rect: Rect, rules: Sequence[Rule], config: EngineConfig
    ) -> DrawInstruction | None:
        """1 項目分の描画指示を返す（一致が無ければ None）。"""
        if not rules:
            return None
        result = self.collect(item, rules, config)
        if not result.colors:
            return None

        key = fingerprint(result.colors)
        swatch = self.cache.get_or_create(key, result.colors, config.use_gradient_blend)

        label = result.label_override
        if label is None:
            label = invert(result.colors[0])
        if not item.active:
            label = scale_color(label, INACTIVE_LABEL_SCALE)

        return DrawInstruction(
            swatch_rect=rect.grown(BACK_RECT_PADDING),
            swatch=swatch,
            label_rect=rect.inset(config.label_indent),
            label_color=label,
            label_text=item.name,
            matched_colors=result.colors,
        )


__all__ = ["AnnotationEngine", "DrawInstruction", "MatchResult", "DiagnosticHook"]
