"""
どこで: `tint.core.context`。
何を: ルール列・エンジン設定・注釈エンジン（キャッシュ）を 1 つにまとめた実行コンテキスト。
なぜ: プロセス全体で共有される可変状態を隠れたグローバルにせず、明示的なオブジェクトとして
      起動時に 1 度作り、描画コールバックへ渡すため（テストでは毎回新しいものを作れる）。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from common.types import Rect

from ..render.swatch_cache import SwatchCache
from .annotate import AnnotationEngine, DiagnosticHook, DrawInstruction
from .config import EngineConfig
from .rules import Item, Rule
from .type_lookup import TypeResolver, resolve_type

logger = logging.getLogger(__name__)


@dataclass
class TintContext:
    """描画ホストと設定画面が共有する状態。

    - `rules` / `config` は設定画面が直接書き換えてよい。
    - 書き換えた後は `rules_changed()` を呼び、キャッシュを破棄すること。
    """

    rules: list[Rule] = field(default_factory=list)
    config: EngineConfig = field(default_factory=EngineConfig)
    engine: AnnotationEngine = field(default_factory=AnnotationEngine)

    @classmethod
    def create(
        cls,
        rules: list[Rule] | None = None,
        config: EngineConfig | None = None,
        *,
        resolver: TypeResolver = resolve_type,
        on_diagnostic: DiagnosticHook | None = None,
        cache: SwatchCache | None = None,
    ) -> "TintContext":
        """コンテキストを生成する（config 省略時は YAML 設定から読む）。"""
        if config is None:
            config = EngineConfig.from_config()
        engine = AnnotationEngine(cache, resolver=resolver, on_diagnostic=on_diagnostic)
        return cls(rules=list(rules or []), config=config, engine=engine)

    @property
    def cache(self) -> SwatchCache:
        return self.engine.cache

    def annotate(self, item: Item, rect: Rect) -> DrawInstruction | None:
        """ホストの描画コールバックから項目ごとに呼ぶ。"""
        return self.engine.annotate(item, rect, self.rules, self.config)

    def rules_changed(self) -> None:
        """ルール集合を編集した後に呼ぶ（キャッシュ済みスウォッチを破棄）。"""
        logger.debug("rules changed: %d rules, clearing swatch cache", len(self.rules))
        self.engine.cache.clear()

    def set_use_gradient_blend(self, enabled: bool) -> None:
        """グラデーション設定を変更し、必要ならキャッシュを破棄する。"""
        if self.config.use_gradient_blend == bool(enabled):
            return
        self.config.use_gradient_blend = bool(enabled)
        self.engine.cache.clear()

    def set_allow_multiple_matches(self, enabled: bool) -> None:
        # キーは一致色列から作られるため、キャッシュはそのまま使える
        self.config.allow_multiple_matches = bool(enabled)


__all__ = ["TintContext"]
