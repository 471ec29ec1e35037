"""
どこで: `tint` パッケージ（hierarchy-tint の公開入口）。
何を: 階層ツリー項目をルールで分類し、色スウォッチとラベル色の描画指示を生成する。
なぜ: ホストは `TintContext.annotate(item, rect)` だけを呼べば済むようにするため。
"""

from .core.annotate import AnnotationEngine, DrawInstruction
from .core.config import EngineConfig
from .core.context import TintContext
from .core.errors import MalformedRuleError, TintError
from .core.rules import Item, Rule, RuleKind, SceneItem
from .render.types import Swatch

__all__ = [
    "AnnotationEngine",
    "DrawInstruction",
    "EngineConfig",
    "TintContext",
    "TintError",
    "MalformedRuleError",
    "Item",
    "Rule",
    "RuleKind",
    "SceneItem",
    "Swatch",
]
