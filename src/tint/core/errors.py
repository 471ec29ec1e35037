"""
どこで: `tint.core.errors`。
何を: ルール照合の例外階層（`TintError` / `MalformedRuleError`）。
なぜ: 照合時の不整合を種別で捕捉し、エンジンが「そのルールだけ読み飛ばす」判断をできるようにするため。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .rules import Rule


class TintError(Exception):
    """hierarchy-tint の基底例外。"""


class MalformedRuleError(TintError, ValueError):
    """ルールの `text` がその種別として解釈できない（例: 数値でないレイヤー）。"""

    def __init__(self, message: str, *, rule: "Rule | None" = None, index: int | None = None):
        super().__init__(message)
        self.rule = rule
        self.index = index

    def with_index(self, index: int) -> "MalformedRuleError":
        """ルール一覧内の位置を付与した同じ内容の例外を返す。"""
        return MalformedRuleError(str(self), rule=self.rule, index=index)


__all__ = ["TintError", "MalformedRuleError"]
