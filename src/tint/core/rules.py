"""
どこで: `tint.core.rules`。
何を: ルール（`Rule`/`RuleKind`）と、ホストが渡す項目のインターフェース（`Item`）、
      およびテスト/簡易ホスト向けの具象項目 `SceneItem`。
なぜ: 照合ロジックが依存する形を最小限のプロトコルに固定し、ホスト実装から独立させるため。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from common.types import RGBA

WHITE: RGBA = (1.0, 1.0, 1.0, 1.0)
BLACK: RGBA = (0.0, 0.0, 0.0, 1.0)


class RuleKind(str, Enum):
    """ルールが照合する属性。"""

    TAG = "tag"
    LAYER = "layer"
    NAME = "name"
    TYPE = "type"

    @classmethod
    def parse(cls, value: "str | RuleKind") -> "RuleKind":
        """`"Tag"` / `"tag"` / `RuleKind.TAG` のいずれも受理する。"""
        if isinstance(value, RuleKind):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise ValueError(f"unknown rule kind: {value!r}") from e


@dataclass
class Rule:
    """ユーザーが編集する 1 行分の色付けルール。

    Attributes
    ----------
    kind : RuleKind
        照合対象の属性。
    text : str
        照合文字列（タグ名 / レイヤー番号 / 名前 / 型記述子）。
    color : RGBA
        一致時に寄与する色。
    override_label_color : bool
        True ならラベル色を `label_color` で上書きする。
    label_color : RGBA
        上書き時のラベル色。
    """

    kind: RuleKind = RuleKind.TAG
    text: str = "Untagged"
    color: RGBA = WHITE
    override_label_color: bool = False
    label_color: RGBA = BLACK


@runtime_checkable
class Item(Protocol):
    """ホストが描画中に渡す項目（読み取り専用）。"""

    @property
    def tag(self) -> str: ...

    @property
    def layer(self) -> int: ...

    @property
    def name(self) -> str: ...

    @property
    def active(self) -> bool: ...

    def has_component(self, type_handle: type) -> bool: ...


@dataclass(frozen=True)
class SceneItem:
    """`Item` の素朴な実装。コンポーネントはインスタンスで保持し、型判定は isinstance。"""

    name: str
    tag: str = "Untagged"
    layer: int = 0
    active: bool = True
    components: tuple[Any, ...] = field(default_factory=tuple)

    def has_component(self, type_handle: type) -> bool:
        return any(isinstance(c, type_handle) for c in self.components)


__all__ = ["RuleKind", "Rule", "Item", "SceneItem", "WHITE", "BLACK"]
