"""
どこで: `tint.core.matcher`。
何を: 1 ルール × 1 項目の一致判定（種別ごとのディスパッチ）。
なぜ: 照合を副作用のない純関数に閉じ込め、エンジン側は結果の集約だけを担うため。
"""

from __future__ import annotations

from typing import Callable

from .errors import MalformedRuleError
from .rules import Item, Rule, RuleKind
from .type_lookup import TypeResolver, resolve_type


def parse_layer(text: str) -> int:
    """レイヤー番号文字列を非負整数へ変換する（不正なら MalformedRuleError）。"""
    try:
        layer = int(text.strip())
    except ValueError as e:
        raise MalformedRuleError(f"layer rule text is not an integer: {text!r}") from e
    if layer < 0:
        raise MalformedRuleError(f"layer rule text is negative: {text!r}")
    return layer


def _match_tag(rule: Rule, item: Item, resolver: TypeResolver) -> bool:
    return rule.text == item.tag


def _match_layer(rule: Rule, item: Item, resolver: TypeResolver) -> bool:
    try:
        return parse_layer(rule.text) == item.layer
    except MalformedRuleError as e:
        raise MalformedRuleError(str(e), rule=rule) from e


def _match_name(rule: Rule, item: Item, resolver: TypeResolver) -> bool:
    return rule.text == item.name


def _match_type(rule: Rule, item: Item, resolver: TypeResolver) -> bool:
    if not rule.text:
        return False
    handle = resolver(rule.text)
    if handle is None:
        return False
    return bool(item.has_component(handle))


_DISPATCH: dict[RuleKind, Callable[[Rule, Item, TypeResolver], bool]] = {
    RuleKind.TAG: _match_tag,
    RuleKind.LAYER: _match_layer,
    RuleKind.NAME: _match_name,
    RuleKind.TYPE: _match_type,
}


def matches(rule: Rule, item: Item, resolver: TypeResolver = resolve_type) -> bool:
    """ルールが項目に一致するかを返す。

    `kind` は `RuleKind` のほか `"Tag"` などの文字列でもよい。

    Raises
    ------
    MalformedRuleError
        ルール文字列がその種別として解釈できない場合（LAYER の非整数など）、
        または `kind` が未知の場合。
    """
    try:
        kind = RuleKind.parse(rule.kind)
    except ValueError as e:
        raise MalformedRuleError(str(e), rule=rule) from e
    return _DISPATCH[kind](rule, item, resolver)


__all__ = ["matches", "parse_layer"]
