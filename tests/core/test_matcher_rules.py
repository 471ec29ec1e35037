from __future__ import annotations

import pytest

from tint.core.errors import MalformedRuleError
from tint.core.matcher import matches, parse_layer
from tint.core.rules import Rule, RuleKind, SceneItem
from tint.core.type_lookup import type_descriptor


class Collider:
    pass


class BoxCollider(Collider):
    pass


class Light:
    pass


def _item(**kwargs) -> SceneItem:
    base = dict(name="Player", tag="Hero", layer=3)
    base.update(kwargs)
    return SceneItem(**base)


def test_rule_defaults() -> None:
    rule = Rule()
    assert rule.kind is RuleKind.TAG
    assert rule.text == "Untagged"
    assert rule.color == (1.0, 1.0, 1.0, 1.0)
    assert rule.override_label_color is False
    assert rule.label_color == (0.0, 0.0, 0.0, 1.0)


def test_rule_kind_parse() -> None:
    assert RuleKind.parse("Layer") is RuleKind.LAYER
    assert RuleKind.parse(RuleKind.NAME) is RuleKind.NAME
    with pytest.raises(ValueError):
        RuleKind.parse("colour")


def test_tag_and_name_are_exact_matches() -> None:
    item = _item()
    assert matches(Rule(RuleKind.TAG, "Hero"), item)
    assert not matches(Rule(RuleKind.TAG, "hero"), item)
    assert matches(Rule(RuleKind.NAME, "Player"), item)
    assert not matches(Rule(RuleKind.NAME, "Player "), item)


def test_layer_parses_text() -> None:
    item = _item(layer=3)
    assert matches(Rule(RuleKind.LAYER, "3"), item)
    assert matches(Rule(RuleKind.LAYER, " 3 "), item)
    assert not matches(Rule(RuleKind.LAYER, "4"), item)


@pytest.mark.parametrize("text", ["abc", "", "1.5", "-1"])
def test_layer_malformed_raises(text: str) -> None:
    rule = Rule(RuleKind.LAYER, text)
    with pytest.raises(MalformedRuleError) as info:
        matches(rule, _item())
    assert info.value.rule is rule


def test_parse_layer() -> None:
    assert parse_layer("0") == 0
    assert parse_layer("31") == 31
    with pytest.raises(MalformedRuleError):
        parse_layer("x1")


def test_type_membership_with_default_resolver() -> None:
    item = _item(components=(BoxCollider(),))
    assert matches(Rule(RuleKind.TYPE, type_descriptor(BoxCollider)), item)
    # 基底型でも一致する（isinstance 判定）
    assert matches(Rule(RuleKind.TYPE, type_descriptor(Collider)), item)
    assert not matches(Rule(RuleKind.TYPE, type_descriptor(Light)), item)


def test_type_membership_unresolved_is_no_match() -> None:
    item = _item(components=(Light(),))
    assert not matches(Rule(RuleKind.TYPE, "no_such_module_xyz:Light"), item)
    assert not matches(Rule(RuleKind.TYPE, "NoSuchBuiltin"), item)


def test_type_membership_empty_text_never_queries_resolver() -> None:
    calls: list[str] = []

    def resolver(text: str):
        calls.append(text)
        return Light

    item = _item(components=(Light(),))
    assert not matches(Rule(RuleKind.TYPE, ""), item, resolver)
    assert calls == []
    assert matches(Rule(RuleKind.TYPE, "anything"), item, resolver)
    assert calls == ["anything"]


def test_scene_item_has_component() -> None:
    item = SceneItem(name="a", components=(1, "x"))
    assert item.has_component(int)
    assert item.has_component(str)
    assert not item.has_component(float)


def test_string_kind_is_accepted() -> None:
    item = _item()
    assert matches(Rule("Tag", "Hero"), item)  # type: ignore[arg-type]
    assert matches(Rule("layer", "3"), item)  # type: ignore[arg-type]
    assert not matches(Rule("Name", "Enemy"), item)  # type: ignore[arg-type]


def test_unknown_kind_is_malformed() -> None:
    rule = Rule("Colour", "Hero")  # type: ignore[arg-type]
    with pytest.raises(MalformedRuleError) as info:
        matches(rule, _item())
    assert info.value.rule is rule
