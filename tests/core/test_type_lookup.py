from __future__ import annotations

import collections

from tint.core.type_lookup import resolve_type, type_descriptor


class Outer:
    class Inner:
        pass


def test_builtin_names() -> None:
    assert resolve_type("int") is int
    assert resolve_type(" str ") is str
    assert type_descriptor(int) == "int"


def test_colon_and_dotted_forms() -> None:
    assert resolve_type("collections:OrderedDict") is collections.OrderedDict
    assert resolve_type("collections.OrderedDict") is collections.OrderedDict


def test_nested_qualname_round_trip() -> None:
    desc = type_descriptor(Outer.Inner)
    assert desc.endswith(":Outer.Inner")
    assert resolve_type(desc) is Outer.Inner


def test_unresolvable_descriptors_return_none() -> None:
    assert resolve_type("") is None
    assert resolve_type("   ") is None
    assert resolve_type("no_such_module_xyz:Thing") is None
    assert resolve_type("collections:NoSuchThing") is None
    assert resolve_type("collections:") is None
    # 型ではない属性
    assert resolve_type("collections:namedtuple") is None
    assert resolve_type("no_such_pkg_xyz.sub.Thing") is None


def test_import_missing_is_opt_in() -> None:
    assert resolve_type("no_such_module_xyz:Thing", import_missing=True) is None
    assert resolve_type("json.decoder:JSONDecoder", import_missing=True).__name__ == "JSONDecoder"
