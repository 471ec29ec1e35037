"""共通フィクスチャ。

- 毎回新しい TintContext（キャッシュを共有しない）
- 診断フックの記録先
"""

from __future__ import annotations

from typing import Callable

import pytest

from common.types import Rect
from tint.core.config import EngineConfig
from tint.core.context import TintContext
from tint.core.errors import MalformedRuleError
from tint.core.rules import SceneItem


@pytest.fixture()
def row_rect() -> Rect:
    return Rect(10.0, 20.0, 200.0, 16.0)


@pytest.fixture()
def diagnostics() -> list[MalformedRuleError]:
    return []


@pytest.fixture()
def make_context(diagnostics: list[MalformedRuleError]) -> Callable[..., TintContext]:
    def _make(rules=None, **config_kwargs) -> TintContext:
        return TintContext.create(
            rules,
            EngineConfig(**config_kwargs),
            on_diagnostic=diagnostics.append,
        )

    return _make


@pytest.fixture()
def enemy_boss() -> SceneItem:
    return SceneItem(name="Boss", tag="Enemy", layer=0)
