"""
どこで: `tint.core.config`。
何を: エンジン設定 `EngineConfig`（複数一致の許可・グラデーション・ラベルインデント）。
なぜ: 設定画面が書き換え、描画ごとに読まれる値を 1 つの型にまとめるため。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from common.types import Vec2
from util.utils import config_section

logger = logging.getLogger(__name__)

CONFIG_SECTION = "hierarchy_coloring"


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        s = value.strip().lower()
        if s in {"true", "yes", "on", "1"}:
            return True
        if s in {"false", "no", "off", "0"}:
            return False
    return default


def _as_indent(value: Any, default: Vec2) -> Vec2:
    # スカラーは x のみ（y=0）として扱う
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (float(value), 0.0)
    if isinstance(value, (list, tuple)) and len(value) == 2:
        try:
            return (float(value[0]), float(value[1]))
        except (TypeError, ValueError):
            return default
    return default


@dataclass
class EngineConfig:
    """描画ごとに読まれるエンジン設定。"""

    allow_multiple_matches: bool = True
    use_gradient_blend: bool = True
    label_indent: Vec2 = (0.0, 0.0)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EngineConfig":
        """辞書から設定を作る。欠損/不正な値は既定値で補う。"""
        base = cls()
        cfg = cls(
            allow_multiple_matches=_as_bool(
                data.get("allow_multiple_matches"), base.allow_multiple_matches
            ),
            use_gradient_blend=_as_bool(data.get("use_gradient_blend"), base.use_gradient_blend),
            label_indent=_as_indent(data.get("label_indent"), base.label_indent),
        )
        unknown = set(data) - {"allow_multiple_matches", "use_gradient_blend", "label_indent"}
        if unknown:
            logger.debug("ignored unknown %s keys: %s", CONFIG_SECTION, sorted(unknown))
        return cfg

    @classmethod
    def from_config(cls, root: Path | None = None) -> "EngineConfig":
        """`configs/default.yaml` / `config.yaml` の `hierarchy_coloring` セクションから読む。"""
        return cls.from_mapping(config_section(CONFIG_SECTION, root))

    def to_mapping(self) -> dict[str, Any]:
        return {
            "allow_multiple_matches": self.allow_multiple_matches,
            "use_gradient_blend": self.use_gradient_blend,
            "label_indent": [float(self.label_indent[0]), float(self.label_indent[1])],
        }


__all__ = ["EngineConfig", "CONFIG_SECTION"]
