"""
どこで: `tint.core.type_lookup`
何を: 型記述子文字列（`module:qualname`）と型オブジェクトの相互変換。
なぜ: TYPE ルールは文字列で保存されるため、描画時に「いまロード済みの型」へ解決する必要がある。

注意:
- 既定の `resolve_type` はロード済みモジュール（`sys.modules`）だけを探索し、import は行わない。
  描画コールバック中に未ロードのモジュールを読み込む副作用を避けるため。
- 解決できない記述子は None（エラーではない）。モジュール再読込後の古い文字列などで普通に起こる。
"""

from __future__ import annotations

import builtins
import importlib
import sys
from typing import Callable, Optional

TypeResolver = Callable[[str], Optional[type]]


def type_descriptor(cls: type) -> str:
    """型から記述子 `"{module}:{qualname}"` を返す（builtins はモジュール名を省く）。"""
    mod = getattr(cls, "__module__", "") or ""
    qn = getattr(cls, "__qualname__", getattr(cls, "__name__", "")) or ""
    if mod == "builtins":
        return qn
    return f"{mod}:{qn}".strip(":")


def _walk(obj: object, qualname: str) -> Optional[type]:
    for part in qualname.split("."):
        if not part:
            return None
        obj = getattr(obj, part, None)
        if obj is None:
            return None
    return obj if isinstance(obj, type) else None


def _find_module(name: str, import_missing: bool) -> object | None:
    mod = sys.modules.get(name)
    if mod is not None or not import_missing:
        return mod
    try:
        return importlib.import_module(name)
    except (ImportError, ValueError):
        return None


def resolve_type(descriptor: str, *, import_missing: bool = False) -> Optional[type]:
    """記述子を型へ解決する（失敗は None）。

    受理形式:
    - `"package.module:Outer.Inner"`（`type_descriptor` の出力）
    - `"package.module.Class"`（最長一致のモジュール名を探す）
    - `"int"` などの builtins 名
    """
    text = descriptor.strip()
    if not text:
        return None
    if ":" in text:
        mod_name, _, qualname = text.partition(":")
        mod = _find_module(mod_name, import_missing)
        return _walk(mod, qualname) if mod is not None else None
    if "." not in text:
        return _walk(builtins, text)
    parts = text.split(".")
    for i in range(len(parts) - 1, 0, -1):
        mod = _find_module(".".join(parts[:i]), import_missing)
        if mod is not None:
            return _walk(mod, ".".join(parts[i:]))
    return None


__all__ = ["TypeResolver", "type_descriptor", "resolve_type"]
