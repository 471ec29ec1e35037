"""
どこで: `tint.export.image`。
何を: 生成済みスウォッチを RGBA8 PNG として保存する。
なぜ: ルール設定の見た目をホスト無しで確認できるようにするため（CLI の preview から使用）。
"""

from __future__ import annotations

from pathlib import Path

import imageio.v3 as iio

from ..render.types import Swatch


def save_swatch_png(swatch: Swatch, path: Path) -> Path:
    """スウォッチを PNG として保存し、保存先を返す。

    Parameters
    ----------
    swatch : Swatch
        保存対象。
    path : Path
        出力先（親ディレクトリは自動作成）。拡張子が無ければ `.png` を付ける。
    """
    out = Path(path)
    if not out.suffix:
        out = out.with_suffix(".png")
    out.parent.mkdir(parents=True, exist_ok=True)
    iio.imwrite(out, swatch.to_u8(), extension=".png")
    return out


__all__ = ["save_swatch_png"]
