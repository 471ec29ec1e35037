"""
どこで: `tint.render.contrast`。
何を: 背景色に対する「反対色」を返す（HSV で色相と明度を半周回す）。
なぜ: ラベル色の上書きが無いとき、背景スウォッチ上でも文字が読めるようにするため。
"""

from __future__ import annotations

import colorsys
from typing import Sequence

from common.types import RGBA


def invert(color: Sequence[float]) -> RGBA:
    """反対色を返す。

    RGB→HSV で `h = (h + 0.5) % 1`, `v = (v + 0.5) % 1`（彩度は維持）として RGB へ戻す。
    HSV は alpha を持たないため、結果は常に不透明（alpha=1）。入力の alpha は使わない。

    Notes
    -----
    2 回適用すると RGB は概ね元に戻るが、明度がちょうど 0.5 / 1.0 の色は途中で黒
    （色相/彩度の情報なし）を経由するため元に戻らない。
    """
    r, g, b = (float(c) for c in color[:3])
    h, s, v = colorsys.rgb_to_hsv(r, g, b)
    h = (h + 0.5) % 1.0
    v = (v + 0.5) % 1.0
    r2, g2, b2 = colorsys.hsv_to_rgb(h, s, v)
    return (r2, g2, b2, 1.0)


__all__ = ["invert"]
