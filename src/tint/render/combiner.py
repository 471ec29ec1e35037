"""
どこで: `tint.render.combiner`。
何を: 一致した色列を 1 枚のピクセル配列（単色 / 単色ブロック / 線形グラデーション）へ合成する。
なぜ: 複数ルールの一致を 1 行の背景で同時に示すため。

仕様（要点）:
- 1 色: 全ピクセルをその色で塗る。
- 複数色・グラデーション無し: 幅 `ceil(W / n)` の縦帯に順に色を割り当てる。
- 複数色・グラデーション有り: 帯幅 `ceil(W / (n - 1))`。列 x で
  `lower = floor(x / chunk)`, `upper = ceil(x / chunk)`, `t = (x % chunk) / chunk` とし、
  `colors[lower]` → `colors[upper]` を t で補間（0–1 にクランプ）。
- 列内の全行は同色（横方向のみ変化）。
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from util.constants import SWATCH_HEIGHT, SWATCH_WIDTH


def _chunk_width(width: int, segments: int) -> int:
    # ceil(width / segments) を整数演算で
    return -(-width // segments)


def column_colors(colors: Sequence[Sequence[float]], use_gradient: bool, width: int) -> np.ndarray:
    """各列の色 (W, 4) float32 を返す（RGB の色は alpha=1 として扱う）。"""
    cols = np.asarray(colors, dtype=np.float32)
    if cols.size == 0:
        raise ValueError("at least one color is required")
    if cols.ndim != 2 or cols.shape[1] not in (3, 4):
        raise ValueError(f"colors must be RGB or RGBA sequences, got shape {cols.shape}")
    if cols.shape[1] == 3:
        cols = np.concatenate([cols, np.ones((cols.shape[0], 1), dtype=np.float32)], axis=1)
    n = cols.shape[0]
    if n == 1:
        return np.repeat(cols, width, axis=0)

    xs = np.arange(width, dtype=np.int64)
    if not use_gradient:
        chunk = _chunk_width(width, n)
        return cols[np.minimum(xs // chunk, n - 1)]

    chunk = _chunk_width(width, n - 1)
    lower = xs // chunk
    upper = -(-xs // chunk)
    t = ((xs % chunk) / float(chunk)).astype(np.float32)[:, None]
    row = cols[lower] + (cols[upper] - cols[lower]) * t
    return np.clip(row, 0.0, 1.0)


def build(
    colors: Sequence[Sequence[float]],
    use_gradient: bool,
    *,
    width: int = SWATCH_WIDTH,
    height: int = SWATCH_HEIGHT,
) -> np.ndarray:
    """色列からピクセル配列 (H, W, 4) float32 を生成する。

    Parameters
    ----------
    colors : Sequence[Sequence[float]]
        一致順の RGBA(0–1) 色列（1 色以上）。
    use_gradient : bool
        True なら隣接色を線形補間、False なら単色ブロック。
    width, height : int
        出力寸法（px）。

    Returns
    -------
    np.ndarray
        shape=(height, width, 4) の新規配列。
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"swatch size must be positive: {width}x{height}")
    row = column_colors(colors, use_gradient, width)
    return np.ascontiguousarray(np.broadcast_to(row, (height, width, 4)), dtype=np.float32)


__all__ = ["build", "column_colors"]
