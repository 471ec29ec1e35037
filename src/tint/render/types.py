"""
どこで: `tint.render` 型定義。
何を: 生成済みスウォッチ（RGBA float32 のピクセル配列）の不変コンテナ `Swatch`。
なぜ: キャッシュから同一インスタンスを複数の項目/フレームへ配るため、書き換え不能にしておく。
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class Swatch:
    """W×H の RGBA ピクセル配列（shape=(H, W, 4), float32, 0–1, 読み取り専用）。"""

    pixels: np.ndarray
    fingerprint: int

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(f"swatch pixels must be (H, W, 4), got {self.pixels.shape}")
        self.pixels.flags.writeable = False

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def column(self, x: int) -> tuple[float, float, float, float]:
        """列 x の色（全行同色）を返す。"""
        r, g, b, a = (float(v) for v in self.pixels[0, x])
        return (r, g, b, a)

    def to_u8(self) -> np.ndarray:
        """RGBA8 (H, W, 4) uint8 へ変換したコピーを返す。"""
        return np.clip(np.rint(self.pixels * 255.0), 0, 255).astype(np.uint8)


__all__ = ["Swatch"]
