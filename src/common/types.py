"""
どこで: `common` の型定義。
何を: Vec2 / RGBA エイリアスと、ホスト 2D 座標系の矩形 `Rect`。
なぜ: 依存の少ない場所に置き、core/render の双方から循環なく参照するため。
"""

from __future__ import annotations

from dataclasses import dataclass

Vec2 = tuple[float, float]
RGBA = tuple[float, float, float, float]


@dataclass(frozen=True)
class Rect:
    """原点 (x, y) と大きさ (width, height) を持つ矩形。"""

    x: float
    y: float
    width: float
    height: float

    @property
    def position(self) -> Vec2:
        return (self.x, self.y)

    @property
    def size(self) -> Vec2:
        return (self.width, self.height)

    def grown(self, delta: Vec2) -> "Rect":
        """原点を保ったまま大きさに `delta` を加えた矩形を返す。"""
        return Rect(self.x, self.y, self.width + delta[0], self.height + delta[1])

    def inset(self, offset: Vec2) -> "Rect":
        """原点を `offset` だけずらし、同じ量だけ大きさを縮めた矩形を返す。"""
        return Rect(
            self.x + offset[0],
            self.y + offset[1],
            self.width - offset[0],
            self.height - offset[1],
        )


__all__ = ["Vec2", "RGBA", "Rect"]
