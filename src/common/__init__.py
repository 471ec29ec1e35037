"""
どこで: `common` パッケージ。
何を: 環境変数設定・ロギング・共通型（Rect/RGBA）といった横断ユーティリティ。
なぜ: core/render/io から再利用する基盤を分離し、依存の向きを単純化するため。
"""

from .types import RGBA, Rect, Vec2

__all__ = [
    "RGBA",
    "Rect",
    "Vec2",
]
