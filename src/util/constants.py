"""
どこで: `util.constants`。
何を: スウォッチ寸法・背景矩形の余白・フィンガープリントの種などの固定値。
なぜ: 描画結果とキャッシュキーの再現性をこれらの値に依存させるため、一箇所に固定する。
"""

from __future__ import annotations

# 生成するスウォッチテクスチャの寸法（px）
SWATCH_WIDTH = 100
SWATCH_HEIGHT = 25

# 背景スウォッチ矩形へ追加する余白（行の右端まで塗るため横に伸ばす）
BACK_RECT_PADDING: tuple[float, float] = (50.0, 0.0)

# フィンガープリント畳み込み: acc = acc * FINGERPRINT_PRIME + color_bits(c)
FINGERPRINT_SEED = 17
FINGERPRINT_PRIME = 31

# 非アクティブ項目のラベル色に掛ける係数
INACTIVE_LABEL_SCALE = 0.5

# 設定読込失敗時のフォールバック色
FALLBACK_RULE_COLOR: tuple[float, float, float, float] = (1.0, 0.0, 1.0, 1.0)
FALLBACK_LABEL_COLOR: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

__all__ = [
    "SWATCH_WIDTH",
    "SWATCH_HEIGHT",
    "BACK_RECT_PADDING",
    "FINGERPRINT_SEED",
    "FINGERPRINT_PRIME",
    "INACTIVE_LABEL_SCALE",
    "FALLBACK_RULE_COLOR",
    "FALLBACK_LABEL_COLOR",
]
