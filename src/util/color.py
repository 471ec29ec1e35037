"""
どこで: `util.color`。
何を: 色指定の正規化/変換（Hex, RGBA 0–1, RGBA 0–255）と、キャッシュキー用のビット表現。
なぜ: ルール保存/読込・CLI・エンジン全体で同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

RGBA = tuple[float, float, float, float]

_U32 = 0xFFFFFFFF


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 受理: Hex 文字列, (r,g,b[,a]) （全要素が 0–1 ならそのまま、それ以外は 0–255 とみなす）
    - 返値: (r,g,b,a) （0–1）
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(value) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        comps = [float(v) for v in value]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(comps) == 3:
        comps.append(1.0 if all(0.0 <= c <= 1.0 for c in comps) else 255.0)
    if all(0.0 <= c <= 1.0 for c in comps):
        r, g, b, a = comps
        return (r, g, b, a)
    # 0–255 とみなし、整数丸め → 0–1 へスケール
    r, g, b, a = (max(0, min(255, int(round(c)))) / 255.0 for c in comps)
    return (r, g, b, a)


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する。"""
    r, g, b, a = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))


def to_hex_rgba(value: object) -> str:
    """色を "#RRGGBBAA"（大文字）へ変換する。保存形式に用いる。"""
    r, g, b, a = to_u8_rgba(value)
    return f"#{r:02X}{g:02X}{b:02X}{a:02X}"


def scale_color(color: Sequence[float], factor: float) -> RGBA:
    """RGBA の全チャンネルに `factor` を掛ける（alpha も含む）。"""
    r, g, b, a = (float(c) * factor for c in color)
    return (r, g, b, a)


def color_bits(color: Sequence[float]) -> int:
    """色の float32 ビットパターンから 32bit 符号付きハッシュを作る。

    各チャンネルを float32 として再解釈した u32 を `r ^ (g << 2) ^ (b >> 2) ^ (a >> 1)`
    で合成する。同じ float32 値は常に同じ値を返す（プロセス間で再現可能）。
    """
    r, g, b, a = (int(v) for v in np.asarray(color, dtype=np.float32).reshape(4).view(np.uint32))
    h = (r ^ ((g << 2) & _U32) ^ (b >> 2) ^ (a >> 1)) & _U32
    return to_int32(h)


def to_int32(value: int) -> int:
    """任意の整数を 32bit 符号付き整数の範囲へ折り返す。"""
    value &= _U32
    return value - (1 << 32) if value & 0x80000000 else value


__all__ = [
    "RGBA",
    "parse_hex_color_str",
    "normalize_color",
    "to_u8_rgba",
    "to_hex_rgba",
    "scale_color",
    "color_bits",
    "to_int32",
]
