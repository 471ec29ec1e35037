"""
どこで: `tint.render.swatch_cache`。
何を: 一致色列のフィンガープリント → 生成済み `Swatch` のキャッシュ。
なぜ: 毎フレーム・全項目で同じ色の組み合わせを再生成しないため。

設計メモ（前提と落とし穴）:
- キーは順序依存の 32bit 畳み込み `acc = acc * 31 + color_bits(c)`（種 17）。
  異なる色列が衝突した場合は同じスウォッチを共有する（検出しない）。
- キーには `use_gradient` を含めない。ルール/グラデーション設定を変えたら `clear()` 必須。
  clear しなければ古いスウォッチが返り続ける（既知の挙動）。
- 追い出しは無い。ルールは少数・手編集なので、キーの種類は実用上有界。
- 挿入は insert-if-absent。並列に同じキーを生成しても、全員が最初に格納された 1 インスタンスを受け取る。
- 生成中に `clear()` が走った場合、その生成結果は呼び出し元へ返すが格納はしない。
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Sequence

from util.color import color_bits, to_int32
from util.constants import FINGERPRINT_PRIME, FINGERPRINT_SEED, SWATCH_HEIGHT, SWATCH_WIDTH

from . import combiner
from .types import Swatch

logger = logging.getLogger(__name__)


def fingerprint(colors: Iterable[Sequence[float]]) -> int:
    """色列の順序依存フィンガープリント（32bit 符号付き）を返す。"""
    acc = FINGERPRINT_SEED
    for c in colors:
        acc = to_int32(acc * FINGERPRINT_PRIME + color_bits(c))
    return acc


class SwatchCache:
    """フィンガープリント → Swatch の無制限キャッシュ。"""

    def __init__(
        self,
        *,
        width: int = SWATCH_WIDTH,
        height: int = SWATCH_HEIGHT,
        debug: bool | None = None,
    ) -> None:
        self.width = int(width)
        self.height = int(height)
        if debug is None:
            from common.settings import get as _get_settings

            debug = bool(_get_settings().SWATCH_DEBUG)
        self._debug = debug
        self._entries: dict[int, Swatch] = {}
        self._lock = threading.Lock()
        # clear() の世代
        self._generation = 0
        # 統計（HUD/テスト用）
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: int) -> bool:
        return key in self._entries

    def get(self, key: int) -> Swatch | None:
        return self._entries.get(key)

    def get_or_create(
        self, key: int, colors: Sequence[Sequence[float]], use_gradient: bool
    ) -> Swatch:
        """キャッシュ済みなら同一インスタンスを、無ければ生成・格納して返す。"""
        cached = self._entries.get(key)
        if cached is not None:
            self.hits += 1
            if self._debug:
                logger.debug("swatch cache hit: key=%d", key)
            return cached

        # 生成はロック外（重い処理で他の呼び出しを止めない）
        with self._lock:
            generation = self._generation
        pixels = combiner.build(colors, use_gradient, width=self.width, height=self.height)
        swatch = Swatch(pixels=pixels, fingerprint=key)
        with self._lock:
            self.misses += 1
            if generation != self._generation:
                # 生成中に clear() を跨いだ結果は格納しない
                stored = swatch
            else:
                stored = self._entries.setdefault(key, swatch)
                if stored is swatch:
                    self.stores += 1
        if self._debug:
            logger.debug(
                "swatch cache miss: key=%d colors=%d gradient=%s size=%d",
                key,
                len(colors),
                use_gradient,
                len(self._entries),
            )
        return stored

    def clear(self) -> None:
        """全エントリを破棄する（ルール集合や use_gradient_blend の変更後に呼ぶ）。"""
        with self._lock:
            n = len(self._entries)
            self._entries.clear()
            self._generation += 1
        if self._debug:
            logger.debug("swatch cache cleared: dropped=%d", n)

    def stats(self) -> dict[str, int]:
        return {
            "size": len(self._entries),
            "hits": self.hits,
            "misses": self.misses,
            "stores": self.stores,
        }


__all__ = ["SwatchCache", "fingerprint"]
