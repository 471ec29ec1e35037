"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- ルール不整合などの診断は `tint.*` ロガーへ WARNING 以上で流れる。
- ホスト側で設定が無い場合に限り、最小構成を 1 度だけ適用するヘルパーを提供する。
"""

from __future__ import annotations

import logging
import os


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv("TINT_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        return getattr(logging, level.strip().upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - `level` 省略時は `TINT_LOG_LEVEL`（既定 INFO）
    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - CLI から呼び出す想定（ライブラリ側からは呼ばない）
    """
    root = logging.getLogger()
    if root.handlers:
        # Assume the host has configured logging
        return
    logging.basicConfig(
        level=_resolve_level(level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
