"""
どこで: `common.settings`
何を: hierarchy-tint の環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を避け、既定値/型の一貫性とテスト容易性を保つため。
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import env_bool, env_path


@dataclass
class _Settings:
    # SwatchCache のヒット/ミスを DEBUG ログへ出す
    SWATCH_DEBUG: bool = False

    # ルール保存先（None なら `<cwd>/data/tint/rules.json`）
    PREFS_PATH: Path | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込する。

    - `TINT_SWATCH_DEBUG`: bool
    - `TINT_PREFS_PATH`: ルール JSON のパス
    """
    _settings.SWATCH_DEBUG = env_bool("TINT_SWATCH_DEBUG", False)
    _settings.PREFS_PATH = env_path("TINT_PREFS_PATH")


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
