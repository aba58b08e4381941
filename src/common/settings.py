"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

設定ファイル（YAML）は `util.utils.load_config` が扱う。ここには
「実行環境ごとに切り替えたいスイッチ」だけを置く。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float, env_str


@dataclass
class _Settings:
    # ラスタライズカーネル（False で numba を通さず Python 実装を直接実行）
    USE_NUMBA: bool = True

    # ロギング
    LOG_LEVEL: str = "INFO"

    # アニメーション速度の上書き（None なら設定ファイル/既定値）
    ANIMATION_SPEED: float | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。"""
    _settings.USE_NUMBA = env_bool("PXR_USE_NUMBA", True)
    _settings.LOG_LEVEL = (env_str("PXR_LOG_LEVEL", "INFO") or "INFO").upper()
    _settings.ANIMATION_SPEED = env_float("PXR_ANIMATION_SPEED", None, min_value=0.0)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
