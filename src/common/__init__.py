"""
どこで: `common` パッケージ。
何を: shapes/engine 双方で使う軽量ユーティリティ（BaseRegistry / 設定 / 型）。
なぜ: 上位層から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry

__all__ = [
    "BaseRegistry",
]
