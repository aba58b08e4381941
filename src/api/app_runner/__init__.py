"""
内部ヘルパ群（API 非公開）。

どこで: `api.app_runner`
何を: `api.app` の補助（設定解決の純粋関数/ウィンドウ初期化）を分離する。
なぜ: `run_app` 本体を「組み立てて回す」だけの薄い関数に保つため。
"""

from __future__ import annotations

__all__: list[str] = []
