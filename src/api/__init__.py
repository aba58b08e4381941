"""
どこで: `api` 入口（高レベル公開 API）。
何を: 形状 `G`・装飾子 `shape`・`Curve`/`Viewport`・実行 `run` を再輸出。
なぜ: 利用者が単一名前空間から曲線生成→実行まで完結できるようにするため。

Usage:
    from api import G, Viewport, run

    curve = G.ellipse((400, 300), 200, 100, Viewport(800, 600))
    run(layout="split")
"""

from engine.core.curve import Curve, Viewport
from shapes.registry import shape as shape  # 公開唯一経路（api.shape）

from .app import build_orchestrator
from .app import run_app as run
from .app import run_app as run_app
from .shapes import G, ShapesAPI

__all__ = [
    "G",  # 形状ファクトリ
    "shape",  # ユーザー拡張用デコレータ
    "run_app",  # 実行（詳細指定）
    "run",  # 実行（エイリアス）
    "build_orchestrator",
    # クラス（高度な使用）
    "ShapesAPI",
    "Curve",
    "Viewport",
]

__version__ = "2026.10"
