"""
どこで: `engine.render` 型定義。
何を: 領域付き描画レイヤー `CurveLayer`。
なぜ: 1 フレーム内で別々の画面領域（左右分割など）へ点列を順描画するためのコンテナが必要。
"""

from __future__ import annotations

from dataclasses import dataclass

from common.types import Rect
from engine.core.curve import Curve


@dataclass(frozen=True)
class CurveLayer:
    """名前と描画領域付きの点列レイヤー。"""

    name: str
    curve: Curve
    region: Rect  # (x, y, w, h) [px]、ウィンドウ左下原点


__all__ = ["CurveLayer"]
