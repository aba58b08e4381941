"""
どこで: `engine.core.state`。
何を: フレームループが共有する可変状態（形状パラメータ/ドラッグ/アニメーション）。
なぜ: グローバル変数の代わりに明示的なコンテキストを渡し、ウィンドウなしでテスト可能にするため。

不変条件:
- `ShapeParameters.rx >= 1` かつ `ry >= 1` は生成時・すべての更新の前後で成立する。
  不正値（<= 0, NaN, ±inf）は例外にせず下限 1 に丸める。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from common.types import Vec2
from util.constants import DEFAULT_ANIMATION_SPEED, MIN_RADIUS


def clamp_radius(value: float) -> float:
    """半径を下限 `MIN_RADIUS` に丸める（非有限値も下限扱い）。"""
    v = float(value)
    if not math.isfinite(v) or v < MIN_RADIUS:
        return MIN_RADIUS
    return v


@dataclass
class ShapeParameters:
    """描画対象の中心 [px, 領域ローカル] と半径 [px]。"""

    center: Vec2
    rx: float = 200.0
    ry: float = 100.0

    def __post_init__(self) -> None:
        self.center = (float(self.center[0]), float(self.center[1]))
        self.rx = clamp_radius(self.rx)
        self.ry = clamp_radius(self.ry)

    @property
    def radii(self) -> Vec2:
        return self.rx, self.ry

    @property
    def circle_radius(self) -> float:
        """円描画に使う単一半径（`min(rx, ry)`）。"""
        return min(self.rx, self.ry)

    def set_radii(self, rx: float, ry: float) -> None:
        self.rx = clamp_radius(rx)
        self.ry = clamp_radius(ry)


@dataclass
class DragState:
    """1 ジェスチャ分のドラッグスナップショット。"""

    active: bool = False
    anchor_pointer: Vec2 = (0.0, 0.0)
    anchor_radii: Vec2 = (MIN_RADIUS, MIN_RADIUS)


@dataclass
class AnimationState:
    # elapsed は有効中のみ単調増加。無効化しても 0 に戻さない
    enabled: bool = False
    elapsed: float = 0.0
    speed: float = DEFAULT_ANIMATION_SPEED


__all__ = ["clamp_radius", "ShapeParameters", "DragState", "AnimationState"]
