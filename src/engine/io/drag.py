"""
どこで: `engine.io.drag`。
何を: ポインタの押下/移動/解放から半径を更新する DragController。
なぜ: 押下時点のスナップショットからの相対変位で半径を決め、入力の揺れを累積させないため。

更新式（ドラッグ中の移動ごと）:
    rx = anchor_rx + (x - anchor_x)
    ry = anchor_ry - (y - anchor_y)   # スクリーン Y は下向きのため反転
いずれも下限 1 に丸める。解放時は値を戻さない（最後のドラッグ値のまま）。
"""

from __future__ import annotations

import logging

from engine.core.state import DragState, ShapeParameters

logger = logging.getLogger(__name__)


class DragController:
    def __init__(self, params: ShapeParameters, state: DragState | None = None) -> None:
        self.params = params
        self.state = state if state is not None else DragState()

    @property
    def active(self) -> bool:
        return self.state.active

    def press(self, x: float, y: float) -> None:
        """現在の半径とポインタ位置をスナップショットしてドラッグを開始する。"""
        self.state.active = True
        self.state.anchor_pointer = (float(x), float(y))
        self.state.anchor_radii = self.params.radii
        logger.debug("drag start at (%.1f, %.1f) radii=%s", x, y, self.state.anchor_radii)

    def move(self, x: float, y: float) -> bool:
        """ドラッグ中なら半径を更新し True を返す。非ドラッグ時は何もしない。"""
        if not self.state.active:
            return False
        ax, ay = self.state.anchor_pointer
        arx, ary = self.state.anchor_radii
        self.params.set_radii(arx + (float(x) - ax), ary - (float(y) - ay))
        return True

    def release(self) -> None:
        if self.state.active:
            logger.debug("drag end radii=(%.1f, %.1f)", self.params.rx, self.params.ry)
        self.state.active = False


__all__ = ["DragController"]
