"""
どこで: `engine.core.animation`。
何を: 経過時間から半径を正弦/余弦で揺らす AnimationModulator。
なぜ: 半径の時間変調を入力処理/描画から切り離した純粋ロジックとして持つため。

位相の進め方:
- 毎フレーム `elapsed += speed * timestamp`。`timestamp` はループ開始からの絶対秒数で、
  フレーム間隔ではない。したがって位相の増分は時間とともに大きくなり、変形は加速していく。
- 半径は `rx = base_rx + amplitude * sin(elapsed)`, `ry = base_ry + amplitude * cos(elapsed)`。
  2 軸は 90° ずれて回るため、楕円は細長い形と円に近い形の間を往復する。
- 有効/無効の切替時に補間はしない。無効中は `elapsed` を凍結し、再開時はその位相から続ける。
"""

from __future__ import annotations

import logging
import math

from common.types import Vec2
from util.constants import DEFAULT_ANIMATION_AMPLITUDE

from .state import AnimationState, ShapeParameters, clamp_radius

logger = logging.getLogger(__name__)


class AnimationModulator:
    """`AnimationState` を進め、`ShapeParameters` の半径を上書きする。"""

    def __init__(
        self,
        state: AnimationState,
        *,
        base_radii: Vec2,
        amplitude: float = DEFAULT_ANIMATION_AMPLITUDE,
    ) -> None:
        """
        引数:
            state: 共有するアニメーション状態（有効フラグ/位相/速度）。
            base_radii: 変調の基準半径。構成時に確定し、以後は変わらない。
            amplitude: 変調振幅 [px]。
        """
        self.state = state
        self._base_rx = float(base_radii[0])
        self._base_ry = float(base_radii[1])
        self._amplitude = float(amplitude)

    @property
    def base_radii(self) -> Vec2:
        return self._base_rx, self._base_ry

    @property
    def amplitude(self) -> float:
        return self._amplitude

    @property
    def enabled(self) -> bool:
        return self.state.enabled

    def set_enabled(self, enabled: bool) -> None:
        if self.state.enabled != bool(enabled):
            self.state.enabled = bool(enabled)
            logger.debug("animation %s at phase %.4f", "on" if enabled else "off", self.state.elapsed)

    def toggle(self) -> bool:
        """有効/無効を反転し、新しい状態を返す。"""
        self.set_enabled(not self.state.enabled)
        return self.state.enabled

    def radii_at(self, elapsed: float) -> Vec2:
        """位相 `elapsed` における半径（下限丸め済み）。"""
        rx = self._base_rx + self._amplitude * math.sin(elapsed)
        ry = self._base_ry + self._amplitude * math.cos(elapsed)
        return clamp_radius(rx), clamp_radius(ry)

    def step(self, params: ShapeParameters, timestamp: float) -> bool:
        """有効時のみ位相を進めて `params` の半径を上書きする。

        引数:
            params: 上書き対象。
            timestamp: ループ開始からの経過秒数（負値は 0 とみなす）。

        返り値:
            半径を書き換えた場合 True。
        """
        if not self.state.enabled:
            return False
        self.state.elapsed += self.state.speed * max(0.0, float(timestamp))
        params.set_radii(*self.radii_at(self.state.elapsed))
        return True


__all__ = ["AnimationModulator"]
