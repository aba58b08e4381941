"""
どこで: `engine.runtime.orchestrator`。
何を: 毎フレーム「入力排出 → 半径の決定 → 曲線生成 → レンダラへ受け渡し」を行う FrameOrchestrator。
なぜ: 半径の書き手（ドラッグ/アニメーション）と生成・描画の順序を 1 箇所で固定するため。

1 フレームの順序:
1) EventQueue を到着順に排出（押下/移動/解放は DragController、トグルはモード切替）。
2) Animated モードなら AnimationModulator が半径を上書き。ドラッグより後に書くため、
   両方が有効なフレームではアニメーションの値が残る。
3) レイアウトに従って生成関数を呼び、`CurveFrame` を sink（レンダラ）へ渡す。

レイアウト:
- `single`: ウィンドウ全体に楕円 1 つ。
- `split`: 左半分に楕円 `(rx, ry)`、右半分に円 `min(rx, ry)`。中心は両領域で共通（領域ローカル）。

スレッド:
- レンダーループのスレッドだけで動く前提。ロックは持たない。
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from common.types import Rect
from engine.core.animation import AnimationModulator
from engine.core.curve import Viewport
from engine.core.state import ShapeParameters
from engine.io.drag import DragController
from engine.io.events import (
    EventQueue,
    InputEvent,
    PointerDown,
    PointerMove,
    PointerUp,
    ToggleAnimation,
)
from engine.render.types import CurveLayer
from shapes.registry import get_shape
from util.constants import LAYOUTS

from ..core.tickable import Tickable
from .frame import CurveFrame

logger = logging.getLogger(__name__)

FrameSink = Callable[[CurveFrame], None]


class Mode(Enum):
    MANUAL = "manual"
    ANIMATED = "animated"


def layout_regions(layout: str, window_size: tuple[int, int]) -> dict[str, Rect]:
    """レイアウト名から `{曲線名: 描画領域}` を返す。

    例外:
        ValueError: 未知のレイアウト名、または幅/高さが正でない場合。
    """
    width, height = int(window_size[0]), int(window_size[1])
    if width <= 0 or height <= 0:
        raise ValueError(f"window size must be positive, got: {(width, height)}")
    if layout == "single":
        return {"ellipse": (0, 0, width, height)}
    if layout == "split":
        # 両領域を同じ幅にして、領域ローカルの中心を共有できるようにする
        half = max(1, width // 2)
        return {"ellipse": (0, 0, half, height), "circle": (half, 0, half, height)}
    allowed = ", ".join(LAYOUTS)
    raise ValueError(f"invalid layout: {layout!r}; allowed={allowed}")


class FrameOrchestrator(Tickable):
    """入力とアニメーションから ShapeParameters を決め、曲線を毎フレーム再生成する。"""

    def __init__(
        self,
        params: ShapeParameters,
        *,
        events: EventQueue,
        drag: DragController,
        animation: AnimationModulator,
        window_size: tuple[int, int],
        layout: str = "single",
        sink: FrameSink | None = None,
    ) -> None:
        """
        引数:
            params: 全コンポーネントで共有する形状パラメータ。
            events: ウィンドウ側が積む入力イベント。
            drag: `params` を更新するドラッグ制御。
            animation: `params` を上書きする時間変調。
            window_size: ウィンドウの論理サイズ [px]。
            layout: "single" / "split"。
            sink: 生成したフレームの受け取り先（通常はレンダラの `submit`）。
        """
        self.params = params
        self.events = events
        self.drag = drag
        self.animation = animation
        self._regions = layout_regions(layout, window_size)
        self._layout = layout
        self._sink = sink
        self._clock = 0.0
        self._frame_index = 0
        self._last_frame: CurveFrame | None = None

    # ---- 状態参照 ----
    @property
    def mode(self) -> Mode:
        return Mode.ANIMATED if self.animation.enabled else Mode.MANUAL

    @property
    def layout(self) -> str:
        return self._layout

    @property
    def regions(self) -> dict[str, Rect]:
        return dict(self._regions)

    @property
    def last_frame(self) -> CurveFrame | None:
        return self._last_frame

    def set_sink(self, sink: FrameSink | None) -> None:
        self._sink = sink

    # ---- Tickable ----
    def tick(self, dt: float) -> None:
        self._clock += max(0.0, float(dt))
        self.step(self._clock)

    # ---- 1 フレーム ----
    def step(self, timestamp: float) -> CurveFrame:
        """`timestamp`（ループ開始からの秒数）で 1 フレームを進め、生成したフレームを返す。"""
        for event in self.events.drain():
            self.dispatch(event)
        self.animation.step(self.params, timestamp)
        frame = self.generate()
        self._last_frame = frame
        self._frame_index += 1
        if self._sink is not None:
            self._sink(frame)
        return frame

    def dispatch(self, event: InputEvent) -> None:
        """入力イベント 1 件を対応するコントローラへ振り分ける。"""
        if isinstance(event, PointerDown):
            self.drag.press(event.x, event.y)
        elif isinstance(event, PointerMove):
            self.drag.move(event.x, event.y)
        elif isinstance(event, PointerUp):
            self.drag.release()
        elif isinstance(event, ToggleAnimation):
            self.animation.toggle()
            logger.info("mode -> %s", self.mode.value)
        else:
            raise TypeError(f"unsupported input event: {event!r}")

    def generate(self) -> CurveFrame:
        """現在の ShapeParameters から全レイヤーの曲線を作り直す。"""
        layers: list[CurveLayer] = []
        center = self.params.center
        for name, region in self._regions.items():
            viewport = Viewport(region[2], region[3])
            fn = get_shape(name)
            if name == "circle":
                curve = fn(center, self.params.circle_radius, viewport)
            else:
                curve = fn(center, self.params.rx, self.params.ry, viewport)
            layers.append(CurveLayer(name=name, curve=curve, region=region))
        frame = CurveFrame.from_layers(
            layers,
            radii=self.params.radii,
            animated=self.animation.enabled,
            index=self._frame_index,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "frame %d: mode=%s radii=(%.1f, %.1f) points=%d",
                frame.index,
                self.mode.value,
                self.params.rx,
                self.params.ry,
                frame.point_count,
            )
        return frame


__all__ = ["Mode", "FrameOrchestrator", "layout_regions"]
