"""
どこで: `api.app`（実行ランナー）。
何を: 楕円/円のラスタライズ結果を毎フレーム再生成し、pyglet + ModernGL で点として描画する。
なぜ: 設定解決・状態の組み立て・ウィンドウ/GL 初期化・フレーム駆動を 1 つの入口にまとめるため。

実行フロー（概要）:
1) 設定解決: FPS/ウィンドウサイズ/レイアウト/色/初期半径/アニメーション設定を
   「明示引数 > 設定ファイル > 既定値」で確定（`api.app_runner.utils`）。
2) 状態の組み立て: `ShapeParameters` / `DragState` / `AnimationState` と
   `EventQueue` / `DragController` / `AnimationModulator` / `FrameOrchestrator` を結線。
   中心はレイアウト領域の中央（領域ローカル座標）。
3) ウィンドウ/GL: `RenderWindow` と `PointRenderer` を生成し、オーケストレータの出力先を
   レンダラの `submit` に接続。
4) フレーム駆動: `FrameClock([orchestrator, renderer])` を `pyglet.clock` で駆動。
   `ESC` でウィンドウを閉じ、GL リソースを解放して終了する。

操作:
- 左ドラッグ: 半径の変更（右へ動かすと rx 増、上へ動かすと ry 増）。
- 右クリック: アニメーションの ON/OFF。

`init_only=True` のときは 2) までで止め、ウィンドウを作らずにオーケストレータを返す。
ヘッドレス環境での起動検証や、描画なしのフレーム生成に使える。
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from common.logging import setup_default_logging
from common.settings import get as get_settings
from common.types import Vec2
from engine.core.animation import AnimationModulator
from engine.core.curve import Viewport
from engine.core.state import AnimationState, DragState, ShapeParameters
from engine.io.drag import DragController
from engine.io.events import EventQueue
from engine.runtime.orchestrator import FrameOrchestrator, layout_regions
from util.utils import load_config

from .app_runner.utils import (
    resolve_animation,
    resolve_caption,
    resolve_colors,
    resolve_fps,
    resolve_layout,
    resolve_point_size,
    resolve_radii,
    resolve_window_size,
)

logger = logging.getLogger(__name__)


def build_orchestrator(
    *,
    window_size: tuple[int, int],
    layout: str,
    radii: Vec2,
    speed: float,
    amplitude: float,
    events: EventQueue | None = None,
) -> FrameOrchestrator:
    """GL に依存しない部分（状態・入力・アニメーション・オーケストレータ）を組み立てる。"""
    regions = layout_regions(layout, window_size)
    first = next(iter(regions.values()))
    center = Viewport(first[2], first[3]).center()

    params = ShapeParameters(center=center, rx=radii[0], ry=radii[1])
    events = events if events is not None else EventQueue()
    drag = DragController(params, DragState())
    # 変調の基準は構成時の初期半径（ドラッグ結果には追従しない）
    animation = AnimationModulator(
        AnimationState(enabled=False, elapsed=0.0, speed=speed),
        base_radii=params.radii,
        amplitude=amplitude,
    )
    return FrameOrchestrator(
        params,
        events=events,
        drag=drag,
        animation=animation,
        window_size=window_size,
        layout=layout,
    )


def run_app(
    *,
    window_size: tuple[int, int] | None = None,
    layout: str | None = None,
    radii: Vec2 | None = None,
    fps: int | None = None,
    background: object | None = None,
    point_color: object | None = None,
    point_size: float | None = None,
    speed: float | None = None,
    amplitude: float | None = None,
    caption: str | None = None,
    config: Mapping[str, Any] | None = None,
    init_only: bool = False,
) -> FrameOrchestrator | None:
    """アプリを起動する。

    Parameters
    ----------
    window_size : tuple[int, int] | None
        ウィンドウの論理サイズ [px]。None で設定/既定（800x600）。
    layout : str | None
        "single"（楕円のみ）または "split"（左: 楕円、右: 円）。
    radii : tuple[float, float] | None
        初期半径 `(rx, ry)` [px]。アニメーションの基準にもなる。
    fps : int | None
        更新レート。None で設定/既定（60）。
    background, point_color : str | tuple | None
        RGBA (0–1) / RGB(A) 0–255 / `#RRGGBB[AA]`。None で設定/既定（黒/オレンジ）。
    point_size : float | None
        点のサイズ [px]。
    speed, amplitude : float | None
        アニメーションの位相速度と振幅 [px]。速度は環境変数 `PXR_ANIMATION_SPEED` でも上書き可。
    caption : str | None
        ウィンドウタイトル。
    config : Mapping | None
        設定辞書。None で `util.utils.load_config()` を読む。
    init_only : bool
        True で GL/ウィンドウを作らず、組み立てたオーケストレータを返す。

    Raises
    ------
    ValueError
        設定値（サイズ/FPS/レイアウト/色/速度）が不正な場合。
    """
    setup_default_logging()
    cfg: Mapping[str, Any] = config if config is not None else load_config()

    # ---- ① 設定解決 -----------------------------------------------
    fps_v = resolve_fps(fps, cfg)
    width, height = resolve_window_size(window_size, cfg)
    layout_v = resolve_layout(layout, cfg)
    bg_rgba, point_rgba = resolve_colors(background, point_color, cfg)
    point_size_v = resolve_point_size(point_size, cfg)
    caption_v = resolve_caption(caption, cfg)
    radii_v = resolve_radii(radii, cfg)
    speed_v, amplitude_v = resolve_animation(
        speed, amplitude, cfg, env_speed=get_settings().ANIMATION_SPEED
    )

    # ---- ② 状態・入力・オーケストレータ -----------------------------
    events = EventQueue()
    orchestrator = build_orchestrator(
        window_size=(width, height),
        layout=layout_v,
        radii=radii_v,
        speed=speed_v,
        amplitude=amplitude_v,
        events=events,
    )
    logger.info(
        "start: window=%dx%d layout=%s fps=%d radii=(%.1f, %.1f)",
        width,
        height,
        layout_v,
        fps_v,
        radii_v[0],
        radii_v[1],
    )

    if init_only:
        return orchestrator

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet

    from engine.core.frame_clock import FrameClock

    from .app_runner.render import create_window_and_renderer

    # ---- ③ Window & ModernGL --------------------------------------
    rendering_window, _mgl_ctx, point_renderer = create_window_and_renderer(
        width,
        height,
        events=events,
        caption=caption_v,
        background=bg_rgba,
        point_color=point_rgba,
        point_size=point_size_v,
    )
    orchestrator.set_sink(point_renderer.submit)

    # ---- ④ FrameClock ---------------------------------------------
    # 生成 → 転送の順。描画は on_draw 側
    frame_clock = FrameClock([orchestrator, point_renderer])
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / fps_v)

    @rendering_window.event
    def on_close():  # noqa: ANN001
        # 冪等なクリーンアップ
        if getattr(on_close, "_closed", False):
            return
        pyglet.clock.unschedule(frame_clock.tick)
        point_renderer.release()
        last_points, uploads = point_renderer.get_last_counts()
        logger.info(
            "closed after %d frames (uploads=%d, last points=%d)",
            frame_clock.frame_count,
            uploads,
            last_points,
        )
        setattr(on_close, "_closed", True)
        pyglet.app.exit()

    pyglet.app.run()
    return None


__all__ = ["run_app", "build_orchestrator"]
