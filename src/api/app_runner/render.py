"""
どこで: `api.app_runner.render`
何を: RenderWindow/ModernGL/PointRenderer の初期化。
なぜ: `api.app` を薄くし、GL 依存の初期化を 1 箇所に閉じ込めるため。
"""

from __future__ import annotations

import moderngl

from common.types import RGBA
from engine.io.events import EventQueue


def create_window_and_renderer(
    window_width: int,
    window_height: int,
    *,
    events: EventQueue,
    caption: str,
    background: RGBA,
    point_color: RGBA,
    point_size: float,
):
    """ウィンドウ/ModernGL/PointRenderer を生成して返す。

    Returns
    -------
    (rendering_window, mgl_ctx, point_renderer)
    """
    from engine.core.render_window import RenderWindow
    from engine.render.renderer import PointRenderer

    rendering_window = RenderWindow(  # type: ignore[abstract]
        window_width,
        window_height,
        events=events,
        caption=caption,
        bg_color=background,
    )

    # ModernGL コンテキスト（pyglet が作った GL コンテキストを共有する）
    mgl_ctx: moderngl.Context = moderngl.create_context()

    point_renderer = PointRenderer(
        mgl_ctx,
        point_color=point_color,
        point_size=point_size,
        pixel_ratio=float(rendering_window.get_pixel_ratio()),
    )
    rendering_window.add_draw_callback(point_renderer.draw)
    return rendering_window, mgl_ctx, point_renderer


__all__ = ["create_window_and_renderer"]
