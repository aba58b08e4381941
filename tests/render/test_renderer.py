from __future__ import annotations

import moderngl as mgl
import numpy as np
import pytest

from engine.core.curve import Curve, Viewport
from engine.render.renderer import PointRenderer
from engine.render.types import CurveLayer
from engine.runtime.frame import CurveFrame
from tests._utils.dummies import DummyContext


def _frame(index: int = 0) -> CurveFrame:
    vp = Viewport(400, 600)
    a = CurveLayer(
        "ellipse",
        Curve.from_pixels([[200.0, 300.0], [300.0, 300.0]], vp),
        (0, 0, 400, 600),
    )
    b = CurveLayer("circle", Curve.from_pixels([[200.0, 400.0]], vp), (400, 0, 400, 600))
    return CurveFrame.from_layers([a, b], radii=(100.0, 100.0), index=index)


def test_init_sets_uniforms_and_point_size_flag() -> None:
    ctx = DummyContext()
    r = PointRenderer(ctx, point_color="#FF8033", point_size=3.0)
    assert r.program["point_size"].value == 3.0
    assert r.program["color"].value == pytest.approx((1.0, 128 / 255, 51 / 255, 1.0))
    assert mgl.PROGRAM_POINT_SIZE in ctx.enabled


def test_tick_uploads_pending_frame_once() -> None:
    ctx = DummyContext()
    r = PointRenderer(ctx)
    r.submit(_frame())
    r.tick(1 / 60)
    assert r.get_last_counts() == (3, 1)
    # 新しいフレームが無ければ再転送しない
    r.tick(1 / 60)
    assert r.get_last_counts() == (3, 1)
    mesh = r._meshes["ellipse"]
    np.testing.assert_array_equal(
        np.frombuffer(mesh.vbo.data, dtype=np.float32).reshape(-1, 2), [[0.0, 0.0], [0.5, 0.0]]
    )


def test_submit_keeps_only_latest_frame() -> None:
    r = PointRenderer(DummyContext())
    r.submit(_frame(index=1))
    r.submit(_frame(index=2))
    r.tick(0.0)
    assert r.get_last_counts()[1] == 1


def test_draw_renders_points_per_region() -> None:
    ctx = DummyContext()
    r = PointRenderer(ctx, point_color=(1.0, 0.5, 0.2, 1.0), pixel_ratio=2.0)
    r.submit(_frame())
    r.tick(0.0)
    r.draw()
    assert ctx.viewports == [(0, 0, 800, 1200), (800, 0, 800, 1200)]
    assert r._meshes["ellipse"].vao.render_calls == [(mgl.POINTS, 2)]
    assert r._meshes["circle"].vao.render_calls == [(mgl.POINTS, 1)]
    # 点色は初期化時に 1 度だけ設定される
    assert r.program["color"].value == (1.0, 0.5, 0.2, 1.0)


def test_draw_before_upload_is_noop_and_release_frees_meshes() -> None:
    ctx = DummyContext()
    r = PointRenderer(ctx)
    r.draw()
    assert ctx.viewports == []
    r.submit(_frame())
    r.tick(0.0)
    meshes = list(r._meshes.values())
    r.release()
    assert all(m.vbo.released and m.vao.released for m in meshes)
    r.draw()


def test_invalid_point_color_raises() -> None:
    with pytest.raises(ValueError):
        PointRenderer(DummyContext(), point_color="#12")
