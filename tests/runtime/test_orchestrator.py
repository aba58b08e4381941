from __future__ import annotations

import logging

import numpy as np
import pytest

from engine.core.animation import AnimationModulator
from engine.core.state import AnimationState, ShapeParameters
from engine.io.drag import DragController
from engine.io.events import EventQueue, PointerDown, PointerMove, PointerUp, ToggleAnimation
from engine.runtime.frame import CurveFrame
from engine.runtime.orchestrator import FrameOrchestrator, Mode, layout_regions
from shapes.circle import circle_points
from shapes.ellipse import ellipse_points


def test_layout_regions() -> None:
    assert layout_regions("single", (800, 600)) == {"ellipse": (0, 0, 800, 600)}
    assert layout_regions("split", (800, 600)) == {
        "ellipse": (0, 0, 400, 600),
        "circle": (400, 0, 400, 600),
    }
    with pytest.raises(ValueError):
        layout_regions("grid", (800, 600))
    with pytest.raises(ValueError):
        layout_regions("single", (0, 600))


def test_step_applies_drag_and_regenerates(orchestrator: FrameOrchestrator) -> None:
    orchestrator.events.push(PointerDown(400, 300))
    orchestrator.events.push(PointerMove(450, 250))
    frame = orchestrator.step(0.0)
    assert frame.radii == (250.0, 150.0)
    assert orchestrator.mode is Mode.MANUAL
    layer = frame.layer("ellipse")
    expected = ellipse_points((400.0, 300.0), 250, 150)
    assert len(layer.curve) == len(expected)
    np.testing.assert_allclose(
        layer.curve.points, expected / np.array([800.0, 600.0]) * 2 - 1, atol=1e-6
    )
    assert orchestrator.last_frame is frame


def test_toggle_switches_mode_and_logs(
    orchestrator: FrameOrchestrator, caplog: pytest.LogCaptureFixture
) -> None:
    orchestrator.events.push(ToggleAnimation())
    with caplog.at_level(logging.INFO, logger="engine.runtime.orchestrator"):
        frame = orchestrator.step(0.0)
    assert orchestrator.mode is Mode.ANIMATED
    assert frame.animated is True
    # 位相 0: rx = base, ry = base + amplitude
    assert frame.radii == pytest.approx((200.0, 150.0))
    assert any("animated" in r.getMessage() for r in caplog.records)


def test_animation_overrides_drag_in_same_frame(orchestrator: FrameOrchestrator) -> None:
    orchestrator.animation.set_enabled(True)
    orchestrator.events.push(PointerDown(400, 300))
    orchestrator.events.push(PointerMove(700, 0))
    frame = orchestrator.step(0.0)
    assert frame.radii == pytest.approx((200.0, 150.0))
    # ドラッグ自体は継続中
    assert orchestrator.drag.active


def test_manual_mode_keeps_radii_between_frames(orchestrator: FrameOrchestrator) -> None:
    a = orchestrator.step(1.0)
    b = orchestrator.step(2.0)
    assert a.radii == b.radii == (200.0, 100.0)
    assert (a.index, b.index) == (0, 1)
    np.testing.assert_array_equal(a.layer("ellipse").curve.points, b.layer("ellipse").curve.points)


def test_split_layout_draws_circle_with_min_radius() -> None:
    params = ShapeParameters(center=(200.0, 300.0), rx=150.0, ry=80.0)
    orch = FrameOrchestrator(
        params,
        events=EventQueue(),
        drag=DragController(params),
        animation=AnimationModulator(AnimationState(), base_radii=params.radii),
        window_size=(800, 600),
        layout="split",
    )
    frame = orch.step(0.0)
    assert [layer.name for layer in frame.layers] == ["ellipse", "circle"]
    circle_layer = frame.layer("circle")
    assert circle_layer.region == (400, 0, 400, 600)
    assert len(circle_layer.curve) == len(circle_points((200.0, 300.0), 80))
    assert frame.point_count == len(frame.layer("ellipse").curve) + len(circle_layer.curve)
    with pytest.raises(KeyError):
        frame.layer("triangle")


def test_tick_accumulates_clock_and_feeds_sink(orchestrator: FrameOrchestrator) -> None:
    received: list[CurveFrame] = []
    orchestrator.set_sink(received.append)
    orchestrator.animation.set_enabled(True)
    orchestrator.tick(0.5)
    orchestrator.tick(0.5)
    assert len(received) == 2
    # speed 0.0005: 0.0005*0.5 + 0.0005*1.0
    assert orchestrator.animation.state.elapsed == pytest.approx(0.00075)


def test_release_event_ends_drag(orchestrator: FrameOrchestrator) -> None:
    orchestrator.events.push(PointerDown(0, 0))
    orchestrator.events.push(PointerUp(0, 0))
    orchestrator.events.push(PointerMove(50, 50))
    frame = orchestrator.step(0.0)
    assert not orchestrator.drag.active
    assert frame.radii == (200.0, 100.0)


def test_unknown_event_raises_type_error(orchestrator: FrameOrchestrator) -> None:
    with pytest.raises(TypeError):
        orchestrator.dispatch("click")  # type: ignore[arg-type]
