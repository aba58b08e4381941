"""共通フィクスチャ。

- 形状パラメータ/入力/アニメーションを結線した最小の構成
- 環境変数による設定の切替
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from engine.core.animation import AnimationModulator
from engine.core.state import AnimationState, DragState, ShapeParameters
from engine.io.drag import DragController
from engine.io.events import EventQueue
from engine.runtime.orchestrator import FrameOrchestrator


@pytest.fixture()
def params() -> ShapeParameters:
    return ShapeParameters(center=(400.0, 300.0), rx=200.0, ry=100.0)


@pytest.fixture()
def drag(params: ShapeParameters) -> DragController:
    return DragController(params, DragState())


@pytest.fixture()
def animation() -> AnimationModulator:
    return AnimationModulator(
        AnimationState(enabled=False, elapsed=0.0, speed=0.0005),
        base_radii=(200.0, 100.0),
        amplitude=50.0,
    )


@pytest.fixture()
def orchestrator(
    params: ShapeParameters, drag: DragController, animation: AnimationModulator
) -> FrameOrchestrator:
    return FrameOrchestrator(
        params,
        events=EventQueue(),
        drag=drag,
        animation=animation,
        window_size=(800, 600),
    )


@pytest.fixture()
def python_kernels(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """numba を通さず Python 実装でトレースする。"""
    monkeypatch.setenv("PXR_USE_NUMBA", "0")
    settings.reload_from_env()
    yield
    monkeypatch.delenv("PXR_USE_NUMBA", raising=False)
    settings.reload_from_env()
