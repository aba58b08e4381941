from __future__ import annotations

import math

import pytest

from engine.core.animation import AnimationModulator
from engine.core.state import AnimationState, ShapeParameters


def _modulator(speed: float = 0.0005) -> AnimationModulator:
    return AnimationModulator(
        AnimationState(enabled=True, elapsed=0.0, speed=speed),
        base_radii=(200.0, 100.0),
        amplitude=50.0,
    )


def test_phase_zero_gives_base_rx_and_raised_ry() -> None:
    params = ShapeParameters(center=(400.0, 300.0))
    m = _modulator()
    assert m.step(params, 0.0) is True
    assert params.radii == pytest.approx((200.0, 150.0))


def test_phase_accumulates_absolute_timestamp() -> None:
    params = ShapeParameters(center=(0.0, 0.0))
    m = _modulator(speed=0.5)
    m.step(params, 1.0)
    m.step(params, 2.0)
    # 0.5*1 + 0.5*2
    assert m.state.elapsed == pytest.approx(1.5)
    assert params.rx == pytest.approx(200.0 + 50.0 * math.sin(1.5))
    assert params.ry == pytest.approx(100.0 + 50.0 * math.cos(1.5))


def test_disabled_freezes_phase_and_leaves_radii() -> None:
    params = ShapeParameters(center=(0.0, 0.0), rx=321.0, ry=123.0)
    m = _modulator(speed=1.0)
    m.step(params, 0.25)
    m.set_enabled(False)
    params.set_radii(321.0, 123.0)
    assert m.step(params, 10.0) is False
    assert m.state.elapsed == pytest.approx(0.25)
    assert params.radii == (321.0, 123.0)
    # 再開時は凍結した位相から続ける
    assert m.toggle() is True
    m.step(params, 0.25)
    assert m.state.elapsed == pytest.approx(0.5)


def test_negative_timestamp_does_not_rewind() -> None:
    params = ShapeParameters(center=(0.0, 0.0))
    m = _modulator(speed=1.0)
    m.step(params, -3.0)
    assert m.state.elapsed == 0.0


def test_large_amplitude_is_clamped_to_one() -> None:
    m = AnimationModulator(AnimationState(enabled=True), base_radii=(10.0, 10.0), amplitude=100.0)
    rx, ry = m.radii_at(-math.pi / 2)  # sin = -1
    assert rx == 1.0
    assert ry == pytest.approx(10.0, abs=1e-9)
    assert m.base_radii == (10.0, 10.0)
    assert m.amplitude == 100.0
