from __future__ import annotations

import numpy as np
import pytest

from engine.core.curve import Curve, Viewport


def test_viewport_maps_pixels_to_ndc() -> None:
    vp = Viewport(800, 600)
    ndc = vp.to_ndc([[0.0, 0.0], [400.0, 300.0], [800.0, 600.0]])
    np.testing.assert_allclose(ndc, [[-1, -1], [0, 0], [1, 1]])
    assert ndc.dtype == np.float32
    assert vp.center() == (400.0, 300.0)


@pytest.mark.parametrize("w, h", [(0, 10), (10, 0), (-1, 5)])
def test_viewport_rejects_non_positive_size(w: int, h: int) -> None:
    with pytest.raises(ValueError):
        Viewport(w, h)


def test_curve_is_read_only_copy() -> None:
    src = np.array([[0.1, 0.2], [0.3, 0.4]], dtype=np.float32)
    c = Curve(src)
    src[0, 0] = 9.0
    assert c.points[0, 0] == pytest.approx(0.1)
    assert not c.points.flags.writeable
    # 呼び出し側の配列は凍結されない
    assert src.flags.writeable
    writable = c.as_array(copy=True)
    writable[0, 0] = 1.0
    assert c.points[0, 0] == pytest.approx(0.1)


def test_curve_empty_and_shape_validation() -> None:
    e = Curve.empty()
    assert e.is_empty and len(e) == 0
    assert e.points.shape == (0, 2)
    assert e.bounds() == (0.0, 0.0, 0.0, 0.0)
    assert Curve([]).points.shape == (0, 2)
    with pytest.raises(ValueError):
        Curve(np.zeros((3, 3), dtype=np.float32))


def test_curve_from_pixels_and_bounds() -> None:
    c = Curve.from_pixels([[400.0, 300.0], [600.0, 450.0]], Viewport(800, 600))
    assert len(c) == 2
    assert c.bounds() == pytest.approx((0.0, 0.0, 0.5, 0.5))
    assert repr(c) == "Curve(n_points=2)"
