"""
中点円アルゴリズム（8 方向対称）

- 初期値 `x = 0, y = r, p = 1 − r`。`(0, r)` を 1 度出力してからループに入る。
- `x < y` の間: `x += 1`。`p < 0` なら `p += 2x + 1`、そうでなければ `y -= 1`, `p += 2(x − y) + 1`。
  更新後の `(x, y)` を出力する。
- 1 バッチ 8 点: `(x, y)` の 4 象限に続けて `(y, x)` の 4 象限。軸上では点が重複する。
"""

from __future__ import annotations

import logging

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from common.types import Vec2
from engine.core.curve import Curve, Viewport
from engine.core.state import clamp_radius

from ._kernels import call_kernel, grow_rows
from .registry import shape
from .symmetry import mirror_octants

logger = logging.getLogger(__name__)


@njit(cache=True)
def _trace_circle_kernel(r: float) -> np.ndarray:
    out = np.empty((int(r) + 4, 2), dtype=np.float64)
    x = 0.0
    y = r
    p = 1.0 - r
    out[0, 0] = x
    out[0, 1] = y
    n = 1
    while x < y:
        x += 1.0
        if p < 0.0:
            p += 2.0 * x + 1.0
        else:
            y -= 1.0
            p += 2.0 * (x - y) + 1.0
        if n == out.shape[0]:
            out = grow_rows(out)
        out[n, 0] = x
        out[n, 1] = y
        n += 1
    return out[:n].copy()


def trace_circle(r: float) -> np.ndarray:
    """第 1 オクタントのステップ列 `(K, 2) float64` を返す（初期点を含む）。"""
    return call_kernel(_trace_circle_kernel, clamp_radius(r))


def circle_points(center: Vec2, r: float) -> np.ndarray:
    """ピクセル座標の境界点列 `(8K, 2) float64` を返す。"""
    return mirror_octants(trace_circle(r), center)


@shape
def circle(center: Vec2, r: float, viewport: Viewport) -> Curve:
    """円の境界点列を NDC の `Curve` として返す（`r` は 1 未満を 1 に丸める）。"""
    pts = circle_points(center, r)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("circle r=%.2f -> %d points", r, len(pts))
    return Curve.from_pixels(pts, viewport)


__all__ = ["trace_circle", "circle_points", "circle"]
