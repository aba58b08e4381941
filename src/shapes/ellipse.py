"""
中点楕円アルゴリズム（2 領域法）

概要:
- 中心 `(xc, yc)` と半径 `rx, ry`（>= 1）から楕円 `(x/rx)² + (y/ry)² = 1` の境界点列を生成する。
- 内側ループは判定変数 `p` の加算更新と比較のみ（点ごとの三角関数/平方根/除算なし）。
- 第 1 象限を numba カーネルでトレースし、4 象限への鏡映と NDC 正規化は numpy で一括処理する。

アルゴリズム:
- 初期値: `x = 0, y = ry`, `p = ry² − rx²·ry + rx²/4`, `px = 0`, `py = 2rx²·y`。
- 領域 1（傾き |dy/dx| <= 1、`px < py` の間）: 点を出力 → `x += 1`, `px += 2ry²`。
  `p < 0` なら `p += ry² + px`、そうでなければ `y -= 1`, `py -= 2rx²`, `p += ry² + px − py`。
- 切替: 領域 1 終了時の `(x, y)` で `p = ry²(x+½)² + rx²(y−1)² − rx²ry²` を 1 度だけ再計算。
- 領域 2（`y > 0` の間）: 点を出力 → `y -= 1`, `py -= 2rx²`。
  `p > 0` なら `p += rx² − py`、そうでなければ `x += 1`, `px += 2ry²`, `p += rx² − py + px`。

出力順:
- 領域 1 の全バッチ → 領域 2 の全バッチ。
- 各バッチは (+x,+y), (−x,+y), (+x,−y), (−x,−y)。
- 領域 2 は `y > 0` で止まるため、長軸端 `(±rx, 0)` の行は出力されない。

補足:
- `rx == ry` でも特別扱いせず、同じ 2 領域の処理で円になる。
- ループは毎回 `x` を 1 増やすか `y` を 1 減らすため、半径 >= 1 なら必ず停止する。
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
from .symmetry import mirror_quadrants

logger = logging.getLogger(__name__)


@njit(cache=True)
def region1_decision(rx: float, ry: float) -> float:
    """領域 1 の初期判定値 `ry² − rx²·ry + rx²/4`。"""
    return ry * ry - rx * rx * ry + 0.25 * rx * rx


@njit(cache=True)
def region2_decision(x: float, y: float, rx: float, ry: float) -> float:
    """領域 2 へ切り替える点 `(x, y)` での判定値 `ry²(x+½)² + rx²(y−1)² − rx²ry²`。"""
    return ry * ry * (x + 0.5) * (x + 0.5) + rx * rx * (y - 1.0) * (y - 1.0) - rx * rx * ry * ry


@njit(cache=True)
def _trace_ellipse_kernel(rx: float, ry: float) -> np.ndarray:
    out = np.empty((int(rx + ry) + 4, 2), dtype=np.float64)
    n = 0

    x = 0.0
    y = ry
    rx2 = rx * rx
    ry2 = ry * ry
    tworx2 = 2.0 * rx2
    twory2 = 2.0 * ry2
    p = region1_decision(rx, ry)
    px = 0.0
    py = tworx2 * y

    # 領域 1
    while px < py:
        if n == out.shape[0]:
            out = grow_rows(out)
        out[n, 0] = x
        out[n, 1] = y
        n += 1
        x += 1.0
        px += twory2
        if p < 0.0:
            p += ry2 + px
        else:
            y -= 1.0
            py -= tworx2
            p += ry2 + px - py

    # 領域 2
    p = region2_decision(x, y, rx, ry)
    while y > 0.0:
        if n == out.shape[0]:
            out = grow_rows(out)
        out[n, 0] = x
        out[n, 1] = y
        n += 1
        y -= 1.0
        py -= tworx2
        if p > 0.0:
            p += rx2 - py
        else:
            x += 1.0
            px += twory2
            p += rx2 - py + px

    return out[:n].copy()


def trace_ellipse(rx: float, ry: float) -> np.ndarray:
    """第 1 象限のステップ列 `(K, 2) float64` を返す（中心・鏡映・正規化なし）。

    半径は下限 1 に丸めてからトレースする。
    """
    return call_kernel(_trace_ellipse_kernel, clamp_radius(rx), clamp_radius(ry))


def ellipse_points(center: Vec2, rx: float, ry: float) -> np.ndarray:
    """ピクセル座標の境界点列 `(4K, 2) float64` を返す。"""
    return mirror_quadrants(trace_ellipse(rx, ry), center)


@shape
def ellipse(center: Vec2, rx: float, ry: float, viewport: Viewport) -> Curve:
    """楕円の境界点列を NDC の `Curve` として返す。

    引数:
        center: 中心 [px]（`viewport` の領域ローカル座標、Y 上向き）。
        rx: X 方向半径 [px]。1 未満/非有限は 1 に丸める。
        ry: Y 方向半径 [px]。1 未満/非有限は 1 に丸める。
        viewport: 正規化に使う領域サイズ。
    """
    pts = ellipse_points(center, rx, ry)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("ellipse rx=%.2f ry=%.2f -> %d points", rx, ry, len(pts))
    return Curve.from_pixels(pts, viewport)


__all__ = ["region1_decision", "region2_decision", "trace_ellipse", "ellipse_points", "ellipse"]
