"""
どこで: `shapes.symmetry`。
何を: 第 1 象限のトレース結果を 4 象限/8 オクタントに鏡映し、中心へ平行移動する。
なぜ: 1 点の計算から複数の境界点を得る対称性の展開を、生成アルゴリズム本体から分離するため。

出力順（1 ステップ = 1 バッチ）:
- 4 象限: (+x,+y), (-x,+y), (+x,-y), (-x,-y)
- 8 オクタント: 上記 4 点に続けて、入れ替えた (y, x) の 4 象限
"""

from __future__ import annotations

import numpy as np

from common.types import Vec2

_QUADRANT_SIGNS = np.array(
    [[1.0, 1.0], [-1.0, 1.0], [1.0, -1.0], [-1.0, -1.0]],
    dtype=np.float64,
)


def mirror_quadrants(steps: np.ndarray, center: Vec2 = (0.0, 0.0)) -> np.ndarray:
    """`(K, 2)` のステップ列から `(4K, 2)` の点列を作る。"""
    s = np.asarray(steps, dtype=np.float64).reshape(-1, 2)
    pts = s[:, None, :] * _QUADRANT_SIGNS[None, :, :]
    pts = pts.reshape(-1, 2)
    pts += np.asarray(center, dtype=np.float64)
    return pts


def mirror_octants(steps: np.ndarray, center: Vec2 = (0.0, 0.0)) -> np.ndarray:
    """`(K, 2)` のステップ列から `(8K, 2)` の点列を作る。"""
    s = np.asarray(steps, dtype=np.float64).reshape(-1, 2)
    quad = mirror_quadrants(s).reshape(-1, 4, 2)
    swapped = mirror_quadrants(s[:, ::-1]).reshape(-1, 4, 2)
    pts = np.concatenate([quad, swapped], axis=1).reshape(-1, 2)
    pts += np.asarray(center, dtype=np.float64)
    return pts


__all__ = ["mirror_quadrants", "mirror_octants"]
