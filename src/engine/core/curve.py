"""
曲線点列型 `Curve` と正規化ビュー `Viewport`

本モジュールは、ラスタライザが 1 フレームごとに生成する「点の並び」を表す `Curve` と、
ピクセル座標を正規化デバイス座標（NDC, [-1, 1]²）へ写す `Viewport` を提供する。

データモデル（不変条件）:
- `points: float32 ndarray (N, 2)` — NDC の点列。C 連続・読み取り専用。
- 点同士は接続されない（描画は POINTS プリミティブ）。順序は生成アルゴリズムの出力順。
- `Curve` は毎フレーム作り直され、部分更新はしない。

座標写像:
- `ndc = p / size * 2 - 1`（軸ごと）。原点は領域の左下、Y 上向き。

使用例:
    vp = Viewport(800, 600)
    c = Curve.from_pixels([[400.0, 300.0], [600.0, 300.0]], vp)
    c.points  # [[0.0, 0.0], [0.5, 0.0]]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

PointsLike = np.ndarray | Sequence[Sequence[float]]


@dataclass(frozen=True)
class Viewport:
    """曲線を正規化する対象領域のピクセルサイズ。"""

    width: float
    height: float

    def __post_init__(self) -> None:
        if not (self.width > 0 and self.height > 0):
            raise ValueError(f"viewport size must be positive, got: {(self.width, self.height)}")

    @property
    def size(self) -> tuple[float, float]:
        return float(self.width), float(self.height)

    def to_ndc(self, points: PointsLike) -> np.ndarray:
        """ピクセル座標 `(N, 2)` を NDC `(N, 2) float32` に写す。"""
        arr = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        size = np.array(self.size, dtype=np.float64)
        return (arr / size * 2.0 - 1.0).astype(np.float32)

    def center(self) -> tuple[float, float]:
        """領域中央のピクセル座標。"""
        return self.width / 2.0, self.height / 2.0


class Curve:
    """NDC 点列。

    フィールド:
    - `points (N,2) float32`: 生成順の点列（読み取り専用ビュー）。
    """

    __slots__ = ("points",)

    points: np.ndarray

    def __init__(self, points: PointsLike) -> None:
        # 呼び出し側の配列を凍結しないよう常にコピーする
        arr = np.array(points, dtype=np.float32)
        if arr.size == 0:
            arr = np.empty((0, 2), dtype=np.float32)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"points は形状 (N, 2) の配列である必要があります: {arr.shape}")
        arr = np.ascontiguousarray(arr)
        arr.setflags(write=False)
        self.points = arr

    # ── ファクトリ ───────────────────
    @classmethod
    def empty(cls) -> "Curve":
        return cls(np.empty((0, 2), dtype=np.float32))

    @classmethod
    def from_pixels(cls, points: PointsLike, viewport: Viewport) -> "Curve":
        """ピクセル座標の点列を `viewport` で正規化して `Curve` を作る。"""
        return cls(viewport.to_ndc(points))

    # ── 参照 ───────────────────────
    def __len__(self) -> int:
        return int(self.points.shape[0])

    def __repr__(self) -> str:
        return f"Curve(n_points={len(self)})"

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def as_array(self, *, copy: bool = False) -> np.ndarray:
        """点列を返す。`copy=False` は読み取り専用ビュー。"""
        return self.points.copy() if copy else self.points

    def bounds(self) -> tuple[float, float, float, float]:
        """`(xmin, ymin, xmax, ymax)` を返す。空のときは全て 0。"""
        if self.is_empty:
            return 0.0, 0.0, 0.0, 0.0
        mn = self.points.min(axis=0)
        mx = self.points.max(axis=0)
        return float(mn[0]), float(mn[1]), float(mx[0]), float(mx[1])


__all__ = ["Curve", "Viewport"]
