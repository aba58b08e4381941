"""
どこで: `engine.runtime` の描画ペイロード型。
何を: Renderer へ渡す 1 フレームぶんのデータ（レイヤー列と、その生成元パラメータ）を表す。
なぜ: Orchestrator と Renderer 間の契約を明示し、duck-typing を排除するため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from common.types import Vec2
from engine.render.types import CurveLayer


@dataclass(frozen=True)
class CurveFrame:
    """描画対象 1 フレーム分のデータコンテナ。"""

    layers: tuple[CurveLayer, ...]
    radii: Vec2
    animated: bool = False
    index: int = 0

    @property
    def point_count(self) -> int:
        return sum(len(layer.curve) for layer in self.layers)

    def layer(self, name: str) -> CurveLayer:
        for layer in self.layers:
            if layer.name == name:
                return layer
        raise KeyError(name)

    @classmethod
    def from_layers(
        cls, layers: Sequence[CurveLayer], *, radii: Vec2, animated: bool = False, index: int = 0
    ) -> "CurveFrame":
        return cls(layers=tuple(layers), radii=radii, animated=animated, index=index)


__all__ = ["CurveFrame"]
