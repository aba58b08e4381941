"""
どこで: `engine.render` の高レベル描画。
何を: `CurveFrame` の各レイヤーを PointMesh に転送し、領域ごとの viewport で POINTS 描画する。
なぜ: 毎フレームのアップロード/描画/リソース寿命を一箇所に集約し、描画処理を単純化するため。
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import moderngl as mgl

from common.types import RGBA, Rect
from engine.runtime.frame import CurveFrame
from util.color import normalize_color

from ..core.tickable import Tickable
from .point_mesh import PointMesh
from .shader import Shader
from .types import CurveLayer

MeshFactory = Callable[[Any, Any], Any]


class PointRenderer(Tickable):
    """
    Orchestrator から受け取ったフレームを tick で GPU に送り、draw で画面に描く。
    受信（submit）・転送（tick）・描画（draw）を分けることで、on_draw は描画のみを担う。
    """

    def __init__(
        self,
        mgl_context: Any,
        *,
        point_color: object = (1.0, 0.5, 0.2, 1.0),
        point_size: float = 1.0,
        pixel_ratio: float = 1.0,
        mesh_factory: MeshFactory = PointMesh,
    ):
        """
        mgl_context: moderngl コンテキスト
        point_color: 基準の点色（Hex または RGB(A)）
        point_size: 点のサイズ [px]
        pixel_ratio: 論理ピクセル → フレームバッファピクセルの倍率（HiDPI 用）
        mesh_factory: `(ctx, program) -> mesh`。レイヤー名ごとに 1 つ生成する
        """
        self.ctx = mgl_context
        self._logger = logging.getLogger(__name__)
        self._mesh_factory = mesh_factory
        self._pixel_ratio = float(pixel_ratio)

        self.program = Shader.create_shader(mgl_context)
        self._base_color: RGBA = normalize_color(point_color)
        self.program["color"].value = self._base_color
        self._point_size = float(point_size)
        self.program["point_size"].value = self._point_size
        mgl_context.enable(mgl.PROGRAM_POINT_SIZE)

        self._meshes: dict[str, Any] = {}
        self._pending: CurveFrame | None = None
        self._layers: tuple[CurveLayer, ...] = ()
        # ログ用: 直近アップロードの点数
        self._last_point_count: int = 0
        self._uploads: int = 0

    # --------------------------------------------------------------------- #
    # Frame handoff                                                          #
    # --------------------------------------------------------------------- #
    def submit(self, frame: CurveFrame) -> None:
        """次の tick で転送するフレームを受け取る（未転送の古いフレームは破棄）。"""
        self._pending = frame

    # --------------------------------------------------------------------- #
    # Tickable                                                               #
    # --------------------------------------------------------------------- #
    def tick(self, dt: float) -> None:
        """
        毎フレーム呼ばれ、新しいフレームがあれば GPU へ転送。
        """
        frame = self._pending
        if frame is None:
            return
        self._pending = None
        total = 0
        for layer in frame.layers:
            mesh = self._mesh_for(layer.name)
            mesh.upload(layer.curve.as_array())
            total += mesh.vertex_count
        self._layers = frame.layers
        self._last_point_count = total
        self._uploads += 1
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(
                "Uploaded frame %d: layers=%d points=%d", frame.index, len(frame.layers), total
            )

    # --------------------------------------------------------------------- #
    # Public drawing API                                                    #
    # --------------------------------------------------------------------- #
    def draw(self) -> None:
        """GPU に送ったレイヤーを、それぞれの領域に描画"""
        for layer in self._layers:
            mesh = self._meshes.get(layer.name)
            if mesh is None or mesh.vertex_count == 0:
                continue
            self.ctx.viewport = self._scaled_region(layer.region)
            mesh.vao.render(mgl.POINTS, mesh.vertex_count)

    def release(self) -> None:
        """GPU リソースを解放。"""
        for mesh in self._meshes.values():
            mesh.release()
        self._meshes.clear()
        self._layers = ()

    # 直近アップロードの点数と累計アップロード回数
    def get_last_counts(self) -> tuple[int, int]:
        return int(self._last_point_count), int(self._uploads)

    # --------------------------------------------------------------------- #
    # Internal helpers                                                      #
    # --------------------------------------------------------------------- #
    def _mesh_for(self, name: str) -> Any:
        mesh = self._meshes.get(name)
        if mesh is None:
            mesh = self._mesh_factory(self.ctx, self.program)
            self._meshes[name] = mesh
        return mesh

    def _scaled_region(self, region: Rect) -> Rect:
        r = self._pixel_ratio
        x, y, w, h = region
        return (int(round(x * r)), int(round(y * r)), int(round(w * r)), int(round(h * r)))


__all__ = ["PointRenderer"]
