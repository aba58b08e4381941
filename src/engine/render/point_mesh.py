"""
どこで: `engine.render` の低レベルメッシュ層。
何を: 点列用 VBO/VAO の確保・更新・解放を担当し、描画可能な PointMesh を管理。
なぜ: GPU 転送の詳細を Renderer から切り離し、再確保や VAO の張り直しを一元化するため。
"""

from __future__ import annotations

from typing import Any

import numpy as np


class PointMesh:
    """
    1 レイヤー分の点列（float32 の xy 並び）を GPU に送り込む作業を管理
    """

    def __init__(
        self,
        ctx: Any,
        program: Any,
        # 初期確保量（既定: 64KB ≒ 8192 点）。必要に応じて自動拡張。
        initial_reserve: int = 64 * 1024,
    ):
        """
        ctx: moderngl コンテキスト
        program: 点描画用シェーダープログラム（入力属性 `in_vert: vec2`）
        """
        self.ctx = ctx
        self.program = program
        self.initial_reserve = initial_reserve

        self.vbo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.vao = ctx.simple_vertex_array(program, self.vbo, "in_vert")

        self.vertex_count: int = 0

    def _ensure_capacity(self, nbytes: int) -> None:
        """データが大きくなったら VBO を再確保し、VAO を張り直す"""
        if nbytes <= self.vbo.size:
            return
        self.vbo.release()
        self.vao.release()
        self.vbo = self.ctx.buffer(reserve=max(nbytes, 2 * self.initial_reserve), dynamic=True)
        self.vao = self.ctx.simple_vertex_array(self.program, self.vbo, "in_vert")

    def upload(self, points: np.ndarray) -> None:
        """`(N, 2) float32` の点列を GPU へ送る（毎フレーム全置換）"""
        data = np.ascontiguousarray(points, dtype=np.float32)
        self.vertex_count = int(data.shape[0])
        if self.vertex_count == 0:
            return
        self._ensure_capacity(data.nbytes)
        self.vbo.orphan()
        self.vbo.write(data.tobytes())

    def release(self) -> None:
        """GPU のメモリを解放する（終了時に使う）"""
        self.vbo.release()
        self.vao.release()
