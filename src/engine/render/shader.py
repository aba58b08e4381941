"""
どこで: `engine.render.shader`。
何を: NDC の 2D 点列を単色の点として描く GLSL プログラムを生成する。
なぜ: 頂点は CPU 側で正規化済みのため、射影行列なしの最小シェーダで足りる。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330
in vec2 in_vert;
uniform float point_size;
void main() {
    gl_Position = vec4(in_vert, 0.0, 1.0);
    gl_PointSize = point_size;
}
"""

FRAGMENT_SHADER = """
#version 330
uniform vec4 color;
out vec4 frag_color;
void main() {
    frag_color = color;
}
"""


class Shader:
    @staticmethod
    def create_shader(mgl_context: Any) -> Any:
        """点描画用の `moderngl.Program` を返す。"""
        return mgl_context.program(vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER)
