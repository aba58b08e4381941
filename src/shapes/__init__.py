"""
どこで: `shapes` パッケージ（関数登録）。
何を: 中点法の曲線生成（楕円/円）を import 副作用で登録し、名前から解決できるようにする。
なぜ: 生成ステージを一箇所に集約し、フレームオーケストレータから再利用するため。
"""

# 関数版 shape 定義を import して登録（副作用）
from . import circle as _register_circle  # noqa: F401
from . import ellipse as _register_ellipse  # noqa: F401
from .registry import get_shape, is_shape_registered, list_shapes, shape  # re-export

__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
]
