"""
どこで: `api.shapes`（曲線生成の高レベル API）。
何を: 登録済み shape 関数を `G.<name>(...)` の形で解決する薄いファサード。
なぜ: 利用者がレジストリを意識せず、関数的に `Curve` を得られる統一入口を提供するため。

Examples
--------
    from api import G, Viewport

    vp = Viewport(800, 600)
    c1 = G.ellipse((400, 300), 200, 100, vp)
    c2 = G.circle((400, 300), 100, vp)

Notes
-----
- 各 shape は純関数（状態を持たない）。キャッシュは持たず、毎回生成する。
- 未登録名は `AttributeError`。
"""

from __future__ import annotations

from typing import Any, Callable

# レジストリ登録の副作用を発火させるため、shapes パッケージを 1 度だけ import すれば十分
import shapes  # noqa: F401  (登録目的の副作用)
from engine.core.curve import Curve
from shapes.registry import get_shape as get_shape_generator
from shapes.registry import is_shape_registered
from shapes.registry import list_shapes as list_registered_shapes


class ShapesAPI:
    """`G` の実体。形状名→生成関数をインスタンス属性で遅延解決する。"""

    def __getattr__(self, name: str) -> Callable[..., Curve]:
        if name.startswith("_") or not is_shape_registered(name):
            raise AttributeError(f"'{self.__class__.__name__}' has no attribute '{name}'")
        return get_shape_generator(name)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(list_registered_shapes()))

    @staticmethod
    def list_shapes() -> list[str]:
        return list_registered_shapes()

    @staticmethod
    def generate(name: str, *args: Any, **kwargs: Any) -> Curve:
        """名前を文字列で指定して生成する（未登録は KeyError）。"""
        return get_shape_generator(name)(*args, **kwargs)


G = ShapesAPI()

__all__ = ["G", "ShapesAPI"]
