from __future__ import annotations

import pytest

import shapes  # noqa: F401  (登録目的の副作用)
from engine.core.curve import Curve, Viewport
from shapes.registry import (
    get_registry,
    get_shape,
    is_shape_registered,
    list_shapes,
    shape,
    unregister,
)


def test_builtin_shapes_are_registered() -> None:
    assert {"circle", "ellipse"} <= set(list_shapes())
    assert is_shape_registered("Ellipse")
    assert callable(get_shape("circle"))


def test_unknown_shape_raises_key_error() -> None:
    with pytest.raises(KeyError):
        get_shape("superellipse")


def test_decorator_with_explicit_name_and_unregister() -> None:
    @shape("TestDot")
    def _dot(center, viewport: Viewport) -> Curve:  # noqa: ANN001
        return Curve.from_pixels([center], viewport)

    try:
        assert is_shape_registered("test_dot")
        c = get_shape("test_dot")((50.0, 50.0), Viewport(100, 100))
        assert c.points.tolist() == [[0.0, 0.0]]
        assert "test_dot" in get_registry()
    finally:
        unregister("test_dot")
    assert not is_shape_registered("test_dot")


def test_decorator_rejects_non_functions() -> None:
    with pytest.raises(TypeError):

        @shape
        class NotAFunction:  # noqa: D401 - テスト用
            pass
