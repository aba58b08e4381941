"""
どこで: `api.app_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS/ウィンドウサイズ/レイアウト/色/半径/アニメーション設定の解決。
なぜ: 「明示引数 > 設定ファイル > 既定値」の優先順位を 1 箇所に集め、単体テストしやすくするため。

各関数は `cfg`（`load_config()` の戻り値）を受け取る。`None` のときは自前で読み込む。
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from common.types import RGBA, Vec2
from util.color import normalize_color
from util.constants import (
    DEFAULT_ANIMATION_AMPLITUDE,
    DEFAULT_ANIMATION_SPEED,
    DEFAULT_BACKGROUND,
    DEFAULT_CAPTION,
    DEFAULT_FPS,
    DEFAULT_POINT_COLOR,
    DEFAULT_POINT_SIZE,
    DEFAULT_RADII,
    DEFAULT_WINDOW_SIZE,
    LAYOUTS,
)
from util.utils import config_section, load_config


def _section(cfg: Mapping[str, Any] | None, name: str) -> dict[str, Any]:
    if cfg is None:
        cfg = load_config()
    return config_section(dict(cfg), name)


def _pick(explicit: Any, section: Mapping[str, Any], key: str, default: Any) -> Any:
    if explicit is not None:
        return explicit
    value = section.get(key)
    return default if value is None else value


def resolve_fps(requested_fps: int | None, cfg: Mapping[str, Any] | None = None) -> int:
    """FPS を解決して 1 以上の int を返す。

    - 明示指定 > `window.fps` > 既定 60。
    - 数値化できない値や 0 以下は `ValueError`。
    """
    raw = _pick(requested_fps, _section(cfg, "window"), "fps", DEFAULT_FPS)
    try:
        fps = int(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid fps: {raw!r}") from e
    if fps <= 0:
        raise ValueError(f"fps must be positive, got: {fps}")
    return fps


def resolve_window_size(
    window_size: tuple[int, int] | None, cfg: Mapping[str, Any] | None = None
) -> tuple[int, int]:
    """ウィンドウサイズ [px] を解決する。

    - 明示指定 `(width, height)` を優先し、なければ `window.width/height`、最後に既定 800x600。
    - 正でない/数値化できない値は `ValueError`。
    """
    if window_size is not None:
        raw: Any = window_size
    else:
        sec = _section(cfg, "window")
        raw = (
            sec.get("width", DEFAULT_WINDOW_SIZE[0]),
            sec.get("height", DEFAULT_WINDOW_SIZE[1]),
        )
    try:
        w, h = int(raw[0]), int(raw[1])
    except (TypeError, ValueError, IndexError) as e:
        raise ValueError(f"invalid window_size: {raw!r}") from e
    if w <= 0 or h <= 0:
        raise ValueError(f"window_size must be positive, got: {(w, h)}")
    return w, h


def resolve_layout(layout: str | None, cfg: Mapping[str, Any] | None = None) -> str:
    """レイアウト名（"single" / "split"）を解決する。大文字/小文字は無視。"""
    raw = _pick(layout, _section(cfg, "shape"), "layout", LAYOUTS[0])
    name = str(raw).strip().lower()
    if name not in LAYOUTS:
        allowed = ", ".join(LAYOUTS)
        raise ValueError(f"invalid layout: {raw!r}; allowed={allowed}")
    return name


def resolve_colors(
    background: object | None,
    point_color: object | None,
    cfg: Mapping[str, Any] | None = None,
) -> tuple[RGBA, RGBA]:
    """背景色と点色を RGBA(0–1) で返す。不正な色指定は `ValueError`。"""
    sec = _section(cfg, "window")
    bg = normalize_color(_pick(background, sec, "background_color", DEFAULT_BACKGROUND))
    fg = normalize_color(_pick(point_color, sec, "point_color", DEFAULT_POINT_COLOR))
    return bg, fg


def resolve_point_size(point_size: float | None, cfg: Mapping[str, Any] | None = None) -> float:
    raw = _pick(point_size, _section(cfg, "window"), "point_size", DEFAULT_POINT_SIZE)
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid point_size: {raw!r}") from e
    if not math.isfinite(value) or value <= 0.0:
        raise ValueError(f"point_size must be positive, got: {value}")
    return value


def resolve_caption(caption: str | None, cfg: Mapping[str, Any] | None = None) -> str:
    return str(_pick(caption, _section(cfg, "window"), "caption", DEFAULT_CAPTION))


def resolve_radii(radii: Vec2 | None, cfg: Mapping[str, Any] | None = None) -> Vec2:
    """初期半径 `(rx, ry)` を解決する。値の丸め（下限 1）は `ShapeParameters` 側で行う。"""
    if radii is not None:
        raw: Any = radii
    else:
        sec = _section(cfg, "shape")
        raw = (sec.get("rx", DEFAULT_RADII[0]), sec.get("ry", DEFAULT_RADII[1]))
    try:
        return float(raw[0]), float(raw[1])
    except (TypeError, ValueError, IndexError) as e:
        raise ValueError(f"invalid radii: {raw!r}") from e


def resolve_animation(
    speed: float | None,
    amplitude: float | None,
    cfg: Mapping[str, Any] | None = None,
    *,
    env_speed: float | None = None,
) -> tuple[float, float]:
    """アニメーションの `(speed, amplitude)` を解決する。

    速度の優先順: 明示引数 > 環境変数 `PXR_ANIMATION_SPEED` > `animation.speed` > 既定。
    速度は負値不可（`ValueError`）。
    """
    sec = _section(cfg, "animation")
    raw_speed = speed if speed is not None else env_speed
    raw_speed = _pick(raw_speed, sec, "speed", DEFAULT_ANIMATION_SPEED)
    raw_amp = _pick(amplitude, sec, "amplitude", DEFAULT_ANIMATION_AMPLITUDE)
    try:
        s, a = float(raw_speed), float(raw_amp)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"invalid animation settings: speed={raw_speed!r} amplitude={raw_amp!r}"
        ) from e
    if not math.isfinite(s) or s < 0.0:
        raise ValueError(f"animation speed must be >= 0, got: {s}")
    if not math.isfinite(a):
        raise ValueError(f"animation amplitude must be finite, got: {a}")
    return s, a


__all__ = [
    "resolve_fps",
    "resolve_window_size",
    "resolve_layout",
    "resolve_colors",
    "resolve_point_size",
    "resolve_caption",
    "resolve_radii",
    "resolve_animation",
]
