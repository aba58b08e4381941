"""
どこで: `shapes._kernels`。
何を: 曲線トレース用 numba カーネルの共通部品（出力バッファの拡張・実行経路の選択）。
なぜ: 内側ループを JIT で回しつつ、デバッグ時は同じコードを素の Python で実行できるようにするため。
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from common.settings import get as _get_settings


@njit(cache=True)
def grow_rows(buf: np.ndarray) -> np.ndarray:
    """行数を 2 倍にした float64 バッファへ既存行をコピーして返す。"""
    n = buf.shape[0]
    out = np.empty((max(1, 2 * n), buf.shape[1]), dtype=np.float64)
    out[:n] = buf
    return out


def call_kernel(kernel: Any, *args: Any) -> np.ndarray:
    """`PXR_USE_NUMBA=0` なら `kernel.py_func`、それ以外は JIT 版を呼ぶ。"""
    fn: Callable[..., np.ndarray] = kernel if _get_settings().USE_NUMBA else kernel.py_func
    return fn(*args)


__all__ = ["grow_rows", "call_kernel"]
