"""
どこで: `engine.io.events`。
何を: ポインタ/トグル入力の型付きイベントと、フレーム境界で排出する EventQueue。
なぜ: ウィンドウのコールバックから状態を直接書き換えず、1 フレームにつき 1 回、
     到着順のまま消費できるようにするため。

座標系:
- イベントの `x, y` はスクリーン座標 [px]（左上原点、Y 下向き）。
  バックエンド固有の座標（pyglet は Y 上向き）はアダプタ側で変換してから積む。
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class PointerDown:
    x: float
    y: float


@dataclass(frozen=True)
class PointerMove:
    x: float
    y: float


@dataclass(frozen=True)
class PointerUp:
    x: float
    y: float


@dataclass(frozen=True)
class ToggleAnimation:
    """Manual/Animated モードの切替要求。"""


InputEvent = Union[PointerDown, PointerMove, PointerUp, ToggleAnimation]


class EventQueue:
    """単一スレッド用の FIFO。`drain()` で溜まったイベントを到着順に取り出す。"""

    def __init__(self) -> None:
        self._events: deque[InputEvent] = deque()

    def push(self, event: InputEvent) -> None:
        self._events.append(event)

    def drain(self) -> Iterator[InputEvent]:
        """現在溜まっている分だけを取り出す（排出中に積まれたものは次フレーム）。"""
        for _ in range(len(self._events)):
            yield self._events.popleft()

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)


__all__ = [
    "PointerDown",
    "PointerMove",
    "PointerUp",
    "ToggleAnimation",
    "InputEvent",
    "EventQueue",
]
