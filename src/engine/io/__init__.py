"""
どこで: `engine.io` サブパッケージ。
何を: 入力イベントの型と FIFO、ドラッグによる半径更新を提供。
なぜ: ウィンドウ/イベントループ固有の処理から入力解釈を切り離すため。
"""

from .drag import DragController
from .events import (
    EventQueue,
    InputEvent,
    PointerDown,
    PointerMove,
    PointerUp,
    ToggleAnimation,
)

__all__ = [
    "DragController",
    "EventQueue",
    "InputEvent",
    "PointerDown",
    "PointerMove",
    "PointerUp",
    "ToggleAnimation",
]
