"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（背景クリア/描画コールバック）と、マウス入力の EventQueue への変換を提供。
なぜ: レンダラ/オーケストレータから GUI 依存を切り離し、最小インターフェイスで統一するため。

入力の割り当て:
- 左ボタン押下/ドラッグ/解放 → PointerDown / PointerMove / PointerUp
- 右ボタン押下 → ToggleAnimation
- ESC → on_close を発火してウィンドウを閉じる

座標:
- pyglet のマウス座標は左下原点・Y 上向き。キューにはスクリーン座標（左上原点・Y 下向き）で積む。

使用例:
    events = EventQueue()
    win = RenderWindow(800, 600, events=events, bg_color=(0, 0, 0, 1))
    win.add_draw_callback(renderer.draw)
    pyglet.app.run()
"""

from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor
from pyglet.window import key, mouse

from engine.io.events import EventQueue, PointerDown, PointerMove, PointerUp, ToggleAnimation


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        events: EventQueue,
        caption: str = "pyxiraster",
        bg_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0),
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            events: 入力イベントの積み先。
            caption: タイトルバー文字列。
            bg_color: 背景色 RGBA（0.0〜1.0）。
        """
        # 点描画なので MSAA は使わない
        config = Config(double_buffer=True, vsync=True)
        super().__init__(width=width, height=height, caption=caption, config=config)
        self._events = events
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def to_screen(self, x: float, y: float) -> tuple[float, float]:
        """pyglet 座標（Y 上向き）をスクリーン座標（Y 下向き）へ変換する。"""
        return float(x), float(self.height - y)

    # ---- pyglet イベント ----
    def on_draw(self):  # Pyglet 既定のイベント名
        """ウィンドウ描画イベントハンドラ。登録された描画コールバックを呼び出す。"""
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_mouse_press(self, x, y, button, modifiers):  # noqa: ANN001
        if button == mouse.LEFT:
            self._events.push(PointerDown(*self.to_screen(x, y)))
        elif button == mouse.RIGHT:
            self._events.push(ToggleAnimation())

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):  # noqa: ANN001
        if buttons & mouse.LEFT:
            self._events.push(PointerMove(*self.to_screen(x, y)))

    def on_mouse_release(self, x, y, button, modifiers):  # noqa: ANN001
        if button == mouse.LEFT:
            self._events.push(PointerUp(*self.to_screen(x, y)))

    def on_key_press(self, symbol, modifiers):  # noqa: ANN001
        if symbol == key.ESCAPE:
            # on_close ハンドラ（資源解放）を通してから閉じる
            self.dispatch_event("on_close")
