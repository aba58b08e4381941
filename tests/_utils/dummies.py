"""GL を使わないテスト用のダミー ModernGL オブジェクト。"""

from __future__ import annotations

from typing import Any


class DummyUniform:
    def __init__(self) -> None:
        self.value: Any = None


class DummyProgram:
    def __init__(self) -> None:
        self.uniforms: dict[str, DummyUniform] = {}

    def __getitem__(self, name: str) -> DummyUniform:
        return self.uniforms.setdefault(name, DummyUniform())


class DummyBuffer:
    def __init__(self, size: int) -> None:
        self.size = int(size)
        self.data = b""
        self.orphans = 0
        self.released = False

    def orphan(self, size: int = -1) -> None:
        self.orphans += 1

    def write(self, data: bytes) -> None:
        if len(data) > self.size:
            raise ValueError("write exceeds buffer size")
        self.data = data

    def release(self) -> None:
        self.released = True


class DummyVAO:
    def __init__(self, program: Any, buffer: DummyBuffer, attr: str) -> None:
        self.program = program
        self.buffer = buffer
        self.attr = attr
        self.render_calls: list[tuple[int, int]] = []
        self.released = False

    def render(self, mode: int, vertices: int) -> None:
        self.render_calls.append((mode, vertices))

    def release(self) -> None:
        self.released = True


class DummyContext:
    def __init__(self) -> None:
        self.programs: list[DummyProgram] = []
        self.buffers: list[DummyBuffer] = []
        self.enabled: list[int] = []
        self.viewport: tuple[int, int, int, int] | None = None
        self.viewports: list[tuple[int, int, int, int]] = []

    def program(self, vertex_shader: str, fragment_shader: str) -> DummyProgram:
        prog = DummyProgram()
        self.programs.append(prog)
        return prog

    def buffer(self, reserve: int = 0, dynamic: bool = False) -> DummyBuffer:
        buf = DummyBuffer(reserve)
        self.buffers.append(buf)
        return buf

    def simple_vertex_array(self, program: Any, buffer: DummyBuffer, attr: str) -> DummyVAO:
        return DummyVAO(program, buffer, attr)

    def enable(self, flag: int) -> None:
        self.enabled.append(flag)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "viewport" and value is not None:
            self.__dict__.setdefault("viewports", []).append(value)
        super().__setattr__(name, value)
