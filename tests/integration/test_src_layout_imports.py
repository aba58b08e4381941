from __future__ import annotations

import importlib

import pytest

MODULES = [
    "api",
    "api.app",
    "api.app_runner.utils",
    "api.app_runner.render",
    "common.settings",
    "common.logging",
    "engine.core.curve",
    "engine.core.state",
    "engine.core.animation",
    "engine.core.frame_clock",
    "engine.io.events",
    "engine.io.drag",
    "engine.render.renderer",
    "engine.render.point_mesh",
    "engine.runtime.orchestrator",
    "shapes",
    "util.color",
    "util.utils",
]


@pytest.mark.integration
@pytest.mark.parametrize("name", MODULES)
def test_modules_import_without_window(name: str) -> None:
    importlib.import_module(name)
