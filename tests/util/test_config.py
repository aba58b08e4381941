from __future__ import annotations

from pathlib import Path

import pytest

from util.utils import config_section, load_config


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_root_config_overrides_top_level_keys(tmp_path: Path) -> None:
    _write(tmp_path / "configs" / "default.yaml", "window:\n  fps: 60\nshape:\n  rx: 200\n")
    _write(tmp_path / "config.yaml", "window:\n  width: 1024\n")
    cfg = load_config(tmp_path)
    # トップレベル単位の上書き（ディープマージしない）
    assert cfg["window"] == {"width": 1024}
    assert cfg["shape"] == {"rx": 200}


def test_missing_or_broken_files_fall_back_to_empty(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}
    _write(tmp_path / "configs" / "default.yaml", "window: [unclosed\n")
    assert load_config(tmp_path) == {}
    _write(tmp_path / "configs" / "default.yaml", "- just\n- a list\n")
    assert load_config(tmp_path) == {}


def test_config_section() -> None:
    assert config_section({"window": {"fps": 30}}, "window") == {"fps": 30}
    assert config_section({"window": 3}, "window") == {}
    assert config_section({}, "shape") == {}


@pytest.mark.integration
def test_repository_default_config_is_loaded() -> None:
    cfg = load_config()
    assert config_section(cfg, "window").get("width") == 800
    assert config_section(cfg, "shape").get("layout") == "single"
    assert config_section(cfg, "animation").get("speed") == pytest.approx(0.0005)
