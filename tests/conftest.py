from __future__ import annotations

from pathlib import Path

import pytest

from canvasshapes import _config
from canvasshapes.recording import RecordingSurface
from canvasshapes.renderer import ShapeRenderer

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_dir = tmp_path / ".canvasshapes"
    monkeypatch.setattr(_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(_config, "CONFIG_FILE", config_dir / "canvasshapes.cfg")
    return config_dir / "canvasshapes.cfg"


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def examples_dir(project_root: Path) -> Path:
    return project_root / "docs" / "examples"


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def shapes(surface: RecordingSurface) -> ShapeRenderer:
    renderer = ShapeRenderer(surface)
    surface.clear_log()
    return renderer
