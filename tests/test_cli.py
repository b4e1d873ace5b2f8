from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import numpy as np
import pytest
from PIL import Image
from typer.testing import CliRunner

from canvasshapes.cli import _next_available_path, app

pytestmark = pytest.mark.cli

runner = CliRunner()


def _write_script(path: Path, body: str) -> Path:
    path.write_text(dedent(body))
    return path


@pytest.fixture
def square_script(tmp_path: Path) -> Path:
    return _write_script(
        tmp_path / "square.py",
        """
        def draw(shapes):
            shapes.set_line_width(0)
            shapes.set_fill_color("f00")
            shapes.square(10, 0, 0)
        """,
    )


def test_render_writes_png(tmp_path: Path, square_script: Path):
    output = tmp_path / "out" / "square.png"
    result = runner.invoke(app, ["render", str(square_script), "-o", str(output), "--width", "20", "--height", "12"])
    assert result.exit_code == 0, result.output
    with Image.open(output) as image:
        assert image.size == (20, 12)
        arr = np.asarray(image.convert("RGBA"))
    assert arr[5, 5].tolist() == [255, 0, 0, 255]
    assert arr[11, 19].tolist() == [0, 0, 0, 0]


def test_render_uses_config_size(tmp_path: Path, square_script: Path, isolated_config: Path):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text('{"width": 30, "height": 40, "background": "white"}')
    output = tmp_path / "configured.png"
    result = runner.invoke(app, ["render", str(square_script), "-o", str(output)])
    assert result.exit_code == 0, result.output
    with Image.open(output) as image:
        assert image.size == (30, 40)
        assert image.convert("RGBA").getpixel((25, 35)) == (255, 255, 255, 255)


def test_render_does_not_overwrite_by_default(tmp_path: Path, square_script: Path):
    output = tmp_path / "drawing.png"
    output.write_bytes(b"existing")
    result = runner.invoke(app, ["render", str(square_script), "-o", str(output)])
    assert result.exit_code == 0, result.output
    assert output.read_bytes() == b"existing"
    assert (tmp_path / "drawing (1).png").exists()


def test_render_overwrite(tmp_path: Path, square_script: Path):
    output = tmp_path / "drawing.png"
    output.write_bytes(b"existing")
    result = runner.invoke(app, ["render", str(square_script), "-o", str(output), "--overwrite"])
    assert result.exit_code == 0, result.output
    assert output.read_bytes() != b"existing"


def test_render_missing_script(tmp_path: Path):
    result = runner.invoke(app, ["render", str(tmp_path / "nope.py")])
    assert result.exit_code != 0


def test_render_script_without_draw(tmp_path: Path):
    script = _write_script(tmp_path / "empty.py", "VALUE = 1\n")
    result = runner.invoke(app, ["render", str(script), "-o", str(tmp_path / "x.png")])
    assert result.exit_code != 0
    assert not (tmp_path / "x.png").exists()


def test_render_script_failure(tmp_path: Path):
    script = _write_script(
        tmp_path / "broken.py",
        """
        def draw(shapes):
            raise RuntimeError("boom")
        """,
    )
    result = runner.invoke(app, ["render", str(script), "-o", str(tmp_path / "x.png")])
    assert result.exit_code != 0
    assert "boom" in result.output


def test_render_bad_background(tmp_path: Path, square_script: Path):
    result = runner.invoke(app, ["render", str(square_script), "--background", "#nothex"])
    assert result.exit_code != 0


def test_trace_lists_commands(square_script: Path):
    result = runner.invoke(app, ["trace", str(square_script)])
    assert result.exit_code == 0, result.output
    assert "begin_path" in result.output
    assert "rect" in result.output
    assert "stroke" not in result.output.replace("set_stroke_style", "")


def test_version_command():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "0.1" in result.output


def test_next_available_path(tmp_path: Path):
    target = tmp_path / "a.png"
    assert _next_available_path(target) == target
    target.write_bytes(b"")
    (tmp_path / "a (1).png").write_bytes(b"")
    assert _next_available_path(target) == tmp_path / "a (2).png"
