from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from canvasshapes.canvas import Canvas
from canvasshapes.recording import RecordingSurface
from tests.helpers import run_drawing

EXAMPLES = sorted((Path(__file__).resolve().parents[1] / "docs" / "examples" / "shapes").glob("*_example.py"))


@pytest.mark.parametrize("script", EXAMPLES, ids=lambda path: path.stem)
def test_example_paints_something(script: Path):
    canvas = Canvas()
    run_drawing(script, canvas)
    assert np.any(canvas.to_array()[..., 3] > 0)


@pytest.mark.parametrize("script", EXAMPLES, ids=lambda path: path.stem)
def test_example_fills_before_every_stroke(script: Path):
    surface = RecordingSurface()
    run_drawing(script, surface)
    names = [name for name in surface.names() if name in ("fill", "stroke")]
    for idx, name in enumerate(names):
        if name == "stroke":
            assert idx > 0 and names[idx - 1] == "fill"


def test_clear_example_leaves_only_the_circle(examples_dir: Path):
    canvas = Canvas()
    shapes = run_drawing(examples_dir / "shapes" / "clear_example.py", canvas)
    arr = canvas.to_array()
    # The square's corner was wiped; the circle's center survived.
    assert arr[25 + 1, 100 + 1].tolist() == [0, 0, 0, 0]
    assert arr[75, 150].tolist() == [255, 255, 0, 255]
    assert shapes.get_line_color() == "#ff0000"


def test_hello_shapes(project_root: Path):
    canvas = Canvas()
    run_drawing(project_root / "examples" / "hello_shapes.py", canvas)
    assert canvas.to_array()[75, 150].tolist() == [204, 0, 0, 255]
