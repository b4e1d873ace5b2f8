from __future__ import annotations

from pathlib import Path

from canvasshapes.cli import _draw_function_from_module
from canvasshapes.renderer import ShapeRenderer


def run_drawing(script_path: Path, surface) -> ShapeRenderer:
    """Load a drawing script and run its draw() against ``surface``."""
    draw = _draw_function_from_module(script_path)
    shapes = ShapeRenderer(surface)
    draw(shapes)
    return shapes
