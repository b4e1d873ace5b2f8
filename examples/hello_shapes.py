"""Minimal canvasshapes drawing script; render it with `canvasshapes render examples/hello_shapes.py`."""

from __future__ import annotations


def draw(shapes):
    """Outline a white square and put a red circle in the middle."""

    shapes.set_line_width(3)
    shapes.square(100, 100, 25)

    shapes.set_fill_color("c00")
    shapes.circle(30, 150, 75)
