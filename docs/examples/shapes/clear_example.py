"""Draw, clear, and draw again with the same style."""

from __future__ import annotations


def draw(shapes):
    shapes.set_lines_and_fill(4, "ff0000", "ffff00")
    shapes.square(100, 100, 25)
    shapes.clear()
    shapes.circle(50, 150, 75)
