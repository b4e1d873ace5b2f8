"""Concentric circles, drawn largest first."""

from __future__ import annotations


def draw(shapes):
    shapes.set_line_width(0)
    for radius, color in ((60, "1f2a44"), (40, "5a7bff"), (20, "c9d1ff")):
        shapes.set_fill_color(color)
        shapes.circle(radius, 150, 75)
