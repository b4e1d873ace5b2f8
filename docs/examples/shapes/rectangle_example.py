"""Rectangles and squares."""

from __future__ import annotations


def draw(shapes):
    shapes.set_fill_color("#5a7bff")
    shapes.rectangle(120, 60, 20, 20)
    shapes.square(60, 180, 40)
