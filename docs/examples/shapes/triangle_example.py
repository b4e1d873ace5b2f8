"""Right-angle and equilateral triangles."""

from __future__ import annotations


def draw(shapes):
    shapes.set_lines_and_fill(1, "000", "ff7a18")
    # Sizes may come in as strings, e.g. from a form field.
    shapes.right_angle_triangle("80", "60", "110", "130", right_to_left=True)
    shapes.right_angle_triangle(80, 60, 190, 130)

    shapes.set_fill_color("9aa6bf")
    shapes.equilateral_triangle(70, 150, 10)
