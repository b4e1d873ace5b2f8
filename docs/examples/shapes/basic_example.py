"""Every shape kind on one canvas."""

from __future__ import annotations


def draw(shapes):
    shapes.set_lines_and_fill(2, "1f2a44", "5a7bff")
    shapes.rectangle(80, 40, 10, 10)
    shapes.square(40, 110, 10)

    shapes.set_fill_color("ff7a18")
    shapes.circle(20, 190, 30)

    shapes.set_fill_color("7fbf7f")
    shapes.right_angle_triangle(60, 50, 20, 130)
    shapes.right_angle_triangle(60, 50, 170, 130, right_to_left=True)

    shapes.set_fill_color("c9d1ff")
    shapes.equilateral_triangle(60, 250, 70)
