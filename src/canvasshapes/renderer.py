"""Shape drawing on top of a 2D drawing surface.

``ShapeRenderer`` keeps a line width, a line color and a fill color in step
with the surface's paint properties and turns shape requests into path
commands. Every shape is filled first and then stroked when the line width is
greater than zero.

By default nothing is validated: odd values go straight to the surface, which
decides whether to ignore them. ``strict=True`` checks values up front and
raises ``InvalidStyleValue`` or ``InvalidGeometry`` before the surface is
touched.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, Mapping

from ._color import is_hex_color, normalize_hex
from .canvas import DrawingSurface
from .surfaces import SurfaceRegistry, default_registry

logger = logging.getLogger(__name__)

VERSION = "0.1"

_LEADING_INT = re.compile(r"^\s*([+-]?)(0[xX][0-9a-fA-F]*|\d+)")

_DEFAULT_KEYS = {
    "line_width": "line_width",
    "lineWidth": "line_width",
    "line_color": "line_color",
    "lineColor": "line_color",
    "fill_color": "fill_color",
    "fillColor": "fill_color",
}


class InvalidStyleValue(ValueError):
    """Raised in strict mode when a line width or color is rejected."""


class InvalidGeometry(ValueError):
    """Raised in strict mode when shape sizes or positions are rejected."""


@dataclass(frozen=True)
class Style:
    line_width: Any
    line_color: str
    fill_color: str


DEFAULT_STYLE = Style(line_width=1, line_color="#000", fill_color="#fff")


def coerce_int(value: object) -> int | float:
    """Read ``value`` as an integer.

    Floats truncate toward zero and strings contribute their leading run of
    digits (``"12.7px"`` gives ``12``, ``"0x10"`` gives ``16``). Floats that
    print in exponent form are read from that text, so ``1e21`` gives ``1``.
    Anything without digits becomes ``nan``.
    """

    if isinstance(value, bool):
        return math.nan
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real):
        number = float(value)
        if not math.isfinite(number):
            return math.nan
        if abs(number) >= 1e21 or 0 < abs(number) < 1e-6:
            return coerce_int(repr(number))
        return int(number)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            return math.nan
        sign, digits = match.groups()
        if digits[:2].lower() == "0x":
            if len(digits) == 2:
                return math.nan
            number = int(digits[2:], 16)
        else:
            number = int(digits)
        return -number if sign == "-" else number
    return math.nan


def _as_float(value: Real) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _is_finite_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _is_positive(value: object) -> bool:
    try:
        return float(value) > 0  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return False


def _check_sizes(**sizes: object) -> None:
    for label, value in sizes.items():
        if not _is_finite_number(value) or value < 0:  # type: ignore[operator]
            raise InvalidGeometry(f"{label} must be a finite number >= 0, got {value!r}.")


def _check_positions(**positions: object) -> None:
    for label, value in positions.items():
        if not _is_finite_number(value):
            raise InvalidGeometry(f"{label} must be a finite number, got {value!r}.")


class ShapeRenderer:
    """Draw filled, optionally outlined shapes on a drawing surface."""

    def __init__(
        self,
        surface: DrawingSurface,
        defaults: Mapping[str, Any] | None = None,
        *,
        strict: bool = False,
    ) -> None:
        self._surface = surface
        self._strict = strict
        self._line_width: Any = DEFAULT_STYLE.line_width
        self._line_color = DEFAULT_STYLE.line_color
        self._fill_color = DEFAULT_STYLE.fill_color

        style = self._resolve_defaults(defaults)
        self.set_line_width(style.line_width)
        self.set_line_color(style.line_color)
        self.set_fill_color(style.fill_color)

    @classmethod
    def from_surface_id(
        cls,
        surface_id: str,
        defaults: Mapping[str, Any] | None = None,
        *,
        registry: SurfaceRegistry | None = None,
        strict: bool = False,
    ) -> "ShapeRenderer":
        """Resolve ``surface_id`` first; raises SurfaceNotFoundError when it is unknown."""
        lookup = registry if registry is not None else default_registry
        return cls(lookup.get(surface_id), defaults, strict=strict)

    def _resolve_defaults(self, defaults: Mapping[str, Any] | None) -> Style:
        if defaults is None:
            return DEFAULT_STYLE
        values: dict[str, Any] = {}
        for key, value in defaults.items():
            name = _DEFAULT_KEYS.get(key)
            if name is None:
                if self._strict:
                    raise InvalidStyleValue(f"Unknown style default {key!r}.")
                logger.warning("Ignoring unknown style default %r", key)
                continue
            if value is not None:
                values[name] = value
        return Style(
            line_width=values.get("line_width", DEFAULT_STYLE.line_width),
            line_color=values.get("line_color", DEFAULT_STYLE.line_color),
            fill_color=values.get("fill_color", DEFAULT_STYLE.fill_color),
        )

    @property
    def surface(self) -> DrawingSurface:
        return self._surface

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def style(self) -> Style:
        return Style(self._line_width, self._line_color, self._fill_color)

    def version(self) -> str:
        return VERSION

    # -- style ----------------------------------------------------------------

    def set_line_width(self, width: Any) -> None:
        if self._strict and (not _is_finite_number(width) or width < 0):
            raise InvalidStyleValue(f"line width must be a finite number >= 0, got {width!r}.")
        self._line_width = width
        self._surface.line_width = width

    def get_line_width(self) -> Any:
        return self._line_width

    def set_line_color(self, color: str) -> None:
        self._line_color = self._normalize_color(color)
        self._surface.stroke_style = self._line_color

    def get_line_color(self) -> str:
        return self._line_color

    def set_fill_color(self, color: str) -> None:
        self._fill_color = self._normalize_color(color)
        self._surface.fill_style = self._fill_color

    def get_fill_color(self) -> str:
        return self._fill_color

    def set_lines_and_fill(self, line_width: Any, line_color: str, fill_color: str) -> None:
        """Apply width, line color and fill color in that order; earlier ones stick if a later one fails."""
        self.set_line_width(line_width)
        self.set_line_color(line_color)
        self.set_fill_color(fill_color)

    line_width = property(get_line_width, set_line_width)
    line_color = property(get_line_color, set_line_color)
    fill_color = property(get_fill_color, set_fill_color)

    def _normalize_color(self, color: Any) -> str:
        if self._strict:
            if not is_hex_color(color):
                raise InvalidStyleValue(f"Expected a hex color, got {color!r}.")
        elif not isinstance(color, str):
            color = str(color)
        return normalize_hex(color)

    def _sync_surface(self) -> None:
        self._surface.line_width = self._line_width
        self._surface.stroke_style = self._line_color
        self._surface.fill_style = self._fill_color

    def clear(self) -> None:
        """Wipe every painted pixel. The style is kept and re-applied to the surface."""
        surface = self._surface
        surface.width = surface.width
        # Resizing also resets the surface's paint state.
        self._sync_surface()

    # -- shapes ---------------------------------------------------------------

    def _paint(self) -> None:
        self._surface.fill()
        if _is_positive(self._line_width):
            self._surface.stroke()

    def square(self, side_length: float, left: float, top: float) -> None:
        self.rectangle(side_length, side_length, left, top)

    def rectangle(self, width: float, height: float, left: float, top: float) -> None:
        if self._strict:
            _check_sizes(width=width, height=height)
            _check_positions(left=left, top=top)
        surface = self._surface
        surface.begin_path()
        surface.rect(left, top, width, height)
        self._paint()

    def circle(self, radius: float, center_left: float, center_top: float) -> None:
        if self._strict:
            _check_sizes(radius=radius)
            _check_positions(center_left=center_left, center_top=center_top)
        surface = self._surface
        surface.begin_path()
        surface.arc(center_left, center_top, radius, 0, 2 * math.pi, False)
        self._paint()

    def right_angle_triangle(
        self,
        width: int | float | str,
        height: int | float | str,
        left: int | float | str,
        top: int | float | str,
        right_to_left: bool = False,
    ) -> None:
        """Draw a right-angle triangle with the right angle at ``(left, top)``.

        Inputs may be numeric strings; all four are read as integers first.
        The horizontal leg runs toward +x, or toward -x when ``right_to_left``
        is ``True``. The vertical leg always runs up to ``top - height``.
        """

        width, height, left, top = (coerce_int(value) for value in (width, height, left, top))
        if self._strict:
            _check_sizes(width=width, height=height)
            _check_positions(left=left, top=top)

        if right_to_left is True:
            corner = left - width
        else:
            corner = left + width

        surface = self._surface
        surface.begin_path()
        surface.move_to(left, top)
        surface.line_to(corner, top)
        surface.line_to(left, top - height)
        surface.line_to(left, top)
        self._paint()

    def equilateral_triangle(self, side_length: float, left: float, top: float) -> None:
        """Draw an equilateral triangle with its apex at ``(left, top)`` and a flat base below."""
        if self._strict:
            _check_sizes(side_length=side_length)
            _check_positions(left=left, top=top)
        if isinstance(side_length, Real):
            # Sides too large for a float become infinite and draw nothing.
            side_length = _as_float(side_length)

        opposite = side_length / 2
        adjacent_square = (side_length * side_length) - (opposite * opposite)
        adjacent = math.sqrt(adjacent_square)

        surface = self._surface
        surface.begin_path()
        surface.move_to(left, top)
        surface.line_to(left + opposite, top + adjacent)
        surface.line_to(left - opposite, top + adjacent)
        surface.line_to(left, top)
        self._paint()

    def __repr__(self) -> str:
        return (
            f"ShapeRenderer(line_width={self._line_width!r}, "
            f"line_color={self._line_color!r}, fill_color={self._fill_color!r})"
        )


__all__ = [
    "DEFAULT_STYLE",
    "InvalidGeometry",
    "InvalidStyleValue",
    "ShapeRenderer",
    "Style",
    "VERSION",
    "coerce_int",
]
