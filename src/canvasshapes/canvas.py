from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Protocol, Tuple, runtime_checkable

import numpy as np
from PIL import Image, ImageDraw

from ._color import parse_rgba

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 150
DEFAULT_LINE_WIDTH = 1.0
DEFAULT_PAINT = "#000000"

Point = Tuple[float, float]


@runtime_checkable
class DrawingSurface(Protocol):
    """The 2D context calls a ShapeRenderer relies on.

    Assigning ``width`` (even to its current value) must wipe the bitmap.
    """

    width: int
    line_width: float
    stroke_style: str
    fill_style: str

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None: ...

    def fill(self) -> None: ...

    def stroke(self) -> None: ...


def _finite(*values: object) -> bool:
    try:
        return all(math.isfinite(float(v)) for v in values)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return False


def _dimension(value: object, label: str) -> int:
    size = int(value)  # type: ignore[call-overload]
    if size < 0:
        raise ValueError(f"Canvas {label} must be non-negative.")
    return size


@dataclass
class _Subpath:
    points: List[Point] = field(default_factory=list)
    closed: bool = False


class Canvas:
    """Raster surface with an HTML-canvas style 2D context, backed by a Pillow RGBA image."""

    SEGMENTS_PER_CIRCLE = 64

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        background: str | None = None,
    ) -> None:
        self._background = parse_rgba(background) if background is not None else None
        self._width = _dimension(width, "width")
        self._height = _dimension(height, "height")
        self._reset()

    def _reset(self) -> None:
        blank = self._background if self._background is not None else (0, 0, 0, 0)
        self._image = Image.new("RGBA", (self._width, self._height), blank)
        self._subpaths: List[_Subpath] = []
        self._line_width = DEFAULT_LINE_WIDTH
        self._stroke_style = DEFAULT_PAINT
        self._stroke_rgba = parse_rgba(DEFAULT_PAINT)
        self._fill_style = DEFAULT_PAINT
        self._fill_rgba = parse_rgba(DEFAULT_PAINT)

    # -- dimensions -----------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = _dimension(value, "width")
        self._reset()

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = _dimension(value, "height")
        self._reset()

    @property
    def size(self) -> Tuple[int, int]:
        return self._width, self._height

    # -- paint state ----------------------------------------------------------

    @property
    def line_width(self) -> float:
        return self._line_width

    @line_width.setter
    def line_width(self, value: float) -> None:
        try:
            width = float(value)
        except (TypeError, ValueError):
            logger.debug("Ignoring non-numeric line width %r", value)
            return
        if not math.isfinite(width) or width <= 0:
            logger.debug("Ignoring line width %r", value)
            return
        self._line_width = width

    @property
    def stroke_style(self) -> str:
        return self._stroke_style

    @stroke_style.setter
    def stroke_style(self, value: str) -> None:
        try:
            rgba = parse_rgba(value)
        except ValueError:
            logger.debug("Ignoring invalid stroke style %r", value)
            return
        self._stroke_style = value
        self._stroke_rgba = rgba

    @property
    def fill_style(self) -> str:
        return self._fill_style

    @fill_style.setter
    def fill_style(self, value: str) -> None:
        try:
            rgba = parse_rgba(value)
        except ValueError:
            logger.debug("Ignoring invalid fill style %r", value)
            return
        self._fill_style = value
        self._fill_rgba = rgba

    # -- path construction ----------------------------------------------------

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        if not _finite(x, y):
            return
        self._subpaths.append(_Subpath([(float(x), float(y))]))

    def line_to(self, x: float, y: float) -> None:
        if not _finite(x, y):
            return
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1].points.append((float(x), float(y)))

    def close_path(self) -> None:
        if not self._subpaths or self._subpaths[-1].closed:
            return
        current = self._subpaths[-1]
        current.closed = True
        self._subpaths.append(_Subpath([current.points[0]]))

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        if not _finite(x, y, w, h):
            return
        x, y, w, h = float(x), float(y), float(w), float(h)
        corners = [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]
        self._subpaths.append(_Subpath(corners, closed=True))
        self._subpaths.append(_Subpath([(x, y)]))

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        if not _finite(x, y, radius, start_angle, end_angle):
            return
        if float(radius) < 0:
            raise ValueError("radius must be non-negative.")
        sampled = self._sample_arc(
            float(x), float(y), float(radius), float(start_angle), float(end_angle), bool(counterclockwise)
        )
        points = [(float(px), float(py)) for px, py in sampled]
        if self._subpaths:
            self._subpaths[-1].points.extend(points)
        else:
            self._subpaths.append(_Subpath(points))

    def _sample_arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start: float,
        end: float,
        counterclockwise: bool,
    ) -> np.ndarray:
        full = 2 * np.pi
        if counterclockwise:
            sweep = -full if start - end >= full else -((start - end) % full)
        else:
            sweep = full if end - start >= full else (end - start) % full
        span = abs(sweep)
        steps = max(int(np.ceil(self.SEGMENTS_PER_CIRCLE * (span / full))), 2)
        angles = np.linspace(start, start + sweep, steps, endpoint=True)
        xs = cx + radius * np.cos(angles)
        ys = cy + radius * np.sin(angles)
        return np.column_stack([xs, ys])

    # -- painting -------------------------------------------------------------

    def fill(self) -> None:
        polygons = [sp.points for sp in self._subpaths if len(set(sp.points)) >= 3]
        if not polygons:
            return
        rgba = self._fill_rgba

        def paint(draw: ImageDraw.ImageDraw) -> None:
            for points in polygons:
                draw.polygon(points, fill=rgba)

        self._composite(paint)

    def stroke(self) -> None:
        # Zero-length subpaths paint nothing.
        lines = [sp for sp in self._subpaths if len(set(sp.points)) >= 2]
        if not lines:
            return
        rgba = self._stroke_rgba
        width = max(int(round(self._line_width)), 1)

        def paint(draw: ImageDraw.ImageDraw) -> None:
            for subpath in lines:
                points = list(subpath.points)
                if subpath.closed:
                    points.append(points[0])
                draw.line(points, fill=rgba, width=width, joint="curve")

        self._composite(paint)

    def _composite(self, paint: Callable[[ImageDraw.ImageDraw], None]) -> None:
        layer = Image.new("RGBA", self._image.size, (0, 0, 0, 0))
        paint(ImageDraw.Draw(layer))
        self._image = Image.alpha_composite(self._image, layer)

    # -- output ---------------------------------------------------------------

    def to_image(self) -> Image.Image:
        return self._image.copy()

    def to_array(self) -> np.ndarray:
        return np.asarray(self._image, dtype=np.uint8).copy()

    def save(self, path: Path | str) -> None:
        self._image.save(Path(path))

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"


__all__ = ["Canvas", "DrawingSurface", "DEFAULT_WIDTH", "DEFAULT_HEIGHT"]
