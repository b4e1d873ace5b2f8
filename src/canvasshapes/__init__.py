"""canvasshapes – fill-and-stroke shape drawing on 2D surfaces."""

from __future__ import annotations

from .canvas import Canvas, DrawingSurface
from .recording import DrawCommand, RecordingSurface
from .renderer import (
    DEFAULT_STYLE,
    VERSION,
    InvalidGeometry,
    InvalidStyleValue,
    ShapeRenderer,
    Style,
)
from .surfaces import SurfaceNotFoundError, SurfaceRegistry, get_surface, register_surface

__all__ = [
    "__version__",
    "Canvas",
    "DEFAULT_STYLE",
    "DrawCommand",
    "DrawingSurface",
    "InvalidGeometry",
    "InvalidStyleValue",
    "RecordingSurface",
    "ShapeRenderer",
    "Style",
    "SurfaceNotFoundError",
    "SurfaceRegistry",
    "get_surface",
    "register_surface",
]

__version__ = VERSION
