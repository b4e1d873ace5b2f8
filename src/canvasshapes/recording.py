from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .canvas import DEFAULT_HEIGHT, DEFAULT_LINE_WIDTH, DEFAULT_PAINT, DEFAULT_WIDTH


@dataclass(frozen=True)
class DrawCommand:
    name: str
    args: Tuple[object, ...] = ()


class RecordingSurface:
    """Drawing surface that logs every call instead of painting pixels.

    Property assignments are logged as ``set_<name>`` commands and stored
    exactly as given, so the surface never rejects a value.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        self.commands: List[DrawCommand] = []
        self.height = height
        self._width = width
        self._line_width: object = DEFAULT_LINE_WIDTH
        self._stroke_style: object = DEFAULT_PAINT
        self._fill_style: object = DEFAULT_PAINT

    def _record(self, name: str, *args: object) -> None:
        self.commands.append(DrawCommand(name, tuple(args)))

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        # Same as a canvas: resizing wipes the bitmap and the paint state.
        self._record("set_width", value)
        self._width = value
        self._line_width = DEFAULT_LINE_WIDTH
        self._stroke_style = DEFAULT_PAINT
        self._fill_style = DEFAULT_PAINT

    @property
    def line_width(self) -> object:
        return self._line_width

    @line_width.setter
    def line_width(self, value: object) -> None:
        self._record("set_line_width", value)
        self._line_width = value

    @property
    def stroke_style(self) -> object:
        return self._stroke_style

    @stroke_style.setter
    def stroke_style(self, value: object) -> None:
        self._record("set_stroke_style", value)
        self._stroke_style = value

    @property
    def fill_style(self) -> object:
        return self._fill_style

    @fill_style.setter
    def fill_style(self, value: object) -> None:
        self._record("set_fill_style", value)
        self._fill_style = value

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def close_path(self) -> None:
        self._record("close_path")

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._record("rect", x, y, w, h)

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        self._record("arc", x, y, radius, start_angle, end_angle, counterclockwise)

    def fill(self) -> None:
        self._record("fill")

    def stroke(self) -> None:
        self._record("stroke")

    def names(self) -> List[str]:
        return [command.name for command in self.commands]

    def vertices(self) -> List[Tuple[object, object]]:
        """Return the move_to/line_to points issued since the last begin_path."""
        points: List[Tuple[object, object]] = []
        for command in reversed(self.commands):
            if command.name == "begin_path":
                break
            if command.name in ("move_to", "line_to"):
                points.append((command.args[0], command.args[1]))
        points.reverse()
        return points

    def clear_log(self) -> None:
        self.commands.clear()


__all__ = ["DrawCommand", "RecordingSurface"]
