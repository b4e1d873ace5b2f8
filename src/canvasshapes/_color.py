from __future__ import annotations

import re
from typing import Tuple

from PIL import ImageColor

_HEX_PATTERN = re.compile(r"^#?(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def normalize_hex(color: str) -> str:
    """Return ``color`` with a leading ``#``; values that already have one pass through."""
    if color[:1] != "#":
        return "#" + color
    return color


def is_hex_color(color: object) -> bool:
    if not isinstance(color, str):
        return False
    return _HEX_PATTERN.match(color) is not None


def parse_rgba(color: str) -> Tuple[int, int, int, int]:
    if not isinstance(color, str):
        raise ValueError(f"Color must be a string, got {type(color).__name__}.")
    try:
        rgba = ImageColor.getcolor(color, "RGBA")
    except ValueError as exc:
        raise ValueError(f"Unrecognized color {color!r}.") from exc
    return tuple(int(c) for c in rgba)  # type: ignore[return-value]
