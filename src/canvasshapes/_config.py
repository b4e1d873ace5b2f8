from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from ._color import parse_rgba

CONFIG_DIR = Path.home() / ".canvasshapes"
CONFIG_FILE = CONFIG_DIR / "canvasshapes.cfg"
DEFAULT_CONFIG: Dict[str, Any] = {
    "_comment": "Canvas size is in pixels. background is any color name or hex value, or null for transparent.",
    "width": 300,
    "height": 150,
    "background": None,
    "defaults": {"line_width": 1, "line_color": "#000", "fill_color": "#fff"},
}


@dataclass(frozen=True)
class CanvasSettings:
    """Resolved canvas settings from canvasshapes.cfg."""

    width: int
    height: int
    background: str | None = None
    defaults: Dict[str, Any] = field(default_factory=dict)


def ensure_user_config() -> None:
    """Ensure ~/.canvasshapes/canvasshapes.cfg exists with sane defaults."""

    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    if CONFIG_FILE.exists():
        return

    try:
        CONFIG_FILE.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        raw = json.loads(CONFIG_FILE.read_text())
    except (OSError, json.JSONDecodeError):
        return dict(DEFAULT_CONFIG)
    if not isinstance(raw, dict):
        return dict(DEFAULT_CONFIG)
    return raw


def _positive_int(value: Any, fallback: int) -> int:
    if isinstance(value, bool):
        return fallback
    try:
        number = int(value)
    except (TypeError, ValueError):
        return fallback
    return number if number > 0 else fallback


def _background(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    try:
        parse_rgba(value)
    except ValueError:
        return None
    return value


def get_canvas_settings() -> CanvasSettings:
    """Return the configured canvas size, background and style defaults."""

    raw_config = _load_user_config()
    defaults = raw_config.get("defaults")
    if not isinstance(defaults, dict):
        defaults = DEFAULT_CONFIG["defaults"]

    return CanvasSettings(
        width=_positive_int(raw_config.get("width"), DEFAULT_CONFIG["width"]),
        height=_positive_int(raw_config.get("height"), DEFAULT_CONFIG["height"]),
        background=_background(raw_config.get("background")),
        defaults=dict(defaults),
    )
