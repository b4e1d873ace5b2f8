"""Logging setup for command-line entry points.

Library modules only call ``logging.getLogger(__name__)``; handlers are left
to the application.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Install a rich log handler once.

    The package log level is always updated; the handler is skipped when the
    root logger is already configured.
    """

    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("canvasshapes").setLevel(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


__all__ = ["setup_logging"]
