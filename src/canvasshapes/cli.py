from __future__ import annotations

import importlib.util
import pathlib
import sys
import traceback
from dataclasses import replace
from types import ModuleType
from typing import Callable

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from canvasshapes import __version__
from canvasshapes._config import CanvasSettings, get_canvas_settings
from canvasshapes._logging import setup_logging
from canvasshapes.canvas import Canvas
from canvasshapes.recording import RecordingSurface
from canvasshapes.renderer import ShapeRenderer

console = Console()
app = typer.Typer(help="Draw shapes from Python scripts onto PNG canvases.")

DrawFunction = Callable[[ShapeRenderer], object]


class DrawingScriptError(RuntimeError):
    """Raised when a drawing script cannot provide a usable draw() function."""


def _load_module(path: pathlib.Path) -> ModuleType:
    module_name = "canvasshapes_user_drawing"
    if module_name in sys.modules:
        del sys.modules[module_name]

    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise DrawingScriptError(f"Unable to import drawing script at {path}")

    module = importlib.util.module_from_spec(spec)
    # Register module so features relying on sys.modules (e.g., dataclasses) work.
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


def _format_exception(exc: BaseException) -> str:
    return "".join(traceback.format_exception(exc))


def _draw_function_from_module(script_path: pathlib.Path) -> DrawFunction:
    module = _load_module(script_path)
    draw = getattr(module, "draw", None)
    if draw is None or not callable(draw):
        raise DrawingScriptError(f"{script_path} must define a callable draw(shapes) function.")
    return draw


def _run_script(script_path: pathlib.Path, shapes: ShapeRenderer) -> None:
    try:
        draw = _draw_function_from_module(script_path)
        draw(shapes)
    except DrawingScriptError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except Exception as exc:
        console.print(Panel.fit(_format_exception(exc), title="Drawing script failed", style="red"))
        raise typer.BadParameter(f"Drawing script failed: {exc}") from exc


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


def _resolve_settings(width: int | None, height: int | None, background: str | None) -> CanvasSettings:
    settings = get_canvas_settings()
    overrides: dict[str, object] = {}
    if width is not None:
        overrides["width"] = width
    if height is not None:
        overrides["height"] = height
    if background is not None:
        overrides["background"] = background
    return replace(settings, **overrides)


def _format_arg(value: object) -> str:
    if isinstance(value, float):
        return f"{value:.6g}"
    return repr(value)


@app.command()
def render(
    script: pathlib.Path = typer.Argument(..., help="Path to a Python script that defines draw(shapes)."),
    output: pathlib.Path = typer.Option(
        pathlib.Path("drawing.png"),
        "--output",
        "-o",
        help="Path to the PNG file that will be produced.",
    ),
    width: int | None = typer.Option(None, min=1, help="Canvas width in pixels (config value when unset)."),
    height: int | None = typer.Option(None, min=1, help="Canvas height in pixels (config value when unset)."),
    background: str | None = typer.Option(None, help="Background color; transparent when unset."),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing image."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log values the canvas ignores."),
) -> None:
    """
    Run a drawing script against a fresh canvas and save the result as a PNG.
    """

    setup_logging(verbose, console=console)
    if not script.exists():
        raise typer.BadParameter(f"Drawing script {script} does not exist.")

    settings = _resolve_settings(width, height, background)
    try:
        canvas = Canvas(settings.width, settings.height, background=settings.background)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    shapes = ShapeRenderer(canvas, settings.defaults)
    _run_script(script, shapes)

    final_output = output
    if output.exists() and not overwrite:
        final_output = _next_available_path(output)
        console.print(f"[yellow]Output {output} exists; writing to {final_output} instead.[/yellow]")

    final_output.parent.mkdir(parents=True, exist_ok=True)
    try:
        canvas.save(final_output)
    except (OSError, ValueError) as exc:
        raise typer.BadParameter(f"Failed to write image: {exc}") from exc

    console.print(
        Panel(
            f"Wrote {canvas.width}x{canvas.height} image to [green]{final_output}[/green].",
            title="Render complete",
            border_style="green",
        )
    )


@app.command()
def trace(
    script: pathlib.Path = typer.Argument(..., help="Path to a Python script that defines draw(shapes)."),
    width: int | None = typer.Option(None, min=1, help="Surface width reported to the script."),
    height: int | None = typer.Option(None, min=1, help="Surface height reported to the script."),
) -> None:
    """
    Run a drawing script against a recording surface and list every command it issued.
    """

    setup_logging(False, console=console)
    if not script.exists():
        raise typer.BadParameter(f"Drawing script {script} does not exist.")

    settings = _resolve_settings(width, height, None)
    surface = RecordingSurface(settings.width, settings.height)
    shapes = ShapeRenderer(surface, settings.defaults)
    _run_script(script, shapes)

    table = Table(title=f"{script.name}: {len(surface.commands)} commands")
    table.add_column("#", justify="right", style="dim")
    table.add_column("command", style="cyan", no_wrap=True)
    table.add_column("arguments")
    for idx, command in enumerate(surface.commands, start=1):
        table.add_row(str(idx), command.name, ", ".join(_format_arg(arg) for arg in command.args))
    console.print(table)


@app.command()
def version() -> None:
    """
    Print the canvasshapes version.
    """

    console.print(f"canvasshapes {__version__}")
