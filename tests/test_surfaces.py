from __future__ import annotations

import pytest

from canvasshapes import surfaces
from canvasshapes.canvas import Canvas
from canvasshapes.recording import RecordingSurface
from canvasshapes.renderer import ShapeRenderer
from canvasshapes.surfaces import SurfaceNotFoundError, SurfaceRegistry


def test_register_and_get():
    registry = SurfaceRegistry()
    canvas = Canvas(10, 10)
    registry.register("main", canvas)
    assert registry.get("main") is canvas
    assert "main" in registry
    assert len(registry) == 1
    assert registry.ids() == ["main"]


def test_register_duplicate_requires_replace():
    registry = SurfaceRegistry()
    registry.register("main", RecordingSurface())
    with pytest.raises(ValueError):
        registry.register("main", RecordingSurface())
    replacement = RecordingSurface()
    registry.register("main", replacement, replace=True)
    assert registry.get("main") is replacement


def test_unknown_surface_raises():
    registry = SurfaceRegistry()
    with pytest.raises(SurfaceNotFoundError):
        registry.get("missing")
    with pytest.raises(SurfaceNotFoundError):
        registry.unregister("missing")
    assert issubclass(SurfaceNotFoundError, LookupError)


def test_unregister_returns_surface():
    registry = SurfaceRegistry()
    surface = RecordingSurface()
    registry.register("main", surface)
    assert registry.unregister("main") is surface
    assert "main" not in registry


def test_renderer_from_surface_id_uses_given_registry():
    registry = SurfaceRegistry()
    surface = RecordingSurface()
    registry.register("drawing", surface)
    shapes = ShapeRenderer.from_surface_id("drawing", {"fill_color": "0a0"}, registry=registry)
    assert shapes.surface is surface
    assert surface.fill_style == "#0a0"


def test_renderer_from_surface_id_fails_before_construction():
    with pytest.raises(SurfaceNotFoundError):
        ShapeRenderer.from_surface_id("nowhere", registry=SurfaceRegistry())


def test_default_registry_helpers(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(surfaces, "default_registry", SurfaceRegistry())
    surface = RecordingSurface()
    surfaces.register_surface("shared", surface)
    assert surfaces.get_surface("shared") is surface
