"""Look up drawing surfaces by identifier."""

from __future__ import annotations

from typing import Dict, List

from .canvas import DrawingSurface


class SurfaceNotFoundError(LookupError):
    """Raised when no drawing surface is registered under an identifier."""


class SurfaceRegistry:
    """Named drawing surfaces, resolved before a renderer is built."""

    def __init__(self) -> None:
        self._surfaces: Dict[str, DrawingSurface] = {}

    def register(self, surface_id: str, surface: DrawingSurface, *, replace: bool = False) -> None:
        if surface_id in self._surfaces and not replace:
            raise ValueError(f"A surface is already registered as {surface_id!r}.")
        self._surfaces[surface_id] = surface

    def unregister(self, surface_id: str) -> DrawingSurface:
        try:
            return self._surfaces.pop(surface_id)
        except KeyError:
            raise SurfaceNotFoundError(f"No surface registered as {surface_id!r}.") from None

    def get(self, surface_id: str) -> DrawingSurface:
        try:
            return self._surfaces[surface_id]
        except KeyError:
            raise SurfaceNotFoundError(f"No surface registered as {surface_id!r}.") from None

    def ids(self) -> List[str]:
        return sorted(self._surfaces)

    def __contains__(self, surface_id: object) -> bool:
        return surface_id in self._surfaces

    def __len__(self) -> int:
        return len(self._surfaces)


default_registry = SurfaceRegistry()


def register_surface(surface_id: str, surface: DrawingSurface, *, replace: bool = False) -> None:
    default_registry.register(surface_id, surface, replace=replace)


def get_surface(surface_id: str) -> DrawingSurface:
    return default_registry.get(surface_id)


__all__ = [
    "SurfaceNotFoundError",
    "SurfaceRegistry",
    "default_registry",
    "get_surface",
    "register_surface",
]
