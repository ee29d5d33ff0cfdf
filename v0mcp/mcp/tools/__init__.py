"""FastMCP tool registrations grouped by domain."""

from . import accessibility, component, layout, shadcn, theme, webapp  # noqa: F401

__all__ = ["accessibility", "component", "layout", "shadcn", "theme", "webapp"]
