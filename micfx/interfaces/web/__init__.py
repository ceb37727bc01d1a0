"""Server-rendered views and the template environment."""

from .views import STATIC_DIR, TEMPLATES_DIR, render, templates

__all__ = ["STATIC_DIR", "TEMPLATES_DIR", "render", "templates"]
