"""Jinja2 view rendering over the search roots."""
from __future__ import annotations

from .renderer import VIEW_EXTENSION, VIEWS_DIRECTORY, ResourceLoader, ViewRenderer

__all__ = ["ViewRenderer", "ResourceLoader", "VIEWS_DIRECTORY", "VIEW_EXTENSION"]
