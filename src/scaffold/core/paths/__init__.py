"""Search root (include path) model and construction."""
from __future__ import annotations

from .model import PathSet, RootSpec
from .pathset import (
    APP_PATH_KEY,
    MODULES_DIRECTORY,
    MODULES_KEY,
    SYSTEM_PATH_KEY,
    PathSetSettings,
    build_path_set,
    discover_module_roots,
)

__all__ = [
    "PathSet",
    "RootSpec",
    "PathSetSettings",
    "build_path_set",
    "discover_module_roots",
    "MODULES_DIRECTORY",
    "MODULES_KEY",
    "APP_PATH_KEY",
    "SYSTEM_PATH_KEY",
]
