"""
Scaffold bundled data.

This package directory is the framework-default search root: it is always
the last (lowest priority) entry of the PathSet, so applications, modules and
the system root can override any file shipped here.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path


def get_data_path(subpackage: str = "", filename: str = "") -> Path:
    """
    Get absolute path to a bundled data file or directory.

    Example:
        >>> get_data_path("views", "TS_typography.html")
        PosixPath('/path/to/scaffold/data/views/TS_typography.html')
    """
    base = Path(str(resources.files("scaffold.data")))
    if subpackage:
        base = base / subpackage
    return base / filename if filename else base


def framework_root() -> Path:
    """Absolute path of the framework-default search root."""
    return get_data_path().resolve()


__all__ = ["get_data_path", "framework_root"]
