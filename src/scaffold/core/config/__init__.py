"""Scaffold configuration system.

Usage:
    from scaffold.core.context import ScaffoldContext

    ctx = ScaffoldContext.from_project(Path("/path/to/project"))
    host = ctx.config.get("db.host")
    ctx.config.set("db.port", 5433)
    ctx.config.clear("db")  # next get re-reads config/db.yaml from disk
"""
from __future__ import annotations

from .bootstrap import load_bootstrap_settings
from .parsers import ConfigFileParser, parse_config_file
from .store import BOOTSTRAP_GROUP, ConfigStore

__all__ = [
    "ConfigStore",
    "BOOTSTRAP_GROUP",
    "ConfigFileParser",
    "parse_config_file",
    "load_bootstrap_settings",
]
