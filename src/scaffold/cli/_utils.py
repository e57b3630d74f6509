"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path

from scaffold.core.context import ScaffoldContext


def get_repo_root(args: argparse.Namespace) -> Path:
    """Project root from ``--repo-root``, else the current directory."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).expanduser().resolve()
    return Path.cwd().resolve()


def build_context(args: argparse.Namespace) -> ScaffoldContext:
    """Bootstrap a context for the project selected by ``args``.

    Uses the bootstrap settings the dispatcher already loaded when present.
    """
    settings = getattr(args, "_settings", None)
    if settings is None:
        return ScaffoldContext.from_project(get_repo_root(args))
    ctx = ScaffoldContext(settings)
    ctx.bootstrap()
    return ctx


__all__ = ["get_repo_root", "build_context"]
