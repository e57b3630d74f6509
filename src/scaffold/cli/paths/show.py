"""
Scaffold paths show command.

SUMMARY: Show the include paths in priority order
"""

from __future__ import annotations

import argparse

from scaffold.cli import OutputFormatter, add_standard_flags, build_context
from scaffold.core.exceptions import ScaffoldError

SUMMARY = "Show the include paths in priority order"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        ctx = build_context(args)
    except ScaffoldError as e:
        formatter.error(e, error_code=e.__class__.__name__)
        return 1

    roots = [
        {"kind": spec.kind, "path": spec.path.as_posix().rstrip("/") + "/", "exists": spec.path.is_dir()}
        for spec in ctx.paths.specs
    ]
    if formatter.json_mode:
        formatter.json_output({"paths": roots})
        return 0

    for index, root in enumerate(roots):
        marker = "" if root["exists"] else "  (missing)"
        formatter.text(f"{index:>2}  {root['kind']:<20} {root['path']}{marker}")
    return 0
