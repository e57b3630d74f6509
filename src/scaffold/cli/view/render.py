"""
Scaffold view render command.

SUMMARY: Render a view to stdout

Module output hooks run first (e.g. the typography page when
``core.output`` is ``typography``) unless --no-modules is given.
"""

from __future__ import annotations

import argparse
import sys

from jinja2 import TemplateError

from scaffold.cli import OutputFormatter, add_repo_root_flag, build_context
from scaffold.core.exceptions import ScaffoldError
from scaffold.core.modules import run_output_hooks

SUMMARY = "Render a view to stdout"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("name", nargs="?", default="", help="View name without extension")
    parser.add_argument(
        "--no-modules",
        action="store_true",
        help="Skip module output hooks",
    )
    parser.add_argument(
        "--var",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Template variable (repeatable)",
    )
    add_repo_root_flag(parser)


def _parse_vars(raw: list[str]) -> dict[str, str]:
    variables: dict[str, str] = {}
    for item in raw:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Invalid --var '{item}', expected KEY=VALUE")
        variables[key.strip()] = value
    return variables


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter()

    try:
        variables = _parse_vars(args.var)
        ctx = build_context(args)
        output = None if args.no_modules else run_output_hooks(ctx)
        if output is None:
            output = ctx.views.load_view(args.name, **variables)
    except (ScaffoldError, TemplateError, ValueError) as e:
        formatter.error(e)
        return 1

    sys.stdout.write(output)
    if output and not output.endswith("\n"):
        sys.stdout.write("\n")
    return 0
