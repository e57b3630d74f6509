"""
Scaffold resource list command.

SUMMARY: List files of a directory kind across all include paths
"""

from __future__ import annotations

import argparse

from scaffold.cli import OutputFormatter, add_standard_flags, build_context
from scaffold.core.exceptions import ScaffoldError

SUMMARY = "List files of a directory kind across all include paths"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("directory", help="Directory kind to list (e.g., views)")
    parser.add_argument(
        "--recursive",
        "-r",
        action="store_true",
        help="Descend into sub-directories",
    )
    parser.add_argument(
        "--unique",
        action="store_true",
        help="Drop entries already listed from another root (keeps first occurrence)",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        ctx = build_context(args)
    except ScaffoldError as e:
        formatter.error(e, error_code=e.__class__.__name__)
        return 1

    entries = ctx.lister.list(args.directory, args.recursive)
    if args.unique:
        entries = list(dict.fromkeys(entries))

    if formatter.json_mode:
        formatter.json_output({"directory": args.directory, "entries": [str(p) for p in entries]})
    else:
        for entry in entries:
            formatter.text(str(entry))
    return 0
