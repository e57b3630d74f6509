"""
Scaffold resource find command.

SUMMARY: Locate a resource file across the include paths

Config lookups list every match, lowest priority first. Any other
directory returns the first match in priority order.
"""

from __future__ import annotations

import argparse

from scaffold.cli import OutputFormatter, add_standard_flags, build_context
from scaffold.core.exceptions import ScaffoldError

SUMMARY = "Locate a resource file across the include paths"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("directory", help="Directory kind to search (e.g., config, views)")
    parser.add_argument("name", help="File name without extension")
    parser.add_argument("--ext", default=None, help="File extension (default: yaml)")
    parser.add_argument(
        "--required",
        action="store_true",
        help="Exit with an error when the resource is not found",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        ctx = build_context(args)
        found = ctx.finder.find(args.directory, args.name, args.required, args.ext)
    except ScaffoldError as e:
        formatter.error(e, error_code=e.__class__.__name__)
        return 1

    matches = found if isinstance(found, list) else ([found] if found is not None else [])
    search = ctx.finder.search_string(args.directory, args.name, args.ext)

    if formatter.json_mode:
        formatter.json_output({"search": search, "found": bool(matches), "matches": [str(p) for p in matches]})
    elif not matches:
        formatter.text(f"Not found: {search}")
    else:
        for path in matches:
            formatter.text(str(path))
    return 0 if matches else 1
