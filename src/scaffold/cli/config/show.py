"""
Scaffold config show command.

SUMMARY: Show a configuration group or key

Displays the merged configuration of a group (every config/<group> file
across the search roots, highest priority winning) or a single dot-notation
key within it.
"""

from __future__ import annotations

import argparse

from scaffold.cli import OutputFormatter, add_json_flag, add_repo_root_flag, build_context
from scaffold.core.exceptions import ScaffoldError
from scaffold.core.utils.io import dump_yaml_string

SUMMARY = "Show a configuration group or key"

_MISSING = object()


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "key",
        help="Group or dot-notation key to show (e.g., 'db' or 'db.host')",
    )
    parser.add_argument(
        "--format",
        choices=["json", "yaml", "table"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--required",
        action="store_true",
        help="Fail when no config file exists for the group",
    )
    add_json_flag(parser)
    add_repo_root_flag(parser)


def _format_value(value, indent: int = 0) -> str:
    """Format a value for table display."""
    prefix = "  " * indent
    if isinstance(value, dict):
        lines = []
        for k, v in value.items():
            formatted = _format_value(v, indent + 1)
            if "\n" in formatted:
                lines.append(f"{prefix}{k}:")
                lines.append(formatted)
            else:
                lines.append(f"{prefix}{k}: {formatted.strip()}")
        return "\n".join(lines)
    if isinstance(value, list):
        if not value:
            return "[]"
        if all(isinstance(v, (str, int, float, bool)) for v in value):
            return f"[{', '.join(str(v) for v in value)}]"
        return "\n".join(f"{prefix}- {_format_value(v, indent + 1).strip()}" for v in value)
    return str(value)


def _nest_key(key: str, value):
    """Nest a dot-notation key into a YAML/JSON-friendly mapping."""
    out = value
    for part in reversed([p for p in key.split(".") if p]):
        out = {part: out}
    return out


def main(args: argparse.Namespace) -> int:
    """Show configuration - delegates to ConfigStore."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        ctx = build_context(args)
        value = ctx.config.get(args.key, _MISSING, required=args.required)
    except ScaffoldError as e:
        formatter.error(e, error_code=e.__class__.__name__)
        return 1

    if value is _MISSING:
        if formatter.json_mode:
            formatter.json_output({"key": args.key, "found": False})
        else:
            formatter.text(f"Key not found: {args.key}")
        return 1

    output_format = "json" if args.json else args.format
    if output_format == "json":
        formatter.json_output({"key": args.key, "value": value})
    elif output_format == "yaml":
        formatter.text(dump_yaml_string(_nest_key(args.key, value)).rstrip())
    else:
        formatted = _format_value(value, 1 if isinstance(value, (dict, list)) else 0)
        if isinstance(value, dict) and value:
            formatter.text(f"{args.key}:\n{formatted}")
        else:
            formatter.text(f"{args.key}: {formatted}")
    return 0
