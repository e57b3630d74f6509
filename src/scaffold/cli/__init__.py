"""
Scaffold CLI package.

Commands are auto-discovered from subfolders (config/, paths/, resource/,
view/). Each command module provides ``SUMMARY``, ``register_args(parser)``
and ``main(args) -> int``.
"""
from ._args import add_json_flag, add_repo_root_flag, add_standard_flags
from ._output import OutputFormatter
from ._utils import build_context, get_repo_root

__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_repo_root_flag",
    "add_standard_flags",
    "get_repo_root",
    "build_context",
]
