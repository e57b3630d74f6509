"""Shared utilities: key paths, merging, YAML I/O and logging setup."""
from __future__ import annotations

from .keypath import coerce_to_container, fill_key, get_key, set_key, split_key
from .merge import deep_merge, shallow_merge

__all__ = [
    "get_key",
    "set_key",
    "fill_key",
    "split_key",
    "coerce_to_container",
    "deep_merge",
    "shallow_merge",
]
