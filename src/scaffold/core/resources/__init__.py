"""Resource resolution across the ordered search roots.

- ``ResourceFinder``: single-file lookup (first match or merge-all)
- ``DirectoryLister``: multi-root recursive listing
- ``ResolutionPolicy``: which of the two walks a lookup uses
"""
from __future__ import annotations

from .finder import DEFAULT_EXTENSION, FindResult, ResourceFinder
from .listing import DirectoryLister, is_hidden
from .policy import CONFIG_DIRECTORY, ResolutionPolicy, policy_for

__all__ = [
    "ResourceFinder",
    "FindResult",
    "DEFAULT_EXTENSION",
    "DirectoryLister",
    "is_hidden",
    "ResolutionPolicy",
    "policy_for",
    "CONFIG_DIRECTORY",
]
