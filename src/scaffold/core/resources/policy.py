"""Resolution policies: how a lookup walks the search roots."""
from __future__ import annotations

from enum import Enum

CONFIG_DIRECTORY = "config"


class ResolutionPolicy(str, Enum):
    """How a resource lookup walks the search roots."""

    # Reverse order, every match returned (lowest priority first).
    MERGE_ALL = "merge_all"
    # Forward order, first match returned.
    FIRST_MATCH = "first_match"


def policy_for(directory: str) -> ResolutionPolicy:
    """Default policy for a directory kind: only ``config`` merges."""
    if directory == CONFIG_DIRECTORY:
        return ResolutionPolicy.MERGE_ALL
    return ResolutionPolicy.FIRST_MATCH


__all__ = ["CONFIG_DIRECTORY", "ResolutionPolicy", "policy_for"]
