"""Ordered search roots.

``PathSet`` is immutable; a rebuild produces a new instance that the
resource finder swaps in whole.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class RootSpec:
    """A single search root and the layer it came from."""

    kind: str  # "app" | "modules" | "module:<name>" | "system" | "framework"
    path: Path


@dataclass(frozen=True)
class PathSet:
    """Ordered search roots, index 0 = highest priority for first-match lookups.

    Config merges walk the same roots in reverse, so index 0 is merged last
    and wins on key collisions.
    """

    specs: Tuple[RootSpec, ...] = field(default_factory=tuple)

    @property
    def roots(self) -> Tuple[Path, ...]:
        return tuple(spec.path for spec in self.specs)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.roots)

    def __len__(self) -> int:
        return len(self.specs)

    def __bool__(self) -> bool:
        return bool(self.specs)

    def reversed(self) -> Tuple[Path, ...]:
        """Roots from lowest to highest priority."""
        return tuple(reversed(self.roots))

    def find_root(self, directory: str) -> Path | None:
        """Return the root equal to ``directory`` if it is one of the roots."""
        try:
            candidate = Path(directory)
        except TypeError:
            return None
        for root in self.roots:
            if root == candidate:
                return root
        return None

    def as_strings(self) -> List[str]:
        """Roots rendered with forward slashes and a trailing slash."""
        return [root.as_posix().rstrip("/") + "/" for root in self.roots]


__all__ = ["RootSpec", "PathSet"]
