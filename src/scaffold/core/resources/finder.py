"""Resource lookup across the ordered search roots.

Files are located according to the order of the installed PathSet:

- ``ResolutionPolicy.FIRST_MATCH`` (views, assets, everything but config)
  walks the roots forward and stops at the first root holding the file.
- ``ResolutionPolicy.MERGE_ALL`` (config) walks the roots in reverse and
  returns every match, lowest priority first, so a later merge lets the
  highest-priority root win.

Successful lookups are memoized by search string. Misses are never cached,
so files created after startup are still discovered.
"""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from scaffold.core.exceptions import ResourceNotFoundError
from scaffold.core.paths.model import PathSet

from .policy import ResolutionPolicy, policy_for

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "yaml"

FindResult = Union[Path, List[Path]]


class ResourceFinder:
    """Find resource files in a directory kind across all search roots."""

    def __init__(
        self,
        paths: Optional[PathSet] = None,
        *,
        default_extension: str = DEFAULT_EXTENSION,
        lock: Optional[threading.RLock] = None,
    ) -> None:
        self._paths = paths or PathSet()
        self.default_extension = default_extension
        self._lock = lock or threading.RLock()
        self._cache: Dict[Tuple[ResolutionPolicy, str], FindResult] = {}

    @property
    def paths(self) -> PathSet:
        return self._paths

    def install(self, paths: PathSet) -> None:
        """Swap in a new PathSet. Cached lookups are kept."""
        with self._lock:
            self._paths = paths
        logger.debug("Installed %d search roots", len(paths))

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def is_cached(self, directory: str, name: str, ext: Optional[str] = None) -> bool:
        search = self.search_string(directory, name, ext)
        with self._lock:
            return any(key[1] == search for key in self._cache)

    def resolve_extension(self, ext: Optional[str]) -> str:
        # None and "" both mean "use the default"; never an extensionless name.
        return self.default_extension if not ext else str(ext).lstrip(".")

    def search_string(self, directory: str, name: str, ext: Optional[str] = None) -> str:
        return f"{directory}/{name}.{self.resolve_extension(ext)}"

    def find(
        self,
        directory: str,
        name: str,
        required: bool = False,
        ext: Optional[str] = None,
        policy: Optional[ResolutionPolicy] = None,
    ) -> Optional[FindResult]:
        """Find a resource file in ``directory`` across the search roots.

        Args:
            directory: Directory kind to search in (``config``, ``views``, ...)
            name: File name without extension
            required: Raise instead of returning None when nothing matches
            ext: File extension; None or "" selects the default extension
            policy: Resolution policy; derived from ``directory`` when None

        Returns:
            ``list[Path]`` for MERGE_ALL, ``Path`` for FIRST_MATCH, or None

        Raises:
            ResourceNotFoundError: If ``required`` and nothing matched
        """
        extension = self.resolve_extension(ext)
        filename = f"{name}.{extension}"
        search = f"{directory}/{filename}"
        policy = policy or policy_for(directory)

        with self._lock:
            cached = self._cache.get((policy, search))
            if cached is not None:
                logger.debug("Find cache hit: %s", search)
                return list(cached) if isinstance(cached, list) else cached

            paths = self._paths
            found: Optional[FindResult]
            if policy is ResolutionPolicy.MERGE_ALL:
                found = self._find_all(paths, search)
            else:
                direct_root = paths.find_root(directory)
                if direct_root is not None:
                    found = self._find_direct(direct_root, filename)
                else:
                    found = self._find_first(paths, search)

            if found is None:
                logger.debug("Resource not found: %s", search)
                if required:
                    raise ResourceNotFoundError(directory, name, extension)
                return None

            self._cache[(policy, search)] = found
            return list(found) if isinstance(found, list) else found

    def _find_all(self, paths: PathSet, search: str) -> Optional[List[Path]]:
        matches: List[Path] = []
        for root in paths.reversed():
            candidate = root / search
            if candidate.is_file():
                matches.append(candidate)
        return matches or None

    def _find_first(self, paths: PathSet, search: str) -> Optional[Path]:
        for root in paths:
            candidate = root / search
            if candidate.is_file():
                return candidate
        return None

    def _find_direct(self, root: Path, filename: str) -> Optional[Path]:
        candidate = root / filename
        return candidate if candidate.is_file() else None


__all__ = ["ResourceFinder", "FindResult", "DEFAULT_EXTENSION"]
