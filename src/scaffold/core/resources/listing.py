"""Recursive listing of a directory kind across every search root."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, FrozenSet, List, Optional, Union

from scaffold.core.paths.model import PathSet

logger = logging.getLogger(__name__)

HIDDEN_PREFIXES = (".", "-")


def is_hidden(name: str) -> bool:
    """Entries starting with ``.`` or ``-`` are never listed."""
    return name.startswith(HIDDEN_PREFIXES)


class DirectoryLister:
    """List files and directories of a directory kind.

    ``paths`` is a callable returning the current PathSet so a rebuilt set is
    picked up without re-wiring the lister.
    """

    def __init__(self, paths: Union[PathSet, Callable[[], PathSet], None] = None) -> None:
        if paths is None:
            paths = PathSet()
        self._paths = paths if callable(paths) else (lambda: paths)

    def list(
        self,
        directory: str,
        recursive: bool = False,
        root: Optional[Union[str, Path]] = None,
    ) -> List[Path]:
        """List all files and directories of ``directory``.

        Args:
            directory: Directory kind to list (``views``, ``modules``, ...)
            recursive: Descend into sub-directories
            root: Concrete directory to list instead of querying every search root

        Returns:
            Entry paths, lowest-priority root first. Entries found under
            several roots appear once per root.
        """
        if root is None:
            files: List[Path] = []
            for search_root in self._paths().reversed():
                files.extend(self.list(directory, recursive, search_root / directory))
            return files

        return self._list_root(directory, recursive, Path(str(root).replace("\\", "/")), frozenset())

    def _list_root(self, directory: str, recursive: bool, root: Path, ancestors: FrozenSet[Path]) -> List[Path]:
        files: List[Path] = []
        if not root.is_dir() or not os.access(root, os.R_OK):
            return files

        # Symlinked directories may point back up the tree.
        real = root.resolve()
        if real in ancestors:
            logger.debug("Skipping %s: it loops back to a parent directory", root)
            return files
        ancestors = ancestors | {real}

        try:
            names = sorted(os.listdir(root))
        except OSError as exc:
            logger.debug("Cannot list %s: %s", root, exc)
            return files

        for name in names:
            if is_hidden(name):
                continue
            item = Path((root / name).as_posix())
            files.append(item)

            if recursive and item.is_dir():
                # Recurse with the base name joined to the current root.
                files.extend(self._list_root(directory, True, root / item.name, ancestors))

        return files


__all__ = ["DirectoryLister", "is_hidden", "HIDDEN_PREFIXES"]
