"""
Scaffold configuration store (group-per-file, merged across search roots).
"""
from __future__ import annotations

import copy
import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from scaffold.core.exceptions import ConfigParseError
from scaffold.core.resources.finder import ResourceFinder
from scaffold.core.resources.policy import CONFIG_DIRECTORY, ResolutionPolicy
from scaffold.core.utils.keypath import coerce_to_container, get_key, split_key
from scaffold.core.utils.merge import shallow_merge

from .parsers import ConfigFileParser, parse_config_file

logger = logging.getLogger(__name__)

BOOTSTRAP_GROUP = "core"


class ConfigStore:
    """Load, merge and cache configuration groups.

    A key such as ``db.host`` belongs to the group ``db``. The group is
    built from every ``config/db.<ext>`` file found across the search roots,
    parsed by the parser collaborator and shallow-merged lowest priority
    first, so the application root wins on top-level key collisions.

    The reserved ``core`` group is never read from files. It holds the
    bootstrap settings installed through :meth:`install_group`.
    """

    def __init__(
        self,
        finder: ResourceFinder,
        parser: Optional[ConfigFileParser] = None,
        *,
        extension: Optional[str] = None,
        lock: Optional[threading.RLock] = None,
    ) -> None:
        self.finder = finder
        self.parser: ConfigFileParser = parser or parse_config_file
        self.extension = extension
        self._lock = lock or threading.RLock()
        # Merged tree: group name -> group mapping. Mutated by set().
        self._tree: Dict[str, Any] = {}
        # Group-load cache: group name -> merged file contents as loaded.
        self._loaded: Dict[str, Dict[str, Any]] = {}
        self._watchers: Dict[str, List[Callable[[str, Any], None]]] = {}

    @staticmethod
    def group_of(key: str) -> str:
        """Return the group name of ``key`` (text before the first dot)."""
        return str(key).split(".", 1)[0]

    @property
    def tree(self) -> Dict[str, Any]:
        """The live merged config tree (treat as read-only, use set())."""
        return self._tree

    def is_loaded(self, group: str) -> bool:
        with self._lock:
            return group in self._tree

    def get(
        self,
        key: str,
        default: Any = None,
        *,
        slash: bool = False,
        required: bool = False,
    ) -> Any:
        """Get a config item or group by dot-notation key.

        Args:
            key: Dot-notation key (e.g., ``db.host``) or a group name
            default: Value to return if the key is not found
            slash: Force a single trailing ``/`` on non-empty string values
            required: Raise ResourceNotFoundError when the group has no files

        Example:
            >>> store.get("db.host")
            'localhost'
        """
        group = self.group_of(key)
        with self._lock:
            if group not in self._tree and group != BOOTSTRAP_GROUP:
                self._tree[group] = copy.deepcopy(self.load_group(group, required))
            value = get_key(self._tree, key, default)

        if slash and isinstance(value, str) and value != "":
            value = value.rstrip("/") + "/"
        return value

    def load_group(self, name: str, required: bool = True) -> Dict[str, Any]:
        """Load and merge every config file named ``name``.

        Files are parsed before anything is merged: a parse failure aborts
        the whole load and nothing is cached.

        Raises:
            ResourceNotFoundError: If ``required`` and no file exists
            ConfigParseError: If any matched file fails to parse
        """
        with self._lock:
            cached = self._loaded.get(name)
            if cached is not None:
                return cached

            files = self.finder.find(
                CONFIG_DIRECTORY,
                name,
                required,
                self.extension,
                policy=ResolutionPolicy.MERGE_ALL,
            ) or []

            parsed = [(path, self._parse(path)) for path in files]

            config: Dict[str, Any] = {}
            for path, data in parsed:
                config = shallow_merge(config, data)

            logger.debug("Loaded config group '%s' from %d file(s)", name, len(parsed))
            self._loaded[name] = config
            return config

    def _parse(self, path: Path) -> Mapping:
        try:
            data = self.parser(path)
        except ConfigParseError:
            raise
        except Exception as exc:
            raise ConfigParseError(f"Failed to parse config file {path}: {exc}", path=path) from exc
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise ConfigParseError(
                f"Config parser returned {type(data).__name__} for {path}, expected a mapping",
                path=path,
            )
        return data

    def set(self, key: str, value: Any) -> bool:
        """Set a config item in the live tree.

        The group is loaded first so the write lands on top of file values.
        Intermediate segments are created, replacing scalars in the way.
        Watchers registered for ``key`` run synchronously afterwards. If a
        watcher raises, the group is restored to its state before the write
        and the exception propagates.
        """
        group = self.group_of(key)
        with self._lock:
            self.get(key)

            watchers = list(self._watchers.get(key, ()))
            previous = copy.deepcopy(self._tree.get(group)) if watchers else None

            segments = split_key(key)
            conf: Dict[str, Any] = self._tree
            for segment in segments[:-1]:
                conf = coerce_to_container(conf, segment)
            conf[segments[-1]] = value

        try:
            for callback in watchers:
                callback(key, value)
        except Exception:
            with self._lock:
                if previous is None:
                    self._tree.pop(group, None)
                else:
                    self._tree[group] = previous
            logger.debug("Rolled back '%s' after a watcher rejected it", key)
            raise
        return True

    def install_group(self, group: str, values: Mapping[str, Any]) -> None:
        """Install ``values`` as the whole of ``group`` without touching files."""
        with self._lock:
            self._tree[group] = copy.deepcopy(dict(values))

    def clear(self, group: str) -> None:
        """Drop ``group`` so the next access re-reads it from disk.

        The resource finder's lookup cache is left untouched.
        """
        with self._lock:
            self._tree.pop(group, None)
            self._loaded.pop(group, None)
        logger.debug("Cleared config group '%s'", group)

    def clear_all(self) -> None:
        with self._lock:
            self._tree.clear()
            self._loaded.clear()

    def watch(self, key: str, callback: Callable[[str, Any], None]) -> None:
        """Call ``callback(key, value)`` after every ``set(key, ...)``."""
        with self._lock:
            self._watchers.setdefault(key, []).append(callback)


__all__ = ["ConfigStore", "BOOTSTRAP_GROUP"]
