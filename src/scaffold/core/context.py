"""Process-wide Scaffold state as an explicit object.

``ScaffoldContext`` owns the include paths, the resource lookup cache, the
config tree and the view renderer. Components receive what they need from
the context instead of reaching for module globals.

Bootstrap is a two-step sequence:

1. install the ``core`` group from bootstrap settings (no file lookups)
2. build the include paths from ``core.path.*`` and install them

Only after step 2 can file-based config groups be resolved.

All components share one re-entrant lock, so a PathSet rebuild is never
observed half-done by another thread.
"""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Mapping, Optional

from scaffold.core.config.bootstrap import load_bootstrap_settings
from scaffold.core.config.parsers import ConfigFileParser
from scaffold.core.config.store import BOOTSTRAP_GROUP, ConfigStore
from scaffold.core.paths.model import PathSet
from scaffold.core.paths.pathset import MODULES_KEY, PathSetSettings, build_path_set
from scaffold.core.resources.finder import ResourceFinder
from scaffold.core.resources.listing import DirectoryLister
from scaffold.core.views.renderer import ViewRenderer

logger = logging.getLogger(__name__)


class ScaffoldContext:
    """Owns and wires the include paths, caches, config store and views."""

    def __init__(
        self,
        settings: Mapping[str, Any],
        *,
        parser: Optional[ConfigFileParser] = None,
        lock: Optional[threading.RLock] = None,
        framework_root: Optional[Path] = None,
    ) -> None:
        self.settings = dict(settings)
        self.framework_root = framework_root
        self.lock = lock or threading.RLock()
        self.finder = ResourceFinder(lock=self.lock)
        self.lister = DirectoryLister(lambda: self.finder.paths)
        self.config = ConfigStore(self.finder, parser, lock=self.lock)
        self.views = ViewRenderer(self.finder, self.config)
        self.config.watch(MODULES_KEY, self._on_modules_changed)
        self._bootstrapped = False

    @classmethod
    def from_project(
        cls,
        project_root: Path,
        *,
        environ: Optional[Mapping[str, str]] = None,
        parser: Optional[ConfigFileParser] = None,
    ) -> "ScaffoldContext":
        """Load bootstrap settings for ``project_root`` and bootstrap a context."""
        settings = load_bootstrap_settings(project_root, environ)
        ctx = cls(settings, parser=parser)
        ctx.bootstrap()
        return ctx

    @property
    def paths(self) -> PathSet:
        return self.finder.paths

    @property
    def bootstrapped(self) -> bool:
        return self._bootstrapped

    def bootstrap(self) -> PathSet:
        """Install the ``core`` group, then build and install the include paths."""
        with self.lock:
            self.config.install_group(BOOTSTRAP_GROUP, self.settings)
            paths = self.rebuild_paths()
            self._bootstrapped = True
        return paths

    def rebuild_paths(self) -> PathSet:
        """Rebuild the include paths from the current ``core`` settings and swap them in."""
        with self.lock:
            settings = PathSetSettings.from_config(self.config)
            if self.framework_root is not None:
                settings = PathSetSettings(
                    app_root=settings.app_root,
                    system_root=settings.system_root,
                    modules=settings.modules,
                    framework_root=self.framework_root,
                )
            paths = build_path_set(settings, self.lister)
            self.finder.install(paths)
        logger.debug("Include paths rebuilt (%d roots)", len(paths))
        return paths

    def _on_modules_changed(self, key: str, value: Any) -> None:
        logger.debug("%s changed; rebuilding include paths", key)
        self.rebuild_paths()

    def teardown(self) -> None:
        """Drop every cache and the include paths."""
        with self.lock:
            self.config.clear_all()
            self.finder.clear_cache()
            self.finder.install(PathSet())
            self._bootstrapped = False


__all__ = ["ScaffoldContext"]
