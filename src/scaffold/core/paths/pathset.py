"""Include path (search root) construction.

Order, highest priority first:
  application root → <system>/modules/ → each module directory →
  system root → framework-default root (scaffold.data)

The application and system roots come from the reserved ``core`` config
group. They are read before any PathSet exists, so building the first
PathSet never depends on file-based config resolution.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from scaffold.core.exceptions import BootstrapError
from scaffold.data import framework_root

from .model import PathSet, RootSpec

if TYPE_CHECKING:
    from scaffold.core.config.store import ConfigStore
    from scaffold.core.resources.listing import DirectoryLister

logger = logging.getLogger(__name__)

MODULES_DIRECTORY = "modules"
MODULES_KEY = "core.modules"
APP_PATH_KEY = "core.path.app"
SYSTEM_PATH_KEY = "core.path.system"


@dataclass(frozen=True)
class PathSetSettings:
    """The handful of values needed to build a PathSet."""

    app_root: Path
    system_root: Path
    modules: Optional[Tuple[str, ...]] = None
    framework_root: Optional[Path] = None

    @classmethod
    def from_config(cls, store: "ConfigStore") -> "PathSetSettings":
        """Read root settings from the ``core`` group of ``store``."""
        app = store.get(APP_PATH_KEY, slash=True)
        system = store.get(SYSTEM_PATH_KEY, slash=True)
        if not app or not system:
            raise BootstrapError(
                f"Both {APP_PATH_KEY} and {SYSTEM_PATH_KEY} must be set before building include paths"
            )
        modules = store.get(MODULES_KEY)
        if modules is not None and not isinstance(modules, (list, tuple)):
            raise BootstrapError(f"{MODULES_KEY} must be a list of module names, got {type(modules).__name__}")
        return cls(
            app_root=Path(app),
            system_root=Path(system),
            modules=tuple(str(m) for m in modules) if modules is not None else None,
        )


def _normalize(path: Path | str) -> Path:
    return Path(str(path).replace("\\", "/"))


def discover_module_roots(
    system_root: Path,
    lister: "DirectoryLister",
    modules: Optional[Sequence[str]] = None,
) -> List[RootSpec]:
    """Return one root per existing module directory under ``<system>/modules``.

    Directories are taken in listing order (sorted, hidden and dash-prefixed
    entries skipped). When ``modules`` is given, only those names are kept.
    """
    allowed = set(modules) if modules is not None else None
    specs: List[RootSpec] = []

    for entry in lister.list(MODULES_DIRECTORY, False, system_root / MODULES_DIRECTORY):
        path = _normalize(os.path.realpath(entry))
        if not path.is_dir():
            continue
        if allowed is not None and entry.name not in allowed:
            logger.debug("Module %s is not enabled in %s", entry.name, MODULES_KEY)
            continue
        specs.append(RootSpec(kind=f"module:{entry.name}", path=path))

    if allowed is not None:
        found = {spec.kind.split(":", 1)[1] for spec in specs}
        for name in sorted(allowed - found):
            logger.warning("Enabled module '%s' was not found under %s", name, system_root / MODULES_DIRECTORY)

    return specs


def build_path_set(settings: PathSetSettings, lister: "DirectoryLister") -> PathSet:
    """Build the ordered PathSet described by ``settings``.

    Fixed roots are trusted as given; module roots are filtered to existing
    directories. Calling this again with the same settings yields the same
    PathSet unless the filesystem changed.
    """
    system_root = _normalize(settings.system_root)
    specs: List[RootSpec] = [
        RootSpec(kind="app", path=_normalize(settings.app_root)),
        RootSpec(kind="modules", path=system_root / MODULES_DIRECTORY),
    ]
    specs.extend(discover_module_roots(system_root, lister, settings.modules))
    specs.append(RootSpec(kind="system", path=system_root))
    specs.append(RootSpec(kind="framework", path=_normalize(settings.framework_root or framework_root())))

    paths = PathSet(specs=tuple(specs))
    logger.debug("Built include paths: %s", ", ".join(paths.as_strings()))
    return paths


__all__ = [
    "PathSetSettings",
    "build_path_set",
    "discover_module_roots",
    "MODULES_DIRECTORY",
    "MODULES_KEY",
    "APP_PATH_KEY",
    "SYSTEM_PATH_KEY",
]
