"""Build a Scaffold project tree for tests.

Layout under ``root``::

    scaffold.yaml          (optional bootstrap settings)
    app/                   application root
    system/                system root
    system/modules/<mod>/  one root per module
    framework/             stand-in framework-default root
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from helpers.io_utils import write_yaml


@dataclass
class ProjectLayout:
    root: Path
    app: Path
    system: Path
    framework: Path
    modules: Dict[str, Path] = field(default_factory=dict)

    @property
    def modules_dir(self) -> Path:
        return self.system / "modules"

    def settings(self, **overrides: Any) -> Dict[str, Any]:
        """Bootstrap ``core`` settings pointing at this layout."""
        settings: Dict[str, Any] = {
            "path": {
                "app": self.app.as_posix() + "/",
                "system": self.system.as_posix() + "/",
            },
            "modules": None,
            "output": None,
        }
        settings.update(overrides)
        return settings

    def add_module(self, name: str) -> Path:
        path = self.modules_dir / name
        path.mkdir(parents=True, exist_ok=True)
        self.modules[name] = path
        return path


def make_project(
    root: Path,
    *,
    modules: Iterable[str] = (),
    settings: Optional[Dict[str, Any]] = None,
) -> ProjectLayout:
    """Create app/system/framework roots (and modules) under ``root``."""
    root = Path(root).resolve()
    layout = ProjectLayout(
        root=root,
        app=root / "app",
        system=root / "system",
        framework=root / "framework",
    )
    for directory in (layout.app, layout.system, layout.modules_dir, layout.framework):
        directory.mkdir(parents=True, exist_ok=True)
    for name in modules:
        layout.add_module(name)
    if settings is not None:
        write_yaml(root / "scaffold.yaml", settings)
    return layout
