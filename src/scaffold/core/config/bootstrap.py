"""Bootstrap settings for the reserved ``core`` config group.

Sources, lowest to highest priority:
1. Built-in defaults (``DEFAULT_SETTINGS``)
2. ``<project_root>/scaffold.yaml``
3. Environment variables: ``SCAFFOLD_<seg>__<seg>=value``

These settings locate the application and system roots, so they are read
without the include paths that file-based config groups depend on.
"""
from __future__ import annotations

import copy
import json
import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import yaml

from scaffold.core.exceptions import BootstrapError
from scaffold.core.utils.io import read_yaml
from scaffold.core.utils.keypath import set_key
from scaffold.core.utils.merge import deep_merge

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "scaffold.yaml"
ENV_PREFIX = "SCAFFOLD_"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "path": {
        "app": "app",
        "system": "system",
    },
    "modules": None,
    "output": None,
    "logging": {
        "level": "WARNING",
    },
}


def _as_bool(v: str) -> Optional[bool]:
    low = v.strip().lower()
    if low in {"true", "false"}:
        return low == "true"
    return None


def _as_int(v: str) -> Optional[int]:
    if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
        return int(v)
    return None


def _as_float(v: str) -> Optional[float]:
    s = v.strip()
    if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
        return float(s)
    return None


def _as_json(v: str) -> Optional[Any]:
    s = v.strip()
    if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
        try:
            return json.loads(s)
        except json.JSONDecodeError:
            return None
    return None


def coerce_env_value(value: str) -> Any:
    """Coerce an environment string: bool, int, float, JSON, else stripped text."""
    for caster in (_as_bool, _as_int, _as_float, _as_json):
        result = caster(value)
        if result is not None:
            return result
    return value.strip()


def parse_env_key(raw: str) -> List[str]:
    """Split the part after ``SCAFFOLD_`` into lower-cased key segments.

    ``path__system`` -> ``["path", "system"]``; without a double underscore
    single underscores separate segments.
    """
    segments = raw.split("__") if "__" in raw else raw.split("_")
    if not raw or any(seg == "" for seg in segments):
        raise BootstrapError(f"Malformed {ENV_PREFIX}* key: '{ENV_PREFIX}{raw}'", context={"key": raw})
    return [seg.lower() for seg in segments]


def iter_env_overrides(environ: Mapping[str, str]) -> Iterator[Tuple[str, Any]]:
    """Yield ``(dot_key, value)`` pairs from ``SCAFFOLD_*`` variables, sorted by name."""
    for name in sorted(environ):
        if not name.startswith(ENV_PREFIX):
            continue
        segments = parse_env_key(name[len(ENV_PREFIX):])
        yield ".".join(segments), coerce_env_value(environ[name])


def _resolve_paths(settings: Dict[str, Any], project_root: Path) -> None:
    paths = settings.get("path")
    if not isinstance(paths, dict):
        raise BootstrapError("Bootstrap setting 'path' must be a mapping")
    for key, raw in list(paths.items()):
        if not isinstance(raw, str) or not raw.strip():
            raise BootstrapError(f"Bootstrap setting 'path.{key}' must be a non-empty string")
        p = Path(os.path.expandvars(raw.strip())).expanduser()
        if not p.is_absolute():
            p = project_root / p
        paths[key] = p.resolve().as_posix() + "/"


def load_bootstrap_settings(
    project_root: Path,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Return the merged ``core`` group for ``project_root``.

    Relative ``path.*`` values are resolved against ``project_root`` and
    rendered as absolute POSIX paths ending in ``/``.

    Raises:
        BootstrapError: If scaffold.yaml is invalid or an env key is malformed
    """
    project_root = Path(project_root).expanduser().resolve()
    environ = os.environ if environ is None else environ

    settings: Dict[str, Any] = copy.deepcopy(DEFAULT_SETTINGS)

    settings_file = project_root / SETTINGS_FILENAME
    if settings_file.exists():
        try:
            data = read_yaml(settings_file, default=None, raise_on_error=True)
        except (OSError, yaml.YAMLError) as exc:
            raise BootstrapError(f"Invalid {SETTINGS_FILENAME}: {exc}", context={"path": str(settings_file)}) from exc
        if data is None:
            logger.warning("%s is empty; using defaults", settings_file)
        elif not isinstance(data, Mapping):
            raise BootstrapError(
                f"{SETTINGS_FILENAME} must contain a mapping, got {type(data).__name__}",
                context={"path": str(settings_file)},
            )
        else:
            settings = deep_merge(settings, data)

    for key, value in iter_env_overrides(environ):
        logger.debug("Bootstrap override from environment: %s", key)
        set_key(settings, key, value)

    _resolve_paths(settings, project_root)
    return settings


__all__ = [
    "DEFAULT_SETTINGS",
    "SETTINGS_FILENAME",
    "ENV_PREFIX",
    "coerce_env_value",
    "parse_env_key",
    "iter_env_overrides",
    "load_bootstrap_settings",
]
