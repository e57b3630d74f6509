"""Config file parsers.

A parser turns one located config file into a mapping. ``ConfigStore`` takes
any ``Callable[[Path], Mapping]``; :func:`parse_config_file` is the default
and dispatches on the file suffix.
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Dict

import yaml

from scaffold.core.exceptions import ConfigParseError
from scaffold.core.utils.io import read_json, read_yaml

ConfigFileParser = Callable[[Path], Mapping]


def _parse_yaml(path: Path) -> Any:
    return read_yaml(path, default={}, raise_on_error=True)


def _parse_json(path: Path) -> Any:
    return read_json(path, default={}, raise_on_error=True)


PARSERS: Dict[str, Callable[[Path], Any]] = {
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
    ".json": _parse_json,
}


def parse_config_file(path: Path) -> Dict[str, Any]:
    """Parse ``path`` into a settings mapping.

    Raises:
        ConfigParseError: Unknown suffix, unreadable file, invalid syntax, or
            a document that is not a mapping
    """
    path = Path(path)
    parser = PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ConfigParseError(f"No config parser for '{path.suffix}' files: {path}", path=path)

    try:
        data = parser(path)
    except (OSError, yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigParseError(f"Failed to parse config file {path}: {exc}", path=path) from exc

    if not isinstance(data, Mapping):
        raise ConfigParseError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}",
            path=path,
        )
    return dict(data)


__all__ = ["ConfigFileParser", "PARSERS", "parse_config_file"]
