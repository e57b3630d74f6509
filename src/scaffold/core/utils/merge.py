"""Dictionary merge utilities.

Two merge flavours are used in Scaffold:
- ``shallow_merge``: config groups. Colliding top-level keys are replaced
  wholesale by the higher-priority mapping.
- ``deep_merge``: bootstrap settings layers (defaults, scaffold.yaml, env).
"""
from __future__ import annotations

from typing import Any, Dict, Mapping


def shallow_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge top-level keys of ``override`` into a copy of ``base``.

    Example:
        >>> shallow_merge({"a": 1, "b": {"x": 1}}, {"a": 2, "b": {"y": 2}})
        {'a': 2, 'b': {'y': 2}}
    """
    result: Dict[str, Any] = dict(base)
    result.update(override or {})
    return result


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    Example:
        >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        if isinstance(result.get(key), Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


__all__ = ["shallow_merge", "deep_merge"]
