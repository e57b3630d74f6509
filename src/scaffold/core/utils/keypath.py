"""Dot-notation access to nested mapping trees.

A key path such as ``"core.path.system"`` addresses successively nested
mapping keys. Reads never raise: a missing segment, or a non-mapping value
met before the last segment, resolves to the caller's ``default``.

Writes mutate the caller's tree in place and return the same object, so
every holder of the tree handle observes the change.
"""
from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, List


def split_key(key_path: str) -> List[str]:
    """Split a dot-noted key into its segments."""
    return str(key_path).split(".")


def get_key(tree: Mapping[str, Any] | None, key_path: str, default: Any = None) -> Any:
    """Return the value addressed by ``key_path`` inside ``tree``.

    Args:
        tree: Mapping to search
        key_path: Dot-noted string: ``foo.bar.baz``
        default: Value returned when the key path does not resolve

    Returns:
        The addressed value, or ``default``

    Example:
        >>> get_key({"a": {"b": 1}}, "a.b")
        1
        >>> get_key({"a": 1}, "a.b", "missing")
        'missing'
    """
    if not tree:
        return default

    current: Any = tree
    for segment in split_key(key_path):
        if not isinstance(current, Mapping) or segment not in current:
            return default
        current = current[segment]
    return current


def coerce_to_container(parent: MutableMapping[str, Any], key: str) -> MutableMapping[str, Any]:
    """Ensure ``parent[key]`` is a mapping and return it.

    A missing key becomes an empty dict. An existing non-mapping value is
    discarded and replaced by an empty dict: the structural path wins over
    leaf data already stored there.
    """
    value = parent.get(key)
    if not isinstance(value, MutableMapping):
        value = {}
        parent[key] = value
    return value


def _walk_to_parent(tree: MutableMapping[str, Any], segments: List[str]) -> MutableMapping[str, Any]:
    row = tree
    for segment in segments[:-1]:
        row = coerce_to_container(row, segment)
    return row


def set_key(tree: MutableMapping[str, Any], key_path: str, value: Any) -> MutableMapping[str, Any]:
    """Assign ``value`` at ``key_path``, creating intermediate mappings.

    Returns:
        ``tree`` itself (mutated in place)
    """
    if not isinstance(tree, MutableMapping):
        raise TypeError(f"set_key requires a mutable mapping, got {type(tree).__name__}")
    if not key_path:
        return tree

    segments = split_key(key_path)
    parent = _walk_to_parent(tree, segments)
    parent[segments[-1]] = value
    return tree


def fill_key(tree: MutableMapping[str, Any], key_path: str, fill: Any = None) -> MutableMapping[str, Any]:
    """Like :func:`set_key`, but only assigns ``fill`` when the final key is absent."""
    if not isinstance(tree, MutableMapping):
        raise TypeError(f"fill_key requires a mutable mapping, got {type(tree).__name__}")
    if not key_path:
        return tree

    segments = split_key(key_path)
    parent = _walk_to_parent(tree, segments)
    parent.setdefault(segments[-1], fill)
    return tree


__all__ = ["split_key", "get_key", "set_key", "fill_key", "coerce_to_container"]
