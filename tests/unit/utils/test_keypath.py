from __future__ import annotations

import pytest

from scaffold.core.utils.keypath import coerce_to_container, fill_key, get_key, set_key


def test_get_key_walks_nested_mappings() -> None:
    tree = {"core": {"path": {"system": "/sys/"}}}
    assert get_key(tree, "core.path.system") == "/sys/"
    assert get_key(tree, "core.path") == {"system": "/sys/"}


def test_get_key_without_dots_reads_top_level() -> None:
    assert get_key({"db": {"host": "a"}}, "db") == {"host": "a"}


def test_get_key_missing_segment_returns_default() -> None:
    tree = {"a": {"b": 1}}
    assert get_key(tree, "a.c") is None
    assert get_key(tree, "x.y.z", "fallback") == "fallback"


def test_get_key_scalar_before_last_segment_fails() -> None:
    tree = {"a": {"b": 1}}
    assert get_key(tree, "a.b.c", "missing") == "missing"


def test_get_key_returns_falsy_leaf_values() -> None:
    tree = {"a": {"zero": 0, "off": False, "none": None}}
    assert get_key(tree, "a.zero", "d") == 0
    assert get_key(tree, "a.off", "d") is False
    assert get_key(tree, "a.none", "d") is None


@pytest.mark.parametrize("tree", [None, {}])
def test_get_key_empty_tree_returns_default(tree) -> None:
    assert get_key(tree, "a", "missing") == "missing"


def test_get_key_empty_key_path_is_not_found() -> None:
    assert get_key({"a": 1}, "", "missing") == "missing"


def test_set_then_get_returns_value() -> None:
    tree = {"a": {"b": {"c": 1}}}
    set_key(tree, "a.b.c", 42)
    assert get_key(tree, "a.b.c") == 42


def test_set_key_mutates_and_returns_same_tree() -> None:
    tree: dict = {}
    result = set_key(tree, "a.b", "v")
    assert result is tree
    assert tree == {"a": {"b": "v"}}


def test_set_key_empty_key_path_leaves_tree_unchanged() -> None:
    tree = {"a": 1}
    assert set_key(tree, "", "ignored") is tree
    assert tree == {"a": 1}


def test_set_key_replaces_scalar_on_the_path() -> None:
    tree = {"a": "scalar"}
    set_key(tree, "a.b", 1)
    assert tree == {"a": {"b": 1}}


def test_set_key_keeps_sibling_keys() -> None:
    tree = {"a": {"x": 1}}
    set_key(tree, "a.y", 2)
    assert tree == {"a": {"x": 1, "y": 2}}


def test_set_key_rejects_non_mapping_tree() -> None:
    with pytest.raises(TypeError):
        set_key(["not", "a", "mapping"], "a", 1)  # type: ignore[arg-type]


def test_coerce_to_container_creates_and_replaces() -> None:
    parent = {"scalar": 5, "mapping": {"k": "v"}}

    created = coerce_to_container(parent, "new")
    assert created == {} and parent["new"] is created

    replaced = coerce_to_container(parent, "scalar")
    assert replaced == {} and parent["scalar"] == {}

    kept = coerce_to_container(parent, "mapping")
    assert kept == {"k": "v"} and kept is parent["mapping"]


def test_fill_key_only_assigns_when_absent() -> None:
    tree = {"a": {"b": "existing"}}
    fill_key(tree, "a.b", "fill")
    fill_key(tree, "a.c", "fill")
    assert tree == {"a": {"b": "existing", "c": "fill"}}


def test_fill_key_defaults_to_none() -> None:
    tree: dict = {}
    fill_key(tree, "x.y")
    assert tree == {"x": {"y": None}}
