from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from scaffold.core.exceptions import ResourceNotFoundError
from scaffold.core.paths import PathSet, RootSpec
from scaffold.core.resources import ResolutionPolicy, ResourceFinder, policy_for
from helpers.io_utils import write_text, write_yaml


def _path_set(*roots: Path) -> PathSet:
    return PathSet(specs=tuple(RootSpec(kind=f"root{i}", path=root) for i, root in enumerate(roots)))


@pytest.fixture
def roots(tmp_path: Path) -> List[Path]:
    """Three roots, highest priority first: app, module, system."""
    result = [tmp_path / "app", tmp_path / "mod1", tmp_path / "sys"]
    for root in result:
        root.mkdir()
    return result


def test_policy_for_directory_kinds() -> None:
    assert policy_for("config") is ResolutionPolicy.MERGE_ALL
    assert policy_for("views") is ResolutionPolicy.FIRST_MATCH
    assert policy_for("assets") is ResolutionPolicy.FIRST_MATCH


def test_config_returns_all_matches_lowest_priority_first(roots) -> None:
    app, mod1, system = roots
    write_yaml(system / "config" / "db.yaml", {"host": "a"})
    write_yaml(mod1 / "config" / "db.yaml", {"port": 5})
    write_yaml(app / "config" / "db.yaml", {"host": "b"})
    finder = ResourceFinder(_path_set(app, mod1, system))

    found = finder.find("config", "db")

    assert found == [
        system / "config" / "db.yaml",
        mod1 / "config" / "db.yaml",
        app / "config" / "db.yaml",
    ]


def test_config_skips_roots_without_the_file(roots) -> None:
    app, mod1, system = roots
    write_yaml(system / "config" / "db.yaml", {"host": "a"})
    finder = ResourceFinder(_path_set(app, mod1, system))

    assert finder.find("config", "db") == [system / "config" / "db.yaml"]


def test_first_match_returns_highest_priority_file(roots) -> None:
    app, mod1, system = roots
    write_text(mod1 / "views" / "page.html", "module")
    write_text(system / "views" / "page.html", "system")
    finder = ResourceFinder(_path_set(app, mod1, system))

    assert finder.find("views", "page", ext="html") == mod1 / "views" / "page.html"


def test_first_match_stops_at_first_hit(roots, monkeypatch: pytest.MonkeyPatch) -> None:
    app, mod1, system = roots
    write_text(app / "views" / "page.html", "app")
    write_text(system / "views" / "page.html", "system")
    finder = ResourceFinder(_path_set(app, mod1, system))

    checked: List[Path] = []
    original = Path.is_file

    def recording_is_file(self: Path) -> bool:
        checked.append(self)
        return original(self)

    monkeypatch.setattr(Path, "is_file", recording_is_file)

    assert finder.find("views", "page", ext="html") == app / "views" / "page.html"
    assert checked == [app / "views" / "page.html"]


@pytest.mark.parametrize("ext", [None, ""])
def test_missing_extension_uses_default(roots, ext) -> None:
    app, mod1, system = roots
    write_yaml(app / "config" / "db.yaml", {"host": "a"})
    write_text(app / "config" / "db", "no extension")
    finder = ResourceFinder(_path_set(app, mod1, system))

    assert finder.find("config", "db", ext=ext) == [app / "config" / "db.yaml"]
    assert finder.search_string("config", "db", ext) == "config/db.yaml"


def test_extension_leading_dot_is_ignored() -> None:
    assert ResourceFinder().search_string("views", "page", ".html") == "views/page.html"


def test_not_found_returns_none(roots) -> None:
    finder = ResourceFinder(_path_set(*roots))

    assert finder.find("config", "missing") is None
    assert finder.find("views", "missing", ext="html") is None


def test_not_found_required_raises(roots) -> None:
    finder = ResourceFinder(_path_set(*roots))

    with pytest.raises(ResourceNotFoundError) as exc_info:
        finder.find("views", "missing", True, "html")

    assert str(exc_info.value) == "Cannot locate the resource: views/missing.html"
    assert exc_info.value.context == {"directory": "views", "name": "missing", "extension": "html"}
    assert isinstance(exc_info.value, FileNotFoundError)


def test_misses_are_not_cached(roots) -> None:
    app, mod1, system = roots
    finder = ResourceFinder(_path_set(app, mod1, system))

    assert finder.find("views", "late", ext="html") is None
    assert not finder.is_cached("views", "late", "html")

    write_text(system / "views" / "late.html", "created after startup")

    assert finder.find("views", "late", ext="html") == system / "views" / "late.html"
    assert finder.is_cached("views", "late", "html")


def test_hits_are_cached_until_cleared(roots) -> None:
    app, mod1, system = roots
    write_text(system / "views" / "page.html", "system")
    finder = ResourceFinder(_path_set(app, mod1, system))

    assert finder.find("views", "page", ext="html") == system / "views" / "page.html"

    # A higher-priority override added later is not seen while the hit is cached.
    write_text(app / "views" / "page.html", "app")
    assert finder.find("views", "page", ext="html") == system / "views" / "page.html"

    finder.clear_cache()
    assert finder.find("views", "page", ext="html") == app / "views" / "page.html"


def test_cached_list_cannot_be_mutated_by_callers(roots) -> None:
    app, mod1, system = roots
    write_yaml(app / "config" / "db.yaml", {"host": "a"})
    finder = ResourceFinder(_path_set(app, mod1, system))

    first = finder.find("config", "db")
    first.append(Path("/bogus"))

    assert finder.find("config", "db") == [app / "config" / "db.yaml"]


def test_cache_keeps_policies_apart(roots) -> None:
    app, mod1, system = roots
    write_yaml(app / "config" / "db.yaml", {"host": "a"})
    write_yaml(system / "config" / "db.yaml", {"host": "b"})
    finder = ResourceFinder(_path_set(app, mod1, system))

    merged = finder.find("config", "db")
    first = finder.find("config", "db", policy=ResolutionPolicy.FIRST_MATCH)

    assert merged == [system / "config" / "db.yaml", app / "config" / "db.yaml"]
    assert first == app / "config" / "db.yaml"


def test_directory_equal_to_a_root_checks_only_that_root(roots) -> None:
    app, mod1, system = roots
    write_text(system / "settings.ini", "x")
    write_text(app / "settings.ini", "y")
    finder = ResourceFinder(_path_set(app, mod1, system))

    assert finder.find(str(system), "settings", ext="ini") == system / "settings.ini"
    assert finder.find(str(mod1), "settings", ext="ini") is None


def test_install_swaps_roots_and_keeps_cache(roots) -> None:
    app, mod1, system = roots
    write_text(system / "views" / "page.html", "system")
    write_text(app / "views" / "other.html", "app")
    finder = ResourceFinder(_path_set(system))

    assert finder.find("views", "page", ext="html") == system / "views" / "page.html"

    finder.install(_path_set(app))

    assert finder.paths.roots == (app,)
    assert finder.find("views", "page", ext="html") == system / "views" / "page.html"
    assert finder.find("views", "other", ext="html") == app / "views" / "other.html"


def test_empty_path_set_finds_nothing() -> None:
    assert ResourceFinder().find("config", "db") is None
