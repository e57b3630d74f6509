from __future__ import annotations

import os

import pytest
from jinja2 import TemplateError

from scaffold.core.exceptions import ResourceNotFoundError
from helpers.io_utils import write_text, write_yaml


def test_load_view_renders_context(project, context_factory) -> None:
    write_text(project.system / "views" / "hello.html", "Hello {{ who }}!")
    ctx = context_factory()

    assert ctx.views.load_view("hello", who="world") == "Hello world!"


def test_module_view_overrides_system_view(project, context_factory) -> None:
    mod1 = project.add_module("mod1")
    write_text(project.system / "views" / "page.html", "system")
    write_text(mod1 / "views" / "page.html", "module")
    ctx = context_factory()

    assert ctx.views.load_view("page") == "module"
    assert ctx.views.find_view("page") == mod1 / "views" / "page.html"


def test_framework_view_is_the_fallback(project, context_factory) -> None:
    write_text(project.framework / "views" / "page.html", "framework")
    ctx = context_factory()

    assert ctx.views.load_view("page") == "framework"


def test_empty_name_renders_nothing(context_factory) -> None:
    assert context_factory().views.load_view("") == ""


def test_missing_view_raises(context_factory) -> None:
    ctx = context_factory()

    with pytest.raises(ResourceNotFoundError, match="views/absent.html"):
        ctx.views.load_view("absent")


def test_include_resolves_through_search_roots(project, context_factory) -> None:
    mod1 = project.add_module("mod1")
    write_text(project.system / "views" / "layout.html", "[{% include 'partials/nav.html' %}]")
    write_text(project.system / "views" / "partials" / "nav.html", "system-nav")
    write_text(mod1 / "views" / "partials" / "nav.html", "module-nav")
    ctx = context_factory()

    assert ctx.views.load_view("layout") == "[module-nav]"


def test_config_is_available_in_views(project, context_factory) -> None:
    write_yaml(project.app / "config" / "site.yaml", {"title": "My Site"})
    write_text(project.app / "views" / "title.html", "{{ config('site.title') }}|{{ config('site.missing', 'none') }}")
    ctx = context_factory()

    assert ctx.views.load_view("title") == "My Site|none"


def test_template_errors_propagate(project, context_factory) -> None:
    write_text(project.app / "views" / "broken.html", "{% if %}")
    ctx = context_factory()

    with pytest.raises(TemplateError):
        ctx.views.load_view("broken")


def test_edited_view_is_reloaded(project, context_factory) -> None:
    path = write_text(project.app / "views" / "page.html", "v1")
    ctx = context_factory()
    assert ctx.views.load_view("page") == "v1"

    write_text(path, "version two")
    stat = path.stat()
    os.utime(path, (stat.st_atime, stat.st_mtime + 10))

    assert ctx.views.load_view("page") == "version two"
