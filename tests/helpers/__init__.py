"""Test helper modules for the Scaffold test suite.

- io_utils: writing YAML, JSON and text fixtures
- layout: building application/system/module root trees under tmp_path
"""
from __future__ import annotations

from helpers.io_utils import write_json, write_text, write_yaml
from helpers.layout import ProjectLayout, make_project

__all__ = ["write_yaml", "write_json", "write_text", "ProjectLayout", "make_project"]
