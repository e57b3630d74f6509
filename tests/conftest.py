import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'scaffold' and tests/ as 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from scaffold.core.context import ScaffoldContext
from scaffold.core.utils.logging import reset_logging_for_tests
from helpers.layout import ProjectLayout, make_project


@pytest.fixture(autouse=True)
def _isolate_scaffold_env(monkeypatch: pytest.MonkeyPatch):
    """Bootstrap env overrides from the developer shell must not leak into tests."""
    for key in list(os.environ):
        if key.startswith("SCAFFOLD_"):
            monkeypatch.delenv(key, raising=False)
    yield
    reset_logging_for_tests()


@pytest.fixture
def project(tmp_path: Path) -> ProjectLayout:
    """Empty project with app/, system/, system/modules/ and framework/ roots."""
    return make_project(tmp_path / "project")


@pytest.fixture
def context_factory(project: ProjectLayout):
    """Build bootstrapped contexts over ``project`` with a stand-in framework root."""

    def _factory(**kwargs) -> ScaffoldContext:
        settings = kwargs.pop("settings", None) or project.settings()
        ctx = ScaffoldContext(settings, framework_root=project.framework, **kwargs)
        ctx.bootstrap()
        return ctx

    return _factory
