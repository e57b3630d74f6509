"""View loading and rendering.

Views are Jinja2 templates stored as ``views/<name>.html`` under any search
root. The first root holding the view wins, so an application can override a
module's or the framework's view by shipping a file with the same name.
Templates may ``{% include %}`` or ``{% extends %}`` other views by name;
those are resolved through the same search roots.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple

from jinja2 import BaseLoader, Environment, TemplateNotFound

from scaffold.core.resources.finder import ResourceFinder
from scaffold.core.resources.policy import ResolutionPolicy

if TYPE_CHECKING:
    from scaffold.core.config.store import ConfigStore

logger = logging.getLogger(__name__)

VIEWS_DIRECTORY = "views"
VIEW_EXTENSION = "html"


class ResourceLoader(BaseLoader):
    """Jinja2 loader resolving template names through a ResourceFinder."""

    def __init__(
        self,
        finder: ResourceFinder,
        directory: str = VIEWS_DIRECTORY,
        extension: str = VIEW_EXTENSION,
    ) -> None:
        self.finder = finder
        self.directory = directory
        self.extension = extension

    def _strip_extension(self, template: str) -> str:
        suffix = f".{self.extension}"
        return template[: -len(suffix)] if template.endswith(suffix) else template

    def get_source(
        self, environment: Environment, template: str
    ) -> Tuple[str, Optional[str], Optional[Callable[[], bool]]]:
        name = self._strip_extension(template)
        path = self.finder.find(self.directory, name, False, self.extension, policy=ResolutionPolicy.FIRST_MATCH)
        if path is None:
            raise TemplateNotFound(template)

        source = Path(path).read_text(encoding="utf-8")
        mtime = Path(path).stat().st_mtime

        def uptodate() -> bool:
            try:
                return Path(path).stat().st_mtime == mtime
            except OSError:
                return False

        return source, str(path), uptodate


class ViewRenderer:
    """Render views found across the search roots."""

    def __init__(
        self,
        finder: ResourceFinder,
        config: Optional["ConfigStore"] = None,
        *,
        extension: str = VIEW_EXTENSION,
    ) -> None:
        self.finder = finder
        self.extension = extension
        # Many views use control blocks on their own lines.
        self.environment = Environment(
            loader=ResourceLoader(finder, VIEWS_DIRECTORY, extension),
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,
        )
        if config is not None:
            self.environment.globals["config"] = config.get

    def find_view(self, name: str) -> Path:
        """Resolve the path of view ``name``.

        Raises:
            ResourceNotFoundError: If no search root holds the view
        """
        return self.finder.find(VIEWS_DIRECTORY, name, True, self.extension, policy=ResolutionPolicy.FIRST_MATCH)

    def load_view(self, name: str, **context: Any) -> str:
        """Render view ``name`` and return the generated text.

        An empty name renders nothing. Template errors propagate.

        Raises:
            ResourceNotFoundError: If the view does not exist
            jinja2.TemplateError: If rendering fails
        """
        if name == "":
            return ""

        path = self.find_view(name)
        logger.debug("Rendering view '%s' from %s", name, path)
        template = self.environment.get_template(f"{name}.{self.extension}")
        return template.render(**context)


__all__ = ["ViewRenderer", "ResourceLoader", "VIEWS_DIRECTORY", "VIEW_EXTENSION"]
