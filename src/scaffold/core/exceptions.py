"""Scaffold exception hierarchy."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional


class ScaffoldError(Exception):
    """Base exception for Scaffold."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ResourceNotFoundError(ScaffoldError, FileNotFoundError):
    """Raised when a required resource is not found in any search root."""

    def __init__(self, directory: str, name: str, extension: str) -> None:
        self.directory = directory
        self.name = name
        self.extension = extension
        message = f"Cannot locate the resource: {directory}/{name}.{extension}"
        ScaffoldError.__init__(
            self,
            message,
            context={"directory": directory, "name": name, "extension": extension},
        )
        FileNotFoundError.__init__(self, message)


class ConfigParseError(ScaffoldError, ValueError):
    """Raised when a located config file cannot be parsed into a mapping."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        self.path = path
        ctx = {"path": str(path)} if path is not None else None
        ScaffoldError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)


class BootstrapError(ScaffoldError, ValueError):
    """Raised when bootstrap settings (scaffold.yaml, SCAFFOLD_* env) are malformed."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ScaffoldError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "ScaffoldError",
    "ResourceNotFoundError",
    "ConfigParseError",
    "BootstrapError",
]
