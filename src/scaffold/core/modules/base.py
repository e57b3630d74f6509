"""Base class for module output hooks."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from scaffold.core.context import ScaffoldContext


class Module:
    """Base class for Scaffold modules.

    A module is a directory under ``<system>/modules/`` that contributes a
    search root. Modules with behaviour also provide a subclass hooking into
    output generation.
    """

    name: str = ""

    def output(self, context: "ScaffoldContext") -> Optional[str]:
        """Return generated text to emit instead of the normal output, or None."""
        return None


__all__ = ["Module"]
