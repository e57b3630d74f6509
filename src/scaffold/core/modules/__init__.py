"""Built-in Scaffold modules and their output hooks."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from .base import Module
from .typography import Typography

if TYPE_CHECKING:
    from scaffold.core.context import ScaffoldContext

logger = logging.getLogger(__name__)

BUILTIN_MODULES: Tuple[Module, ...] = (Typography(),)


def run_output_hooks(
    context: "ScaffoldContext",
    modules: Sequence[Module] = BUILTIN_MODULES,
) -> Optional[str]:
    """Return the first non-None module output, in registration order."""
    for module in modules:
        result = module.output(context)
        if result is not None:
            logger.debug("Module '%s' produced output", module.name)
            return result
    return None


__all__ = ["Module", "Typography", "BUILTIN_MODULES", "run_output_hooks"]
