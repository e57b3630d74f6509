"""Typography test page.

Renders a page showing every type element, so the effect of the merged
stylesheets can be checked at a glance.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .base import Module

if TYPE_CHECKING:
    from scaffold.core.context import ScaffoldContext

OUTPUT_KEY = "core.output"
TYPOGRAPHY_VIEW = "TS_typography"


class Typography(Module):
    name = "typography"

    def output(self, context: "ScaffoldContext") -> Optional[str]:
        if context.config.get(OUTPUT_KEY) != self.name:
            return None
        return context.views.load_view(TYPOGRAPHY_VIEW)


__all__ = ["Typography", "TYPOGRAPHY_VIEW", "OUTPUT_KEY"]
