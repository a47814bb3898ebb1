"""
Screen reader output for the semantic tree.

Produces the reading order: every component's ``describe()`` line in
pre-order (parent first, then children in document order).
"""

import logging
from typing import Any, List, Sequence

from backend.ui_components import UIComponent, child_components
from backend.utils.errors import ensure_sequence

logger = logging.getLogger(__name__)


class ScreenReaderService:
    def generate_reading_order(self, roots: Sequence[UIComponent]) -> List[str]:
        """Flat list of descriptions from a depth-first walk over ``roots``."""
        ensure_sequence(roots, "generate_reading_order()")
        output: List[str] = []
        for component in roots:
            self._traverse(component, output)
        return output

    def _traverse(self, component: Any, output: List[str]) -> None:
        try:
            output.append(component.describe())
        except Exception as exc:
            logger.warning("[ScreenReader] describe() failed for %r: %s", component, exc)
            output.append(f"[Screen reader error for component: {exc}]")

        for child in child_components(component):
            self._traverse(child, output)
