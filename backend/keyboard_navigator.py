"""
Keyboard tab order for the semantic tree.

Only components whose ``focusable`` state is truthy become tab stops, but the
walk always descends, so focusable children of a non-focusable container
(e.g. buttons inside a NavigationRegion) still appear in document order.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from backend.ui_components import UIComponent, child_components
from backend.utils.errors import ensure_sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TabStop:
    label: str
    hint: str

    def to_dict(self) -> Dict[str, str]:
        return {"label": self.label, "hint": self.hint}


class KeyboardNavigator:
    def build_tab_order(self, roots: Sequence[UIComponent]) -> List[TabStop]:
        """Return tab stops with navigation hints for all focusable components."""
        ensure_sequence(roots, "build_tab_order()")
        order: List[TabStop] = []
        for component in roots:
            self._collect(component, order)
        return order

    def _collect(self, component: Any, order: List[TabStop]) -> None:
        try:
            if component.get_state("focusable"):
                order.append(TabStop(label=component.label, hint=component.navigate()))
        except Exception as exc:
            logger.warning("[KeyboardNavigator] Could not collect %r: %s", component, exc)
            order.append(TabStop(label="unknown", hint=f"[Navigation error: {exc}]"))

        for child in child_components(component):
            self._collect(child, order)
