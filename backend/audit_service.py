"""
Rule-based accessibility audit of the semantic tree.

Each rule is a pure check ``(component) -> issue message | None``. Every
component is evaluated against every rule in table order, so a clean tree of
N components yields N * len(rules) entries split across passed/failed.
New rules only need to be appended to ``RULES``.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from backend.ui_components import UIComponent, child_components
from backend.utils.errors import ensure_sequence

logger = logging.getLogger(__name__)

AUDIT_ERROR_ID = "AUDIT_ERROR"


@dataclass(frozen=True)
class AuditRule:
    id: str
    description: str
    check: Callable[[UIComponent], Optional[str]]


def _is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def _check_label(component: UIComponent) -> Optional[str]:
    if _is_blank(component.label):
        return f"Component [{component.id}] has an empty label."
    return None


def _check_role(component: UIComponent) -> Optional[str]:
    if _is_blank(component.role):
        return f'Component [{component.id}] "{component.label}" is missing an ARIA role.'
    return None


def _check_focusable_button(component: UIComponent) -> Optional[str]:
    if component.role == "button" and not component.get_state("focusable"):
        return f'Button "{component.label}" [{component.id}] is not marked as focusable.'
    return None


RULES: Tuple[AuditRule, ...] = (
    AuditRule(
        id="LABEL_EMPTY",
        description="All components must have a non-empty accessible label.",
        check=_check_label,
    ),
    AuditRule(
        id="ROLE_PRESENT",
        description="All components must declare an ARIA role.",
        check=_check_role,
    ),
    AuditRule(
        id="FOCUSABLE_BUTTON",
        description="All button components must be focusable.",
        check=_check_focusable_button,
    ),
)


@dataclass
class AuditResult:
    passed: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {"passed": list(self.passed), "failed": list(self.failed)}


class AuditService:
    """Runs every rule against every component in the tree."""

    def __init__(self, rules: Sequence[AuditRule] = RULES):
        self.rules: Tuple[AuditRule, ...] = tuple(rules)

    def run_audit(self, roots: Sequence[UIComponent]) -> AuditResult:
        ensure_sequence(roots, "run_audit()")
        result = AuditResult()
        for root in roots:
            self._audit_component(root, result)
        logger.debug(
            "[AuditService] %d check(s) passed, %d failed",
            len(result.passed),
            len(result.failed),
        )
        return result

    def _audit_component(self, component: Any, result: AuditResult) -> None:
        passed: List[str] = []
        failed: List[str] = []
        try:
            for rule in self.rules:
                issue = rule.check(component)
                if issue:
                    failed.append(f"[{rule.id}] {issue}")
                else:
                    passed.append(f'[{rule.id}] "{component.label}" passed.')
        except Exception as exc:
            logger.warning("[AuditService] Rule evaluation failed for %r: %s", component, exc)
            result.failed.append(
                f"[{AUDIT_ERROR_ID}] Unexpected error auditing component: {exc}"
            )
        else:
            result.passed.extend(passed)
            result.failed.extend(failed)

        for child in child_components(component):
            self._audit_component(child, result)
