"""Helper utilities shared by the API routes and the serverless entrypoint."""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from backend.audit_service import AuditResult, AuditService
from backend.figma_client import DEFAULT_TIMEOUT_SECONDS, FIGMA_BASE_URL, FigmaClient
from backend.keyboard_navigator import KeyboardNavigator
from backend.screen_reader import ScreenReaderService
from backend.semantic_tree import SemanticTree, get_max_tree_depth

load_dotenv()

logger = logging.getLogger("doca11y-backend")


def _parse_positive_float(value: Any, default: float) -> float:
    """Best-effort conversion to a positive float."""
    if value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass
class AuditorConfig:
    """Runtime settings, normally read from the environment (.env supported)."""

    figma_base_url: str = FIGMA_BASE_URL
    figma_timeout: float = DEFAULT_TIMEOUT_SECONDS
    figma_token: Optional[str] = None
    max_tree_depth: Optional[int] = None
    frontend_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "AuditorConfig":
        return cls(
            figma_base_url=_clean(os.getenv("FIGMA_API_BASE_URL")) or FIGMA_BASE_URL,
            figma_timeout=_parse_positive_float(os.getenv("FIGMA_TIMEOUT"), DEFAULT_TIMEOUT_SECONDS),
            figma_token=_clean(os.getenv("FIGMA_TOKEN")),
            max_tree_depth=get_max_tree_depth(),
            frontend_url=_clean(os.getenv("FRONTEND_URL")),
        )


def build_status_summary(component_count: int, audit: AuditResult) -> str:
    """One-line status shown after a run, e.g. 'Done. 3 components | 9 checks passed | 0 issues found.'"""
    return (
        f"Done. {component_count} components | "
        f"{len(audit.passed)} checks passed | "
        f"{len(audit.failed)} issues found."
    )


def run_accessibility_pipeline(nodes: Any, max_depth: Optional[int] = None) -> Dict[str, Any]:
    """
    Build the semantic tree from raw nodes and run every accessibility pass.

    Raises InvalidInputError when ``nodes`` is not a list; every per-node or
    per-component problem is reported inside the payload instead.
    """
    tree = SemanticTree(max_depth=max_depth)
    result = tree.build(nodes)
    roots = list(result.roots)

    reading_order = ScreenReaderService().generate_reading_order(roots)
    tab_order = KeyboardNavigator().build_tab_order(roots)
    audit = AuditService().run_audit(roots)

    summary = build_status_summary(len(roots), audit)
    logger.info("[Pipeline] %s (%d parse error(s))", summary, len(result.errors))

    payload: Dict[str, Any] = result.to_dict()
    payload.update(
        {
            "readingOrder": reading_order,
            "tabOrder": [stop.to_dict() for stop in tab_order],
            "audit": audit.to_dict(),
            "summary": summary,
        }
    )
    return payload


async def run_figma_audit(
    file_key: str,
    token: str,
    config: Optional[AuditorConfig] = None,
) -> Dict[str, Any]:
    """Fetch a Figma file and run the pipeline over its top-level nodes."""
    config = config or AuditorConfig.from_env()
    client = FigmaClient(token, base_url=config.figma_base_url, timeout=config.figma_timeout)
    file_data = await client.fetch_file(file_key)
    nodes: List[Any] = client.extract_nodes(file_data)
    logger.info("[Pipeline] Retrieved %d top-level node(s) from %s", len(nodes), file_key)

    payload = run_accessibility_pipeline(nodes, max_depth=config.max_tree_depth)
    payload["fileKey"] = file_key
    payload["nodeCount"] = len(nodes)
    return payload
