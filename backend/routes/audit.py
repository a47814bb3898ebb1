"""Routes that run the accessibility audit over raw nodes or a Figma file."""

import logging
from typing import Any, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from backend.figma_client import (
    FigmaAuthError,
    FigmaError,
    FigmaNotFoundError,
)
from backend.utils.app_helpers import (
    AuditorConfig,
    run_accessibility_pipeline,
    run_figma_audit,
)
from backend.utils.errors import InvalidInputError

logger = logging.getLogger("doca11y-audit")

router = APIRouter(prefix="/api/audit", tags=["audit"])


class AuditNodesPayload(BaseModel):
    nodes: Any = None


class FigmaAuditPayload(BaseModel):
    file_key: Optional[str] = Field(default=None, alias="fileKey")
    token: Optional[str] = None


def _figma_error_status(exc: FigmaError) -> int:
    if isinstance(exc, FigmaAuthError):
        return 401
    if isinstance(exc, FigmaNotFoundError):
        return 404
    return 502


@router.post("/nodes")
async def audit_nodes(payload: AuditNodesPayload):
    """Audit raw Figma nodes posted directly by the client."""
    config = AuditorConfig.from_env()
    try:
        return run_accessibility_pipeline(payload.nodes, max_depth=config.max_tree_depth)
    except InvalidInputError as e:
        return JSONResponse({"error": str(e)}, status_code=400)


@router.post("/figma")
async def audit_figma_file(payload: FigmaAuditPayload):
    """Fetch a Figma file with the caller's token and audit it."""
    config = AuditorConfig.from_env()
    token = (payload.token or "").strip() or config.figma_token
    file_key = (payload.file_key or "").strip()

    if not token:
        return JSONResponse(
            {"error": "Please enter your Figma Personal Access Token."}, status_code=400
        )
    if not file_key:
        return JSONResponse({"error": "Please enter a Figma File Key."}, status_code=400)

    try:
        return await run_figma_audit(file_key, token, config)
    except FigmaError as e:
        logger.warning("[Audit] Figma request for %s failed: %s", file_key, e)
        return JSONResponse({"error": str(e)}, status_code=_figma_error_status(e))
    except InvalidInputError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    except Exception as e:
        logger.exception("doca11y-audit:audit_figma_file unexpected error")
        return JSONResponse({"error": str(e)}, status_code=500)
