"""Health and diagnostics routes."""

from fastapi import APIRouter

from backend.semantic_tree import get_max_tree_depth

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health() -> dict:
    """Return basic service health information."""
    return {
        "status": "ok",
        "service": "figma-a11y-auditor",
        "maxTreeDepth": get_max_tree_depth(),
    }
