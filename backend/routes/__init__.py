"""FastAPI router modules for backend endpoints."""

from .health import router as health_router
from .audit import router as audit_router

__all__ = [
    "health_router",
    "audit_router",
]
