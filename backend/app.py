# backend/app.py

# Standard library imports
import os
import sys
import logging
from pathlib import Path

from dotenv import load_dotenv

# Third-party imports
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Ensure project root in sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Local application imports
from backend.routes import audit_router, health_router
from backend.utils.app_helpers import AuditorConfig


# ----------------------
# Logging & Config
# ----------------------
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("doca11y-backend")

load_dotenv()

FRONTEND_URL = AuditorConfig.from_env().frontend_url or "http://localhost:3000"

# ----------------------
# FastAPI app + CORS
# ----------------------
app = FastAPI(title="Figma Accessibility Auditor API")

origins = [
    FRONTEND_URL,
    "http://localhost:3000",  # local dev
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(dict.fromkeys(origins)),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(audit_router)

logger.info("[Backend] Figma accessibility auditor ready (frontend origin %s)", FRONTEND_URL)


if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", 5000))
    uvicorn.run("backend.app:app", host="0.0.0.0", port=port, reload=True)
