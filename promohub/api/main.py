"""
promohub.api.main — FastAPI application entry point
====================================================

Run with::

    python -m promohub.api
    # or
    uvicorn promohub.api.main:app --reload --port 8000
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from promohub.api.deps import get_engine  # noqa: E402
from promohub.api.routes.admin import router as admin_router  # noqa: E402
from promohub.api.routes.boosters import router as boosters_router  # noqa: E402
from promohub.api.routes.campaigns import router as campaigns_router  # noqa: E402
from promohub.api.routes.creators import router as creators_router  # noqa: E402
from promohub.database.engine import init_db  # noqa: E402

logger = logging.getLogger(__name__)


def _cors_origins() -> list[str]:
    """Resolve allowed CORS origins from env with safe defaults.

    Priority:
      1) CORS_ALLOW_ORIGINS (comma-separated)
      2) FRONTEND_URL (single origin)
    """
    raw = os.getenv("CORS_ALLOW_ORIGINS", "").strip()
    if raw:
        return [origin.strip().rstrip("/") for origin in raw.split(",") if origin.strip()]

    frontend_url = os.getenv("FRONTEND_URL", "").strip()
    if frontend_url:
        return [frontend_url.rstrip("/")]

    return []


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle — verify tables and seed the booster catalog."""
    engine = app.dependency_overrides.get(get_engine, get_engine)()
    init_db(engine)
    logger.info("PromoHub API started — engine ready (%s)", engine.url.database)
    yield
    logger.info("PromoHub API shutting down")


app = FastAPI(
    title="PromoHub API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routers
app.include_router(boosters_router, prefix="/api")
app.include_router(campaigns_router, prefix="/api")
app.include_router(creators_router, prefix="/api")
app.include_router(admin_router, prefix="/api")


@app.get("/api/health")
def health():
    return {"status": "ok"}
