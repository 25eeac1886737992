"""
promohub.api.routes.boosters — Booster summary, completion & meta edits
========================================================================
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy import Engine

from promohub.api.deps import get_current_user_id, get_engine
from promohub.services import booster_service
from promohub.services.errors import BoosterNotCompleted, InvalidBoosterKey, UserNotFound

router = APIRouter(prefix="/boosters", tags=["boosters"])
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pydantic schemas
# ---------------------------------------------------------------------------
class CompleteBoosterBody(BaseModel):
    booster_key: str | None = Field(default=None, alias="boosterKey")
    meta: dict[str, Any] | None = None


class BoosterMetaBody(BaseModel):
    meta: dict[str, Any]


# ---------------------------------------------------------------------------
# GET /boosters/summary
# ---------------------------------------------------------------------------
@router.get("/summary")
def get_summary(
    user_id: str = Depends(get_current_user_id),
    engine: Engine = Depends(get_engine),
):
    """Score summary plus the user's per-booster list."""
    try:
        return booster_service.get_booster_summary(engine, user_id)
    except UserNotFound as exc:
        raise HTTPException(404, str(exc))


# ---------------------------------------------------------------------------
# POST /boosters/complete
# ---------------------------------------------------------------------------
@router.post("/complete")
def complete(
    body: CompleteBoosterBody,
    user_id: str = Depends(get_current_user_id),
    engine: Engine = Depends(get_engine),
):
    """Mark a booster completed and return the recalculated summary."""
    if not body.booster_key:
        raise HTTPException(400, "boosterKey is required")
    try:
        state, summary = booster_service.complete_booster(
            engine, user_id, body.booster_key, body.meta
        )
    except InvalidBoosterKey:
        raise HTTPException(400, "Invalid boosterKey")
    except UserNotFound as exc:
        raise HTTPException(404, str(exc))
    return {
        "ok": True,
        "updated": booster_service.serialize_state(state),
        "summary": summary.as_response(),
    }


# ---------------------------------------------------------------------------
# PATCH /boosters/{key}/meta
# ---------------------------------------------------------------------------
@router.patch("/{booster_key}/meta")
def update_meta(
    booster_key: str,
    body: BoosterMetaBody,
    user_id: str = Depends(get_current_user_id),
    engine: Engine = Depends(get_engine),
):
    """Edit the links / notes attached to a completed booster."""
    try:
        state, summary = booster_service.update_booster_meta(
            engine, user_id, booster_key, body.meta
        )
    except InvalidBoosterKey:
        raise HTTPException(400, "Invalid boosterKey")
    except BoosterNotCompleted as exc:
        raise HTTPException(400, str(exc))
    except UserNotFound as exc:
        raise HTTPException(404, str(exc))
    return {
        "ok": True,
        "updated": booster_service.serialize_state(state),
        "summary": summary.as_response(),
    }
