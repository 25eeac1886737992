"""
promohub.api.routes.admin — Booster catalog administration
===========================================================
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy import Engine, select
from sqlalchemy.orm import Session

from promohub.api.deps import get_current_admin, get_engine
from promohub.database.models import Booster
from promohub.services import booster_service
from promohub.services.errors import InvalidBoosterKey

router = APIRouter(prefix="/admin", tags=["admin"])
logger = logging.getLogger(__name__)


class BoosterActiveUpdate(BaseModel):
    is_active: bool = Field(alias="isActive")


def _booster_dict(b: Booster) -> dict:
    return {
        "key": b.key,
        "title": b.title,
        "description": b.description,
        "category": b.category,
        "points": b.points,
        "sortOrder": b.sort_order,
        "isActive": b.is_active,
    }


@router.get("/boosters")
def list_boosters(
    admin: dict = Depends(get_current_admin),
    engine: Engine = Depends(get_engine),
):
    """Full catalog, retired boosters included."""
    with Session(engine) as session:
        rows = session.scalars(select(Booster).order_by(Booster.sort_order, Booster.id)).all()
        return [_booster_dict(b) for b in rows]


@router.patch("/boosters/{booster_key}")
def set_booster_active(
    booster_key: str,
    body: BoosterActiveUpdate,
    admin: dict = Depends(get_current_admin),
    engine: Engine = Depends(get_engine),
):
    """Retire or restore a booster.  Boosters are never deleted."""
    try:
        booster = booster_service.set_booster_active(engine, booster_key, body.is_active)
    except InvalidBoosterKey:
        raise HTTPException(404, "Booster not found")
    logger.info("Admin %s set %s active=%s", admin.get("sub"), booster_key, body.is_active)
    return _booster_dict(booster)
