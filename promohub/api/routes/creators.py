"""
promohub.api.routes.creators — Public creator search
=====================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy import Engine

from promohub.api.deps import get_config, get_engine
from promohub.config import PromoHubConfig
from promohub.services import creator_search_service

router = APIRouter(prefix="/creators", tags=["public"])


@router.get("/search")
def search(
    q: str = "",
    city: str = "",
    niche: str = "",
    min_budget: float | None = Query(None, alias="minBudget"),
    max_budget: float | None = Query(None, alias="maxBudget"),
    boosted_only: bool = Query(False, alias="boostedOnly"),
    sort: str = "best",
    page: int = Query(1),
    limit: int = Query(12),
    engine: Engine = Depends(get_engine),
    cfg: PromoHubConfig = Depends(get_config),
):
    """Influencers ranked by booster percent, each with a badge."""
    return creator_search_service.search_creators(
        engine,
        q=q,
        city=city,
        niche=niche,
        min_budget=min_budget,
        max_budget=max_budget,
        boosted_only=boosted_only,
        sort=sort,
        page=page,
        limit=limit,
        max_limit=cfg.search_max_limit,
        boosted_min_percent=cfg.boosted_min_percent,
    )
