"""
promohub.api.routes.campaigns — Suggested creators for a brand campaign
========================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import Engine

from promohub.api.deps import get_config, get_current_user_id, get_engine
from promohub.config import PromoHubConfig
from promohub.services import campaign_service
from promohub.services.errors import CampaignNotFound

router = APIRouter(prefix="/brand/campaigns", tags=["campaigns"])


@router.get("/{campaign_id}/suggested")
def get_suggested(
    campaign_id: str,
    brand_id: str = Depends(get_current_user_id),
    engine: Engine = Depends(get_engine),
    cfg: PromoHubConfig = Depends(get_config),
):
    """Best-matching influencers for one of the caller's campaigns."""
    try:
        suggested = campaign_service.suggest_creators(
            engine,
            brand_id,
            campaign_id,
            candidate_limit=cfg.candidate_fetch_limit,
            limit=cfg.suggestion_limit,
        )
    except CampaignNotFound:
        raise HTTPException(404, "Campaign not found")
    return {"ok": True, "suggested": suggested}
