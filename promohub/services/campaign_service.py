"""
promohub.services.campaign_service — Suggested Creators for a Campaign
=======================================================================

Loads a brand's campaign, reads a bounded slice of influencers, and ranks
them with :mod:`promohub.engine.matching`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from promohub.constants import CANDIDATE_FETCH_LIMIT, SUGGESTION_LIMIT
from promohub.database.models import Campaign, CampaignRequirements, User, UserRole
from promohub.engine.matching import (
    MatchCandidate,
    MatchRequirements,
    location_strings,
    max_followers,
    rank_candidates,
)
from promohub.services.errors import CampaignNotFound

if TYPE_CHECKING:
    from sqlalchemy import Engine

logger = logging.getLogger(__name__)


def requirements_from_row(row: CampaignRequirements | None) -> MatchRequirements:
    """A campaign without requirements constrains nothing."""
    if row is None:
        return MatchRequirements()
    return MatchRequirements(
        categories=tuple(row.categories or ()),
        languages=tuple(row.languages or ()),
        locations=tuple(row.locations or ()),
        min_followers=row.min_followers,
        max_followers=row.max_followers,
    )


def candidate_from_user(user: User) -> MatchCandidate:
    categories = [c.key for c in user.categories]
    profile = user.influencer_profile
    languages = list(profile.languages or []) if profile else []
    location = user.location
    return MatchCandidate(
        id=user.id,
        categories=categories,
        languages=languages,
        locations=location_strings(
            user.city,
            location.district if location else None,
            location.statename if location else None,
        ),
        followers=max_followers(s.followers for s in user.socials),
        extra={
            "name": user.name,
            "username": user.username,
            "image": user.image,
            "city": user.city,
        },
    )


def suggest_creators(
    engine: Engine,
    brand_id: str,
    campaign_id: str,
    *,
    candidate_limit: int = CANDIDATE_FETCH_LIMIT,
    limit: int = SUGGESTION_LIMIT,
) -> list[dict[str, Any]]:
    """Top *limit* influencers for *campaign_id*, best match first.

    Raises
    ------
    CampaignNotFound
        If the campaign does not exist or belongs to another brand.
    """
    with Session(engine) as session:
        campaign = session.scalar(
            select(Campaign)
            .options(selectinload(Campaign.requirements))
            .where(Campaign.id == campaign_id, Campaign.brand_id == brand_id)
        )
        if campaign is None:
            raise CampaignNotFound(campaign_id)

        requirements = requirements_from_row(campaign.requirements)

        users = session.scalars(
            select(User)
            .options(
                selectinload(User.influencer_profile),
                selectinload(User.categories),
                selectinload(User.socials),
                selectinload(User.location),
            )
            .where(User.role == UserRole.INFLUENCER.value)
            .order_by(User.created_at, User.id)
            .limit(candidate_limit)
        ).all()
        candidates = [candidate_from_user(u) for u in users]

    ranked = rank_candidates(requirements, candidates, limit=limit)
    logger.info(
        "Campaign %s: %d of %d candidates suggested",
        campaign_id,
        len(ranked),
        len(candidates),
    )
    return [
        {
            "id": item.candidate.id,
            **item.candidate.extra,
            "followers": item.candidate.followers,
            "categories": list(item.candidate.categories),
            "languages": list(item.candidate.languages),
            "score": item.score,
        }
        for item in ranked
    ]
