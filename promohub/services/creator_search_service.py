"""
promohub.services.creator_search_service — Public Creator Search
=================================================================

Filtered, paginated influencer listing ordered by booster percent.
Every row carries the badge / rank reason from
:func:`promohub.engine.ranking.creator_badge`.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, func, or_, select
from sqlalchemy.orm import Session, selectinload

from promohub.constants import BOOSTED_MIN_PERCENT, DEFAULT_BOOST_LEVEL
from promohub.database.models import InfluencerCategory, InfluencerPackage, User, UserRole
from promohub.engine.ranking import creator_badge

if TYPE_CHECKING:
    from sqlalchemy import Engine

logger = logging.getLogger(__name__)


def _order_by(sort: str) -> list:
    if sort == "newest":
        return [User.created_at.desc(), User.id]
    if sort == "boosted":
        return [
            User.booster_percent.desc(),
            User.booster_updated_at.desc().nulls_last(),
            User.id,
        ]
    return [
        User.booster_percent.desc(),
        User.booster_updated_at.desc().nulls_last(),
        User.created_at.desc(),
        User.id,
    ]


def _row(user: User) -> dict[str, Any]:
    percent = user.booster_percent or 0
    primary_niche = user.categories[0].key if user.categories else None
    starting_price = user.packages[0].price if user.packages else None
    return {
        "id": user.id,
        "name": user.name or user.username or "Creator",
        "username": user.username,
        "imageUrl": user.image,
        "boosterPercent": percent,
        "boosterLevel": user.booster_level or DEFAULT_BOOST_LEVEL,
        "boosterScore": user.booster_score or 0,
        "creatorProfile": {
            "city": user.city or None,
            "primaryNiche": primary_niche,
            "startingPrice": starting_price,
        },
        **creator_badge(percent).as_dict(),
    }


def search_creators(
    engine: Engine,
    *,
    q: str = "",
    city: str = "",
    niche: str = "",
    min_budget: float | None = None,
    max_budget: float | None = None,
    boosted_only: bool = False,
    sort: str = "best",
    page: int = 1,
    limit: int = 12,
    max_limit: int = 50,
    boosted_min_percent: int = BOOSTED_MIN_PERCENT,
) -> dict[str, Any]:
    """Search influencers and attach ranking badges.

    Text filters are case-insensitive substring matches; budget bounds
    match any package of the creator.
    """
    q, city, niche = q.strip(), city.strip(), niche.strip()
    sort = (sort or "best").lower()
    page = max(1, page)
    limit = min(max_limit, max(1, limit))

    filters = [User.role == UserRole.INFLUENCER.value]
    if boosted_only:
        filters.append(User.booster_percent >= boosted_min_percent)
    if q:
        filters.append(or_(User.name.ilike(f"%{q}%"), User.username.ilike(f"%{q}%")))
    if city:
        filters.append(User.city.ilike(f"%{city}%"))
    if niche:
        filters.append(User.categories.any(InfluencerCategory.key.ilike(f"%{niche}%")))
    price_bounds = []
    if min_budget is not None:
        price_bounds.append(InfluencerPackage.price >= min_budget)
    if max_budget is not None:
        price_bounds.append(InfluencerPackage.price <= max_budget)
    if price_bounds:
        filters.append(User.packages.any(and_(*price_bounds)))

    with Session(engine) as session:
        total = session.scalar(
            select(func.count()).select_from(User).where(*filters)
        ) or 0
        users = session.scalars(
            select(User)
            .options(selectinload(User.categories), selectinload(User.packages))
            .where(*filters)
            .order_by(*_order_by(sort))
            .offset((page - 1) * limit)
            .limit(limit)
        ).all()
        results = [_row(u) for u in users]

    logger.debug("Creator search sort=%s page=%d → %d/%d", sort, page, len(results), total)
    return {
        "meta": {
            "total": total,
            "page": page,
            "limit": limit,
            "totalPages": max(1, math.ceil(total / limit)),
            "sort": sort,
            "boostedOnly": boosted_only,
            "minBoosterPercent": boosted_min_percent if boosted_only else 0,
        },
        "results": results,
    }
