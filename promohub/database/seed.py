"""
promohub.database.seed — Default Booster Catalog Seeder
========================================================

The booster catalog shipped with every deployment.  Seeding is
idempotent by ``key``: missing boosters are inserted, existing rows are
brought back in line with the catalog text, points and ordering.

``is_active`` is only set on insert — a booster retired by an admin stays
retired across restarts.
"""

from __future__ import annotations

import logging

from sqlalchemy import Engine, select

from promohub.database.engine import get_session
from promohub.database.models import Booster, BoosterCategory

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Default catalog
# ---------------------------------------------------------------------------
DEFAULT_BOOSTERS: list[dict] = [
    {"key": "connect-instagram", "title": "Connect Instagram",
     "description": "Verify your Instagram and unlock metrics.",
     "category": BoosterCategory.VERIFICATION, "points": 30, "sort_order": 1},
    {"key": "connect-youtube", "title": "Connect YouTube",
     "description": "Bring subscribers and channel stats.",
     "category": BoosterCategory.VERIFICATION, "points": 25, "sort_order": 2},

    {"key": "portfolio", "title": "Add Portfolio Samples",
     "description": "Upload or link best work.",
     "category": BoosterCategory.PROFILE_POWER, "points": 20, "sort_order": 3},
    {"key": "niche", "title": "Pick Your Primary Niche",
     "description": "Primary and secondary niches.",
     "category": BoosterCategory.PROFILE_POWER, "points": 15, "sort_order": 4},
    {"key": "content-types", "title": "Content Types You Create",
     "description": "Reels, UGC ads, demos, posters, etc.",
     "category": BoosterCategory.PROFILE_POWER, "points": 15, "sort_order": 5},

    {"key": "audience-geo", "title": "Audience Locations",
     "description": "Country and state/city focus.",
     "category": BoosterCategory.AUDIENCE, "points": 15, "sort_order": 6},
    {"key": "audience-age", "title": "Audience Age Groups",
     "description": "Age buckets (18-24, 25-34...).",
     "category": BoosterCategory.AUDIENCE, "points": 10, "sort_order": 7},

    {"key": "brand-exp", "title": "Brand Collaboration History",
     "description": "Worked with brands before?",
     "category": BoosterCategory.TRUST, "points": 15, "sort_order": 8},
    {"key": "invoice", "title": "Invoice / GST Details",
     "description": "Invoice/GST increases trust.",
     "category": BoosterCategory.TRUST, "points": 10, "sort_order": 9},

    {"key": "avg-performance", "title": "Average Performance Buckets",
     "description": "Add ranges for views/likes.",
     "category": BoosterCategory.PERFORMANCE, "points": 20, "sort_order": 10},
    {"key": "response-time", "title": "Fast Response Badge",
     "description": "Set response time range.",
     "category": BoosterCategory.PERFORMANCE, "points": 10, "sort_order": 11},
    {"key": "posting-consistency", "title": "Posting Consistency",
     "description": "Daily/weekly frequency.",
     "category": BoosterCategory.PERFORMANCE, "points": 10, "sort_order": 12},
]


# ---------------------------------------------------------------------------
# Seeder
# ---------------------------------------------------------------------------
def seed_default_boosters(engine: Engine, catalog: list[dict] | None = None) -> int:
    """Upsert the booster catalog by key.  Returns the number of inserts."""
    catalog = DEFAULT_BOOSTERS if catalog is None else catalog
    inserted = 0
    with get_session(engine) as session:
        existing = {
            b.key: b for b in session.scalars(select(Booster)).all()
        }
        for entry in catalog:
            fields = {**entry, "category": str(entry["category"])}
            row = existing.get(fields["key"])
            if row is None:
                session.add(Booster(is_active=True, **fields))
                inserted += 1
            else:
                for name, value in fields.items():
                    setattr(row, name, value)

    if inserted:
        logger.info("Seeded %d default boosters.", inserted)
    return inserted
