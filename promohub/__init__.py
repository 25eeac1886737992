"""
PromoHub — Booster & Matching Score Engine
===========================================
Scoring core of the PromoHubGo brand/influencer marketplace: creators
complete "boosters" (profile actions) that feed a weighted trust score,
the score drives search badges, and brands get campaign suggestions
ranked by requirement fit.

Package layout::

    promohub/
    ├── config.py          # YAML → typed Python config
    ├── constants.py       # Weight tables, tier thresholds, match weights
    ├── database/
    │   ├── engine.py      # SQLAlchemy engine + session helper
    │   ├── models.py      # ORM models
    │   └── seed.py        # Default booster catalog
    ├── engine/
    │   ├── boosters.py    # Weighted percent + tier label (pure)
    │   ├── ranking.py     # Search badge from percent (pure)
    │   └── matching.py    # Campaign ↔ creator fit score (pure)
    ├── services/
    │   ├── booster_service.py         # Completion, summary, snapshot writes
    │   ├── campaign_service.py        # Suggested creators for a campaign
    │   ├── creator_search_service.py  # Public search with badges
    │   └── errors.py                  # Service-layer exceptions
    └── api/
        ├── main.py        # FastAPI app
        ├── deps.py        # Engine/config/JWT dependencies
        └── routes/        # boosters, campaigns, creators, admin
"""

__version__ = "0.1.0"
