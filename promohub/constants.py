"""
promohub.constants — Shared Scoring Tables
===========================================

Single source of truth for the booster weight table, tier thresholds,
search badges and matching weights.  Import from here instead of
duplicating in the engine, services and API routes.

Every table is immutable; the engine receives them as arguments so the
scorers stay pure and can be exercised with alternative tables in tests.
"""

from __future__ import annotations

from types import MappingProxyType

# ---------------------------------------------------------------------------
# Booster category multipliers (unknown / missing category → DEFAULT)
# ---------------------------------------------------------------------------
CATEGORY_MULTIPLIERS: MappingProxyType[str, float] = MappingProxyType({
    "Verification": 1.4,
    "Profile Power": 1.2,
    "Performance": 1.1,
    "Trust": 1.1,
    "Audience": 1.0,
})
DEFAULT_CATEGORY_MULTIPLIER: float = 1.0

# ---------------------------------------------------------------------------
# Portfolio ceiling — a product rule: no Elite tier without a portfolio
# ---------------------------------------------------------------------------
PORTFOLIO_BOOSTER_KEY = "portfolio"
PORTFOLIO_MISSING_CAP = 85

# ---------------------------------------------------------------------------
# Tier labels — inclusive lower bounds, checked top-down
# ---------------------------------------------------------------------------
BOOST_LEVELS: tuple[tuple[int, str], ...] = (
    (90, "Elite Boost"),
    (70, "High Boost"),
    (40, "Medium Boost"),
)
DEFAULT_BOOST_LEVEL = "Starter Boost"

# ---------------------------------------------------------------------------
# Creator search badges — inclusive lower bounds, checked top-down
# ---------------------------------------------------------------------------
CREATOR_BADGES: tuple[tuple[int, str, str], ...] = (
    (90, "Elite", "Top boosted creator"),
    (70, "Boosted", "Strong boost signals"),
    (40, "Growing", "Building trust quickly"),
)
DEFAULT_CREATOR_BADGE: tuple[str, str] = ("Starter", "New creator profile")

# Minimum percent for the "boosted only" search filter
BOOSTED_MIN_PERCENT = 70

# ---------------------------------------------------------------------------
# Campaign matching
# ---------------------------------------------------------------------------
MATCH_WEIGHTS: MappingProxyType[str, int] = MappingProxyType({
    "category": 4,
    "language": 2,
    "location": 2,
})
FOLLOWERS_PER_BONUS_POINT = 10_000
MAX_FOLLOWER_BONUS = 10

SUGGESTION_LIMIT = 30
CANDIDATE_FETCH_LIMIT = 200
