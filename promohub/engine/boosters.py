"""
promohub.engine.boosters — Booster Recalculation Engine
========================================================

Pure calculation: a user's booster rows in, a score summary out.
No DB I/O inside the engine — :mod:`promohub.services.booster_service`
loads the rows and persists the snapshot.

Pipeline:
  BoosterEntry[] → Active filter → Raw points → Weighted percent
  → Portfolio cap → Tier label → BoosterSummary
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from promohub.constants import (
    BOOST_LEVELS,
    CATEGORY_MULTIPLIERS,
    DEFAULT_BOOST_LEVEL,
    DEFAULT_CATEGORY_MULTIPLIER,
    PORTFOLIO_BOOSTER_KEY,
    PORTFOLIO_MISSING_CAP,
)

logger = logging.getLogger(__name__)

__all__ = [
    "BoosterEntry",
    "BoosterSummary",
    "boost_level",
    "category_multiplier",
    "compute_summary",
    "round_half_up",
]


# ---------------------------------------------------------------------------
# Inputs / outputs
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class BoosterEntry:
    """One catalog booster joined with the user's completion status."""

    key: str
    category: str | None
    points: int
    is_active: bool = True
    completed: bool = False


@dataclass(frozen=True, slots=True)
class BoosterSummary:
    """Result of a recalculation.  ``booster_score`` mirrors ``earned_points``."""

    earned_points: int = 0
    total_points: int = 0
    booster_percent: int = 0
    booster_level: str = DEFAULT_BOOST_LEVEL

    @property
    def booster_score(self) -> int:
        return self.earned_points

    def as_response(self) -> dict:
        """Shape used by the HTTP layer."""
        return {
            "totalPoints": self.total_points,
            "earnedPoints": self.earned_points,
            "percent": self.booster_percent,
            "boostLevel": self.booster_level,
            "boosterScore": self.booster_score,
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def round_half_up(value: float) -> int:
    """Round .5 upwards (``round()`` would use banker's rounding)."""
    return int(math.floor(value + 0.5))


def category_multiplier(
    category: str | None,
    multipliers: Mapping[str, float] = CATEGORY_MULTIPLIERS,
) -> float:
    if not category:
        return DEFAULT_CATEGORY_MULTIPLIER
    return multipliers.get(category, DEFAULT_CATEGORY_MULTIPLIER)


def boost_level(percent: int) -> str:
    """Tier label for a weighted percent.  Ties go to the higher bracket."""
    for threshold, label in BOOST_LEVELS:
        if percent >= threshold:
            return label
    return DEFAULT_BOOST_LEVEL


# ---------------------------------------------------------------------------
# Full calculation
# ---------------------------------------------------------------------------
def compute_summary(
    entries: Iterable[BoosterEntry],
    multipliers: Mapping[str, float] = CATEGORY_MULTIPLIERS,
) -> BoosterSummary:
    """Compute earned/total points, weighted percent and tier label.

    Inactive boosters are excluded from both numerator and denominator,
    so retiring a booster never penalises existing users.

    Parameters
    ----------
    entries : the user's boosters, one per catalog entry
    multipliers : category → weight table (defaults to the shared table)
    """
    active = [e for e in entries if e.is_active]
    completed = [e for e in active if e.completed]

    total_points = sum(e.points for e in active)
    earned_points = sum(e.points for e in completed)

    weighted_total = sum(e.points * category_multiplier(e.category, multipliers) for e in active)
    weighted_earned = sum(
        e.points * category_multiplier(e.category, multipliers) for e in completed
    )

    if weighted_total > 0:
        percent = round_half_up(weighted_earned / weighted_total * 100)
    else:
        percent = 0

    # Portfolio rule runs before labelling
    if not any(e.key == PORTFOLIO_BOOSTER_KEY for e in completed):
        percent = min(percent, PORTFOLIO_MISSING_CAP)

    return BoosterSummary(
        earned_points=earned_points,
        total_points=total_points,
        booster_percent=percent,
        booster_level=boost_level(percent),
    )
