"""
promohub.engine.matching — Campaign ↔ Creator Matching Scorer
==============================================================

Pure scoring of how well a creator fits a campaign's requirements.
No DB I/O; :mod:`promohub.services.campaign_service` builds the
:class:`MatchCandidate` objects from ORM rows.

Score::

    4 * category hits + 2 * language hits + 2 * location hits
      + min(10, followers // 10_000)

Follower range limits are hard filters: an excluded candidate scores
``None`` and never appears in a ranking.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from promohub.constants import (
    FOLLOWERS_PER_BONUS_POINT,
    MATCH_WEIGHTS,
    MAX_FOLLOWER_BONUS,
    SUGGESTION_LIMIT,
)

logger = logging.getLogger(__name__)

# Digits only: no "_" separators, no "inf"/"nan" words
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class MatchRequirements:
    """Campaign requirements as seen by the scorer.  Empty means no constraint."""

    categories: Sequence[str] = ()
    languages: Sequence[str] = ()
    locations: Sequence[str] = ()
    min_followers: int | None = None
    max_followers: int | None = None


@dataclass(frozen=True, slots=True)
class MatchCandidate:
    """A creator reduced to the fields the scorer reads."""

    id: str
    categories: Sequence[str] = ()
    languages: Sequence[str] = ()
    locations: Sequence[str] = ()
    followers: float = 0
    extra: Mapping[str, object] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ScoredCandidate:
    candidate: MatchCandidate
    score: int


# ---------------------------------------------------------------------------
# Normalisation helpers
# ---------------------------------------------------------------------------
def parse_followers(value: object) -> float:
    """Parse a free-text follower count such as ``"12,500"``.

    Only plain decimal notation is accepted (optional sign, fraction and
    exponent).  Empty, non-numeric and non-finite values count as 0.
    """
    if not value:
        return 0
    text = str(value).replace(",", "").strip()
    if not _DECIMAL_RE.fullmatch(text):
        return 0
    number = float(text)
    if not math.isfinite(number):
        return 0
    return int(number) if number.is_integer() else number


def max_followers(values: Iterable[object]) -> float:
    """Largest parsed follower count across socials (0 with no socials)."""
    return max((parse_followers(v) for v in values), default=0)


def location_strings(*parts: str | None) -> list[str]:
    """City / district / state names with blanks dropped, de-duplicated."""
    seen: list[str] = []
    for part in parts:
        if part is None:
            continue
        text = str(part).strip()
        if text and text not in seen:
            seen.append(text)
    return seen


def overlap_score(a: Iterable[str] | None, b: Iterable[str] | None) -> int:
    """Count of case-insensitive matches between two string sets."""
    left = {str(x).lower() for x in (a or ())}
    right = {str(x).lower() for x in (b or ())}
    return len(left & right)


def follower_bonus(followers: float) -> int:
    return min(MAX_FOLLOWER_BONUS, math.floor(followers / FOLLOWERS_PER_BONUS_POINT))


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------
def score_candidate(
    requirements: MatchRequirements,
    candidate: MatchCandidate,
    weights: Mapping[str, int] = MATCH_WEIGHTS,
) -> int | None:
    """Score *candidate*, or return ``None`` when it is outside the follower range."""
    followers = candidate.followers
    if requirements.min_followers is not None and followers < requirements.min_followers:
        return None
    if requirements.max_followers is not None and followers > requirements.max_followers:
        return None

    category_hits = overlap_score(requirements.categories, candidate.categories)
    language_hits = overlap_score(requirements.languages, candidate.languages)
    location_hits = overlap_score(requirements.locations, candidate.locations)

    return (
        category_hits * weights["category"]
        + language_hits * weights["language"]
        + location_hits * weights["location"]
        + follower_bonus(followers)
    )


def rank_candidates(
    requirements: MatchRequirements,
    candidates: Iterable[MatchCandidate],
    limit: int = SUGGESTION_LIMIT,
    weights: Mapping[str, int] = MATCH_WEIGHTS,
) -> list[ScoredCandidate]:
    """Score, drop excluded candidates, sort by score desc, keep the top *limit*.

    The sort is stable, so equal scores keep the input order.
    """
    scored: list[ScoredCandidate] = []
    excluded = 0
    for candidate in candidates:
        score = score_candidate(requirements, candidate, weights)
        if score is None:
            excluded += 1
            continue
        scored.append(ScoredCandidate(candidate, score))

    scored.sort(key=lambda s: s.score, reverse=True)
    if excluded:
        logger.debug("Follower range excluded %d candidate(s)", excluded)
    return scored[:limit]
