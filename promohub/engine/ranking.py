"""
promohub.engine.ranking — Creator Ranking Badges
=================================================

Maps a creator's booster percent to the badge / rank reason shown on
search results.  Pure and total over ``[0, 100]``.
"""

from __future__ import annotations

from dataclasses import dataclass

from promohub.constants import CREATOR_BADGES, DEFAULT_CREATOR_BADGE


@dataclass(frozen=True, slots=True)
class CreatorBadge:
    badge: str
    rank_reason: str

    def as_dict(self) -> dict[str, str]:
        return {"badge": self.badge, "rankReason": self.rank_reason}


def creator_badge(percent: int | None) -> CreatorBadge:
    """Badge for *percent*; thresholds are inclusive lower bounds."""
    value = percent or 0
    for threshold, badge, reason in CREATOR_BADGES:
        if value >= threshold:
            return CreatorBadge(badge, reason)
    return CreatorBadge(*DEFAULT_CREATOR_BADGE)
