"""
tests/test_ranking.py — Creator search badges
"""

from __future__ import annotations

import pytest

from promohub.engine.ranking import CreatorBadge, creator_badge


@pytest.mark.parametrize(
    ("percent", "badge", "reason"),
    [
        (100, "Elite", "Top boosted creator"),
        (90, "Elite", "Top boosted creator"),
        (89, "Boosted", "Strong boost signals"),
        (70, "Boosted", "Strong boost signals"),
        (69, "Growing", "Building trust quickly"),
        (40, "Growing", "Building trust quickly"),
        (39, "Starter", "New creator profile"),
        (0, "Starter", "New creator profile"),
    ],
)
def test_badge_brackets(percent, badge, reason):
    assert creator_badge(percent) == CreatorBadge(badge, reason)


def test_missing_percent_is_starter():
    assert creator_badge(None).badge == "Starter"


def test_every_percent_has_a_badge():
    badges = {creator_badge(p).badge for p in range(101)}
    assert badges == {"Elite", "Boosted", "Growing", "Starter"}


def test_as_dict_uses_response_keys():
    assert creator_badge(75).as_dict() == {
        "badge": "Boosted",
        "rankReason": "Strong boost signals",
    }
