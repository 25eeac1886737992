"""
tests/test_booster_engine.py — Unit Tests for the Booster Recalculation Engine
===============================================================================

Tests the pure calculation (no I/O, no database).
"""

from __future__ import annotations

import itertools

import pytest

from promohub.constants import CATEGORY_MULTIPLIERS
from promohub.database.seed import DEFAULT_BOOSTERS
from promohub.engine.boosters import (
    BoosterEntry,
    BoosterSummary,
    boost_level,
    category_multiplier,
    compute_summary,
    round_half_up,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _entry(key, category, points, *, completed=False, active=True) -> BoosterEntry:
    return BoosterEntry(
        key=key, category=category, points=points, is_active=active, completed=completed
    )


def _catalog(completed_keys: set[str] = frozenset()) -> list[BoosterEntry]:
    """The default seed catalog with the given keys completed."""
    return [
        _entry(b["key"], str(b["category"]), b["points"], completed=b["key"] in completed_keys)
        for b in DEFAULT_BOOSTERS
    ]


# ---------------------------------------------------------------------------
# Weight table
# ---------------------------------------------------------------------------
class TestCategoryMultiplier:
    @pytest.mark.parametrize(
        ("category", "expected"),
        [
            ("Verification", 1.4),
            ("Profile Power", 1.2),
            ("Performance", 1.1),
            ("Trust", 1.1),
            ("Audience", 1.0),
            ("Mystery", 1.0),
            ("", 1.0),
            (None, 1.0),
        ],
    )
    def test_table_with_default(self, category, expected):
        assert category_multiplier(category) == expected

    def test_table_is_immutable(self):
        with pytest.raises(TypeError):
            CATEGORY_MULTIPLIERS["Audience"] = 5.0  # type: ignore[index]

    def test_custom_table_can_be_passed_in(self):
        entries = [
            _entry("portfolio", "A", 10, completed=True),
            _entry("x", "B", 10),
        ]
        summary = compute_summary(entries, {"A": 3.0, "B": 1.0})
        assert summary.booster_percent == 75


# ---------------------------------------------------------------------------
# Tier labels
# ---------------------------------------------------------------------------
class TestBoostLevel:
    @pytest.mark.parametrize(
        ("percent", "label"),
        [
            (100, "Elite Boost"),
            (90, "Elite Boost"),
            (89, "High Boost"),
            (70, "High Boost"),
            (69, "Medium Boost"),
            (40, "Medium Boost"),
            (39, "Starter Boost"),
            (0, "Starter Boost"),
        ],
    )
    def test_thresholds_are_inclusive(self, percent, label):
        assert boost_level(percent) == label

    def test_exactly_90_weighted_is_elite(self):
        entries = [
            _entry("portfolio", "Audience", 90, completed=True),
            _entry("other", "Audience", 10),
        ]
        summary = compute_summary(entries)
        assert summary.booster_percent == 90
        assert summary.booster_level == "Elite Boost"

    def test_exactly_89_weighted_is_high(self):
        entries = [
            _entry("portfolio", "Audience", 89, completed=True),
            _entry("other", "Audience", 11),
        ]
        summary = compute_summary(entries)
        assert summary.booster_percent == 89
        assert summary.booster_level == "High Boost"


# ---------------------------------------------------------------------------
# Full calculation
# ---------------------------------------------------------------------------
class TestComputeSummary:
    def test_reference_scenario(self):
        """A (30 Verification) + B (20 Profile Power) done, portfolio open → 73%."""
        entries = [
            _entry("A", "Verification", 30, completed=True),
            _entry("B", "Profile Power", 20, completed=True),
            _entry("portfolio", "Profile Power", 20),
        ]
        summary = compute_summary(entries)
        assert summary.earned_points == 50
        assert summary.total_points == 70
        assert summary.booster_percent == 73
        assert summary.booster_level == "High Boost"
        assert summary.booster_score == 50

    def test_no_boosters_scores_zero(self):
        summary = compute_summary([])
        assert summary == BoosterSummary()
        assert summary.booster_level == "Starter Boost"

    def test_nothing_completed(self):
        summary = compute_summary(_catalog())
        assert summary.earned_points == 0
        assert summary.total_points == 195
        assert summary.booster_percent == 0

    def test_everything_completed_is_100(self):
        all_keys = {b["key"] for b in DEFAULT_BOOSTERS}
        summary = compute_summary(_catalog(all_keys))
        assert summary.earned_points == summary.total_points == 195
        assert summary.booster_percent == 100
        assert summary.booster_level == "Elite Boost"

    def test_earned_points_are_unweighted(self):
        summary = compute_summary(_catalog({"connect-instagram"}))
        assert summary.earned_points == 30

    def test_half_rounds_up(self):
        # 1 / 8 * 100 == 12.5 exactly; round() would give 12
        entries = [
            _entry("portfolio", "Audience", 1, completed=True),
            _entry("x", "Audience", 7),
        ]
        assert compute_summary(entries).booster_percent == 13
        assert round_half_up(12.5) == 13
        assert round_half_up(12.4999) == 12


class TestPortfolioCap:
    def test_everything_but_portfolio_is_capped_at_85(self):
        all_but_portfolio = {b["key"] for b in DEFAULT_BOOSTERS} - {"portfolio"}
        summary = compute_summary(_catalog(all_but_portfolio))
        # uncapped would be round(209.5 / 233.5 * 100) == 90
        assert summary.booster_percent == 85
        assert summary.booster_level == "High Boost"

    def test_cap_does_not_raise_low_scores(self):
        summary = compute_summary(_catalog({"invoice"}))
        assert summary.booster_percent < 85

    def test_inactive_portfolio_does_not_lift_cap(self):
        entries = [
            _entry("portfolio", "Profile Power", 20, completed=True, active=False),
            _entry("A", "Verification", 30, completed=True),
        ]
        assert compute_summary(entries).booster_percent == 85

    def test_missing_portfolio_still_capped(self):
        entries = [_entry("A", "Verification", 30, completed=True)]
        assert compute_summary(entries).booster_percent == 85

    def test_completed_portfolio_allows_elite(self):
        entries = [_entry("portfolio", "Profile Power", 20, completed=True)]
        summary = compute_summary(entries)
        assert summary.booster_percent == 100
        assert summary.booster_level == "Elite Boost"


class TestInactiveBoosters:
    def test_inactive_excluded_from_both_sides(self):
        entries = [
            _entry("portfolio", "Audience", 50, completed=True),
            _entry("retired", "Audience", 50, completed=True, active=False),
            _entry("open", "Audience", 50),
        ]
        summary = compute_summary(entries)
        assert summary.total_points == 100
        assert summary.earned_points == 50
        assert summary.booster_percent == 50

    @pytest.mark.parametrize("retire", [b["key"] for b in DEFAULT_BOOSTERS])
    def test_retiring_an_open_booster_never_lowers_percent(self, retire):
        completed = {"connect-instagram", "niche", "audience-geo"} - {retire}
        before = compute_summary(_catalog(completed))
        after_entries = [
            _entry(e.key, e.category, e.points, completed=e.completed, active=e.key != retire)
            for e in _catalog(completed)
        ]
        after = compute_summary(after_entries)
        assert after.booster_percent >= before.booster_percent


class TestInvariants:
    def test_bounds_hold_for_every_completion_subset(self):
        keys = [b["key"] for b in DEFAULT_BOOSTERS[:7]]
        for size in range(len(keys) + 1):
            for combo in itertools.combinations(keys, size):
                summary = compute_summary(_catalog(set(combo)))
                assert 0 <= summary.earned_points <= summary.total_points
                assert 0 <= summary.booster_percent <= 100
                if "portfolio" not in combo:
                    assert summary.booster_percent <= 85

    def test_recalculation_is_deterministic(self):
        entries = _catalog({"portfolio", "brand-exp"})
        assert compute_summary(entries) == compute_summary(entries)

    def test_response_shape(self):
        body = compute_summary(_catalog({"portfolio"})).as_response()
        assert set(body) == {"totalPoints", "earnedPoints", "percent", "boostLevel", "boosterScore"}
        assert body["boosterScore"] == body["earnedPoints"] == 20
