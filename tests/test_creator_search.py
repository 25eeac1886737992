"""
tests/test_creator_search.py — Public creator search with ranking badges
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from conftest import add_user
from sqlalchemy.orm import Session

from promohub.database.models import InfluencerCategory, InfluencerPackage, UserRole
from promohub.services.creator_search_service import search_creators

_NOW = datetime(2026, 1, 1, tzinfo=UTC)


def _creator(engine, user_id, percent=0, *, niches=(), prices=(), updated=None, **fields):
    add_user(
        engine,
        user_id,
        username=user_id,
        booster_percent=percent,
        booster_updated_at=updated,
        **fields,
    )
    with Session(engine) as session:
        for key in niches:
            session.add(InfluencerCategory(user_id=user_id, key=key))
        for price in prices:
            session.add(InfluencerPackage(user_id=user_id, title="Reel", price=price))
        session.commit()


def _ids(body) -> list[str]:
    return [r["id"] for r in body["results"]]


@pytest.fixture
def engine(db_engine):
    _creator(db_engine, "elite", 95, name="Elena", city="Mumbai",
             niches=["fashion"], prices=[5000, 20000], updated=_NOW)
    _creator(db_engine, "boosted", 72, name="Bilal", city="Pune",
             niches=["food"], prices=[1500], updated=_NOW)
    _creator(db_engine, "growing", 45, name="Gita", city="Navi Mumbai",
             niches=["fitness", "food"], updated=_NOW - timedelta(days=1))
    _creator(db_engine, "starter", 10, name="Sam")
    add_user(db_engine, "brand", role=UserRole.BRAND, username="brand", booster_percent=100)
    return db_engine


class TestFiltering:
    def test_only_influencers_best_first(self, engine):
        body = search_creators(engine)
        assert _ids(body) == ["elite", "boosted", "growing", "starter"]
        assert body["meta"]["total"] == 4

    def test_badges(self, engine):
        rows = {r["id"]: r for r in search_creators(engine)["results"]}
        assert rows["elite"]["badge"] == "Elite"
        assert rows["boosted"]["badge"] == "Boosted"
        assert rows["growing"]["badge"] == "Growing"
        assert rows["starter"]["badge"] == "Starter"
        assert rows["starter"]["rankReason"] == "New creator profile"

    def test_text_query_matches_name_or_username(self, engine):
        assert _ids(search_creators(engine, q="ELE")) == ["elite"]
        assert _ids(search_creators(engine, q="grow")) == ["growing"]

    def test_city_substring(self, engine):
        assert _ids(search_creators(engine, city="mumbai")) == ["elite", "growing"]

    def test_niche(self, engine):
        assert _ids(search_creators(engine, niche="food")) == ["boosted", "growing"]

    def test_budget_matches_any_package(self, engine):
        assert _ids(search_creators(engine, min_budget=10000)) == ["elite"]
        assert _ids(search_creators(engine, max_budget=2000)) == ["boosted"]
        assert _ids(search_creators(engine, min_budget=1000, max_budget=6000)) == [
            "elite", "boosted",
        ]

    def test_boosted_only(self, engine):
        body = search_creators(engine, boosted_only=True)
        assert _ids(body) == ["elite", "boosted"]
        assert body["meta"]["boostedOnly"] is True
        assert body["meta"]["minBoosterPercent"] == 70

    def test_boosted_threshold_is_configurable(self, engine):
        body = search_creators(engine, boosted_only=True, boosted_min_percent=40)
        assert _ids(body) == ["elite", "boosted", "growing"]


class TestPaging:
    def test_pages(self, engine):
        first = search_creators(engine, limit=3)
        second = search_creators(engine, limit=3, page=2)
        assert _ids(first) == ["elite", "boosted", "growing"]
        assert _ids(second) == ["starter"]
        assert first["meta"]["totalPages"] == 2

    def test_limit_is_clamped(self, engine):
        assert search_creators(engine, limit=500)["meta"]["limit"] == 50
        assert search_creators(engine, limit=0)["meta"]["limit"] == 1
        assert search_creators(engine, page=-3)["meta"]["page"] == 1

    def test_empty_result_has_one_page(self, engine):
        body = search_creators(engine, q="nobody")
        assert body["results"] == []
        assert body["meta"]["total"] == 0
        assert body["meta"]["totalPages"] == 1


class TestRowShape:
    def test_profile_fields(self, engine):
        row = search_creators(engine, q="elena")["results"][0]
        assert row["name"] == "Elena"
        assert row["boosterPercent"] == 95
        assert row["boosterLevel"] == "Starter Boost"
        assert row["creatorProfile"] == {
            "city": "Mumbai",
            "primaryNiche": "fashion",
            "startingPrice": 5000,
        }

    def test_missing_name_falls_back_to_username(self, engine):
        row = search_creators(engine, q="starter")["results"][0]
        assert row["name"] == "Sam"
        _creator(engine, "anon")
        row = search_creators(engine, q="anon")["results"][0]
        assert row["name"] == "anon"
        assert row["creatorProfile"]["primaryNiche"] is None
        assert row["creatorProfile"]["startingPrice"] is None

    def test_newest_sort(self, engine):
        _creator(engine, "zz-late", 0)
        body = search_creators(engine, sort="newest")
        assert body["meta"]["sort"] == "newest"
        assert len(body["results"]) == 5
