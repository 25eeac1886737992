"""
tests/conftest.py — Shared Test Fixtures
=========================================
"""

from __future__ import annotations

import os

# ---------------------------------------------------------------------------
# A valid JWT_SECRET must exist before promohub.api.deps is imported,
# because the secret is validated at module-load time.
# ---------------------------------------------------------------------------
_TEST_JWT_SECRET = "test-secret-for-pytest-only-" + "x" * 40  # > 32 chars
os.environ.setdefault("JWT_SECRET", _TEST_JWT_SECRET)

import pytest  # noqa: E402
from sqlalchemy import Engine, create_engine  # noqa: E402

# ---------------------------------------------------------------------------
# SQLite has no JSONB; render it as TEXT so the PG models work unchanged.
# ---------------------------------------------------------------------------
from sqlalchemy.dialects.postgresql import JSONB as PG_JSONB  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from promohub.database.models import Base, User, UserRole  # noqa: E402
from promohub.database.seed import seed_default_boosters  # noqa: E402

_jsonb_sqlite_registered = False


def _register_jsonb_sqlite_compat():
    """Register SQLite compilation for PG JSONB type (idempotent)."""
    global _jsonb_sqlite_registered
    if _jsonb_sqlite_registered:
        return
    from sqlalchemy.ext.compiler import compiles

    @compiles(PG_JSONB, "sqlite")
    def _compile_jsonb_as_text(type_, compiler, **kw):
        return "TEXT"

    _jsonb_sqlite_registered = True


_register_jsonb_sqlite_compat()


@pytest.fixture
def db_engine() -> Engine:
    """In-memory SQLite engine with all PromoHub tables.

    StaticPool keeps a single connection so the TestClient's worker
    threads see the same in-memory database.
    """
    from sqlalchemy.pool import StaticPool

    engine = create_engine(
        "sqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def seeded_engine(db_engine: Engine) -> Engine:
    """db_engine with the default 12-booster catalog."""
    seed_default_boosters(db_engine)
    return db_engine


@pytest.fixture
def db_session(db_engine: Engine):
    """Provide a session that rolls back after each test."""
    with Session(db_engine) as session:
        yield session
        session.rollback()


def add_user(engine: Engine, user_id: str, *, role: str = UserRole.INFLUENCER, **fields) -> str:
    """Insert a user row and return its id."""
    with Session(engine) as session:
        session.add(User(id=user_id, role=str(role), **fields))
        session.commit()
    return user_id


def make_token(sub: str = "u-1", *, is_admin: bool = False) -> str:
    """Create a bearer JWT for *sub*."""
    import jwt

    from promohub.api.deps import JWT_ALGORITHM, JWT_SECRET

    return jwt.encode({"sub": sub, "is_admin": is_admin}, JWT_SECRET, algorithm=JWT_ALGORITHM)


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def test_config():
    from promohub.config import PromoHubConfig

    return PromoHubConfig(marketplace_name="PromoHub Test")


@pytest.fixture
def client(seeded_engine, test_config):
    """TestClient wired to the seeded SQLite engine and a fixed config."""
    from fastapi.testclient import TestClient

    from promohub.api.deps import get_config, get_engine
    from promohub.api.main import app

    app.dependency_overrides[get_engine] = lambda: seeded_engine
    app.dependency_overrides[get_config] = lambda: test_config
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
