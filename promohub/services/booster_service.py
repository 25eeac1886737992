"""
promohub.services.booster_service — Booster Completion & Score Snapshot
========================================================================

Session-owning operations around the pure engine in
:mod:`promohub.engine.boosters`:

* ``recalculate``          — recompute and persist a user's score snapshot
* ``complete_booster``     — idempotent, monotonic completion + recalculation
* ``update_booster_meta``  — edit the payload of an already-completed booster
* ``get_booster_summary``  — ensure one row per active booster, then summarise
* ``set_booster_active``   — retire / restore a catalog entry

The snapshot on ``users`` is a cache.  It is recomputed from the full
booster state after every mutation, never adjusted incrementally.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from promohub.constants import CATEGORY_MULTIPLIERS
from promohub.database.models import Booster, BoosterStatus, User, UserBooster
from promohub.engine.boosters import BoosterEntry, BoosterSummary, compute_summary
from promohub.services.errors import BoosterNotCompleted, InvalidBoosterKey, UserNotFound

if TYPE_CHECKING:
    from sqlalchemy import Engine

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------
def _require_user(session: Session, user_id: str) -> User:
    user = session.get(User, user_id)
    if user is None:
        raise UserNotFound(user_id)
    return user


def _require_booster(session: Session, booster_key: str) -> Booster:
    booster = session.scalar(select(Booster).where(Booster.key == booster_key))
    if booster is None:
        raise InvalidBoosterKey(booster_key)
    return booster


def load_booster_entries(session: Session, user_id: str) -> list[BoosterEntry]:
    """The user's booster rows joined with their catalog definitions.

    Boosters the user has no row for do not take part in the score.
    """
    rows = session.execute(
        select(Booster, UserBooster.status)
        .join(UserBooster, UserBooster.booster_id == Booster.id)
        .where(UserBooster.user_id == user_id)
        .order_by(Booster.sort_order, Booster.id)
    ).all()
    return [
        BoosterEntry(
            key=booster.key,
            category=booster.category,
            points=booster.points,
            is_active=bool(booster.is_active),
            completed=status == BoosterStatus.COMPLETED,
        )
        for booster, status in rows
    ]


def insert_state_if_absent(session: Session, state: UserBooster) -> bool:
    """Insert *state* under a SAVEPOINT.

    Returns False when a row with the same (user, booster) key already
    exists, e.g. written by a concurrent request.  The outer transaction
    stays usable either way.
    """
    try:
        with session.begin_nested():
            session.add(state)
            session.flush()
    except IntegrityError:
        logger.debug(
            "Booster row (%s, %s) already exists", state.user_id, state.booster_id
        )
        return False
    return True


def serialize_state(state: UserBooster | None) -> dict | None:
    if state is None:
        return None
    return {
        "userId": state.user_id,
        "boosterId": state.booster_id,
        "status": state.status,
        "completedAt": state.completed_at.isoformat() if state.completed_at else None,
        "meta": state.meta,
    }


# ---------------------------------------------------------------------------
# Recalculation
# ---------------------------------------------------------------------------
def recalculate_for_user(
    session: Session,
    user_id: str,
    multipliers: Mapping[str, float] = CATEGORY_MULTIPLIERS,
) -> BoosterSummary:
    """Recompute the summary inside an open session and write the snapshot.

    The caller owns the transaction.
    """
    user = _require_user(session, user_id)
    summary = compute_summary(load_booster_entries(session, user_id), multipliers)

    user.booster_score = summary.booster_score
    user.booster_percent = summary.booster_percent
    user.booster_level = summary.booster_level
    user.booster_updated_at = datetime.now(UTC)
    session.flush()

    logger.debug(
        "Recalculated boosters for %s: %d/%d pts, %d%% (%s)",
        user_id,
        summary.earned_points,
        summary.total_points,
        summary.booster_percent,
        summary.booster_level,
    )
    return summary


def recalculate(engine: Engine, user_id: str) -> BoosterSummary:
    """Recompute and persist *user_id*'s snapshot in its own transaction."""
    with Session(engine) as session:
        summary = recalculate_for_user(session, user_id)
        session.commit()
        return summary


# ---------------------------------------------------------------------------
# Ensure rows
# ---------------------------------------------------------------------------
def ensure_user_boosters(session: Session, user_id: str) -> int:
    """Insert an ``available`` row for every active booster the user lacks.

    Returns the number of rows created.  Existing rows are never touched.
    """
    active_ids = session.scalars(
        select(Booster.id).where(Booster.is_active.is_(True))
    ).all()
    have = set(session.scalars(
        select(UserBooster.booster_id).where(UserBooster.user_id == user_id)
    ).all())

    created = 0
    for booster_id in active_ids:
        if booster_id in have:
            continue
        row = UserBooster(
            user_id=user_id,
            booster_id=booster_id,
            status=BoosterStatus.AVAILABLE.value,
        )
        if insert_state_if_absent(session, row):
            created += 1
    return created


# ---------------------------------------------------------------------------
# Completion
# ---------------------------------------------------------------------------
def complete_booster(
    engine: Engine,
    user_id: str,
    booster_key: str,
    meta: dict | None = None,
) -> tuple[UserBooster, BoosterSummary]:
    """Mark *booster_key* completed for *user_id* and recalculate.

    Completing an already-completed booster leaves the row untouched
    (``completed_at`` is not reset) but still recomputes the summary.
    There is no path back to ``available``.  A row created concurrently by
    another request is picked up instead of raising.

    Returns (state row, summary).  The row is detached from its session.

    Raises
    ------
    InvalidBoosterKey
        If *booster_key* is not in the catalog.
    UserNotFound
        If *user_id* does not exist.
    """
    with Session(engine, expire_on_commit=False) as session:
        booster = _require_booster(session, booster_key)
        _require_user(session, user_id)

        key = (user_id, booster.id)
        state = session.get(UserBooster, key)
        if state is None:
            fresh = UserBooster(
                user_id=user_id,
                booster_id=booster.id,
                status=BoosterStatus.COMPLETED.value,
                completed_at=datetime.now(UTC),
                meta=meta,
            )
            if insert_state_if_absent(session, fresh):
                logger.info("Booster %s completed by %s", booster_key, user_id)
            # Either our row or the one a concurrent request committed first
            state = session.get(UserBooster, key)

        if state.status != BoosterStatus.COMPLETED:
            state.status = BoosterStatus.COMPLETED.value
            state.completed_at = datetime.now(UTC)
            if meta is not None:
                state.meta = meta
            logger.info("Booster %s completed by %s", booster_key, user_id)
        session.flush()

        summary = recalculate_for_user(session, user_id)
        session.commit()
        session.expunge(state)
        return state, summary


def update_booster_meta(
    engine: Engine,
    user_id: str,
    booster_key: str,
    meta: dict,
) -> tuple[UserBooster, BoosterSummary]:
    """Replace the meta payload of a completed booster.

    Status and ``completed_at`` are left as they are.

    Raises
    ------
    InvalidBoosterKey, UserNotFound, BoosterNotCompleted
    """
    with Session(engine, expire_on_commit=False) as session:
        booster = _require_booster(session, booster_key)
        _require_user(session, user_id)

        state = session.get(UserBooster, (user_id, booster.id))
        if state is None or state.status != BoosterStatus.COMPLETED:
            raise BoosterNotCompleted(booster_key)
        state.meta = meta
        session.flush()

        summary = recalculate_for_user(session, user_id)
        session.commit()
        session.expunge(state)
        return state, summary


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------
def get_booster_summary(engine: Engine, user_id: str) -> dict[str, Any]:
    """Ensure rows, recalculate, and return the summary plus per-booster list."""
    with Session(engine) as session:
        _require_user(session, user_id)
        ensure_user_boosters(session, user_id)

        rows = session.execute(
            select(UserBooster, Booster)
            .join(Booster, UserBooster.booster_id == Booster.id)
            .where(UserBooster.user_id == user_id)
            .order_by(Booster.sort_order, Booster.id)
        ).all()

        summary = recalculate_for_user(session, user_id)

        boosters = [
            {
                "key": booster.key,
                "title": booster.title,
                "description": booster.description,
                "category": booster.category,
                "points": booster.points,
                "status": state.status,
                "completedAt": state.completed_at.isoformat() if state.completed_at else None,
                "meta": state.meta,
            }
            for state, booster in rows
        ]
        session.commit()

    return {**summary.as_response(), "boosters": boosters}


# ---------------------------------------------------------------------------
# Catalog administration
# ---------------------------------------------------------------------------
def set_booster_active(engine: Engine, booster_key: str, active: bool) -> Booster:
    """Retire or restore a booster.  Catalog rows are never deleted.

    User snapshots pick the change up on their next recalculation.
    """
    with Session(engine, expire_on_commit=False) as session:
        booster = _require_booster(session, booster_key)
        if booster.is_active != active:
            booster.is_active = active
            logger.info(
                "Booster %s %s", booster_key, "reactivated" if active else "deactivated"
            )
        session.commit()
        session.expunge(booster)
        return booster
