"""
promohub.database.models — SQLAlchemy 2.0 Data Models
======================================================

Tables:
- users                  — Brands, creators and admins, plus the booster score snapshot
- boosters               — Booster catalog (scoreable profile actions)
- user_boosters          — Per-user booster completion state
- influencer_profiles    — Creator profile extras (languages, bio)
- influencer_categories  — Creator category keys
- influencer_socials     — Linked social accounts with follower counts
- user_locations         — Resolved district / state for a user
- influencer_packages    — Priced creator packages
- campaigns              — Brand campaigns
- campaign_requirements  — Matching constraints attached 1:1 to a campaign
"""

from __future__ import annotations

import enum
import uuid
from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _new_id() -> str:
    return uuid.uuid4().hex


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------
class Base(DeclarativeBase):
    """Shared base for all PromoHub ORM models."""


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class UserRole(enum.StrEnum):
    BRAND = "BRAND"
    INFLUENCER = "INFLUENCER"
    ADMIN = "ADMIN"


class BoosterStatus(enum.StrEnum):
    """Persisted booster states.  "locked" only exists in the UI."""
    AVAILABLE = "available"
    COMPLETED = "completed"


class BoosterCategory(enum.StrEnum):
    VERIFICATION = "Verification"
    PROFILE_POWER = "Profile Power"
    AUDIENCE = "Audience"
    TRUST = "Trust"
    PERFORMANCE = "Performance"


# ---------------------------------------------------------------------------
# Users — one row per account, with the denormalized booster snapshot
# ---------------------------------------------------------------------------
class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str | None] = mapped_column(String(200), default=None)
    username: Mapped[str | None] = mapped_column(String(100), unique=True, default=None)
    image: Mapped[str | None] = mapped_column(Text, default=None)
    city: Mapped[str | None] = mapped_column(String(100), default=None)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=UserRole.INFLUENCER.value
    )

    # Snapshot of the last booster recalculation (cache, not source of truth)
    booster_score: Mapped[int] = mapped_column(Integer, default=0)
    booster_percent: Mapped[int] = mapped_column(Integer, default=0)
    booster_level: Mapped[str | None] = mapped_column(String(30), default=None)
    booster_updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), default=None
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    # Relationships
    boosters: Mapped[list[UserBooster]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    influencer_profile: Mapped[InfluencerProfile | None] = relationship(
        back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    categories: Mapped[list[InfluencerCategory]] = relationship(
        back_populates="user", cascade="all, delete-orphan",
        order_by="InfluencerCategory.key",
    )
    socials: Mapped[list[InfluencerSocial]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    location: Mapped[UserLocation | None] = relationship(
        back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    packages: Mapped[list[InfluencerPackage]] = relationship(
        back_populates="user", cascade="all, delete-orphan",
        order_by="InfluencerPackage.price",
    )

    __table_args__ = (
        Index("ix_users_role_booster_percent", "role", "booster_percent"),
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r} role={self.role}>"


# ---------------------------------------------------------------------------
# Booster — catalog entry.  Never deleted, only deactivated.
# ---------------------------------------------------------------------------
class Booster(Base):
    __tablename__ = "boosters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    key: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    points: Mapped[int] = mapped_column(Integer, nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    __table_args__ = (
        CheckConstraint("points > 0", name="ck_boosters_points_positive"),
    )

    def __repr__(self) -> str:
        return f"<Booster key={self.key!r} points={self.points} active={self.is_active}>"


# ---------------------------------------------------------------------------
# UserBooster — per-user completion state, one row per (user, booster)
# ---------------------------------------------------------------------------
class UserBooster(Base):
    __tablename__ = "user_boosters"

    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    booster_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("boosters.id", ondelete="CASCADE"), primary_key=True
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=BoosterStatus.AVAILABLE.value
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), default=None
    )
    meta: Mapped[dict | None] = mapped_column(JSONB, nullable=True, default=None)

    user: Mapped[User] = relationship(back_populates="boosters")
    booster: Mapped[Booster] = relationship()

    def __repr__(self) -> str:
        return (
            f"<UserBooster user={self.user_id} booster={self.booster_id} "
            f"status={self.status}>"
        )


# ---------------------------------------------------------------------------
# Creator profile data used by matching and search
# ---------------------------------------------------------------------------
class InfluencerProfile(Base):
    __tablename__ = "influencer_profiles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), unique=True
    )
    languages: Mapped[list | None] = mapped_column(JSONB, default=list)
    bio: Mapped[str | None] = mapped_column(Text, default=None)

    user: Mapped[User] = relationship(back_populates="influencer_profile")


class InfluencerCategory(Base):
    __tablename__ = "influencer_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    key: Mapped[str] = mapped_column(String(64), nullable=False)

    user: Mapped[User] = relationship(back_populates="categories")

    __table_args__ = (
        UniqueConstraint("user_id", "key", name="uq_influencer_categories_user_key"),
    )


class InfluencerSocial(Base):
    __tablename__ = "influencer_socials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    platform: Mapped[str] = mapped_column(String(30), nullable=False)
    username: Mapped[str | None] = mapped_column(String(100), default=None)
    url: Mapped[str | None] = mapped_column(Text, default=None)
    followers: Mapped[str | None] = mapped_column(String(30), default=None)  # free text, e.g. "12,500"
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    user: Mapped[User] = relationship(back_populates="socials")


class UserLocation(Base):
    __tablename__ = "user_locations"

    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    district: Mapped[str | None] = mapped_column(String(100), default=None)
    statename: Mapped[str | None] = mapped_column(String(100), default=None)
    pincode: Mapped[str | None] = mapped_column(String(10), default=None)

    user: Mapped[User] = relationship(back_populates="location")


class InfluencerPackage(Base):
    __tablename__ = "influencer_packages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)

    user: Mapped[User] = relationship(back_populates="packages")


# ---------------------------------------------------------------------------
# Campaigns
# ---------------------------------------------------------------------------
class Campaign(Base):
    __tablename__ = "campaigns"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    brand_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default="DRAFT")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    requirements: Mapped[CampaignRequirements | None] = relationship(
        back_populates="campaign", uselist=False, cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("ix_campaigns_brand", "brand_id"),
    )

    def __repr__(self) -> str:
        return f"<Campaign id={self.id} title={self.title!r}>"


class CampaignRequirements(Base):
    """Matching constraints for a campaign.  Read-only input to the scorer."""
    __tablename__ = "campaign_requirements"

    campaign_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("campaigns.id", ondelete="CASCADE"), primary_key=True
    )
    categories: Mapped[list | None] = mapped_column(JSONB, default=list)
    locations: Mapped[list | None] = mapped_column(JSONB, default=list)
    languages: Mapped[list | None] = mapped_column(JSONB, default=list)
    min_followers: Mapped[int | None] = mapped_column(Integer, default=None)
    max_followers: Mapped[int | None] = mapped_column(Integer, default=None)
    min_engagement: Mapped[float | None] = mapped_column(default=None)
    gender: Mapped[str | None] = mapped_column(String(20), default=None)

    campaign: Mapped[Campaign] = relationship(back_populates="requirements")
