"""Booster catalog, user booster state, creator profile and campaign tables

Revision ID: 0001
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("username", sa.String(100), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="INFLUENCER"),
        sa.Column("booster_score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("booster_percent", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("booster_level", sa.String(30), nullable=True),
        sa.Column("booster_updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now()
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )
    op.create_index(
        "ix_users_role_booster_percent", "users", ["role", "booster_percent"]
    )

    op.create_table(
        "boosters",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("key", sa.String(64), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("sort_order", sa.Integer(), server_default="0"),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true()),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("key"),
        sa.CheckConstraint("points > 0", name="ck_boosters_points_positive"),
    )

    op.create_table(
        "user_boosters",
        sa.Column("user_id", sa.String(36), nullable=False),
        sa.Column("booster_id", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="available"),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("meta", JSONB(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["booster_id"], ["boosters.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "booster_id"),
    )

    op.create_table(
        "influencer_profiles",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("user_id", sa.String(36), nullable=False),
        sa.Column("languages", JSONB(), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )

    op.create_table(
        "influencer_categories",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(36), nullable=False),
        sa.Column("key", sa.String(64), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "key", name="uq_influencer_categories_user_key"),
    )

    op.create_table(
        "influencer_socials",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(36), nullable=False),
        sa.Column("platform", sa.String(30), nullable=False),
        sa.Column("username", sa.String(100), nullable=True),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("followers", sa.String(30), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now()
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "user_locations",
        sa.Column("user_id", sa.String(36), nullable=False),
        sa.Column("district", sa.String(100), nullable=True),
        sa.Column("statename", sa.String(100), nullable=True),
        sa.Column("pincode", sa.String(10), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id"),
    )

    op.create_table(
        "influencer_packages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(36), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "campaigns",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("brand_id", sa.String(36), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("status", sa.String(20), server_default="DRAFT"),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now()
        ),
        sa.ForeignKeyConstraint(["brand_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_campaigns_brand", "campaigns", ["brand_id"])

    op.create_table(
        "campaign_requirements",
        sa.Column("campaign_id", sa.String(36), nullable=False),
        sa.Column("categories", JSONB(), nullable=True),
        sa.Column("locations", JSONB(), nullable=True),
        sa.Column("languages", JSONB(), nullable=True),
        sa.Column("min_followers", sa.Integer(), nullable=True),
        sa.Column("max_followers", sa.Integer(), nullable=True),
        sa.Column("min_engagement", sa.Float(), nullable=True),
        sa.Column("gender", sa.String(20), nullable=True),
        sa.ForeignKeyConstraint(["campaign_id"], ["campaigns.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("campaign_id"),
    )


def downgrade() -> None:
    op.drop_table("campaign_requirements")
    op.drop_index("ix_campaigns_brand", table_name="campaigns")
    op.drop_table("campaigns")
    op.drop_table("influencer_packages")
    op.drop_table("user_locations")
    op.drop_table("influencer_socials")
    op.drop_table("influencer_categories")
    op.drop_table("influencer_profiles")
    op.drop_table("user_boosters")
    op.drop_table("boosters")
    op.drop_index("ix_users_role_booster_percent", table_name="users")
    op.drop_table("users")
