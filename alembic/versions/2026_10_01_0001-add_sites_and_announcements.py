"""add_sites_and_announcements

Revision ID: 3f1a9c2d7b10
Revises:
Create Date: 2026-10-01 00:01:00.000000

This migration adds:
- sites, site_settings and categories
- the single-row global_settings table
- announcements and the announcement_sites junction table
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3f1a9c2d7b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def _social_links() -> list[sa.Column]:
    return [
        sa.Column(name, sa.String(512), nullable=True)
        for name in (
            "instagram_url",
            "linkedin_url",
            "facebook_url",
            "twitter_url",
            "youtube_url",
        )
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        "sites",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(63), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("primary_color", sa.String(32), nullable=False),
        sa.Column("logo_path", sa.String(512), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_sites_id", "sites", ["id"])
    op.create_index("ix_sites_name", "sites", ["name"])
    op.create_index("ix_sites_slug", "sites", ["slug"], unique=True)

    op.create_table(
        "site_settings",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "site_id",
            sa.Uuid(),
            sa.ForeignKey("sites.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("about_text", sa.Text(), nullable=True),
        *_social_links(),
        *_timestamps(),
        sa.UniqueConstraint("site_id", name="uq_site_settings_site_id"),
    )
    op.create_index("ix_site_settings_id", "site_settings", ["id"])
    op.create_index("ix_site_settings_site_id", "site_settings", ["site_id"])

    op.create_table(
        "categories",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "site_id",
            sa.Uuid(),
            sa.ForeignKey("sites.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(63), nullable=False),
        sa.Column("color", sa.String(32), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.UniqueConstraint("site_id", "slug", name="uq_categories_site_slug"),
    )
    op.create_index("ix_categories_id", "categories", ["id"])
    op.create_index("ix_categories_site_id", "categories", ["site_id"])
    op.create_index("ix_categories_slug", "categories", ["slug"])

    op.create_table(
        "global_settings",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("site_name", sa.String(255), nullable=True),
        sa.Column("logo_path", sa.String(512), nullable=True),
        sa.Column("about_text", sa.Text(), nullable=True),
        *_social_links(),
        *_timestamps(),
    )
    op.create_index("ix_global_settings_id", "global_settings", ["id"])

    op.create_table(
        "announcements",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(63), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("image_path", sa.String(512), nullable=True),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_pinned", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "category_id",
            sa.Uuid(),
            sa.ForeignKey("categories.id", ondelete="SET NULL"),
            nullable=True,
        ),
        *_timestamps(),
    )
    op.create_index("ix_announcements_id", "announcements", ["id"])
    op.create_index("ix_announcements_slug", "announcements", ["slug"], unique=True)
    op.create_index("ix_announcements_category_id", "announcements", ["category_id"])
    # Listing order: pinned first, newest first
    op.create_index(
        "ix_announcements_listing",
        "announcements",
        ["is_published", "is_pinned", "created_at"],
    )

    op.create_table(
        "announcement_sites",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "announcement_id",
            sa.Uuid(),
            sa.ForeignKey("announcements.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "site_id",
            sa.Uuid(),
            sa.ForeignKey("sites.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("is_primary", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.UniqueConstraint("announcement_id", "site_id", name="uq_announcement_sites"),
    )
    op.create_index("ix_announcement_sites_id", "announcement_sites", ["id"])
    op.create_index(
        "ix_announcement_sites_announcement_id", "announcement_sites", ["announcement_id"]
    )
    op.create_index("ix_announcement_sites_site_id", "announcement_sites", ["site_id"])
    op.create_index(
        "ix_announcement_sites_site_announcement",
        "announcement_sites",
        ["site_id", "announcement_id"],
    )


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_table("announcement_sites")
    op.drop_table("announcements")
    op.drop_table("global_settings")
    op.drop_table("categories")
    op.drop_table("site_settings")
    op.drop_table("sites")
