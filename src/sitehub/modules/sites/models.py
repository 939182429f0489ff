"""Site database models."""

from sqlalchemy import Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sitehub.core.constants import (
    DEFAULT_PRIMARY_COLOR,
    MAX_COLOR_LENGTH,
    MAX_NAME_LENGTH,
    MAX_SLUG_LENGTH,
    MAX_URL_LENGTH,
)
from sitehub.core.database.base import Base, SiteMixin, TimestampMixin, UUIDMixin


class Site(Base, UUIDMixin, TimestampMixin):
    """A branded portal within the deployment.

    Sites are deactivated rather than deleted; inactive sites keep their
    content but can no longer be resolved.
    """

    __tablename__ = "sites"

    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
        index=True,
    )
    slug: Mapped[str] = mapped_column(
        String(MAX_SLUG_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    is_active: Mapped[bool] = mapped_column(
        default=True,
        nullable=False,
    )
    is_default: Mapped[bool] = mapped_column(
        default=False,
        nullable=False,
    )
    primary_color: Mapped[str] = mapped_column(
        String(MAX_COLOR_LENGTH),
        default=DEFAULT_PRIMARY_COLOR,
        nullable=False,
    )
    logo_path: Mapped[str | None] = mapped_column(
        String(MAX_URL_LENGTH),
        nullable=True,
    )

    settings: Mapped["SiteSettings | None"] = relationship(
        back_populates="site",
        uselist=False,
        cascade="all, delete-orphan",
    )
    categories: Mapped[list["Category"]] = relationship(
        back_populates="site",
        order_by="Category.order",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Site(id={self.id}, name={self.name}, slug={self.slug})>"


class SiteSettings(Base, UUIDMixin, TimestampMixin, SiteMixin):
    """Per-site footer settings; every field falls back to global settings."""

    __tablename__ = "site_settings"
    __table_args__ = (UniqueConstraint("site_id", name="uq_site_settings_site_id"),)

    about_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    instagram_url: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)
    linkedin_url: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)
    facebook_url: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)
    twitter_url: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)
    youtube_url: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)

    site: Mapped[Site] = relationship(back_populates="settings")


class Category(Base, UUIDMixin, TimestampMixin, SiteMixin):
    """An announcement category belonging to one site."""

    __tablename__ = "categories"
    __table_args__ = (UniqueConstraint("site_id", "slug", name="uq_categories_site_slug"),)

    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    slug: Mapped[str] = mapped_column(String(MAX_SLUG_LENGTH), nullable=False, index=True)
    color: Mapped[str | None] = mapped_column(String(MAX_COLOR_LENGTH), nullable=True)
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    site: Mapped[Site] = relationship(back_populates="categories")

    def __repr__(self) -> str:
        return f"<Category(site_id={self.site_id}, slug={self.slug}, order={self.order})>"


class GlobalSettings(Base, UUIDMixin, TimestampMixin):
    """Deployment-wide defaults. At most one row is used.

    Every column is optional; a missing row is the same as all-empty.
    """

    __tablename__ = "global_settings"

    site_name: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), nullable=True)
    logo_path: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)
    about_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    instagram_url: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)
    linkedin_url: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)
    facebook_url: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)
    twitter_url: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)
    youtube_url: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)
