"""Announcement database models."""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sitehub.core.constants import MAX_NAME_LENGTH, MAX_SLUG_LENGTH, MAX_URL_LENGTH
from sitehub.core.database.base import Base, SiteMixin, TimestampMixin, UUIDMixin
from sitehub.modules.sites.models import Category


class Announcement(Base, UUIDMixin, TimestampMixin):
    """A published piece of content, syndicated to one or more sites."""

    __tablename__ = "announcements"

    title: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    slug: Mapped[str] = mapped_column(
        String(MAX_SLUG_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image_path: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)
    is_published: Mapped[bool] = mapped_column(default=False, nullable=False)
    is_pinned: Mapped[bool] = mapped_column(default=False, nullable=False)
    category_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    category: Mapped[Category | None] = relationship()
    sites: Mapped[list["AnnouncementSite"]] = relationship(
        back_populates="announcement",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Announcement(id={self.id}, slug={self.slug})>"


class AnnouncementSite(Base, UUIDMixin, SiteMixin):
    """Links an announcement to a site it is published on."""

    __tablename__ = "announcement_sites"
    __table_args__ = (
        UniqueConstraint("announcement_id", "site_id", name="uq_announcement_sites"),
        Index("ix_announcement_sites_site_announcement", "site_id", "announcement_id"),
    )

    announcement_id: Mapped[UUID] = mapped_column(
        ForeignKey("announcements.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    is_primary: Mapped[bool] = mapped_column(default=False, nullable=False)

    announcement: Mapped[Announcement] = relationship(back_populates="sites")
