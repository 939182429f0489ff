"""Announcement repository for database operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import Select, func, select
from sqlalchemy.orm import selectinload

from sitehub.api.dependencies import DBSession
from sitehub.modules.announcements.models import Announcement, AnnouncementSite
from sitehub.modules.sites.models import Category


class AnnouncementRepository:
    """Repository for Announcement database operations.

    All listing queries are scoped to a single site.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    def _published_for_site(
        self, site_id: UUID, category_slug: str | None
    ) -> Select[tuple[Announcement]]:
        stmt = (
            select(Announcement)
            .join(AnnouncementSite, AnnouncementSite.announcement_id == Announcement.id)
            .where(
                AnnouncementSite.site_id == site_id,
                Announcement.is_published.is_(True),
            )
        )
        if category_slug:
            stmt = stmt.join(Category, Category.id == Announcement.category_id).where(
                Category.slug == category_slug
            )
        return stmt

    async def list_for_site(
        self,
        site_id: UUID,
        skip: int = 0,
        limit: int = 20,
        category_slug: str | None = None,
    ) -> tuple[list[Announcement], int]:
        """List published announcements for a site, pinned first then newest.

        ``skip`` and ``limit`` must already have been through the
        pagination guard.

        Args:
            site_id: The site's UUID
            skip: Number of rows to skip
            limit: Maximum number of rows to return
            category_slug: Optional category filter

        Returns:
            Tuple of (announcements list, total count)
        """
        base = self._published_for_site(site_id, category_slug)

        count_stmt = select(func.count()).select_from(base.subquery())
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            base.options(selectinload(Announcement.category))
            .order_by(Announcement.is_pinned.desc(), Announcement.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        announcements = list(result.scalars().all())

        return announcements, total


# Type alias for dependency injection
AnnouncementRepo = Annotated[AnnouncementRepository, Depends(AnnouncementRepository)]
