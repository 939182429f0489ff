"""Site repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from sitehub.core.database import async_session_factory
from sitehub.modules.sites.models import GlobalSettings, Site


class SiteRepository:
    """Repository for Site and GlobalSettings reads.

    Every method opens its own short-lived session, so independent lookups
    can run concurrently; a single AsyncSession does not allow that.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def find_active_by_slug(self, slug: str) -> Site | None:
        """Get an active site by slug, with settings and ordered categories.

        Args:
            slug: The site's URL slug

        Returns:
            Site if found and active, None otherwise
        """
        stmt = (
            select(Site)
            .where(Site.slug == slug, Site.is_active.is_(True))
            .options(selectinload(Site.settings), selectinload(Site.categories))
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def find_global_settings(self) -> GlobalSettings | None:
        """Get the deployment-wide settings row, if there is one."""
        stmt = select(GlobalSettings).order_by(GlobalSettings.created_at).limit(1)
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def list_active(self) -> list[Site]:
        """List active sites ordered by name."""
        stmt = select(Site).where(Site.is_active.is_(True)).order_by(Site.name)
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def find_default(self) -> Site | None:
        """Get the active site flagged as the deployment default."""
        stmt = (
            select(Site)
            .where(Site.is_default.is_(True), Site.is_active.is_(True))
            .order_by(Site.created_at)
            .limit(1)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none()


def get_site_repository() -> SiteRepository:
    """Dependency that provides a SiteRepository."""
    return SiteRepository(async_session_factory)


# Type alias for dependency injection
SiteRepo = Annotated[SiteRepository, Depends(get_site_repository)]
