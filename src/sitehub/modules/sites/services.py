"""Site resolution: slug to fully merged SiteContext."""

import asyncio
from collections.abc import Sequence
from typing import Annotated, Any, Protocol

import structlog
from fastapi import Depends

from sitehub.core.constants import (
    ABOUT_TEXT_FALLBACK,
    DEFAULT_PRIMARY_COLOR,
    MAX_NAV_CATEGORIES,
    NAV_HOME_LABEL,
    NAV_SEARCH_LABEL,
)
from sitehub.core.errors import SiteNotFoundError, SiteResolutionError
from sitehub.core.utils.urls import get_site_url
from sitehub.modules.sites.models import Category, GlobalSettings, Site, SiteSettings
from sitehub.modules.sites.repos import SiteRepo
from sitehub.modules.sites.schemas import FooterSettings, NavLink, SiteContext


logger = structlog.get_logger()

SOCIAL_LINK_FIELDS = (
    "instagram_url",
    "linkedin_url",
    "facebook_url",
    "twitter_url",
    "youtube_url",
)


class SiteDataSource(Protocol):
    """The reads SiteResolver needs from the data layer."""

    async def find_active_by_slug(self, slug: str) -> Site | None: ...

    async def find_global_settings(self) -> GlobalSettings | None: ...

    async def find_default(self) -> Site | None: ...


def first_present(*values: Any) -> Any:
    """Return the first value that is neither None nor an empty string."""
    for value in values:
        if value is not None and value != "":
            return value
    return None


def merge_logo(site: Site, global_settings: GlobalSettings | None) -> str | None:
    """Site logo, else global logo, else None."""
    return first_present(
        site.logo_path,
        global_settings.logo_path if global_settings else None,
    )


def merge_footer(
    site: Site,
    site_settings: SiteSettings | None,
    global_settings: GlobalSettings | None,
) -> FooterSettings:
    """Merge footer fields with precedence site > global > literal fallback.

    ``about_text`` falls back to "Informasi terbaru dari {site name}";
    social links have no literal fallback.
    """

    def pick(field: str, fallback: str | None = None) -> str | None:
        return first_present(
            getattr(site_settings, field, None),
            getattr(global_settings, field, None),
            fallback,
        )

    social_links = {field: pick(field) for field in SOCIAL_LINK_FIELDS}

    return FooterSettings(
        site_name=site.name,
        about_text=pick("about_text", ABOUT_TEXT_FALLBACK.format(site_name=site.name)),
        logo_path=merge_logo(site, global_settings),
        **social_links,
    )


def build_navigation(
    site_slug: str,
    categories: Sequence[Category],
    max_categories: int = MAX_NAV_CATEGORIES,
) -> list[NavLink]:
    """Build the navigation bar: home, first categories in order, search."""
    home = NavLink(href=get_site_url(site_slug), label=NAV_HOME_LABEL)
    category_links = [
        NavLink(
            href=f"{get_site_url(site_slug)}?category={category.slug}",
            label=category.name.upper(),
        )
        for category in list(categories)[:max_categories]
    ]
    search = NavLink(href=get_site_url(site_slug, "search"), label=NAV_SEARCH_LABEL)
    return [home, *category_links, search]


def build_site_context(site: Site, global_settings: GlobalSettings | None) -> SiteContext:
    """Assemble the per-request view-model for a resolved site."""
    return SiteContext(
        site_id=site.id,
        slug=site.slug,
        name=site.name,
        primary_color=site.primary_color or DEFAULT_PRIMARY_COLOR,
        logo_path=merge_logo(site, global_settings),
        navigation=build_navigation(site.slug, site.categories),
        footer=merge_footer(site, site.settings, global_settings),
    )


class SiteResolver:
    """Resolves a slug to a SiteContext.

    The resolver only reads. Remembering the site in the session cookie is
    up to the caller.
    """

    def __init__(self, repository: SiteDataSource) -> None:
        self.repository = repository

    async def resolve(self, slug: str) -> SiteContext:
        """Resolve an active site and merge its configuration.

        Args:
            slug: The site's URL slug

        Returns:
            The merged site context

        Raises:
            SiteNotFoundError: If no active site has this slug
            SiteResolutionError: If the data layer failed
        """
        site, global_settings = await self._fetch(slug)

        if site is None:
            logger.info("site_not_found", site_slug=slug)
            raise SiteNotFoundError(slug)

        context = build_site_context(site, global_settings)
        logger.debug("site_resolved", site_slug=slug, site_id=str(site.id))
        return context

    async def resolve_default(self, fallback_slug: str) -> SiteContext:
        """Resolve the active site flagged as default, else ``fallback_slug``.

        Raises:
            SiteNotFoundError: If neither site exists
            SiteResolutionError: If the data layer failed
        """
        try:
            site = await self.repository.find_default()
        except Exception as exc:
            logger.error(
                "site_resolution_failed",
                site_slug=fallback_slug,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise SiteResolutionError(fallback_slug, reason=type(exc).__name__) from exc

        return await self.resolve(site.slug if site else fallback_slug)

    async def _fetch(self, slug: str) -> tuple[Site | None, GlobalSettings | None]:
        # Both reads are independent; either failing aborts resolution
        site_task = asyncio.ensure_future(self.repository.find_active_by_slug(slug))
        settings_task = asyncio.ensure_future(self.repository.find_global_settings())
        try:
            site, global_settings = await asyncio.gather(site_task, settings_task)
        except Exception as exc:
            # Any failure here means "could not check", never "no such site"
            logger.error(
                "site_resolution_failed",
                site_slug=slug,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise SiteResolutionError(slug, reason=type(exc).__name__) from exc
        finally:
            for task in (site_task, settings_task):
                if not task.done():
                    task.cancel()
        return site, global_settings


def get_site_resolver(repository: SiteRepo) -> SiteResolver:
    """Dependency that provides a SiteResolver."""
    return SiteResolver(repository)


Resolver = Annotated[SiteResolver, Depends(get_site_resolver)]
