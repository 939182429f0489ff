"""Site API routes."""

from fastapi import APIRouter, Request, status

from sitehub.core.errors import NotFoundError
from sitehub.modules.sites.context import SiteContextStoreDep, bind_request_site
from sitehub.modules.sites.repos import SiteRepo
from sitehub.modules.sites.schemas import (
    CurrentSiteRequest,
    CurrentSiteResponse,
    SiteContext,
    SiteListResponse,
    SiteSummary,
)
from sitehub.modules.sites.services import Resolver


router = APIRouter(prefix="/sites", tags=["sites"])


@router.get(
    "",
    response_model=SiteListResponse,
    summary="List active sites",
)
async def list_sites(repository: SiteRepo) -> SiteListResponse:
    """List all active sites, ordered by name."""
    sites = await repository.list_active()
    return SiteListResponse(items=[SiteSummary.model_validate(site) for site in sites])


@router.get(
    "/current",
    response_model=CurrentSiteResponse,
    summary="Get the current site",
    description="Returns the site remembered for this browser session.",
)
async def get_current_site(store: SiteContextStoreDep) -> CurrentSiteResponse:
    """Get the current site from the session cookies."""
    site_id = store.get()
    slug = store.get_slug()
    if site_id is None or slug is None:
        raise NotFoundError("No current site selected", resource="current_site")
    return CurrentSiteResponse(site_id=site_id, slug=slug)


@router.put(
    "/current",
    response_model=CurrentSiteResponse,
    summary="Switch the current site",
)
async def set_current_site(
    body: CurrentSiteRequest,
    resolver: Resolver,
    store: SiteContextStoreDep,
) -> CurrentSiteResponse:
    """Resolve a site and remember it for this browser session.

    Cookies are only written once the site has resolved, so an unknown
    slug or a failed lookup leaves the previous selection untouched.
    """
    context = await resolver.resolve(body.slug)
    store.set(str(context.site_id), context.slug)
    return CurrentSiteResponse(site_id=str(context.site_id), slug=context.slug)


@router.delete(
    "/current",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Forget the current site",
)
async def clear_current_site(store: SiteContextStoreDep) -> None:
    """Clear the current site cookies."""
    store.clear()


@router.get(
    "/{slug}/context",
    response_model=SiteContext,
    summary="Resolve a site",
    description="Navigation, footer and branding for an active site.",
)
async def get_site_context(slug: str, request: Request, resolver: Resolver) -> SiteContext:
    """Resolve a site by slug."""
    context = await resolver.resolve(slug)
    bind_request_site(request, context)
    return context
