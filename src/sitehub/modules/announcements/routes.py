"""Announcement API routes."""

from typing import Annotated

from fastapi import APIRouter, Query, Request

from sitehub.core.pagination import Pagination, get_pagination_meta
from sitehub.modules.announcements.repos import AnnouncementRepo
from sitehub.modules.announcements.schemas import (
    AnnouncementListResponse,
    AnnouncementResponse,
    PaginationNotice,
    PaginationResponse,
)
from sitehub.modules.sites.context import bind_request_site
from sitehub.modules.sites.services import Resolver


router = APIRouter(prefix="/sites/{slug}/announcements", tags=["announcements"])


@router.get(
    "",
    response_model=AnnouncementListResponse,
    summary="List a site's announcements",
    description=(
        "Published announcements for an active site, pinned first. "
        "Out-of-range pagination is corrected and reported in `notice`."
    ),
)
async def list_site_announcements(
    slug: str,
    request: Request,
    resolver: Resolver,
    repository: AnnouncementRepo,
    pagination: Pagination,
    category: Annotated[str | None, Query(max_length=63)] = None,
) -> AnnouncementListResponse:
    """List published announcements for a site."""
    context = await resolver.resolve(slug)
    bind_request_site(request, context)

    announcements, total = await repository.list_for_site(
        context.site_id,
        skip=pagination.skip,
        limit=pagination.limit,
        category_slug=category,
    )
    meta = get_pagination_meta(pagination.page, pagination.limit, total)

    return AnnouncementListResponse(
        data=[AnnouncementResponse.model_validate(item) for item in announcements],
        pagination=PaginationResponse.from_meta(meta),
        notice=PaginationNotice.from_result(pagination),
    )
