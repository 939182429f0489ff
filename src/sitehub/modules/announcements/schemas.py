"""Pydantic schemas for announcement listings."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from sitehub.core.pagination import PaginationMeta, PaginationResult


class CategoryBrief(BaseModel):
    """Category fields shown on an announcement card."""

    name: str
    slug: str
    color: str | None = None

    model_config = ConfigDict(from_attributes=True)


class AnnouncementResponse(BaseModel):
    """Schema for an announcement in a listing."""

    id: UUID
    title: str
    slug: str
    excerpt: str | None = None
    image_path: str | None = None
    is_pinned: bool
    category: CategoryBrief | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PaginationResponse(BaseModel):
    """Pagination metadata returned with every listing."""

    page: int
    limit: int
    total: int
    total_pages: int
    max_page: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_meta(cls, meta: PaginationMeta) -> "PaginationResponse":
        return cls(
            page=meta.page,
            limit=meta.limit,
            total=meta.total,
            total_pages=meta.total_pages,
            max_page=meta.max_page,
            has_next=meta.has_next,
            has_prev=meta.has_prev,
        )


class PaginationNotice(BaseModel):
    """Advisory attached when the pagination guard adjusted the request.

    ``status`` is "warning" when the request was served as asked but
    bounded (limit clamped), "error" when a parameter was replaced by its
    default.
    """

    status: str
    issue: str
    field: str | None = None
    message: str
    max_page: int | None = None

    @classmethod
    def from_result(cls, result: PaginationResult) -> "PaginationNotice | None":
        if result.ok or result.issue is None or result.message is None:
            return None
        return cls(
            status=result.status.value,
            issue=result.issue.value,
            field=result.field,
            message=result.message,
            max_page=result.max_page,
        )


class AnnouncementListResponse(BaseModel):
    """Schema for a paginated announcement listing."""

    data: list[AnnouncementResponse]
    pagination: PaginationResponse
    notice: PaginationNotice | None = None
