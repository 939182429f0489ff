"""FastAPI dependency that runs the pagination guard on query parameters."""

from typing import Annotated

import structlog
from fastapi import Depends, Query, Request

from sitehub.core.pagination.guard import PaginationResult, validate_pagination


logger = structlog.get_logger()


async def get_pagination(
    request: Request,
    page: Annotated[str | None, Query(description="Page number, 1-indexed")] = None,
    limit: Annotated[str | None, Query(description="Items per page")] = None,
) -> PaginationResult:
    """Validate ``page`` and ``limit`` from the query string.

    Both are taken as opaque strings so that malformed values reach the
    guard instead of failing FastAPI's own validation with a 422.
    """
    result = validate_pagination(page, limit)

    if not result.ok:
        logger.warning(
            "pagination_adjusted",
            path=str(request.url.path),
            status=result.status.value,
            issue=result.issue.value if result.issue else None,
            field=result.field,
            page=page,
            limit=limit,
        )

    return result


Pagination = Annotated[PaginationResult, Depends(get_pagination)]
