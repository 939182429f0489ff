"""Pagination guard and metadata helpers."""

from sitehub.core.pagination.dependencies import Pagination, get_pagination
from sitehub.core.pagination.guard import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MAX_OFFSET,
    PaginationIssue,
    PaginationMeta,
    PaginationResult,
    PaginationStatus,
    get_pagination_meta,
    max_reachable_page,
    validate_pagination,
)


__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "MAX_OFFSET",
    "Pagination",
    "PaginationIssue",
    "PaginationMeta",
    "PaginationResult",
    "PaginationStatus",
    "get_pagination",
    "get_pagination_meta",
    "max_reachable_page",
    "validate_pagination",
]
