"""Pagination guard against deep-pagination queries.

Offset pagination gets slower the further a query skips, so every listing
endpoint runs its raw ``page``/``limit`` input through ``validate_pagination``
before touching the database. Bad input never raises: the guard always
returns a usable ``limit``/``skip`` pair and, when it had to step in, an
advisory message tagged with its severity.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum

from sitehub.core.constants import DEFAULT_PAGE_SIZE, MAX_OFFSET, MAX_PAGE_SIZE


DEFAULT_LIMIT = DEFAULT_PAGE_SIZE
MAX_LIMIT = MAX_PAGE_SIZE

# Leading optional sign and digits, anything after is ignored ("12abc" -> 12)
_INT_PREFIX = re.compile(r"^\s*([+-]?)0*(\d+)")

# Longer digit runs are read as OVERSIZED_INT; every bound is far below it
MAX_INT_DIGITS = 18
OVERSIZED_INT = 10**MAX_INT_DIGITS

RawParam = int | float | str | None


class PaginationStatus(str, Enum):
    """Severity of a pagination outcome."""

    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


class PaginationIssue(str, Enum):
    """Machine-readable reason for a non-OK outcome."""

    LIMIT_CLAMPED = "limit_clamped"
    INVALID_PARAMETER = "invalid_parameter"
    OFFSET_TOO_LARGE = "offset_too_large"


@dataclass(frozen=True)
class PaginationResult:
    """Validated pagination window.

    ``limit`` and ``skip`` are always safe to pass to a query, whatever
    ``status`` says.
    """

    limit: int
    skip: int
    page: int
    status: PaginationStatus = PaginationStatus.OK
    issue: PaginationIssue | None = None
    field: str | None = None
    message: str | None = None
    max_page: int | None = None

    @property
    def ok(self) -> bool:
        return self.status is PaginationStatus.OK

    @property
    def is_warning(self) -> bool:
        return self.status is PaginationStatus.WARNING

    @property
    def is_error(self) -> bool:
        return self.status is PaginationStatus.ERROR


@dataclass(frozen=True)
class PaginationMeta:
    """Page counts for UI controls, bounded by the offset ceiling."""

    page: int
    limit: int
    total: int
    total_pages: int
    max_page: int
    has_next: bool
    has_prev: bool


def _is_absent(value: RawParam) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_int(value: RawParam) -> int | None:
    """Parse a raw query value into an int.

    Strings are read up to the first non-digit, floats are truncated.
    Digit runs longer than MAX_INT_DIGITS read as OVERSIZED_INT (signed).
    Returns None when no integer can be read. Booleans are rejected.

    Examples:
        >>> parse_int("12abc")
        12
        >>> parse_int(" 7")
        7
        >>> parse_int("abc") is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        if match is None:
            return None
        sign, digits = match.groups()
        if len(digits) > MAX_INT_DIGITS:
            return -OVERSIZED_INT if sign == "-" else OVERSIZED_INT
        return int(sign + digits)
    return None


def max_reachable_page(limit: int) -> int:
    """Highest page whose offset stays within MAX_OFFSET for ``limit``."""
    return MAX_OFFSET // limit + 1


def validate_pagination(page: RawParam, limit: RawParam) -> PaginationResult:
    """Validate and sanitize raw pagination parameters.

    Rules, in order:

    1. ``limit`` defaults to DEFAULT_LIMIT and must be an integer >= 1.
    2. ``limit`` above MAX_LIMIT is clamped, with a warning.
    3. ``page`` defaults to 1 and must be an integer >= 1.
    4. ``skip`` may not exceed MAX_OFFSET; the error reports the last
       reachable page for the effective limit.

    Args:
        page: Page number (1-indexed), as received from the request
        limit: Items per page, as received from the request

    Returns:
        A PaginationResult; never raises for bad input
    """
    parsed_limit = DEFAULT_LIMIT if _is_absent(limit) else parse_int(limit)

    if parsed_limit is None or parsed_limit < 1:
        return PaginationResult(
            limit=DEFAULT_LIMIT,
            skip=0,
            page=1,
            status=PaginationStatus.ERROR,
            issue=PaginationIssue.INVALID_PARAMETER,
            field="limit",
            message="Invalid limit parameter. Must be a positive number.",
        )

    warning: str | None = None
    if parsed_limit > MAX_LIMIT:
        parsed_limit = MAX_LIMIT
        warning = f"Limit exceeds maximum of {MAX_LIMIT}. Using maximum limit."

    parsed_page = 1 if _is_absent(page) else parse_int(page)

    if parsed_page is None or parsed_page < 1:
        return PaginationResult(
            limit=parsed_limit,
            skip=0,
            page=1,
            status=PaginationStatus.ERROR,
            issue=PaginationIssue.INVALID_PARAMETER,
            field="page",
            message="Invalid page parameter. Must be a positive number.",
        )

    skip = (parsed_page - 1) * parsed_limit

    if skip > MAX_OFFSET:
        max_page = max_reachable_page(parsed_limit)
        return PaginationResult(
            limit=parsed_limit,
            skip=0,
            page=1,
            status=PaginationStatus.ERROR,
            issue=PaginationIssue.OFFSET_TOO_LARGE,
            field="page",
            message=(
                f"Page offset too large. Maximum page is {max_page} "
                f"with limit {parsed_limit}."
            ),
            max_page=max_page,
        )

    if warning:
        return PaginationResult(
            limit=parsed_limit,
            skip=skip,
            page=parsed_page,
            status=PaginationStatus.WARNING,
            issue=PaginationIssue.LIMIT_CLAMPED,
            field="limit",
            message=warning,
        )

    return PaginationResult(limit=parsed_limit, skip=skip, page=parsed_page)


def get_pagination_meta(page: int, limit: int, total: int) -> PaginationMeta:
    """Calculate pagination metadata.

    ``max_page`` is capped by the offset ceiling as well as by ``total`` so
    that ``has_next`` never points at a page the guard would reject.
    """
    if limit < 1:
        raise ValueError("limit must be a positive integer")

    total_pages = math.ceil(total / limit) if total > 0 else 0
    max_page = min(total_pages, math.ceil(MAX_OFFSET / limit))

    return PaginationMeta(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        max_page=max_page,
        has_next=page < max_page,
        has_prev=page > 1,
    )
