"""Unit tests for the pagination guard.

These tests verify validate_pagination including:
- Defaults and offset arithmetic
- Limit clamping (warning, not error)
- Invalid page/limit fallbacks
- The deep-pagination offset ceiling
"""

import pytest

from sitehub.core.pagination import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MAX_OFFSET,
    PaginationIssue,
    PaginationStatus,
    max_reachable_page,
    validate_pagination,
)
from sitehub.core.pagination.guard import OVERSIZED_INT, parse_int


pytestmark = pytest.mark.unit


class TestValidatePaginationDefaults:
    """Tests for absent parameters."""

    def test_absent_values_use_defaults(self):
        """No page and no limit gives the first default-sized page."""
        result = validate_pagination(None, None)

        assert result.limit == DEFAULT_LIMIT
        assert result.skip == 0
        assert result.page == 1
        assert result.ok

    def test_empty_strings_are_absent(self):
        """Empty query values behave like missing ones."""
        result = validate_pagination("", "  ")

        assert result.limit == DEFAULT_LIMIT
        assert result.skip == 0
        assert result.status is PaginationStatus.OK


class TestValidatePaginationOffsets:
    """Tests for the skip calculation."""

    @pytest.mark.parametrize(
        ("page", "limit", "skip"),
        [
            (1, 1, 0),
            (2, 20, 20),
            (3, 50, 100),
            (101, 100, 10000),
            (10001, 1, 10000),
            ("4", "25", 75),
        ],
    )
    def test_skip_is_page_minus_one_times_limit(self, page, limit, skip):
        """Valid input gives skip = (page-1)*limit with no advisory."""
        result = validate_pagination(page, limit)

        assert result.skip == skip
        assert result.ok
        assert result.message is None

    def test_skip_equal_to_ceiling_is_allowed(self):
        """An offset of exactly MAX_OFFSET is still served."""
        result = validate_pagination(501, 20)

        assert result.skip == MAX_OFFSET
        assert result.ok


class TestValidatePaginationLimit:
    """Tests for limit validation and clamping."""

    def test_limit_above_maximum_is_clamped_with_warning(self):
        """validate(1, 500) clamps to 100 and warns."""
        result = validate_pagination(1, 500)

        assert result.limit == MAX_LIMIT
        assert result.skip == 0
        assert result.status is PaginationStatus.WARNING
        assert result.issue is PaginationIssue.LIMIT_CLAMPED
        assert result.field == "limit"
        assert "maximum of 100" in result.message

    def test_clamped_limit_still_pages(self):
        """The clamped limit is used for the offset."""
        result = validate_pagination(3, "1000")

        assert result.limit == MAX_LIMIT
        assert result.skip == 200
        assert result.is_warning

    @pytest.mark.parametrize("limit", ["0", 0, -5, "abc", "-1"])
    def test_invalid_limit_falls_back_to_default(self, limit):
        """Non-positive or unparsable limits fall back with an error."""
        result = validate_pagination(3, limit)

        assert result.limit == DEFAULT_LIMIT
        assert result.skip == 0
        assert result.is_error
        assert result.issue is PaginationIssue.INVALID_PARAMETER
        assert result.field == "limit"

    def test_boolean_limit_is_rejected(self):
        """Booleans are not numbers here."""
        result = validate_pagination(1, True)

        assert result.is_error
        assert result.field == "limit"


class TestValidatePaginationPage:
    """Tests for page validation."""

    def test_negative_page_defaults_to_first_page(self):
        """validate(-1, 20) falls back to page 1 with an error."""
        result = validate_pagination(-1, 20)

        assert result.page == 1
        assert result.skip == 0
        assert result.limit == 20
        assert result.is_error
        assert result.issue is PaginationIssue.INVALID_PARAMETER
        assert result.field == "page"

    @pytest.mark.parametrize("page", ["0", "x", "-3"])
    def test_invalid_page_keeps_valid_limit(self, page):
        """A bad page does not discard a good limit."""
        result = validate_pagination(page, "50")

        assert result.limit == 50
        assert result.skip == 0
        assert result.field == "page"

    def test_invalid_page_after_clamp_reports_page_error(self):
        """A bad page outranks the clamp warning."""
        result = validate_pagination("nope", 500)

        assert result.limit == MAX_LIMIT
        assert result.is_error
        assert result.field == "page"


class TestValidatePaginationOffsetCeiling:
    """Tests for the deep-pagination ceiling."""

    def test_offset_too_large_reports_max_page(self):
        """validate(600, 20) is rejected with max page 501."""
        result = validate_pagination(600, 20)

        assert result.is_error
        assert result.issue is PaginationIssue.OFFSET_TOO_LARGE
        assert result.skip == 0
        assert result.limit == 20
        assert result.max_page == 501
        assert "Maximum page is 501" in result.message

    def test_max_page_uses_clamped_limit(self):
        """The remediation page is computed for the effective limit."""
        result = validate_pagination(1000, 5000)

        assert result.limit == MAX_LIMIT
        assert result.issue is PaginationIssue.OFFSET_TOO_LARGE
        assert result.max_page == max_reachable_page(MAX_LIMIT) == 101

    def test_skip_never_exceeds_ceiling(self):
        """No input yields a skip above MAX_OFFSET."""
        for page in (1, 50, 501, 502, 10**9):
            for limit in (1, 20, 100, 101, 10**6):
                result = validate_pagination(page, limit)
                assert 0 <= result.skip <= MAX_OFFSET


class TestParseInt:
    """Tests for the lenient integer parser."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("12", 12),
            (" 7", 7),
            ("12abc", 12),
            ("+3", 3),
            ("-4", -4),
            ("1.9", 1),
            (2.7, 2),
            (5, 5),
            ("abc", None),
            ("", None),
            (float("nan"), None),
            (True, None),
        ],
    )
    def test_parse_int(self, raw, expected):
        """Leading digits are read, anything else is rejected."""
        assert parse_int(raw) == expected


class TestOversizedInput:
    """Tests for digit strings longer than any sensible bound."""

    def test_huge_page_is_offset_too_large(self):
        """A thousands-of-digits page is a deep-pagination error, not a crash."""
        result = validate_pagination("9" * 5000, "20")

        assert result.is_error
        assert result.issue is PaginationIssue.OFFSET_TOO_LARGE
        assert result.limit == 20
        assert result.skip == 0
        assert result.max_page == 501

    def test_huge_limit_is_clamped(self):
        """A thousands-of-digits limit is clamped with a warning."""
        result = validate_pagination("1", "9" * 5000)

        assert result.is_warning
        assert result.issue is PaginationIssue.LIMIT_CLAMPED
        assert result.limit == MAX_LIMIT
        assert result.skip == 0

    def test_huge_negative_page_is_invalid(self):
        """A long negative number is still an invalid page."""
        result = validate_pagination("-" + "9" * 5000, "20")

        assert result.issue is PaginationIssue.INVALID_PARAMETER
        assert result.field == "page"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("9" * 5000, OVERSIZED_INT),
            ("-" + "9" * 5000, -OVERSIZED_INT),
            ("0" * 5000 + "42", 42),
            ("000", 0),
        ],
    )
    def test_parse_int_bounds_digit_runs(self, raw, expected):
        """Long runs saturate, leading zeros do not count."""
        assert parse_int(raw) == expected
