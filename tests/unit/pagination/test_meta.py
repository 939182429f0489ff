"""Unit tests for pagination metadata."""

import pytest

from sitehub.core.pagination import get_pagination_meta


pytestmark = pytest.mark.unit


class TestGetPaginationMeta:
    """Tests for get_pagination_meta."""

    def test_middle_page(self):
        """meta(5, 20, 1000) has pages on both sides."""
        meta = get_pagination_meta(5, 20, 1000)

        assert meta.total_pages == 50
        assert meta.max_page == 50
        assert meta.has_next is True
        assert meta.has_prev is True

    def test_last_page_has_no_next(self):
        """The final page of a short listing."""
        meta = get_pagination_meta(3, 10, 25)

        assert meta.total_pages == 3
        assert meta.max_page == 3
        assert meta.has_next is False
        assert meta.has_prev is True

    def test_max_page_capped_by_offset_ceiling(self):
        """A huge table stops offering pages past the ceiling."""
        meta = get_pagination_meta(500, 20, 1_000_000)

        assert meta.total_pages == 50_000
        assert meta.max_page == 500
        assert meta.has_next is False

    def test_empty_listing(self):
        """No rows means no pages."""
        meta = get_pagination_meta(1, 20, 0)

        assert meta.total_pages == 0
        assert meta.max_page == 0
        assert meta.has_next is False
        assert meta.has_prev is False

    def test_rejects_non_positive_limit(self):
        """Metadata needs a validated limit."""
        with pytest.raises(ValueError):
            get_pagination_meta(1, 0, 10)
