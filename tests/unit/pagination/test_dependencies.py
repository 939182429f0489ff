"""Unit tests for the pagination FastAPI dependency."""

from unittest.mock import MagicMock, patch

import pytest

from sitehub.core.pagination import PaginationIssue, get_pagination


pytestmark = pytest.mark.unit


def make_mock_request(path="/api/v1/sites/x/announcements"):
    """Create a mock Request for testing."""
    request = MagicMock()
    request.url = MagicMock()
    request.url.path = path
    return request


class TestGetPagination:
    """Tests for get_pagination."""

    async def test_valid_params_are_not_logged(self):
        """Valid input passes through silently."""
        with patch("sitehub.core.pagination.dependencies.logger") as mock_logger:
            result = await get_pagination(make_mock_request(), page="2", limit="10")

            assert result.skip == 10
            mock_logger.warning.assert_not_called()

    async def test_adjusted_params_are_logged(self):
        """Clamped or rejected input is logged as an advisory."""
        with patch("sitehub.core.pagination.dependencies.logger") as mock_logger:
            result = await get_pagination(make_mock_request(), page="600", limit="20")

            assert result.issue is PaginationIssue.OFFSET_TOO_LARGE
            mock_logger.warning.assert_called_once()
            args, kwargs = mock_logger.warning.call_args
            assert args == ("pagination_adjusted",)
            assert kwargs["issue"] == "offset_too_large"
            assert kwargs["status"] == "error"
