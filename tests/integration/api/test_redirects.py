"""Integration tests for legacy URL redirects."""

import pytest
from httpx import ASGITransport, AsyncClient

from sitehub.core.redirects import LegacyRedirector, RedirectRule
from sitehub.main import create_app


pytestmark = pytest.mark.integration


class TestLegacyRedirects:
    """Requests to legacy paths are answered before routing."""

    @pytest.mark.parametrize(
        ("path", "location"),
        [
            ("/article/foo", "/site/sja-utama/foo"),
            ("/articles/foo", "/site/sja-utama/foo"),
            ("/category/berita", "/site/sja-utama?category=berita"),
            ("/search?q=ujian", "/site/sja-utama/search?q=ujian"),
        ],
    )
    async def test_legacy_path_is_permanently_redirected(
        self, client: AsyncClient, path, location
    ):
        response = await client.get(path)

        assert response.status_code == 301
        assert response.headers["location"] == location

    async def test_site_scoped_path_is_not_redirected(self, client: AsyncClient):
        """/site/ paths pass through to routing untouched."""
        response = await client.get("/site/sja-utama/foo")

        assert response.status_code == 404
        assert "location" not in response.headers

    async def test_api_paths_pass_through(self, client: AsyncClient):
        response = await client.get("/health/live")

        assert response.status_code == 200

    async def test_custom_table(self):
        """An injected table replaces the default one."""
        app = create_app(
            redirector=LegacyRedirector(
                [RedirectRule("/berita/:slug", "/site/kampus-b/:slug", permanent=False)]
            )
        )

        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as client:
            response = await client.get("/berita/libur")

        assert response.status_code == 302
        assert response.headers["location"] == "/site/kampus-b/libur"
