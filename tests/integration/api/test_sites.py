"""Integration tests for site endpoints and the current-site cookies."""

import pytest
from httpx import AsyncClient

from sitehub.modules.sites.context import SITE_COOKIE_NAME, SITE_SLUG_COOKIE_NAME


pytestmark = pytest.mark.integration


class TestListSites:
    """Tests for GET /api/v1/sites."""

    async def test_lists_only_active_sites(self, client: AsyncClient, default_site):
        """Inactive sites are not listed."""
        response = await client.get("/api/v1/sites")

        assert response.status_code == 200
        items = response.json()["items"]
        assert [item["slug"] for item in items] == ["sja-utama"]
        assert items[0]["id"] == str(default_site.id)


class TestSiteContext:
    """Tests for GET /api/v1/sites/{slug}/context."""

    async def test_resolves_site(self, client: AsyncClient, default_site):
        """The merged context is returned for an active site."""
        response = await client.get("/api/v1/sites/sja-utama/context")

        assert response.status_code == 200
        data = response.json()
        assert data["site_id"] == str(default_site.id)
        assert data["primary_color"] == "#0f4c81"
        assert [link["label"] for link in data["navigation"]][0] == "BERANDA"
        assert len(data["navigation"]) == 7
        assert data["footer"]["about_text"] == "Portal resmi SJA"
        assert data["footer"]["facebook_url"] == "https://facebook.com/sja"

    @pytest.mark.parametrize("slug", ["sja-arsip", "tidak-ada"])
    async def test_unknown_or_inactive_site_is_404(self, client: AsyncClient, slug):
        """Missing and inactive sites answer 404."""
        response = await client.get(f"/api/v1/sites/{slug}/context")

        assert response.status_code == 404
        assert response.json()["type"].endswith("/errors/site_not_found")

    async def test_data_layer_failure_is_503(self, client: AsyncClient, site_repository):
        """A broken database is a retryable 503, not a 404."""
        site_repository.error = ConnectionError("database unreachable")

        response = await client.get("/api/v1/sites/sja-utama/context")

        assert response.status_code == 503
        assert response.headers["retry-after"] == "5"
        assert response.json()["type"].endswith("/errors/site_resolution_failed")


class TestCurrentSite:
    """Tests for the /api/v1/sites/current cookie flow."""

    async def test_nothing_selected_is_404(self, client: AsyncClient):
        """A fresh session has no current site."""
        response = await client.get("/api/v1/sites/current")

        assert response.status_code == 404

    async def test_select_read_and_clear(self, client: AsyncClient, default_site):
        """Selecting a site stores both cookies; clearing removes both."""
        response = await client.put("/api/v1/sites/current", json={"slug": "sja-utama"})

        assert response.status_code == 200
        assert response.json() == {"site_id": str(default_site.id), "slug": "sja-utama"}
        assert client.cookies.get(SITE_COOKIE_NAME) == str(default_site.id)
        assert client.cookies.get(SITE_SLUG_COOKIE_NAME) == "sja-utama"
        set_cookie = " ".join(response.headers.get_list("set-cookie")).lower()
        assert "httponly" in set_cookie
        assert "samesite=lax" in set_cookie

        response = await client.get("/api/v1/sites/current")
        assert response.status_code == 200
        assert response.json()["slug"] == "sja-utama"

        response = await client.delete("/api/v1/sites/current")
        assert response.status_code == 204
        assert client.cookies.get(SITE_COOKIE_NAME) is None
        assert client.cookies.get(SITE_SLUG_COOKIE_NAME) is None

        response = await client.get("/api/v1/sites/current")
        assert response.status_code == 404

    async def test_half_a_pair_is_not_a_selection(self, client: AsyncClient):
        """A lone slug cookie does not count as a current site."""
        client.cookies.set(SITE_SLUG_COOKIE_NAME, "sja-utama")

        response = await client.get("/api/v1/sites/current")

        assert response.status_code == 404

    async def test_unknown_site_leaves_cookies_alone(self, client: AsyncClient):
        """Selecting a missing site writes nothing."""
        response = await client.put("/api/v1/sites/current", json={"slug": "tidak-ada"})

        assert response.status_code == 404
        assert "set-cookie" not in response.headers

    async def test_resolution_failure_leaves_cookies_alone(
        self, client: AsyncClient, site_repository
    ):
        """A failed lookup is a 503 and writes nothing."""
        site_repository.error = TimeoutError()

        response = await client.put("/api/v1/sites/current", json={"slug": "sja-utama"})

        assert response.status_code == 503
        assert "set-cookie" not in response.headers

    @pytest.mark.parametrize("slug", ["", "a/b", "with space"])
    async def test_malformed_slug_is_422(self, client: AsyncClient, slug):
        """The slug must be a single path segment."""
        response = await client.put("/api/v1/sites/current", json={"slug": slug})

        assert response.status_code == 422
