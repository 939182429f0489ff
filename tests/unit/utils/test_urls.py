"""Tests for URL and text helpers."""

import pytest

from sitehub.core.utils import (
    extract_site_slug_from_path,
    generate_slug,
    get_admin_url,
    get_site_url,
    is_site_scoped_path,
)


pytestmark = pytest.mark.unit


class TestGetSiteUrl:
    """Tests for get_site_url."""

    def test_site_root(self):
        """No path gives the site's home."""
        assert get_site_url("sja-utama") == "/site/sja-utama"

    @pytest.mark.parametrize("path", ["search", "/search"])
    def test_leading_slash_is_optional(self, path):
        """Paths join with exactly one slash."""
        assert get_site_url("sja-utama", path) == "/site/sja-utama/search"


class TestGetAdminUrl:
    """Tests for get_admin_url."""

    def test_admin_root(self):
        assert get_admin_url() == "/admin"

    def test_admin_path(self):
        assert get_admin_url("/sites") == "/admin/sites"


class TestExtractSiteSlug:
    """Tests for extract_site_slug_from_path."""

    @pytest.mark.parametrize(
        ("path", "slug"),
        [
            ("/site/sja-utama", "sja-utama"),
            ("/site/sja-utama/", "sja-utama"),
            ("/site/sja-utama/some-article", "sja-utama"),
            ("/site", None),
            ("/site/", None),
            ("/article/foo", None),
            ("/", None),
        ],
    )
    def test_extract(self, path, slug):
        assert extract_site_slug_from_path(path) == slug


class TestIsSiteScopedPath:
    """Tests for is_site_scoped_path."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/site/x", True),
            ("/site", True),
            ("/sites/current", False),
            ("/website", False),
            ("/", False),
        ],
    )
    def test_scoped(self, path, expected):
        assert is_site_scoped_path(path) is expected


class TestGenerateSlug:
    """Tests for generate_slug."""

    @pytest.mark.parametrize(
        ("name", "slug"),
        [
            ("SJA Utama", "sja-utama"),
            ("Berita & Pengumuman!", "berita-pengumuman"),
            ("  spaced   out  ", "spaced-out"),
            ("under_score", "under-score"),
        ],
    )
    def test_slugify(self, name, slug):
        assert generate_slug(name) == slug

    def test_max_length(self):
        """Slugs are truncated to the requested length."""
        assert len(generate_slug("a" * 200, max_length=10)) == 10
