"""URL builders for site-scoped and admin paths.

Site-scoped paths follow ``/site/{slug}``; these helpers are the only place
that shape is spelled out.
"""

SITE_PATH_PREFIX = "site"
ADMIN_PATH_PREFIX = "admin"


def extract_site_slug_from_path(path: str) -> str | None:
    """Extract the site slug from a ``/site/{slug}/...`` path.

    Examples:
        >>> extract_site_slug_from_path("/site/sja-utama/some-article")
        'sja-utama'
        >>> extract_site_slug_from_path("/article/foo") is None
        True
    """
    segments = [segment for segment in path.split("/") if segment]
    if len(segments) >= 2 and segments[0] == SITE_PATH_PREFIX:
        return segments[1]
    return None


def is_site_scoped_path(path: str) -> bool:
    """Return True if the path already lives under ``/site/``."""
    segments = [segment for segment in path.split("/") if segment]
    return bool(segments) and segments[0] == SITE_PATH_PREFIX


def _join(prefix: str, path: str) -> str:
    clean_path = path[1:] if path.startswith("/") else path
    return f"{prefix}/{clean_path}" if clean_path else prefix


def get_site_url(site_slug: str, path: str = "") -> str:
    """Build a URL inside a site, e.g. ``get_site_url("x", "search")``."""
    return _join(f"/{SITE_PATH_PREFIX}/{site_slug}", path)


def get_admin_url(path: str = "") -> str:
    """Build an admin URL, e.g. ``get_admin_url("sites")`` -> ``/admin/sites``."""
    return _join(f"/{ADMIN_PATH_PREFIX}", path)
