"""Small helpers shared across modules."""

from sitehub.core.utils.text import generate_slug
from sitehub.core.utils.urls import (
    extract_site_slug_from_path,
    get_admin_url,
    get_site_url,
    is_site_scoped_path,
)


__all__ = [
    "extract_site_slug_from_path",
    "generate_slug",
    "get_admin_url",
    "get_site_url",
    "is_site_scoped_path",
]
