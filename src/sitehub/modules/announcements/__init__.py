"""Announcements module - paginated per-site listings."""

from sitehub.modules.announcements.routes import router


# Module metadata
__module_info__ = {
    "name": "announcements",
    "version": "1.0.0",
    "description": "Published announcements per site",
    "dependencies": ["sites"],
}

__all__ = ["router"]
