"""Sites module - site resolution and the current-site session."""

from sitehub.modules.sites.routes import router


# Module metadata
__module_info__ = {
    "name": "sites",
    "version": "1.0.0",
    "description": "Site resolution and current-site session",
    "dependencies": [],
}

__all__ = ["router"]
