"""SiteHub - multi-tenant site resolution for announcement portals."""

__version__ = "0.1.0"
