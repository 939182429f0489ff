"""Test data factories."""

from tests.factories.site import SiteFactory, make_global_settings, make_site


__all__ = ["SiteFactory", "make_global_settings", "make_site"]
