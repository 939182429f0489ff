"""API routing layer."""
