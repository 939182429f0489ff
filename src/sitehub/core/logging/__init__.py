"""Logging module with structured logging and request tracking."""

from sitehub.core.logging.middleware import RequestIdMiddleware, RequestLoggingMiddleware
from sitehub.core.logging.setup import configure_logging


__all__ = [
    "RequestIdMiddleware",
    "RequestLoggingMiddleware",
    "configure_logging",
]
