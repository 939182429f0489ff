"""Database layer - session management, base models, and mixins."""

from sitehub.core.database.base import Base, SiteMixin, TimestampMixin, UUIDMixin
from sitehub.core.database.session import (
    async_engine,
    async_session_factory,
    get_db,
)


__all__ = [
    "Base",
    "SiteMixin",
    "TimestampMixin",
    "UUIDMixin",
    "async_engine",
    "async_session_factory",
    "get_db",
]
