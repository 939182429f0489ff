"""Error handling module with RFC 7807 Problem Details."""

from sitehub.core.errors.exceptions import (
    AppException,
    BadRequestError,
    NotFoundError,
    ServiceUnavailableError,
    SiteNotFoundError,
    SiteResolutionError,
    ValidationError,
)
from sitehub.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    "BadRequestError",
    # Handlers
    "FieldError",
    "NotFoundError",
    "ProblemDetail",
    "ServiceUnavailableError",
    "SiteNotFoundError",
    "SiteResolutionError",
    "ValidationError",
    "register_exception_handlers",
]
