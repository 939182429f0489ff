"""Domain exceptions for the application.

These exceptions represent business-logic errors and are automatically
converted to RFC 7807 Problem Details responses by the exception handlers.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    All domain exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a requested resource is not found.

    Example:
        raise NotFoundError("Category not found", details={"slug": slug})
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class SiteNotFoundError(NotFoundError):
    """Raised when no active site matches a slug.

    This is the normal "tenant does not exist" outcome. It must never be
    used for infrastructure failures; see SiteResolutionError.
    """

    message = "Site not found"
    error_code = "site_not_found"

    def __init__(self, slug: str, **kwargs: Any) -> None:
        self.slug = slug
        super().__init__(
            message=kwargs.pop("message", None),
            resource="site",
            resource_id=slug,
            **kwargs,
        )


class ValidationError(AppException):
    """Raised when request data fails validation.

    Example:
        raise ValidationError(
            "Invalid input data",
            errors=[{"field": "slug", "message": "Invalid slug format"}]
        )
    """

    message = "Validation error"
    error_code = "validation_error"
    status_code = 422

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors
        super().__init__(message=message, details=details, **kwargs)


class BadRequestError(AppException):
    """Raised for general client errors.

    Example:
        raise BadRequestError("Invalid request format")
    """

    message = "Bad request"
    error_code = "bad_request"
    status_code = 400


class ServiceUnavailableError(AppException):
    """Raised when a required service is unavailable.

    Example:
        raise ServiceUnavailableError("Database connection failed")
    """

    message = "Service temporarily unavailable"
    error_code = "service_unavailable"
    status_code = 503


class SiteResolutionError(ServiceUnavailableError):
    """Raised when a site could not be looked up at all.

    Wraps data-access failures (connection errors, timeouts) so callers can
    tell "could not check" apart from "site does not exist". Clients may
    retry the whole request.
    """

    message = "Site could not be resolved"
    error_code = "site_resolution_failed"

    def __init__(self, slug: str, reason: str | None = None, **kwargs: Any) -> None:
        self.slug = slug
        details = kwargs.pop("details", {})
        details["slug"] = slug
        if reason:
            details["reason"] = reason
        super().__init__(message=kwargs.pop("message", None), details=details, **kwargs)
