"""Middleware that applies the legacy redirect table before routing."""

from typing import TYPE_CHECKING

import structlog
from fastapi import Request, Response
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from sitehub.core.redirects.redirector import LegacyRedirector


if TYPE_CHECKING:
    from starlette.types import ASGIApp


logger = structlog.get_logger()


class LegacyRedirectMiddleware(BaseHTTPMiddleware):
    """Answers legacy URLs with a redirect to their site-scoped equivalent.

    A matching rule is terminal: the request never reaches routing.

    Attributes:
        redirector: The redirect table to consult
    """

    def __init__(self, app: "ASGIApp", redirector: LegacyRedirector) -> None:
        super().__init__(app)
        self.redirector = redirector

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Redirect legacy paths, pass everything else through."""
        redirect = self.redirector.match(request.url.path, request.url.query)
        if redirect is None:
            return await call_next(request)

        logger.info(
            "legacy_redirect",
            path=request.url.path,
            location=redirect.location,
            status_code=redirect.status_code,
        )
        return RedirectResponse(url=redirect.location, status_code=redirect.status_code)
