"""Cookie-backed "current site" for a browser session.

The site id and slug live in two cookies that are always written and
cleared together. Nothing else in the application reads or writes these
cookies; go through SiteContextStore.
"""

from typing import Annotated

import structlog
from fastapi import Depends, Request, Response

from sitehub.config import settings
from sitehub.modules.sites.schemas import SiteContext


logger = structlog.get_logger()

SITE_COOKIE_NAME = "current_site_id"
SITE_SLUG_COOKIE_NAME = "current_site_slug"

# Marks values written or cleared during this exchange
_CLEARED = object()


class SiteContextStore:
    """Reads and writes the current-site cookie pair for one exchange.

    Attributes:
        request: Incoming request the stored values are read from
        response: Outgoing response new values are written to
        secure: Whether cookies carry the Secure flag
        max_age: Cookie lifetime in seconds
    """

    def __init__(
        self,
        request: Request,
        response: Response,
        secure: bool | None = None,
        max_age: int | None = None,
    ) -> None:
        self.request = request
        self.response = response
        self.secure = settings.is_production if secure is None else secure
        self.max_age = settings.site_cookie_max_age if max_age is None else max_age
        self._pending: dict[str, object] | None = None

    def _read_pair(self) -> tuple[str, str] | None:
        if self._pending is not None:
            site_id = self._pending[SITE_COOKIE_NAME]
            slug = self._pending[SITE_SLUG_COOKIE_NAME]
            if site_id is _CLEARED or slug is _CLEARED:
                return None
            return str(site_id), str(slug)

        site_id = self.request.cookies.get(SITE_COOKIE_NAME)
        slug = self.request.cookies.get(SITE_SLUG_COOKIE_NAME)
        # Half a pair is treated as nothing stored
        if not site_id or not slug:
            return None
        return site_id, slug

    def get(self) -> str | None:
        """Get the current site ID, or None."""
        pair = self._read_pair()
        return pair[0] if pair else None

    def get_slug(self) -> str | None:
        """Get the current site slug, or None."""
        pair = self._read_pair()
        return pair[1] if pair else None

    def set(self, site_id: str, slug: str) -> None:
        """Remember a site for this browser session.

        Args:
            site_id: The site's ID
            slug: The site's slug

        Raises:
            ValueError: If either value is empty
        """
        if not site_id or not slug:
            raise ValueError("site_id and slug must both be non-empty")

        for key, value in ((SITE_COOKIE_NAME, site_id), (SITE_SLUG_COOKIE_NAME, slug)):
            self.response.set_cookie(
                key=key,
                value=value,
                max_age=self.max_age,
                path="/",
                httponly=True,
                secure=self.secure,
                samesite="lax",
            )

        self._pending = {SITE_COOKIE_NAME: site_id, SITE_SLUG_COOKIE_NAME: slug}
        logger.info("site_context_set", site_id=site_id, site_slug=slug)

    def clear(self) -> None:
        """Forget the current site."""
        for key in (SITE_COOKIE_NAME, SITE_SLUG_COOKIE_NAME):
            self.response.delete_cookie(
                key=key,
                path="/",
                httponly=True,
                secure=self.secure,
                samesite="lax",
            )

        self._pending = {SITE_COOKIE_NAME: _CLEARED, SITE_SLUG_COOKIE_NAME: _CLEARED}
        logger.info("site_context_cleared")


def get_site_context_store(request: Request, response: Response) -> SiteContextStore:
    """Dependency that provides a SiteContextStore for the current exchange."""
    return SiteContextStore(request, response)


SiteContextStoreDep = Annotated[SiteContextStore, Depends(get_site_context_store)]


def bind_request_site(request: Request, context: SiteContext) -> None:
    """Record a resolved site on the request and in the structlog context.

    The request-id middleware unbinds both keys when the request ends.
    """
    request.state.site_id = context.site_id
    structlog.contextvars.bind_contextvars(
        site_id=str(context.site_id),
        site_slug=context.slug,
    )
