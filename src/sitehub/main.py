"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sitehub import __version__
from sitehub.api.router import api_router
from sitehub.config import settings
from sitehub.core.database import async_engine
from sitehub.core.errors import register_exception_handlers
from sitehub.core.logging import (
    RequestIdMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)
from sitehub.core.redirects import (
    LegacyRedirectMiddleware,
    LegacyRedirector,
    build_redirector,
)


configure_logging(settings.log_level, json_logs=settings.is_production)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Handles startup and shutdown events.
    """
    logger.info(
        "application_startup",
        app_name=settings.app_name,
        environment=settings.environment,
        default_site=settings.default_site_slug,
    )

    yield

    logger.info("application_shutdown")

    await async_engine.dispose()
    logger.info("database_engine_disposed")


def create_app(redirector: LegacyRedirector | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        redirector: Legacy redirect table; built from settings when omitted

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=settings.app_name,
        description="Multi-site announcement portals with a shared backend",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        # Disable docs in production
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
    )

    cors_origins = settings.cors_origins
    if settings.is_development and not cors_origins:
        cors_origins = ["http://localhost:3000", "http://localhost:5173"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )

    # Legacy URLs are rewritten before any routing happens
    if settings.legacy_redirects_enabled:
        app.add_middleware(
            LegacyRedirectMiddleware,
            redirector=redirector
            or build_redirector(
                settings.default_site_slug,
                settings.legacy_redirect_rules,
            ),
        )

    app.add_middleware(RequestLoggingMiddleware)

    # Add request ID middleware last so it is outermost and runs first
    app.add_middleware(RequestIdMiddleware)

    # Register exception handlers for RFC 7807 error responses
    register_exception_handlers(app)

    app.include_router(api_router)

    return app
