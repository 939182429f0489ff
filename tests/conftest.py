"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from sitehub.core.database import get_db
from sitehub.main import create_app
from sitehub.modules.announcements.repos import AnnouncementRepository
from sitehub.modules.sites.models import GlobalSettings, Site
from sitehub.modules.sites.repos import get_site_repository
from tests.factories.site import make_global_settings, make_site
from tests.fakes import FakeSiteRepository


@pytest.fixture
def default_site() -> Site:
    """The deployment's default site with seven categories and settings."""
    return make_site(
        name="SJA Utama",
        slug="sja-utama",
        primary_color="#0f4c81",
        is_default=True,
        logo_path="/uploads/sja.png",
        categories=[
            "Berita",
            "Pengumuman",
            "Kegiatan",
            "Akademik",
            "Prestasi",
            "Alumni",
            "Karir",
        ],
        settings={"about_text": "Portal resmi SJA", "instagram_url": "https://instagram.com/sja"},
    )


@pytest.fixture
def inactive_site() -> Site:
    """A deactivated site."""
    return make_site(name="SJA Arsip", slug="sja-arsip", is_active=False, categories=["Arsip"])


@pytest.fixture
def global_settings() -> GlobalSettings:
    """Deployment-wide fallbacks."""
    return make_global_settings(
        site_name="SJA",
        logo_path="/uploads/global.png",
        facebook_url="https://facebook.com/sja",
    )


@pytest.fixture
def site_repository(
    default_site: Site, inactive_site: Site, global_settings: GlobalSettings
) -> FakeSiteRepository:
    """Fake repository holding the default and inactive sites."""
    return FakeSiteRepository(
        sites=[default_site, inactive_site],
        global_settings=global_settings,
    )


@pytest.fixture
def announcement_repository() -> MagicMock:
    """Mocked announcement repository returning an empty page by default."""
    repo = MagicMock(spec=AnnouncementRepository)
    repo.list_for_site = AsyncMock(return_value=([], 0))
    return repo


@pytest.fixture
def db_session() -> MagicMock:
    """Mocked database session for endpoints that only ping the database."""
    session = MagicMock()
    session.execute = AsyncMock(return_value=None)
    return session


@pytest.fixture
async def app(
    site_repository: FakeSiteRepository,
    announcement_repository: MagicMock,
    db_session: MagicMock,
) -> AsyncGenerator[Any, None]:
    """Create test application instance with fake data access."""
    application = create_app()

    async def override_get_db() -> AsyncGenerator[Any, None]:
        yield db_session

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_site_repository] = lambda: site_repository
    application.dependency_overrides[AnnouncementRepository] = lambda: announcement_repository

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
