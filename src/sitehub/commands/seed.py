"""Command: sitehub seed - Generate demo/seed data for development."""

import asyncio
from typing import Any

import typer
from rich.console import Console
from sqlalchemy import select


console = Console()

DEFAULT_CATEGORIES = ["Berita", "Pengumuman", "Kegiatan", "Akademik", "Prestasi"]

DEMO_SITES: list[dict[str, Any]] = [
    {
        "name": "SJA Bandung",
        "slug": "sja-bandung",
        "primary_color": "#b91c1c",
        "categories": ["Berita", "Agenda", "Galeri"],
    },
    {
        "name": "SJA Jakarta",
        "slug": "sja-jakarta",
        "primary_color": "#047857",
        "categories": ["Berita", "Pengumuman", "Kegiatan", "Alumni", "Karir", "Beasiswa", "Olahraga"],
    },
    {
        "name": "SJA Arsip",
        "slug": "sja-arsip",
        "primary_color": "#4b5563",
        "categories": ["Arsip"],
        "is_active": False,
    },
]


async def _create_site(session: Any, data: dict[str, Any], is_default: bool = False) -> bool:
    """Create a site with its categories unless the slug is taken.

    Returns:
        True if the site was created
    """
    from sitehub.core.utils import generate_slug
    from sitehub.modules.sites.models import Category, Site, SiteSettings

    result = await session.execute(select(Site).where(Site.slug == data["slug"]))
    existing = result.scalar_one_or_none()
    if existing:
        console.print(f"[yellow]Site already exists:[/yellow] {existing.name}")
        return False

    site = Site(
        name=data["name"],
        slug=data["slug"],
        is_active=data.get("is_active", True),
        is_default=is_default,
        primary_color=data["primary_color"],
        logo_path=data.get("logo_path"),
        categories=[
            Category(name=name, slug=generate_slug(name), order=position)
            for position, name in enumerate(data["categories"])
        ],
    )
    if data.get("about_text"):
        site.settings = SiteSettings(about_text=data["about_text"])

    session.add(site)
    console.print(f"[green]✓[/green] Created site: {site.name} ({site.slug})")
    return True


async def seed_default() -> None:
    """Create the default site and the global settings row."""
    from sitehub.config import settings
    from sitehub.core.database import async_session_factory
    from sitehub.modules.sites.models import GlobalSettings

    async with async_session_factory() as session:
        await _create_site(
            session,
            {
                "name": "SJA Utama",
                "slug": settings.default_site_slug,
                "primary_color": "#0f4c81",
                "logo_path": "/uploads/logo-sja.png",
                "about_text": "Portal informasi resmi SJA.",
                "categories": DEFAULT_CATEGORIES,
            },
            is_default=True,
        )

        result = await session.execute(select(GlobalSettings).limit(1))
        if result.scalar_one_or_none() is None:
            session.add(
                GlobalSettings(site_name="SJA", logo_path="/uploads/logo-sja.png")
            )
            console.print("[green]✓[/green] Created global settings")

        await session.commit()


async def seed_demo() -> None:
    """Create the default data plus several demo sites."""
    from sitehub.core.database import async_session_factory

    await seed_default()

    async with async_session_factory() as session:
        for data in DEMO_SITES:
            await _create_site(session, data)
        await session.commit()


SCENARIOS = {
    "default": seed_default,
    "demo": seed_demo,
}


def seed(
    scenario: str = typer.Option(
        "default", "--scenario", "-s", help="Seed scenario to run (default, demo)"
    ),
) -> None:
    """Seed the database with sites for development."""
    from sitehub.core.database import async_engine

    runner = SCENARIOS.get(scenario)
    if runner is None:
        console.print(f"[red]Error:[/red] Unknown scenario: {scenario}")
        console.print(f"Available scenarios: {', '.join(SCENARIOS)}")
        raise typer.Exit(1)

    async def _run() -> None:
        try:
            await runner()
        finally:
            await async_engine.dispose()

    asyncio.run(_run())
