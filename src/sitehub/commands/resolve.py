"""Command: sitehub resolve - Resolve a site and print its context."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table


console = Console()


def resolve(
    slug: str | None = typer.Argument(
        None, help="Slug of the site to resolve (default: the default site)"
    ),
) -> None:
    """Resolve a site the same way the API does and print the result."""
    from sitehub.config import settings
    from sitehub.core.database import async_engine, async_session_factory
    from sitehub.core.errors import SiteNotFoundError, SiteResolutionError
    from sitehub.modules.sites.repos import SiteRepository
    from sitehub.modules.sites.services import SiteResolver

    async def _resolve(target: str | None):
        resolver = SiteResolver(SiteRepository(async_session_factory))
        try:
            if target is None:
                return await resolver.resolve_default(settings.default_site_slug)
            return await resolver.resolve(target)
        finally:
            await async_engine.dispose()

    try:
        context = asyncio.run(_resolve(slug))
    except SiteNotFoundError as e:
        console.print(f"[red]Error:[/red] No active site with slug '{e.slug}'.")
        raise typer.Exit(1)
    except SiteResolutionError as e:
        console.print(f"[red]Error:[/red] {e.message} ({e.details.get('reason')})")
        raise typer.Exit(2)

    console.print(
        f"\n[bold cyan]{context.name}[/bold cyan] "
        f"([dim]{context.slug}[/dim], {context.primary_color})"
    )
    console.print(f"Logo: {context.logo_path or '[dim]none[/dim]'}\n")

    nav = Table(title="Navigation", show_header=True)
    nav.add_column("Label", style="cyan", no_wrap=True)
    nav.add_column("Link")
    for link in context.navigation:
        nav.add_row(link.label, link.href)
    console.print(nav)

    footer = Table(title="Footer", show_header=True)
    footer.add_column("Field", style="cyan", no_wrap=True)
    footer.add_column("Value")
    for field, value in context.footer.model_dump().items():
        footer.add_row(field, value if value is not None else "[dim]-[/dim]")
    console.print(footer)
