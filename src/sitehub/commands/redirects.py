"""Command: sitehub redirects - Show the legacy redirect table."""

import typer
from rich.console import Console
from rich.table import Table


console = Console()


def redirects(
    path: str | None = typer.Argument(
        None, help="Show where this path would be redirected"
    ),
) -> None:
    """List legacy redirects, or check a single path against them."""
    from sitehub.config import settings
    from sitehub.core.redirects import build_redirector

    redirector = build_redirector(settings.default_site_slug, settings.legacy_redirect_rules)

    if path is not None:
        path, _, query = path.partition("?")
        match = redirector.match(path, query)
        if match is None:
            console.print(f"[yellow]No redirect:[/yellow] {path}")
            raise typer.Exit(1)
        console.print(f"[cyan]{path}[/cyan] -> [green]{match.location}[/green] ({match.status_code})")
        return

    table = Table(title="Legacy Redirects", show_header=True)
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Source", style="cyan", no_wrap=True)
    table.add_column("Destination", style="green")
    table.add_column("Status", no_wrap=True)

    for position, rule in enumerate(redirector.rules, start=1):
        table.add_row(str(position), rule.source, rule.destination, str(rule.status_code))

    console.print(table)
