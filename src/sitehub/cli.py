"""Main SiteHub CLI application."""

import typer
from rich.console import Console

from sitehub import __version__
from sitehub.commands import redirects, resolve, seed


console = Console()

app = typer.Typer(
    name="sitehub",
    help="Seed sites, inspect site resolution and legacy redirects.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register commands
app.command(name="seed")(seed.seed)
app.command(name="resolve")(resolve.resolve)
app.command(name="redirects")(redirects.redirects)


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """SiteHub CLI - manage and inspect multi-site portals."""
    if version:
        console.print(f"[bold cyan]sitehub[/bold cyan] version {__version__}")
        raise typer.Exit()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
