"""CLI entry point for Folio."""

import logging
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv

# Load environment variables from .env.local
# Path: main.py -> folio/ -> src/ -> project root
load_dotenv(Path(__file__).parent.parent.parent / ".env.local")

import typer  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.logging import RichHandler  # noqa: E402
from rich.markup import escape  # noqa: E402
from rich.panel import Panel  # noqa: E402
from rich.table import Table  # noqa: E402

from folio.builder import EXPERIENCES_FILE, build_site  # noqa: E402
from folio.config import get_settings  # noqa: E402
from folio.loaders import ContentError, load_experiences  # noqa: E402
from folio.utils.date_utils import (  # noqa: E402
    InvalidDateError,
    MalformedRangeError,
    format_duration,
)
from folio.utils.sorting import sort_experiences  # noqa: E402

CONTENT_ERRORS = (ContentError, MalformedRangeError, InvalidDateError)

app = typer.Typer(
    name="folio",
    help="Folio - build a personal portfolio site from static content",
    add_completion=False,
)
console = Console()


def configure_logging(verbose: bool) -> None:
    """Send log records through rich, at DEBUG when verbose."""
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def build(
    content: Annotated[
        Path | None, typer.Option("--content", "-c", help="Content directory")
    ] = None,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output directory")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show detailed progress")
    ] = False,
) -> None:
    """Render every page of the site as Markdown."""
    configure_logging(verbose)
    settings = get_settings()
    content_dir = content or settings.content_dir
    output_dir = output or settings.output_dir

    console.print(
        Panel.fit(
            "[bold blue]Folio[/bold blue] - Building your site",
            border_style="blue",
        )
    )

    try:
        written = build_site(content_dir, output_dir)
    except CONTENT_ERRORS as e:
        console.print(f"\n[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    console.print(f"\n[green]Wrote {len(written)} pages to:[/green] {output_dir}")


@app.command()
def experience(
    content: Annotated[
        Path | None, typer.Option("--content", "-c", help="Content directory")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show detailed progress")
    ] = False,
) -> None:
    """List work experience, most recent first."""
    configure_logging(verbose)
    content_dir = content or get_settings().content_dir

    try:
        experiences = sort_experiences(load_experiences(content_dir / EXPERIENCES_FILE))
        rows = [
            (exp.position, exp.company, exp.duration, format_duration(exp.duration))
            for exp in experiences
        ]
    except CONTENT_ERRORS as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    table = Table(title="My Experience")
    table.add_column("Position")
    table.add_column("Company")
    table.add_column("Dates", style="dim")
    table.add_column("Length", style="green")
    for row in rows:
        table.add_row(*row)
    console.print(table)


@app.command()
def duration(
    value: Annotated[str, typer.Argument(help='Range like "Jan 2020 - Present"')],
) -> None:
    """Show how long a date range lasts."""
    try:
        console.print(format_duration(value))
    except (MalformedRangeError, InvalidDateError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


@app.command()
def version() -> None:
    """Show version information."""
    from folio import __version__

    console.print(f"Folio v{__version__}")


if __name__ == "__main__":
    app()
