# ABOUTME: The `folio progress` command for recording a reading position.
# ABOUTME: Updates last position and percentage; unknown titles are left alone.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from folio.cli.options import fail, home_option, open_library
from folio.errors import FolioError

console = Console()


@click.command("progress")
@click.argument("title")
@click.argument("cfi")
@click.argument("percentage", type=click.FloatRange(0.0, 1.0))
@home_option
def progress(title: str, cfi: str, percentage: float, home: Path | None) -> None:
    """Record the reading position of TITLE (PERCENTAGE between 0 and 1)."""
    with open_library(home) as library:
        try:
            library.update_progress(title, cfi, percentage)
        except FolioError as exc:
            fail(exc)

    console.print(f"Saved position for [bold]{escape(title)}[/bold] at {percentage:.0%}.")
