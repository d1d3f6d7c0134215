# ABOUTME: The `folio wipe` command for erasing the whole library.
# ABOUTME: Clears books, highlights and bookmarks and empties the books directory.

from pathlib import Path

import click
from rich.console import Console

from folio.cli.options import fail, home_option, open_library
from folio.errors import FolioError

console = Console()


@click.command("wipe")
@click.confirmation_option(prompt="Delete every book, highlight and bookmark?")
@home_option
def wipe(home: Path | None) -> None:
    """Delete all books, highlights and bookmarks. Collections are kept."""
    with open_library(home) as library:
        try:
            library.wipe_all()
        except FolioError as exc:
            fail(exc)

    console.print("[green]Library wiped.[/green]")
