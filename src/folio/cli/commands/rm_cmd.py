# ABOUTME: The `folio rm` command for deleting a book.
# ABOUTME: Removes the book's highlights, catalog row and content file, reporting orphaned files.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from folio.cli.options import fail, home_option, open_library
from folio.errors import FolioError

console = Console()


@click.command("rm")
@click.argument("title")
@home_option
def rm(title: str, home: Path | None) -> None:
    """Delete a book, its highlights and its content file."""
    with open_library(home) as library:
        try:
            result = library.delete_book(title)
        except FolioError as exc:
            fail(exc)

    if not result.success:
        console.print(
            f"[red]Deleted [bold]{escape(title)}[/bold] from the catalog, "
            f"but its file remains at {result.orphaned_path}: {escape(str(result.error))}[/red]"
        )
        raise SystemExit(1)

    console.print(
        f"Deleted [bold]{escape(title)}[/bold] ({result.highlights_deleted} highlight(s))."
    )
