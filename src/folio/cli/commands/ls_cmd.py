# ABOUTME: The `folio ls` command for listing cataloged books.
# ABOUTME: Displays a Rich table of books, newest first, with reading progress.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from folio.cli.options import home_option, open_library
from folio.core.titles import clean_book_title

console = Console()


@click.command("ls")
@home_option
def ls(home: Path | None) -> None:
    """List all books in the library, newest first."""
    with open_library(home) as library:
        books = library.list_books()

    if not books:
        console.print("[yellow]No books in the library.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Progress", justify="right")
    table.add_column("Added", style="dim")

    for book in books:
        table.add_row(
            str(book.id),
            escape(clean_book_title(book.title)),
            f"{book.last_percentage:.0%}",
            book.created_at,
        )

    console.print(table)
    console.print(f"\n[dim]{len(books)} book(s)[/dim]")
