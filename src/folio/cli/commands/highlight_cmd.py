# ABOUTME: The `folio highlights` command group for managing highlights.
# ABOUTME: Provides add, ls, note, and rm subcommands.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from folio.cli.options import fail, home_option, open_library
from folio.db.mapping import DEFAULT_HIGHLIGHT_COLOR, Highlight
from folio.errors import FolioError

console = Console()


def _highlight_table(highlights: list[Highlight]) -> Table:
    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Book")
    table.add_column("Text", style="bold")
    table.add_column("Notes")
    table.add_column("Added", style="dim")
    for hl in highlights:
        table.add_row(
            str(hl.id),
            escape(hl.book_title),
            escape(hl.text),
            escape(hl.notes),
            hl.created_at,
        )
    return table


@click.group("highlights")
def highlights() -> None:
    """Manage highlights."""


@highlights.command("add")
@click.argument("book_title")
@click.argument("cfi")
@click.argument("text")
@click.option("--color", default=DEFAULT_HIGHLIGHT_COLOR, show_default=True)
@click.option("--notes", default="")
@home_option
def highlight_add(
    book_title: str, cfi: str, text: str, color: str, notes: str, home: Path | None
) -> None:
    """Highlight TEXT at CFI in BOOK_TITLE."""
    with open_library(home) as library:
        try:
            hl = library.add_highlight(book_title, cfi, text, color=color, notes=notes)
        except FolioError as exc:
            fail(exc)

    console.print(f"Added highlight [cyan]{hl.id}[/cyan] to [bold]{escape(book_title)}[/bold].")


@highlights.command("ls")
@click.option("--book", "book_title", default=None, help="Only highlights of this book.")
@home_option
def highlight_ls(book_title: str | None, home: Path | None) -> None:
    """List highlights, newest first."""
    with open_library(home) as library:
        if book_title is not None:
            items = library.list_highlights(book_title)
        else:
            items = library.list_all_highlights()

    if not items:
        console.print("[yellow]No highlights.[/yellow]")
        return

    console.print(_highlight_table(items))


@highlights.command("note")
@click.argument("highlight_id", type=int)
@click.argument("notes")
@home_option
def highlight_note(highlight_id: int, notes: str, home: Path | None) -> None:
    """Replace the notes of a highlight."""
    with open_library(home) as library:
        try:
            library.update_highlight_notes(highlight_id, notes)
        except FolioError as exc:
            fail(exc)

    console.print(f"Updated notes on highlight {highlight_id}.")


@highlights.command("rm")
@click.argument("highlight_id", type=int)
@home_option
def highlight_rm(highlight_id: int, home: Path | None) -> None:
    """Delete a highlight."""
    with open_library(home) as library:
        try:
            library.delete_highlight(highlight_id)
        except FolioError as exc:
            fail(exc)

    console.print(f"Removed highlight {highlight_id}.")
