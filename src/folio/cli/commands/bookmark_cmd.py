# ABOUTME: The `folio bookmarks` command group for managing bookmarks.
# ABOUTME: Provides add, ls, and rm subcommands.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from folio.cli.options import fail, home_option, open_library
from folio.errors import FolioError

console = Console()


@click.group("bookmarks")
def bookmarks() -> None:
    """Manage bookmarks."""


@bookmarks.command("add")
@click.argument("book_title")
@click.argument("cfi")
@click.argument("label")
@home_option
def bookmark_add(book_title: str, cfi: str, label: str, home: Path | None) -> None:
    """Bookmark CFI in BOOK_TITLE under LABEL."""
    with open_library(home) as library:
        try:
            bookmark = library.add_bookmark(book_title, cfi, label)
        except FolioError as exc:
            fail(exc)

    console.print(f"Added bookmark [cyan]{bookmark.id}[/cyan] ({escape(label)}).")


@bookmarks.command("ls")
@click.argument("book_title")
@home_option
def bookmark_ls(book_title: str, home: Path | None) -> None:
    """List the bookmarks of a book, newest first."""
    with open_library(home) as library:
        items = library.list_bookmarks(book_title)

    if not items:
        console.print("[yellow]No bookmarks.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Label", style="bold")
    table.add_column("Position")
    table.add_column("Added", style="dim")
    for bookmark in items:
        table.add_row(
            str(bookmark.id), escape(bookmark.label), escape(bookmark.cfi), bookmark.created_at
        )

    console.print(table)


@bookmarks.command("rm")
@click.argument("bookmark_id", type=int)
@home_option
def bookmark_rm(bookmark_id: int, home: Path | None) -> None:
    """Delete a bookmark."""
    with open_library(home) as library:
        try:
            library.delete_bookmark(bookmark_id)
        except FolioError as exc:
            fail(exc)

    console.print(f"Removed bookmark {bookmark_id}.")
