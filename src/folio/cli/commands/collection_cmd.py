# ABOUTME: The `folio collections` command group for grouping highlights.
# ABOUTME: Provides create, ls, rm, link, unlink, and show subcommands.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from folio.cli.options import fail, home_option, open_library
from folio.db.mapping import DEFAULT_COLLECTION_EMOJI
from folio.errors import FolioError

console = Console()


@click.group("collections")
def collections() -> None:
    """Manage highlight collections."""


@collections.command("create")
@click.argument("name")
@click.option("--emoji", default=DEFAULT_COLLECTION_EMOJI, show_default=True)
@home_option
def collection_create(name: str, emoji: str, home: Path | None) -> None:
    """Create a collection named NAME."""
    with open_library(home) as library:
        try:
            collection = library.create_collection(name, emoji)
        except FolioError as exc:
            fail(exc)

    console.print(
        f"Created {collection.emoji} [bold]{escape(collection.name)}[/bold] ({collection.id})."
    )


@collections.command("ls")
@home_option
def collection_ls(home: Path | None) -> None:
    """List collections alphabetically."""
    with open_library(home) as library:
        items = library.list_collections()

    if not items:
        console.print("[yellow]No collections.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Name", style="bold")
    table.add_column("Created", style="dim")
    for collection in items:
        table.add_row(
            str(collection.id),
            f"{collection.emoji} {escape(collection.name)}",
            collection.created_at,
        )

    console.print(table)


@collections.command("rm")
@click.argument("collection_id", type=int)
@home_option
def collection_rm(collection_id: int, home: Path | None) -> None:
    """Delete a collection. Its highlights are kept."""
    with open_library(home) as library:
        try:
            library.delete_collection(collection_id)
        except FolioError as exc:
            fail(exc)

    console.print(f"Removed collection {collection_id}.")


@collections.command("link")
@click.argument("highlight_id", type=int)
@click.argument("collection_id", type=int)
@home_option
def collection_link(highlight_id: int, collection_id: int, home: Path | None) -> None:
    """Add a highlight to a collection."""
    with open_library(home) as library:
        try:
            library.link_highlight_to_collection(highlight_id, collection_id)
        except FolioError as exc:
            fail(exc)

    console.print(f"Linked highlight {highlight_id} to collection {collection_id}.")


@collections.command("unlink")
@click.argument("highlight_id", type=int)
@click.argument("collection_id", type=int)
@home_option
def collection_unlink(highlight_id: int, collection_id: int, home: Path | None) -> None:
    """Remove a highlight from a collection."""
    with open_library(home) as library:
        try:
            library.unlink_highlight_from_collection(highlight_id, collection_id)
        except FolioError as exc:
            fail(exc)

    console.print(f"Unlinked highlight {highlight_id} from collection {collection_id}.")


@collections.command("show")
@click.argument("collection_id", type=int)
@home_option
def collection_show(collection_id: int, home: Path | None) -> None:
    """Show the highlights in a collection, newest first."""
    with open_library(home) as library:
        items = library.highlights_in_collection(collection_id)

    if not items:
        console.print("[yellow]No highlights in this collection.[/yellow]")
        return

    for hl in items:
        console.print(f"[dim]{hl.id}[/dim] [bold]{escape(hl.book_title)}[/bold]: {escape(hl.text)}")
