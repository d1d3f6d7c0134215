# ABOUTME: The `folio add` command for importing EPUB files into the library.
# ABOUTME: Accepts files or directories, stores each book's content, and catalogs it by title.

from pathlib import Path

import click
from rich.console import Console

from folio.cli.options import home_option, open_library
from folio.core.importer import find_epubs, import_epubs

console = Console()


def _collect(paths: tuple[Path, ...]) -> list[Path]:
    """Expand directories into their EPUB files, keeping explicit files as given."""
    collected: list[Path] = []
    for path in paths:
        if path.is_dir():
            collected.extend(find_epubs(path))
        else:
            collected.append(path)
    return collected


@click.command("add")
@click.argument(
    "paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path)
)
@home_option
def add(paths: tuple[Path, ...], home: Path | None) -> None:
    """Add EPUB files (or directories of them) to the library."""
    epubs = _collect(paths)
    if not epubs:
        console.print("[yellow]No EPUB files found.[/yellow]")
        return

    with open_library(home) as library:
        result = import_epubs(epubs, library)

    for path, message in result.error_details:
        console.print(f"[red]Error:[/red] {path.name}: {message}")

    console.print(
        f"{result.added} added, {result.existing} already in library, {result.errors} errors"
    )
    if result.errors:
        raise SystemExit(1)
