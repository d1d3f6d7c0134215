# ABOUTME: The `folio verify` command for checking library integrity.
# ABOUTME: Reports books with missing content files and files no book references.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from folio.cli.options import home_option, open_library
from folio.core.verifier import verify_library

console = Console()


@click.command("verify")
@home_option
def verify(home: Path | None) -> None:
    """Verify that the catalog and the books directory agree."""
    with open_library(home) as library:
        result = verify_library(library)

    if result.total_issues > 0:
        table = Table()
        table.add_column("Title / File", style="bold")
        table.add_column("Issue", style="red")

        for book in result.missing_content:
            table.add_row(escape(book.title), f"Missing content file {escape(book.filename)}")

        for name in result.orphaned_files:
            table.add_row(escape(name), "Orphaned file")

        console.print(table)
        console.print(
            f"\n[red]{result.total_issues} issue(s) found, {result.ok} book(s) verified.[/red]"
        )
        raise SystemExit(1)

    console.print(f"[green]All {result.ok} book(s) verified.[/green]")
