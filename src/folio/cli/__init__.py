# ABOUTME: CLI package for Folio, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.logging import RichHandler

from folio.cli.commands import (
    add_cmd,
    bookmark_cmd,
    collection_cmd,
    highlight_cmd,
    ls_cmd,
    progress_cmd,
    rm_cmd,
    verify_cmd,
    wipe_cmd,
)


@click.group()
@click.version_option(package_name="folio")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Folio - local e-book library, reading state and highlights."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


cli.add_command(add_cmd.add)
cli.add_command(ls_cmd.ls)
cli.add_command(progress_cmd.progress)
cli.add_command(rm_cmd.rm)
cli.add_command(wipe_cmd.wipe)
cli.add_command(verify_cmd.verify)
cli.add_command(highlight_cmd.highlights)
cli.add_command(bookmark_cmd.bookmarks)
cli.add_command(collection_cmd.collections)
