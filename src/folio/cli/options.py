# ABOUTME: Shared Click options and helpers for Folio CLI commands.
# ABOUTME: Provides the --home option and a library opener that aborts cleanly on startup failure.

from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape

from folio.config import DEFAULT_HOME, HOME_ENV_VAR, LibraryPaths
from folio.core.library import Library
from folio.errors import FolioError, StartupError

err_console = Console(stderr=True)

home_option = click.option(
    "--home",
    "home",
    type=click.Path(path_type=Path),
    envvar=HOME_ENV_VAR,
    default=None,
    help=f"Library home directory (default: ${HOME_ENV_VAR} or {DEFAULT_HOME})",
)


def open_library(home: Path | None) -> Library:
    """Open the library or exit with status 1; there is no degraded mode."""
    try:
        return Library.open(LibraryPaths.resolve(home))
    except StartupError as exc:
        err_console.print(f"[red]Cannot open library:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc


def fail(exc: FolioError) -> NoReturn:
    """Report a typed failure and exit with status 1."""
    err_console.print(f"[red]{escape(str(exc))}[/red]")
    raise SystemExit(1) from exc
