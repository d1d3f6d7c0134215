# ABOUTME: Filesystem layout of a Folio library home.
# ABOUTME: Resolves the database file and content directory from FOLIO_HOME or ~/.folio.

import os
from dataclasses import dataclass
from pathlib import Path

HOME_ENV_VAR = "FOLIO_HOME"
DEFAULT_HOME = Path.home() / ".folio"

DB_FILENAME = "highlights.db"
BOOKS_DIRNAME = "books"


def default_home() -> Path:
    """Return the library home, honoring the FOLIO_HOME environment variable."""
    override = os.environ.get(HOME_ENV_VAR)
    return Path(override).expanduser() if override else DEFAULT_HOME


@dataclass(frozen=True)
class LibraryPaths:
    """Locations of everything Folio persists under one home directory."""

    home: Path

    @property
    def db_path(self) -> Path:
        return self.home / DB_FILENAME

    @property
    def books_dir(self) -> Path:
        return self.home / BOOKS_DIRNAME

    @classmethod
    def resolve(cls, home: Path | None = None) -> "LibraryPaths":
        """Build paths for an explicit home, falling back to default_home()."""
        return cls(home=home or default_home())
