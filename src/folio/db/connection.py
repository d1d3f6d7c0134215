# ABOUTME: SQLite connection management and schema initialization for Folio.
# ABOUTME: Opens or creates the database, creates tables, and applies additive migrations.

import logging
import sqlite3
from pathlib import Path

from folio.db.schema import ADDITIVE_MIGRATIONS, TABLES
from folio.errors import SchemaInitError, StartupError

logger = logging.getLogger(__name__)

_DUPLICATE_COLUMN = "duplicate column name"


def _is_already_applied(exc: sqlite3.OperationalError) -> bool:
    """Whether a failed ALTER TABLE means the column already exists."""
    return _DUPLICATE_COLUMN in str(exc).lower()


def _apply_migrations(conn: sqlite3.Connection) -> int:
    """Apply every additive migration, skipping the ones already applied.

    There is no version table: each migration is attempted on every startup
    and a "duplicate column name" error is taken to mean it already ran.
    Any other error propagates.

    Returns:
        The number of migrations that added a column on this run.
    """
    applied = 0
    for statement in ADDITIVE_MIGRATIONS:
        try:
            conn.execute(statement)
        except sqlite3.OperationalError as exc:
            if not _is_already_applied(exc):
                raise
            logger.debug("Migration already applied: %s", statement)
            continue
        applied += 1
        logger.info("Applied migration: %s", statement)
    conn.commit()
    return applied


def initialize(conn: sqlite3.Connection) -> None:
    """Create all tables if absent, then converge columns via migrations.

    Safe to call on every startup, including against databases created by
    an older schema. Never drops or renames anything.

    Raises:
        SchemaInitError: If the base tables cannot be created, or a migration
            fails for any reason other than the column already existing.
    """
    try:
        conn.executescript(TABLES)
    except sqlite3.Error as exc:
        raise SchemaInitError(f"Failed to initialize database: {exc}") from exc

    try:
        _apply_migrations(conn)
    except sqlite3.Error as exc:
        raise SchemaInitError(f"Migration failed: {exc}") from exc


def open_database(path: Path) -> sqlite3.Connection:
    """Open or create the Folio library database.

    Creates parent directories if they don't exist, enables WAL journal mode,
    foreign keys and sqlite3.Row access, then runs initialize(). The
    connection may be used from any thread; callers serialize access.

    Args:
        path: Path to the database file.

    Returns:
        A configured sqlite3.Connection.

    Raises:
        StartupError: If the directory or database file cannot be opened.
        SchemaInitError: If the schema cannot be brought up to date.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(path), check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA foreign_keys=ON")
    except (OSError, sqlite3.Error) as exc:
        raise StartupError(f"Cannot open database at {path}: {exc}") from exc

    try:
        initialize(conn)
    except SchemaInitError:
        conn.close()
        raise

    return conn
