# ABOUTME: Book catalog operations for the Folio library database.
# ABOUTME: Insert, query, update reading state, and delete rows in the books table.

import sqlite3

from folio.db.mapping import BOOK_COLUMNS, Book, row_to_book


class LibraryCatalog:
    """Wraps a sqlite3 connection and provides typed access to the books table.

    Methods that take part in multi-step facade operations (insert_book,
    delete_by_title, clear) leave the transaction open; the caller commits
    or rolls back. Single-statement updates commit immediately.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def insert_book(self, title: str, filename: str, cover: str | None = None) -> bool:
        """Insert a catalog row unless one with this title already exists.

        An existing row is left untouched: filename and cover are only set
        on first insert. Does not commit.

        Returns:
            True if a new row was created.
        """
        cursor = self._conn.execute(
            "INSERT OR IGNORE INTO books (title, filename, cover) VALUES (?, ?, ?)",
            (title, filename, cover),
        )
        return cursor.rowcount > 0

    def get_by_title(self, title: str) -> Book | None:
        """Retrieve a book by its exact (case-sensitive) title."""
        cursor = self._conn.execute(
            f"SELECT {BOOK_COLUMNS} FROM books WHERE title = ?", (title,)
        )
        row = cursor.fetchone()
        return row_to_book(row) if row else None

    def list_all(self) -> list[Book]:
        """Return all books, newest first."""
        cursor = self._conn.execute(
            f"SELECT {BOOK_COLUMNS} FROM books ORDER BY created_at DESC, id DESC"
        )
        return [row_to_book(row) for row in cursor.fetchall()]

    def update_progress(self, title: str, cfi: str, percentage: float) -> int:
        """Store the last reading position for a book.

        Unknown titles are not an error: nothing is created and 0 is returned.

        Returns:
            The number of rows updated.
        """
        cursor = self._conn.execute(
            "UPDATE books SET last_cfi = ?, last_percentage = ? WHERE title = ?",
            (cfi, percentage, title),
        )
        self._conn.commit()
        return cursor.rowcount

    def update_locations(self, title: str, locations_data: str) -> int:
        """Store the serialized pagination cache for a book. No-op on unknown titles."""
        cursor = self._conn.execute(
            "UPDATE books SET locations_data = ? WHERE title = ?",
            (locations_data, title),
        )
        self._conn.commit()
        return cursor.rowcount

    def delete_by_title(self, title: str) -> int:
        """Delete the row for a title. Does not commit."""
        cursor = self._conn.execute("DELETE FROM books WHERE title = ?", (title,))
        return cursor.rowcount

    def clear(self) -> None:
        """Delete every book row. Does not commit."""
        self._conn.execute("DELETE FROM books")
