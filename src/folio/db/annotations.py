# ABOUTME: Highlight and bookmark operations for the Folio library database.
# ABOUTME: Annotations reference books by title value; unknown ids make updates and deletes no-ops.

import sqlite3

from folio.db.mapping import (
    BOOKMARK_COLUMNS,
    DEFAULT_HIGHLIGHT_COLOR,
    HIGHLIGHT_COLUMNS,
    Bookmark,
    Highlight,
    row_to_bookmark,
    row_to_highlight,
)


class AnnotationStore:
    """Typed access to the highlights and bookmarks tables."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    # --- Highlights ---

    def add_highlight(
        self,
        book_title: str,
        cfi: str,
        text: str,
        color: str = DEFAULT_HIGHLIGHT_COLOR,
        notes: str = "",
    ) -> Highlight:
        """Insert a highlight and return it with its assigned id and timestamp.

        The book title is not checked against the catalog.
        """
        cursor = self._conn.execute(
            "INSERT INTO highlights (book_title, cfi, text, color, notes) "
            "VALUES (?, ?, ?, ?, ?)",
            (book_title, cfi, text, color, notes),
        )
        self._conn.commit()
        return self._get_highlight(cursor.lastrowid)  # type: ignore[arg-type]

    def _get_highlight(self, highlight_id: int) -> Highlight:
        cursor = self._conn.execute(
            f"SELECT {HIGHLIGHT_COLUMNS} FROM highlights WHERE id = ?", (highlight_id,)
        )
        return row_to_highlight(cursor.fetchone())

    def list_highlights(self, book_title: str) -> list[Highlight]:
        """Return the highlights of one book, newest first."""
        cursor = self._conn.execute(
            f"SELECT {HIGHLIGHT_COLUMNS} FROM highlights WHERE book_title = ? "
            "ORDER BY created_at DESC, id DESC",
            (book_title,),
        )
        return [row_to_highlight(row) for row in cursor.fetchall()]

    def list_all_highlights(self) -> list[Highlight]:
        """Return every highlight in the library, newest first."""
        cursor = self._conn.execute(
            f"SELECT {HIGHLIGHT_COLUMNS} FROM highlights ORDER BY created_at DESC, id DESC"
        )
        return [row_to_highlight(row) for row in cursor.fetchall()]

    def update_notes(self, highlight_id: int, notes: str) -> int:
        """Replace the notes on a highlight. Returns rows updated (0 for unknown ids)."""
        cursor = self._conn.execute(
            "UPDATE highlights SET notes = ? WHERE id = ?", (notes, highlight_id)
        )
        self._conn.commit()
        return cursor.rowcount

    def delete_highlight(self, highlight_id: int) -> int:
        """Delete a highlight and its collection links. Unknown ids are a no-op."""
        self._conn.execute(
            "DELETE FROM highlight_collections WHERE highlight_id = ?", (highlight_id,)
        )
        cursor = self._conn.execute("DELETE FROM highlights WHERE id = ?", (highlight_id,))
        self._conn.commit()
        return cursor.rowcount

    def delete_highlights_for_book(self, book_title: str) -> int:
        """Delete every highlight of a book and their collection links. Does not commit."""
        self._conn.execute(
            "DELETE FROM highlight_collections WHERE highlight_id IN "
            "(SELECT id FROM highlights WHERE book_title = ?)",
            (book_title,),
        )
        cursor = self._conn.execute(
            "DELETE FROM highlights WHERE book_title = ?", (book_title,)
        )
        return cursor.rowcount

    # --- Bookmarks ---

    def add_bookmark(self, book_title: str, cfi: str, label: str) -> Bookmark:
        """Insert a bookmark and return it with its assigned id and timestamp."""
        cursor = self._conn.execute(
            "INSERT INTO bookmarks (book_title, cfi, label) VALUES (?, ?, ?)",
            (book_title, cfi, label),
        )
        self._conn.commit()
        row = self._conn.execute(
            f"SELECT {BOOKMARK_COLUMNS} FROM bookmarks WHERE id = ?", (cursor.lastrowid,)
        ).fetchone()
        return row_to_bookmark(row)

    def list_bookmarks(self, book_title: str) -> list[Bookmark]:
        """Return the bookmarks of one book, newest first."""
        cursor = self._conn.execute(
            f"SELECT {BOOKMARK_COLUMNS} FROM bookmarks WHERE book_title = ? "
            "ORDER BY created_at DESC, id DESC",
            (book_title,),
        )
        return [row_to_bookmark(row) for row in cursor.fetchall()]

    def delete_bookmark(self, bookmark_id: int) -> int:
        cursor = self._conn.execute("DELETE FROM bookmarks WHERE id = ?", (bookmark_id,))
        self._conn.commit()
        return cursor.rowcount

    def clear(self) -> None:
        """Delete every highlight and bookmark. Does not commit.

        Collection links go with their highlights through the foreign key
        cascade; collections themselves are kept.
        """
        self._conn.execute("DELETE FROM highlights")
        self._conn.execute("DELETE FROM bookmarks")
