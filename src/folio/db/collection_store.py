# ABOUTME: Collection operations for the Folio library database.
# ABOUTME: Named groupings of highlights with a many-to-many link table.

import sqlite3

from folio.db.mapping import (
    COLLECTION_COLUMNS,
    DEFAULT_COLLECTION_EMOJI,
    Collection,
    Highlight,
    row_to_collection,
    row_to_highlight,
)
from folio.errors import ConstraintViolationError, NotFoundError


class CollectionStore:
    """Typed access to the collections and highlight_collections tables."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create(self, name: str, emoji: str = DEFAULT_COLLECTION_EMOJI) -> Collection:
        """Create a collection.

        Unlike book and link inserts, a name collision is not ignored.

        Raises:
            ConstraintViolationError: If a collection with this name exists.
        """
        try:
            cursor = self._conn.execute(
                "INSERT INTO collections (name, emoji) VALUES (?, ?)", (name, emoji)
            )
            self._conn.commit()
        except sqlite3.IntegrityError as exc:
            self._conn.rollback()
            if "UNIQUE constraint failed: collections.name" in str(exc):
                raise ConstraintViolationError(
                    f"Collection '{name}' already exists"
                ) from exc
            raise

        row = self._conn.execute(
            f"SELECT {COLLECTION_COLUMNS} FROM collections WHERE id = ?",
            (cursor.lastrowid,),
        ).fetchone()
        return row_to_collection(row)

    def list_all(self) -> list[Collection]:
        """Return all collections, alphabetically by name."""
        cursor = self._conn.execute(
            f"SELECT {COLLECTION_COLUMNS} FROM collections ORDER BY name"
        )
        return [row_to_collection(row) for row in cursor.fetchall()]

    def delete(self, collection_id: int) -> int:
        """Delete a collection after removing its links. Unknown ids are a no-op."""
        self._conn.execute(
            "DELETE FROM highlight_collections WHERE collection_id = ?", (collection_id,)
        )
        cursor = self._conn.execute(
            "DELETE FROM collections WHERE id = ?", (collection_id,)
        )
        self._conn.commit()
        return cursor.rowcount

    def link(self, highlight_id: int, collection_id: int) -> None:
        """Add a highlight to a collection. Linking twice is a no-op.

        Raises:
            NotFoundError: If the highlight or the collection does not exist.
        """
        try:
            self._conn.execute(
                "INSERT OR IGNORE INTO highlight_collections (highlight_id, collection_id) "
                "VALUES (?, ?)",
                (highlight_id, collection_id),
            )
            self._conn.commit()
        except sqlite3.IntegrityError as exc:
            self._conn.rollback()
            if "FOREIGN KEY constraint failed" in str(exc):
                raise NotFoundError(
                    f"Highlight {highlight_id} or collection {collection_id} not found"
                ) from exc
            raise

    def unlink(self, highlight_id: int, collection_id: int) -> int:
        """Remove a highlight from a collection. Missing links are a no-op."""
        cursor = self._conn.execute(
            "DELETE FROM highlight_collections WHERE highlight_id = ? AND collection_id = ?",
            (highlight_id, collection_id),
        )
        self._conn.commit()
        return cursor.rowcount

    def highlights_in(self, collection_id: int) -> list[Highlight]:
        """Return the highlights in a collection, newest first."""
        cursor = self._conn.execute(
            "SELECT h.id, h.book_title, h.cfi, h.text, h.color, h.notes, h.created_at "
            "FROM highlights h "
            "JOIN highlight_collections hc ON h.id = hc.highlight_id "
            "WHERE hc.collection_id = ? "
            "ORDER BY h.created_at DESC, h.id DESC",
            (collection_id,),
        )
        return [row_to_highlight(row) for row in cursor.fetchall()]

    def collections_of(self, highlight_id: int) -> list[Collection]:
        """Return the collections a highlight belongs to, alphabetically by name."""
        cursor = self._conn.execute(
            "SELECT c.id, c.name, c.emoji, c.created_at "
            "FROM collections c "
            "JOIN highlight_collections hc ON c.id = hc.collection_id "
            "WHERE hc.highlight_id = ? "
            "ORDER BY c.name",
            (highlight_id,),
        )
        return [row_to_collection(row) for row in cursor.fetchall()]
