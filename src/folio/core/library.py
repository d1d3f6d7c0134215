# ABOUTME: The Folio command surface: every library operation behind one lock.
# ABOUTME: Coordinates the stores and content files so composite operations stay ordered.

import enum
import logging
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from folio.config import LibraryPaths
from folio.core.content import ContentStore
from folio.db.annotations import AnnotationStore
from folio.db.catalog import LibraryCatalog
from folio.db.collection_store import CollectionStore
from folio.db.connection import open_database
from folio.db.mapping import (
    DEFAULT_COLLECTION_EMOJI,
    DEFAULT_HIGHLIGHT_COLOR,
    Book,
    Bookmark,
    Collection,
    Highlight,
)
from folio.errors import NotFoundError, StartupError, StorageError

logger = logging.getLogger(__name__)


class DeleteStatus(enum.Enum):
    APPLIED = "applied"
    FILE_ORPHANED = "file_orphaned"


@dataclass
class DeleteResult:
    """Outcome of delete_book.

    FILE_ORPHANED means the database rows are gone (and stay gone) but the
    content file could not be removed; orphaned_path names it.
    """

    title: str
    filename: str
    status: DeleteStatus
    highlights_deleted: int = 0
    orphaned_path: Path | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.status is DeleteStatus.APPLIED


class Library:
    """Owns the single database connection and serializes access to it.

    Each public method holds the lock for its whole duration, including
    multi-statement operations. Database and filesystem failures surface as
    StorageError with the underlying message.
    """

    def __init__(self, conn: sqlite3.Connection, content: ContentStore) -> None:
        self._conn = conn
        self._lock = threading.Lock()
        self.content = content
        self.catalog = LibraryCatalog(conn)
        self.annotations = AnnotationStore(conn)
        self.collections = CollectionStore(conn)

    @classmethod
    def open(cls, paths: LibraryPaths) -> "Library":
        """Prepare the library home and open the database.

        Raises:
            StartupError: If the home, content directory or database cannot
                be created or initialized. There is no degraded mode.
        """
        try:
            paths.books_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StartupError(f"Cannot create storage directory {paths.books_dir}: {exc}") from exc

        conn = open_database(paths.db_path)
        logger.debug("Opened library at %s", paths.home)
        return cls(conn, ContentStore(paths.books_dir))

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def __enter__(self) -> "Library":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @contextmanager
    def _exclusive(self) -> Iterator[None]:
        """Hold the connection lock; roll back on any failure and wrap raw storage errors.

        ValueError covers paths the filesystem rejects outright, such as an
        embedded NUL byte in a filename.
        """
        with self._lock:
            try:
                yield
            except (sqlite3.Error, OSError, ValueError) as exc:
                self._conn.rollback()
                raise StorageError(str(exc)) from exc
            except BaseException:
                self._conn.rollback()
                raise

    # --- Books ---

    def add_book(
        self, title: str, filename: str, content: bytes, cover: str | None = None
    ) -> Book:
        """Catalog a book and store its content, returning the catalog row.

        Idempotent per title: if the title exists the row is not changed and
        only its content file (at the stored filename) is rewritten. A new
        row is committed only after its file is written.
        """
        with self._exclusive():
            created = self.catalog.insert_book(title, filename, cover)
            book = self.catalog.get_by_title(title)
            if book is None:
                raise StorageError(f"Book '{title}' missing from catalog after insert")
            self.content.write(book.filename, content)
            self._conn.commit()

        if created:
            logger.info("Added book %r as %s", title, book.filename)
        else:
            logger.info("Book %r already cataloged; rewrote %s", title, book.filename)
        return book

    def get_book(self, title: str) -> Book | None:
        with self._exclusive():
            return self.catalog.get_by_title(title)

    def list_books(self) -> list[Book]:
        with self._exclusive():
            return self.catalog.list_all()

    def update_progress(self, title: str, cfi: str, percentage: float) -> None:
        with self._exclusive():
            self.catalog.update_progress(title, cfi, percentage)

    def update_locations(self, title: str, locations_data: str) -> None:
        with self._exclusive():
            self.catalog.update_locations(title, locations_data)

    def get_content(self, filename: str) -> bytes:
        """Read a book's content file. Not serialized with database operations.

        Raises:
            NotFoundError: If the file is missing, even when a row references it.
        """
        try:
            return self.content.read(filename)
        except (OSError, ValueError) as exc:
            raise StorageError(str(exc)) from exc

    def read_book(self, title: str) -> bytes:
        """Look up a book by title and return its content."""
        book = self.get_book(title)
        if book is None:
            raise NotFoundError(f"Book '{title}' not found")
        return self.get_content(book.filename)

    def delete_book(self, title: str) -> DeleteResult:
        """Delete a book, its highlights, and its content file, in that order.

        Database work commits before the file is touched. If the file cannot
        be removed afterwards the database changes stand and the result
        reports FILE_ORPHANED. Bookmarks of the book are kept.

        Raises:
            NotFoundError: If no book has this title.
        """
        with self._exclusive():
            book = self.catalog.get_by_title(title)
            if book is None:
                raise NotFoundError(f"Book '{title}' not found")

            highlights_deleted = self.annotations.delete_highlights_for_book(title)
            self.catalog.delete_by_title(title)
            self._conn.commit()

            try:
                self.content.delete(book.filename)
            except OSError as exc:
                path = self.content.path_for(book.filename)
                logger.warning("Deleted %r but could not remove %s: %s", title, path, exc)
                return DeleteResult(
                    title=title,
                    filename=book.filename,
                    status=DeleteStatus.FILE_ORPHANED,
                    highlights_deleted=highlights_deleted,
                    orphaned_path=path,
                    error=str(exc),
                )

        logger.info("Deleted book %r (%d highlights)", title, highlights_deleted)
        return DeleteResult(
            title=title,
            filename=book.filename,
            status=DeleteStatus.APPLIED,
            highlights_deleted=highlights_deleted,
        )

    def wipe_all(self) -> None:
        """Delete all books, highlights and bookmarks, reclaim space, empty the books directory.

        Collections are not removed.
        """
        with self._exclusive():
            self.annotations.clear()
            self.catalog.clear()
            self._conn.commit()
            self._conn.execute("VACUUM")
            self.content.wipe()
        logger.info("Wiped library")

    # --- Highlights ---

    def add_highlight(
        self,
        book_title: str,
        cfi: str,
        text: str,
        color: str = DEFAULT_HIGHLIGHT_COLOR,
        notes: str = "",
    ) -> Highlight:
        with self._exclusive():
            return self.annotations.add_highlight(book_title, cfi, text, color, notes)

    def list_highlights(self, book_title: str) -> list[Highlight]:
        with self._exclusive():
            return self.annotations.list_highlights(book_title)

    def list_all_highlights(self) -> list[Highlight]:
        with self._exclusive():
            return self.annotations.list_all_highlights()

    def update_highlight_notes(self, highlight_id: int, notes: str) -> None:
        with self._exclusive():
            self.annotations.update_notes(highlight_id, notes)

    def delete_highlight(self, highlight_id: int) -> None:
        with self._exclusive():
            self.annotations.delete_highlight(highlight_id)

    # --- Bookmarks ---

    def add_bookmark(self, book_title: str, cfi: str, label: str) -> Bookmark:
        with self._exclusive():
            return self.annotations.add_bookmark(book_title, cfi, label)

    def list_bookmarks(self, book_title: str) -> list[Bookmark]:
        with self._exclusive():
            return self.annotations.list_bookmarks(book_title)

    def delete_bookmark(self, bookmark_id: int) -> None:
        with self._exclusive():
            self.annotations.delete_bookmark(bookmark_id)

    # --- Collections ---

    def create_collection(
        self, name: str, emoji: str = DEFAULT_COLLECTION_EMOJI
    ) -> Collection:
        with self._exclusive():
            return self.collections.create(name, emoji)

    def list_collections(self) -> list[Collection]:
        with self._exclusive():
            return self.collections.list_all()

    def delete_collection(self, collection_id: int) -> None:
        with self._exclusive():
            self.collections.delete(collection_id)

    def link_highlight_to_collection(self, highlight_id: int, collection_id: int) -> None:
        with self._exclusive():
            self.collections.link(highlight_id, collection_id)

    def unlink_highlight_from_collection(self, highlight_id: int, collection_id: int) -> None:
        with self._exclusive():
            self.collections.unlink(highlight_id, collection_id)

    def highlights_in_collection(self, collection_id: int) -> list[Highlight]:
        with self._exclusive():
            return self.collections.highlights_in(collection_id)

    def collections_of_highlight(self, highlight_id: int) -> list[Collection]:
        with self._exclusive():
            return self.collections.collections_of(highlight_id)
