# ABOUTME: Unit tests for LibraryCatalog operations on the books table.
# ABOUTME: Validates insert-or-ignore, ordering, and no-op updates on unknown titles.

import sqlite3
from pathlib import Path

import pytest

from folio.db.catalog import LibraryCatalog
from folio.db.connection import open_database


@pytest.fixture()
def conn(tmp_path: Path) -> sqlite3.Connection:
    return open_database(tmp_path / "catalog_test.db")


@pytest.fixture()
def catalog(conn: sqlite3.Connection) -> LibraryCatalog:
    return LibraryCatalog(conn)


class TestInsertBook:
    def test_insert_creates_row(self, catalog: LibraryCatalog) -> None:
        assert catalog.insert_book("Dune", "dune.epub", "data:image/png;base64,AA==") is True
        book = catalog.get_by_title("Dune")
        assert book is not None
        assert book.filename == "dune.epub"
        assert book.cover == "data:image/png;base64,AA=="
        assert book.last_cfi == ""
        assert book.last_percentage == 0.0
        assert book.locations_data is None
        assert book.created_at

    def test_second_insert_is_ignored(self, catalog: LibraryCatalog) -> None:
        catalog.insert_book("Dune", "dune.epub", None)
        assert catalog.insert_book("Dune", "dune-v2.epub", "cover") is False

        book = catalog.get_by_title("Dune")
        assert book is not None
        assert book.filename == "dune.epub"
        assert book.cover is None

    def test_get_unknown_title(self, catalog: LibraryCatalog) -> None:
        assert catalog.get_by_title("Nope") is None


class TestListAll:
    def test_newest_first(self, catalog: LibraryCatalog, conn: sqlite3.Connection) -> None:
        for title, stamp in [
            ("Old", "2024-01-01 10:00:00"),
            ("Newest", "2024-03-01 10:00:00"),
            ("Middle", "2024-02-01 10:00:00"),
        ]:
            catalog.insert_book(title, f"{title}.epub")
            conn.execute("UPDATE books SET created_at = ? WHERE title = ?", (stamp, title))
        conn.commit()

        assert [b.title for b in catalog.list_all()] == ["Newest", "Middle", "Old"]

    def test_same_timestamp_falls_back_to_insert_order(self, catalog: LibraryCatalog) -> None:
        catalog.insert_book("First", "1.epub")
        catalog.insert_book("Second", "2.epub")
        assert [b.title for b in catalog.list_all()] == ["Second", "First"]


class TestUpdates:
    def test_update_progress(self, catalog: LibraryCatalog) -> None:
        catalog.insert_book("Dune", "dune.epub")
        assert catalog.update_progress("Dune", "epubcfi(/6/4)", 0.42) == 1

        book = catalog.get_by_title("Dune")
        assert book is not None
        assert book.last_cfi == "epubcfi(/6/4)"
        assert book.last_percentage == pytest.approx(0.42)

    def test_update_progress_unknown_title_is_noop(self, catalog: LibraryCatalog) -> None:
        catalog.insert_book("Dune", "dune.epub")
        assert catalog.update_progress("nonexistent", "cfi", 0.5) == 0
        assert [b.title for b in catalog.list_all()] == ["Dune"]

    def test_update_locations(self, catalog: LibraryCatalog) -> None:
        catalog.insert_book("Dune", "dune.epub")
        assert catalog.update_locations("Dune", '["cfi1","cfi2"]') == 1
        book = catalog.get_by_title("Dune")
        assert book is not None
        assert book.locations_data == '["cfi1","cfi2"]'

    def test_update_locations_unknown_title_is_noop(self, catalog: LibraryCatalog) -> None:
        assert catalog.update_locations("nonexistent", "[]") == 0


class TestDelete:
    def test_delete_by_title(self, catalog: LibraryCatalog) -> None:
        catalog.insert_book("Dune", "dune.epub")
        assert catalog.delete_by_title("Dune") == 1
        assert catalog.get_by_title("Dune") is None

    def test_clear(self, catalog: LibraryCatalog) -> None:
        catalog.insert_book("A", "a.epub")
        catalog.insert_book("B", "b.epub")
        catalog.clear()
        assert catalog.list_all() == []
