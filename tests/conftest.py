# ABOUTME: Shared pytest fixtures for Folio tests.
# ABOUTME: Provides temporary library homes, open Library instances, and sample EPUB files.

from collections.abc import Iterator
from pathlib import Path

import pytest
from ebooklib import epub

from folio.config import LibraryPaths
from folio.core.library import Library

FAKE_JPEG = b"\xff\xd8\xff\xe0fake jpeg bytes"


@pytest.fixture
def library_paths(tmp_path: Path) -> LibraryPaths:
    """Paths for a library home inside the test's temp directory."""
    return LibraryPaths(home=tmp_path / "home")


@pytest.fixture
def library(library_paths: LibraryPaths) -> Iterator[Library]:
    """An open Library backed by a fresh temporary home."""
    lib = Library.open(library_paths)
    yield lib
    lib.close()


def _build_epub(path: Path, title: str, cover: bytes | None = None) -> Path:
    book = epub.EpubBook()
    book.set_identifier(f"id-{path.stem}")
    book.set_title(title)
    book.set_language("en")
    book.add_author("Umberto Eco")

    if cover is not None:
        book.set_cover("cover.jpg", cover)

    chapter = epub.EpubHtml(title="Chapter 1", file_name="chap01.xhtml", lang="en")
    chapter.content = b"<html><body><h1>Chapter 1</h1><p>Content.</p></body></html>"
    book.add_item(chapter)

    book.toc = [epub.Link("chap01.xhtml", "Chapter 1", "chap01")]
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", chapter]

    epub.write_epub(str(path), book)
    return path


@pytest.fixture
def epub_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "incoming"
    directory.mkdir()
    return directory


@pytest.fixture
def sample_epub(epub_dir: Path) -> Path:
    """A minimal valid EPUB with a cover image."""
    return _build_epub(epub_dir / "The Name of the Rose.epub", "The Name of the Rose", FAKE_JPEG)


@pytest.fixture
def coverless_epub(epub_dir: Path) -> Path:
    """A minimal valid EPUB without any cover."""
    return _build_epub(epub_dir / "Baudolino.epub", "Baudolino")


@pytest.fixture
def corrupt_epub(epub_dir: Path) -> Path:
    """A file with an .epub name that is not a valid EPUB."""
    filepath = epub_dir / "corrupt.epub"
    filepath.write_text("this is not a valid epub file")
    return filepath
