# ABOUTME: Record types returned by the Folio stores.
# ABOUTME: Converts sqlite3.Row objects into Book, Highlight, Bookmark and Collection.

from dataclasses import dataclass
from typing import Any

DEFAULT_HIGHLIGHT_COLOR = "#facc15"
DEFAULT_COLLECTION_EMOJI = "📌"

BOOK_COLUMNS = (
    "id, title, filename, last_cfi, cover, locations_data, last_percentage, created_at"
)
HIGHLIGHT_COLUMNS = "id, book_title, cfi, text, color, notes, created_at"
BOOKMARK_COLUMNS = "id, book_title, cfi, label, created_at"
COLLECTION_COLUMNS = "id, name, emoji, created_at"


@dataclass
class Book:
    """A cataloged book and its reading state."""

    id: int
    title: str
    filename: str
    last_cfi: str
    cover: str | None
    locations_data: str | None
    last_percentage: float
    created_at: str


@dataclass
class Highlight:
    """A highlighted passage, tied to its book by title."""

    id: int
    book_title: str
    cfi: str
    text: str
    color: str
    notes: str
    created_at: str


@dataclass
class Bookmark:
    id: int
    book_title: str
    cfi: str
    label: str
    created_at: str


@dataclass
class Collection:
    """A named, user-defined grouping of highlights."""

    id: int
    name: str
    emoji: str
    created_at: str


def row_to_book(row: Any) -> Book:
    return Book(
        id=row["id"],
        title=row["title"],
        filename=row["filename"],
        last_cfi=row["last_cfi"],
        cover=row["cover"],
        locations_data=row["locations_data"],
        last_percentage=float(row["last_percentage"]),
        created_at=row["created_at"],
    )


def row_to_highlight(row: Any) -> Highlight:
    return Highlight(
        id=row["id"],
        book_title=row["book_title"],
        cfi=row["cfi"],
        text=row["text"],
        color=row["color"],
        notes=row["notes"],
        created_at=row["created_at"],
    )


def row_to_bookmark(row: Any) -> Bookmark:
    return Bookmark(
        id=row["id"],
        book_title=row["book_title"],
        cfi=row["cfi"],
        label=row["label"],
        created_at=row["created_at"],
    )


def row_to_collection(row: Any) -> Collection:
    return Collection(
        id=row["id"],
        name=row["name"],
        emoji=row["emoji"],
        created_at=row["created_at"],
    )
