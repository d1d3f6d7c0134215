# ABOUTME: EPUB intake helpers using ebooklib.
# ABOUTME: Derives a catalog title from the file name and extracts the cover as a data URL.

import base64
import logging
from dataclasses import dataclass
from pathlib import Path

import ebooklib
from ebooklib import epub

logger = logging.getLogger(__name__)


class EpubReadError(Exception):
    """Raised when an EPUB file cannot be read or parsed."""


@dataclass
class EpubDetails:
    """What the library needs from an EPUB before cataloging it."""

    title: str
    filename: str
    cover: str | None = None


def title_from_filename(path: Path) -> str:
    """Catalog title for an EPUB: its file name without the .epub extension."""
    name = path.name
    if name.lower().endswith(".epub"):
        return name[: -len(".epub")]
    return name


def _find_cover_item(book: epub.EpubBook) -> epub.EpubItem | None:
    """Locate the cover image item of an EPUB, if present."""
    meta_entries = book.get_metadata("OPF", "cover")
    if meta_entries:
        cover_id = meta_entries[0][1].get("content")
        if cover_id:
            item = book.get_item_with_id(cover_id)
            if item is not None:
                return item

    # Fallback: an image with "cover" in its id or file name
    for item in book.get_items_of_type(ebooklib.ITEM_IMAGE):
        item_id = (item.get_id() or "").lower()
        item_name = (item.get_name() or "").lower()
        if "cover" in item_id or "cover" in item_name:
            return item

    for item in book.get_items_of_type(ebooklib.ITEM_COVER):
        return item

    return None


def cover_data_url(book: epub.EpubBook) -> str | None:
    """Return the EPUB cover as a base64 data URL, or None if there is none."""
    item = _find_cover_item(book)
    if item is None:
        return None
    content = item.get_content()
    if not content:
        return None
    media_type = getattr(item, "media_type", None) or "image/jpeg"
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{media_type};base64,{encoded}"


def read_epub_details(path: Path) -> EpubDetails:
    """Read the title, stored file name and cover of an EPUB.

    A cover that cannot be extracted is logged and left empty; the book is
    still importable.

    Raises:
        EpubReadError: If the file does not exist or is not a readable EPUB.
    """
    if not path.exists():
        raise EpubReadError(f"File not found: {path}")

    try:
        book = epub.read_epub(str(path), options={"ignore_ncx": True})
    except Exception as exc:
        raise EpubReadError(f"Failed to read EPUB: {path}: {exc}") from exc

    cover: str | None = None
    try:
        cover = cover_data_url(book)
    except Exception as exc:
        logger.warning("Failed to extract cover from %s: %s", path, exc)

    return EpubDetails(title=title_from_filename(path), filename=path.name, cover=cover)
