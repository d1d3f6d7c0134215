# ABOUTME: Public API for the Folio library database layer.
# ABOUTME: Exports connection setup, the three stores, and their record types.

from folio.db.annotations import AnnotationStore
from folio.db.catalog import LibraryCatalog
from folio.db.collection_store import CollectionStore
from folio.db.connection import initialize, open_database
from folio.db.mapping import Book, Bookmark, Collection, Highlight

__all__ = [
    "AnnotationStore",
    "Book",
    "Bookmark",
    "Collection",
    "CollectionStore",
    "Highlight",
    "LibraryCatalog",
    "initialize",
    "open_database",
]
