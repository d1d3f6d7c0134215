# ABOUTME: Cross-store integrity verification for a Folio library.
# ABOUTME: Finds catalog rows whose content file is missing and files no row references.

from dataclasses import dataclass, field

from folio.core.library import Library
from folio.db.mapping import Book


@dataclass
class VerifyResult:
    """Aggregated results from a library verification run."""

    ok: int = 0
    missing_content: list[Book] = field(default_factory=list)
    orphaned_files: list[str] = field(default_factory=list)

    @property
    def total_issues(self) -> int:
        """Total number of issues found across all categories."""
        return len(self.missing_content) + len(self.orphaned_files)


def verify_library(library: Library) -> VerifyResult:
    """Check that the catalog and the books directory agree.

    1. Every cataloged book has its content file.
    2. Every file in the books directory is referenced by some book.
       Unreferenced files are what a partially failed delete leaves behind.

    Read-only: nothing is repaired.
    """
    result = VerifyResult()
    books = library.list_books()
    referenced = {book.filename for book in books}

    for book in books:
        if library.content.exists(book.filename):
            result.ok += 1
        else:
            result.missing_content.append(book)

    result.orphaned_files = [
        name for name in library.content.list_files() if name not in referenced
    ]
    return result
