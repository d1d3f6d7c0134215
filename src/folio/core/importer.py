# ABOUTME: Import pipeline for adding EPUB files to a Folio library.
# ABOUTME: Reads each file, extracts its cover, and catalogs it through the Library facade.

from dataclasses import dataclass, field
from pathlib import Path

from folio.core.library import Library
from folio.errors import FolioError
from folio.formats.epub import EpubReadError, read_epub_details


@dataclass
class ImportResult:
    """Summary of an import operation."""

    added: int = 0
    existing: int = 0
    errors: int = 0
    error_details: list[tuple[Path, str]] = field(default_factory=list)


def find_epubs(directory: Path) -> list[Path]:
    """Recursively find all .epub files in a directory."""
    return sorted(directory.rglob("*.epub"))


def import_epubs(paths: list[Path], library: Library) -> ImportResult:
    """Add EPUB files to the library.

    Titles that are already cataloged count as existing; their content file
    is still rewritten by add_book. Unreadable files are recorded as errors
    and do not stop the run.
    """
    result = ImportResult()

    for epub_path in paths:
        try:
            details = read_epub_details(epub_path)
            data = epub_path.read_bytes()
        except (EpubReadError, OSError) as exc:
            result.errors += 1
            result.error_details.append((epub_path, str(exc)))
            continue

        already_cataloged = library.get_book(details.title) is not None

        try:
            library.add_book(details.title, details.filename, data, cover=details.cover)
        except FolioError as exc:
            result.errors += 1
            result.error_details.append((epub_path, str(exc)))
            continue

        if already_cataloged:
            result.existing += 1
        else:
            result.added += 1

    return result
