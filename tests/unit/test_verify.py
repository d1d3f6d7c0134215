# ABOUTME: Unit tests for cross-store library verification.
# ABOUTME: Validates detection of missing content files and orphaned files.

from folio.core.library import Library
from folio.core.verifier import VerifyResult, verify_library


class TestVerifyResult:
    def test_default_result_is_clean(self) -> None:
        result = VerifyResult()
        assert result.ok == 0
        assert result.total_issues == 0

    def test_total_issues(self) -> None:
        result = VerifyResult(orphaned_files=["a.epub", "b.epub"])
        assert result.total_issues == 2


class TestVerifyLibrary:
    def test_clean_library(self, library: Library) -> None:
        library.add_book("A", "a.epub", b"a")
        library.add_book("B", "b.epub", b"b")
        result = verify_library(library)
        assert result.ok == 2
        assert result.total_issues == 0

    def test_missing_content(self, library: Library) -> None:
        library.add_book("A", "a.epub", b"a")
        (library.content.directory / "a.epub").unlink()

        result = verify_library(library)

        assert result.ok == 0
        assert [b.title for b in result.missing_content] == ["A"]

    def test_orphaned_file(self, library: Library) -> None:
        library.add_book("A", "a.epub", b"a")
        library.content.write("stray.epub", b"left behind")

        result = verify_library(library)

        assert result.ok == 1
        assert result.orphaned_files == ["stray.epub"]
