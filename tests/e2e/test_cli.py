# ABOUTME: End-to-end tests for the Folio CLI.
# ABOUTME: Drives full library workflows through Click's CliRunner against a real home directory.

from pathlib import Path

from click.testing import CliRunner

from folio.cli import cli
from folio.config import LibraryPaths
from folio.core.library import Library


def _run(runner: CliRunner, home: Path, *args: str):
    return runner.invoke(cli, [*args, "--home", str(home)])


class TestBookCommands:
    def test_add_ls_progress_rm(self, sample_epub: Path, tmp_path: Path) -> None:
        home = tmp_path / "home"
        runner = CliRunner()

        result = _run(runner, home, "add", str(sample_epub))
        assert result.exit_code == 0, result.output
        assert "1 added" in result.output

        result = _run(runner, home, "progress", "The Name of the Rose", "epubcfi(/6/4)", "0.5")
        assert result.exit_code == 0
        assert "50%" in result.output

        result = _run(runner, home, "ls")
        assert result.exit_code == 0
        assert "The Name of the Rose" in result.output
        assert "1 book(s)" in result.output

        result = _run(runner, home, "rm", "The Name of the Rose")
        assert result.exit_code == 0
        assert "Deleted" in result.output

        result = _run(runner, home, "ls")
        assert "No books in the library" in result.output

    def test_add_directory_twice(self, sample_epub: Path, tmp_path: Path) -> None:
        home = tmp_path / "home"
        runner = CliRunner()

        _run(runner, home, "add", str(sample_epub.parent))
        result = _run(runner, home, "add", str(sample_epub.parent))
        assert result.exit_code == 0
        assert "0 added, 1 already in library" in result.output

    def test_add_corrupt_exits_nonzero(self, corrupt_epub: Path, tmp_path: Path) -> None:
        result = _run(CliRunner(), tmp_path / "home", "add", str(corrupt_epub))
        assert result.exit_code == 1
        assert "1 errors" in result.output

    def test_rm_unknown_title(self, tmp_path: Path) -> None:
        result = _run(CliRunner(), tmp_path / "home", "rm", "Ghost")
        assert result.exit_code == 1

    def test_progress_unknown_title_succeeds(self, tmp_path: Path) -> None:
        result = _run(CliRunner(), tmp_path / "home", "progress", "nonexistent", "cfi", "0.5")
        assert result.exit_code == 0

    def test_wipe_and_verify(self, sample_epub: Path, tmp_path: Path) -> None:
        home = tmp_path / "home"
        runner = CliRunner()
        _run(runner, home, "add", str(sample_epub))

        result = _run(runner, home, "verify")
        assert result.exit_code == 0
        assert "All 1 book(s) verified" in result.output

        (home / "books" / "stray.epub").write_bytes(b"orphan")
        result = _run(runner, home, "verify")
        assert result.exit_code == 1
        assert "stray.epub" in result.output

        result = _run(runner, home, "wipe", "--yes")
        assert result.exit_code == 0
        assert list((home / "books").iterdir()) == []

        result = _run(runner, home, "ls")
        assert "No books in the library" in result.output

    def test_unopenable_home_aborts(self, tmp_path: Path) -> None:
        home = tmp_path / "home"
        home.write_text("a file")
        result = _run(CliRunner(), home, "ls")
        assert result.exit_code == 1

    def test_home_from_environment(self, tmp_path: Path) -> None:
        home = tmp_path / "envhome"
        runner = CliRunner(env={"FOLIO_HOME": str(home)})
        result = runner.invoke(cli, ["ls"])
        assert result.exit_code == 0
        assert (home / "highlights.db").exists()


class TestAnnotationCommands:
    def test_highlight_and_collection_workflow(self, tmp_path: Path) -> None:
        home = tmp_path / "home"
        runner = CliRunner()

        result = _run(
            runner, home, "highlights", "add", "Dune", "cfi-1", "Fear is the mind-killer."
        )
        assert result.exit_code == 0
        assert "Added highlight" in result.output

        result = _run(runner, home, "highlights", "note", "1", "Litany")
        assert result.exit_code == 0

        result = _run(runner, home, "highlights", "ls", "--book", "Dune")
        assert result.exit_code == 0
        assert "Litany" in result.output

        result = _run(runner, home, "collections", "create", "Favorites", "--emoji", "⭐")
        assert result.exit_code == 0

        result = _run(runner, home, "collections", "create", "Favorites")
        assert result.exit_code == 1
        assert "already exists" in result.output

        result = _run(runner, home, "collections", "link", "1", "1")
        assert result.exit_code == 0

        result = _run(runner, home, "collections", "show", "1")
        assert "Fear is the mind-killer." in result.output

        result = _run(runner, home, "collections", "unlink", "1", "1")
        assert result.exit_code == 0
        result = _run(runner, home, "collections", "show", "1")
        assert "No highlights in this collection" in result.output

        result = _run(runner, home, "collections", "ls")
        assert "Favorites" in result.output

        result = _run(runner, home, "collections", "link", "99", "1")
        assert result.exit_code == 1

        result = _run(runner, home, "highlights", "rm", "1")
        assert result.exit_code == 0
        result = _run(runner, home, "highlights", "ls")
        assert "No highlights" in result.output

        result = _run(runner, home, "collections", "rm", "1")
        assert result.exit_code == 0

    def test_bookmark_workflow(self, tmp_path: Path) -> None:
        home = tmp_path / "home"
        runner = CliRunner()

        result = _run(runner, home, "bookmarks", "add", "Dune", "cfi-3", "Arrakis")
        assert result.exit_code == 0

        result = _run(runner, home, "bookmarks", "ls", "Dune")
        assert "Arrakis" in result.output

        result = _run(runner, home, "bookmarks", "rm", "1")
        assert result.exit_code == 0
        result = _run(runner, home, "bookmarks", "ls", "Dune")
        assert "No bookmarks" in result.output


class TestBracketedText:
    def test_ls_shows_title_with_markup_characters(self, tmp_path: Path) -> None:
        home = tmp_path / "home"
        with Library.open(LibraryPaths(home=home)) as library:
            library.add_book("Notes [/] draft", "notes.epub", b"x")

        result = _run(CliRunner(), home, "ls")
        assert result.exit_code == 0, result.output
        assert "Notes [/] draft" in result.output

    def test_bookmark_label_shown_verbatim(self, tmp_path: Path) -> None:
        home = tmp_path / "home"
        runner = CliRunner()

        result = _run(runner, home, "bookmarks", "add", "Dune", "c1", "[todo] reread")
        assert result.exit_code == 0
        assert "[todo] reread" in result.output

        result = _run(runner, home, "bookmarks", "ls", "Dune")
        assert result.exit_code == 0
        assert "[todo] reread" in result.output

    def test_highlight_book_and_collection_name_verbatim(self, tmp_path: Path) -> None:
        home = tmp_path / "home"
        runner = CliRunner()

        _run(runner, home, "highlights", "add", "[b]Dune", "c1", "spice")
        result = _run(runner, home, "highlights", "ls")
        assert result.exit_code == 0
        assert "[b]Dune" in result.output

        _run(runner, home, "collections", "create", "[red]Hot")
        result = _run(runner, home, "collections", "ls")
        assert result.exit_code == 0
        assert "[red]Hot" in result.output

    def test_verify_reports_bracketed_title(self, tmp_path: Path) -> None:
        home = tmp_path / "home"
        with Library.open(LibraryPaths(home=home)) as library:
            library.add_book("[draft] Notes", "draft.epub", b"x")
        (home / "books" / "draft.epub").unlink()

        result = _run(CliRunner(), home, "verify")
        assert result.exit_code == 1
        assert "[draft] Notes" in result.output
