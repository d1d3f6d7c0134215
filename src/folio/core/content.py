# ABOUTME: On-disk storage for book binaries under the managed books directory.
# ABOUTME: Writes go through a temp file and os.replace so readers never see a partial file.

import os
import shutil
import tempfile
from pathlib import Path

from folio.errors import NotFoundError


class ContentStore:
    """Maps a caller-supplied filename to a file under one managed directory.

    Filenames are used as given. Keeping them inside the directory (no
    separators, no "..") is the caller's responsibility.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def path_for(self, filename: str) -> Path:
        return self.directory / filename

    def exists(self, filename: str) -> bool:
        return self.path_for(filename).is_file()

    def write(self, filename: str, data: bytes) -> Path:
        """Write content for filename, replacing any existing file.

        The bytes are written and fsynced to a temporary file in the same
        directory, then renamed over the destination. A crash leaves either
        the previous file or the complete new one.

        Returns:
            The path of the written file.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        dest = self.path_for(filename)

        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".", suffix=".part")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, dest)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        return dest

    def read(self, filename: str) -> bytes:
        """Read the content stored for filename.

        Raises:
            NotFoundError: If no file exists for filename.
        """
        path = self.path_for(filename)
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise NotFoundError(f"Content file not found: {path}") from exc

    def delete(self, filename: str) -> None:
        """Remove the file for filename. Already-absent files are not an error."""
        self.path_for(filename).unlink(missing_ok=True)

    def list_files(self) -> list[str]:
        """Return the names of all stored files, sorted. Temp files are skipped."""
        if not self.directory.exists():
            return []
        return sorted(
            p.name
            for p in self.directory.iterdir()
            if p.is_file() and not (p.name.startswith(".") and p.name.endswith(".part"))
        )

    def wipe(self) -> None:
        """Remove the managed directory and everything in it, then recreate it empty."""
        if self.directory.exists():
            shutil.rmtree(self.directory)
        self.directory.mkdir(parents=True, exist_ok=True)
