"""File reading operations module."""
from pathlib import Path

from fsentry.core.exceptions import NotExistError
from fsentry.infrastructure.filesystem.errors import translate_os_error


class FileReader:
    """Handles file reading operations only."""

    def read_file(self, path: Path) -> bytes:
        """Read entire file content."""
        try:
            with open(path, "rb") as f:
                return f.read()
        except IsADirectoryError as e:
            raise NotExistError(f"read_file: not a file: {path}") from e
        except OSError as e:
            raise translate_os_error(e, "read_file", path) from e

    def file_exists(self, path: Path) -> bool:
        """Check if a regular file exists."""
        return Path(path).is_file()
