"""File writing operations module."""
import os
import tempfile
from pathlib import Path

from fsentry.core.exceptions import BadPathError, ExistError, NotExistError
from fsentry.infrastructure.filesystem.errors import translate_os_error
from fsentry.infrastructure.logging import get_logger

logger = get_logger(__name__)

CREATE_FILE_MODE = 0o666


class FileWriter:
    """Handles file writing operations only."""

    def create_file(self, path: Path, content: bytes) -> None:
        """Create a new file, failing if anything already occupies the path."""
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, CREATE_FILE_MODE)
        except IsADirectoryError as e:
            raise ExistError(f"create_file: object exist: {path}") from e
        except OSError as e:
            raise translate_os_error(e, "create_file", path, missing=BadPathError) from e

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            raise translate_os_error(e, "create_file", path) from e

    def update_file(self, path: Path, content: bytes) -> None:
        """Replace the content of an existing file.

        Content goes to a hidden temporary file first and is then renamed
        over the target, so readers never see a half written file.
        """
        path = Path(path)
        if not path.is_file():
            raise NotExistError(f"update_file: object not exist: {path}")

        try:
            temp_fd, temp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
            )
        except OSError as e:
            raise translate_os_error(e, "update_file", path) from e

        temp_path = Path(temp_name)
        try:
            with os.fdopen(temp_fd, "wb") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(temp_path, path.stat().st_mode & 0o777)
            os.replace(temp_path, path)
        except OSError as e:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError as cleanup_error:
                    logger.warning(
                        "temp_file_cleanup_failed",
                        path=str(temp_path),
                        error=str(cleanup_error),
                    )
            raise translate_os_error(e, "update_file", path) from e

    def remove_file(self, path: Path) -> None:
        """Delete a single file."""
        try:
            os.remove(path)
        except IsADirectoryError as e:
            raise NotExistError(f"remove_file: not a file: {path}") from e
        except OSError as e:
            raise translate_os_error(e, "remove_file", path) from e

    def rename(self, source: Path, destination: Path) -> None:
        """Rename a file or directory."""
        try:
            os.rename(source, destination)
        except OSError as e:
            raise translate_os_error(e, "rename", source) from e
