"""Directory operations management module."""
import os
import shutil
from pathlib import Path
from typing import List

from fsentry.core.exceptions import BadPathError, ExistError, NotExistError
from fsentry.infrastructure.filesystem.errors import translate_os_error

CREATE_DIR_MODE = 0o755


class DirectoryManager:
    """Handles directory operations only."""

    def create_dir(self, path: Path) -> None:
        """Create a single directory inside an existing parent."""
        try:
            os.mkdir(path, CREATE_DIR_MODE)
        except OSError as e:
            raise translate_os_error(e, "create_dir", path, missing=BadPathError) from e

    def create_dir_recursive(self, path: Path) -> None:
        """Create a directory and any missing parents; existing is fine."""
        try:
            os.makedirs(path, CREATE_DIR_MODE, exist_ok=True)
        except FileExistsError as e:
            raise ExistError(f"create_dir_recursive: not a directory: {path}") from e
        except OSError as e:
            raise translate_os_error(
                e, "create_dir_recursive", path, missing=BadPathError
            ) from e

    def remove_dir_recursive(self, path: Path) -> None:
        """Delete a directory with everything inside; missing is fine."""
        path = Path(path)
        if not path.exists():
            return
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise translate_os_error(e, "remove_dir_recursive", path) from e

    def copy_dir_recursive(self, source: Path, destination: Path) -> None:
        """Copy a directory tree to a destination that must not exist yet."""
        source = Path(source)
        if not source.is_dir():
            raise NotExistError(f"copy_dir_recursive: object not exist: {source}")
        try:
            shutil.copytree(source, destination, symlinks=True)
        except shutil.Error as e:
            raise translate_os_error(
                OSError(str(e)), "copy_dir_recursive", destination
            ) from e
        except OSError as e:
            raise translate_os_error(
                e, "copy_dir_recursive", destination, missing=BadPathError
            ) from e

    def list_dir(self, path: Path) -> List[Path]:
        """List immediate children of a directory."""
        try:
            return sorted(Path(path).iterdir())
        except OSError as e:
            raise translate_os_error(e, "list_dir", path, missing=BadPathError) from e

    def dir_exists(self, path: Path) -> bool:
        """Check if a directory exists."""
        return Path(path).is_dir()

    def exists(self, path: Path) -> bool:
        """Check if anything exists at the path."""
        return os.path.lexists(path)
