"""Filesystem primitive layer used by the object managers."""
from pathlib import Path
from typing import List, Protocol, runtime_checkable

from fsentry.infrastructure.filesystem.directory_manager import DirectoryManager
from fsentry.infrastructure.filesystem.file_reader import FileReader
from fsentry.infrastructure.filesystem.file_writer import FileWriter


@runtime_checkable
class Storage(Protocol):
    """Single-step filesystem operations.

    Every method raises an FSEntryError subclass on failure.
    """

    def create_file(self, path: Path, content: bytes) -> None: ...

    def read_file(self, path: Path) -> bytes: ...

    def update_file(self, path: Path, content: bytes) -> None: ...

    def remove_file(self, path: Path) -> None: ...

    def create_dir(self, path: Path) -> None: ...

    def create_dir_recursive(self, path: Path) -> None: ...

    def remove_dir_recursive(self, path: Path) -> None: ...

    def rename(self, source: Path, destination: Path) -> None: ...

    def copy_dir_recursive(self, source: Path, destination: Path) -> None: ...

    def list_dir(self, path: Path) -> List[Path]: ...

    def file_exists(self, path: Path) -> bool: ...

    def dir_exists(self, path: Path) -> bool: ...

    def exists(self, path: Path) -> bool: ...


class FileStorage(FileReader, FileWriter, DirectoryManager):
    """Storage backed by the local filesystem"""
