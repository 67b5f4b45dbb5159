"""Store service: the public entry point of the library.

Every call takes the store-wide read/write lock, resolves the nested path
under the root and delegates to the folder, entry or binary manager.
Mutations hold the lock exclusively, reads share it.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional, Sequence, Union

import structlog

from fsentry.core.config import Settings, get_settings
from fsentry.core.exceptions import BadPathError
from fsentry.core.identifier import IdentifierNormalizer
from fsentry.core.models import Binary, Entry, FolderInfo, ListResult
from fsentry.core.models.base import utcnow
from fsentry.core.path_builder import ENTRY_SUFFIX, INFO_FILE_NAME, build_path
from fsentry.core.services import BinaryManager, EntryManager, FolderManager
from fsentry.core.services.base import Clock
from fsentry.infrastructure.concurrency import ReadWriteLock
from fsentry.infrastructure.filesystem import FileStorage, Storage
from fsentry.infrastructure.logging import bind_context, unbind_context

from .base import ServiceBase


class StoreService(ServiceBase):
    """Hierarchical object store rooted at one directory"""

    def __init__(
        self,
        root: Optional[Union[str, Path]] = None,
        *,
        pretty: Optional[bool] = None,
        settings: Optional[Settings] = None,
        storage: Optional[Storage] = None,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
        clock: Clock = utcnow,
    ):
        super().__init__(logger)
        self.settings = settings or get_settings()
        self.root = Path(root) if root is not None else self.settings.root_path
        self.pretty = self.settings.pretty_json if pretty is None else pretty
        self.storage = storage or FileStorage()
        self.lock = ReadWriteLock(name=str(self.root))

        normalizer = IdentifierNormalizer(
            max_length=self.settings.max_identifier_length,
            extra_reserved=self.settings.extra_reserved_names,
        )
        self.folders = FolderManager(
            self.storage, normalizer, self.pretty, clock, self.logger
        )
        self.entries = EntryManager(
            self.storage, normalizer, self.pretty, clock, self.logger
        )
        self.binaries = BinaryManager(self.storage, normalizer, self.logger)

    def initialize(self) -> None:
        self.init()

    def cleanup(self) -> None:
        self.logger.debug("store_closed", root=str(self.root))

    # Root level

    def init(self) -> None:
        """Create the root directory unless it already exists"""
        with self._operation("init"):
            if self.storage.dir_exists(self.root):
                return
            self.storage.create_dir_recursive(self.root)
            self.logger.info("store_initialized", root=str(self.root))

    def drop(self) -> None:
        """Delete the root directory with every object in it"""
        with self._operation("drop"):
            if not self.storage.dir_exists(self.root):
                return
            self.storage.remove_dir_recursive(self.root)
            self.logger.info("store_dropped", root=str(self.root))

    def list(self, *path: str) -> ListResult:
        """List folders and entries directly inside a nested path"""
        with self._operation("list", exclusive=False):
            directory = self._resolve(path)
            result = ListResult()
            for child in self.storage.list_dir(directory):
                name = child.name
                if name.startswith("."):
                    continue
                if self.storage.dir_exists(child):
                    if self.storage.file_exists(child / INFO_FILE_NAME):
                        result.folders.append(name)
                    else:
                        result.corrupted_folders.append(name)
                elif name.endswith(ENTRY_SUFFIX) and self.storage.file_exists(child):
                    result.entries.append(name[: -len(ENTRY_SUFFIX)])
            return result

    # Folders

    def create_folder(self, name: str, data: Any = None, *path: str) -> FolderInfo:
        with self._operation("create_folder"):
            return self.folders.create(self._resolve(path), name, data)

    def get_folder(self, name: str, *path: str) -> FolderInfo:
        with self._operation("get_folder", exclusive=False):
            return self.folders.get(self._resolve(path), name)

    def move_folder(self, old_name: str, new_name: str, *path: str) -> FolderInfo:
        with self._operation("move_folder"):
            return self.folders.move(self._resolve(path), old_name, new_name)

    def move_folder_without_timestamp(
        self, old_name: str, new_name: str, *path: str
    ) -> FolderInfo:
        with self._operation("move_folder_without_timestamp"):
            return self.folders.move_without_timestamp(
                self._resolve(path), old_name, new_name
            )

    def update_folder(self, name: str, data: Any = None, *path: str) -> FolderInfo:
        with self._operation("update_folder"):
            return self.folders.update(self._resolve(path), name, data)

    def remove_folder(self, name: str, *path: str) -> None:
        with self._operation("remove_folder"):
            self.folders.remove(self._resolve(path), name)

    def duplicate_folder(
        self,
        src_name: str,
        dst_name: str,
        *path: str,
        dst_path: Optional[Sequence[str]] = None,
    ) -> FolderInfo:
        with self._operation("duplicate_folder"):
            return self.folders.duplicate(
                self._resolve(path), src_name, dst_name, self._resolve_optional(dst_path)
            )

    # Entries

    def create_entry(self, name: str, data: Any = None, *path: str) -> Entry:
        with self._operation("create_entry"):
            return self.entries.create(self._resolve(path), name, data)

    def get_entry(self, name: str, *path: str) -> Entry:
        with self._operation("get_entry", exclusive=False):
            return self.entries.get(self._resolve(path), name)

    def move_entry(self, old_name: str, new_name: str, *path: str) -> Entry:
        with self._operation("move_entry"):
            return self.entries.move(self._resolve(path), old_name, new_name)

    def update_entry(self, name: str, data: Any = None, *path: str) -> Entry:
        with self._operation("update_entry"):
            return self.entries.update(self._resolve(path), name, data)

    def remove_entry(self, name: str, *path: str) -> None:
        with self._operation("remove_entry"):
            self.entries.remove(self._resolve(path), name)

    def duplicate_entry(
        self,
        src_name: str,
        dst_name: str,
        *path: str,
        dst_path: Optional[Sequence[str]] = None,
    ) -> Entry:
        with self._operation("duplicate_entry"):
            return self.entries.duplicate(
                self._resolve(path), src_name, dst_name, self._resolve_optional(dst_path)
            )

    # Binaries

    def create_binary(self, name: str, data: bytes, *path: str) -> Binary:
        with self._operation("create_binary"):
            return self.binaries.create(self._resolve(path), name, data)

    def get_binary(self, name: str, *path: str) -> Binary:
        with self._operation("get_binary", exclusive=False):
            return self.binaries.get(self._resolve(path), name)

    def move_binary(self, old_name: str, new_name: str, *path: str) -> None:
        with self._operation("move_binary"):
            self.binaries.move(self._resolve(path), old_name, new_name)

    def update_binary(self, name: str, data: bytes, *path: str) -> Binary:
        with self._operation("update_binary"):
            return self.binaries.update(self._resolve(path), name, data)

    def remove_binary(self, name: str, *path: str) -> None:
        with self._operation("remove_binary"):
            self.binaries.remove(self._resolve(path), name)

    def duplicate_binary(
        self,
        src_name: str,
        dst_name: str,
        *path: str,
        dst_path: Optional[Sequence[str]] = None,
    ) -> Binary:
        with self._operation("duplicate_binary"):
            return self.binaries.duplicate(
                self._resolve(path), src_name, dst_name, self._resolve_optional(dst_path)
            )

    @contextmanager
    def _operation(self, name: str, exclusive: bool = True) -> Iterator[None]:
        guard = self.lock.write_locked() if exclusive else self.lock.read_locked()
        with guard:
            bind_context(operation=name, store_root=str(self.root))
            try:
                yield
            finally:
                unbind_context("operation", "store_root")

    def _resolve(self, segments: Sequence[str]) -> Path:
        """Build the directory path for nested segments under the root"""
        for segment in segments:
            _validate_segment(segment)
        return build_path(self.root, *segments)

    def _resolve_optional(self, segments: Optional[Sequence[str]]) -> Optional[Path]:
        if segments is None:
            return None
        return self._resolve(segments)


def _validate_segment(segment: str) -> None:
    if (
        not segment
        or segment in (".", "..")
        or "/" in segment
        or "\\" in segment
        or "\x00" in segment
    ):
        raise BadPathError(f"invalid path segment: {segment!r}", {"segment": segment})


FSEntry = StoreService

__all__ = ["StoreService", "FSEntry"]
