"""Folder object management

A folder is a directory named by its identifier with an .info.json file
inside. Both parts are created, renamed and copied together.
"""
from pathlib import Path
from typing import Any, Optional

from fsentry.core.exceptions import (
    BadPathError,
    CorruptedError,
    ExistError,
    FSEntryError,
    NotExistError,
)
from fsentry.core.models import FolderInfo
from fsentry.core.path_builder import folder_path, info_path
from fsentry.core.services.base import MetadataManager


class FolderManager(MetadataManager):
    """Creates, reads, renames, updates, removes and copies folders"""

    kind = "folder"

    def create(self, parent: Path, name: str, data: Any = None) -> FolderInfo:
        """
        Create a folder and its info file

        Args:
            parent: Existing directory that will hold the folder
            name: Display name of the folder
            data: Custom JSON payload

        Returns:
            Information about the created folder

        Raises:
            BadNameError: If the name has no valid identifier
            BadPathError: If the parent directory does not exist
            ExistError: If the folder already exists
        """
        identifier = self.normalizer.require(name)
        self._require_parent(parent)

        target = folder_path(parent, identifier)
        if self.storage.exists(target):
            raise ExistError(f"folder already exists: {name}", {"path": str(target)})

        info = FolderInfo(id=identifier, name=name, created_at=self.clock(), data=data)
        content = self._encode(info)

        self.storage.create_dir(target)
        try:
            self.storage.create_file(info_path(parent, identifier), content)
        except FSEntryError:
            # Without an info file the new directory would be corrupted
            self._compensate(
                lambda: self.storage.remove_dir_recursive(target),
                "folder_create_cleanup_failed",
                path=str(target),
            )
            raise

        self.logger.info("folder_created", id=identifier, path=str(target))
        return info

    def get(self, parent: Path, name: str) -> FolderInfo:
        identifier = self.normalizer.require(name)
        self._require_parent(parent)
        return self._read_info(parent, identifier)

    def move(self, parent: Path, old_name: str, new_name: str) -> FolderInfo:
        """Rename a folder and mark it as updated"""
        return self._move(parent, old_name, new_name, keep_timestamps=False)

    def move_without_timestamp(
        self, parent: Path, old_name: str, new_name: str
    ) -> FolderInfo:
        """Rename a folder keeping its creation and update timestamps"""
        return self._move(parent, old_name, new_name, keep_timestamps=True)

    def update(self, parent: Path, name: str, data: Any = None) -> FolderInfo:
        identifier = self.normalizer.require(name)
        self._require_parent(parent)

        current = self._read_info(parent, identifier)
        updated = current.model_copy(update={"data": data, "updated_at": self.clock()})
        self.storage.update_file(info_path(parent, identifier), self._encode(updated))

        self.logger.info("folder_updated", id=identifier)
        return updated

    def remove(self, parent: Path, name: str) -> None:
        """
        Remove a folder with everything inside it

        Raises:
            NotExistError: If the folder directory does not exist
            CorruptedError: If the directory has no info file
        """
        identifier = self.normalizer.require(name)
        self._require_parent(parent)

        target = folder_path(parent, identifier)
        if not self.storage.dir_exists(target):
            raise NotExistError(f"folder not exist: {name}", {"path": str(target)})
        if not self.storage.file_exists(info_path(parent, identifier)):
            raise CorruptedError(
                f"folder has no info file: {name}", {"path": str(target)}
            )

        self.storage.remove_dir_recursive(target)
        self.logger.info("folder_removed", id=identifier, path=str(target))

    def duplicate(
        self,
        parent: Path,
        src_name: str,
        dst_name: str,
        dst_parent: Optional[Path] = None,
    ) -> FolderInfo:
        """
        Copy a folder with its content under a new name

        The copy is a new object: its creation time is now and it has
        never been updated.
        """
        src_id = self.normalizer.require(src_name)
        dst_id = self.normalizer.require(dst_name)
        self._require_parent(parent)
        target_parent = parent if dst_parent is None else dst_parent
        if dst_parent is not None:
            self._require_parent(dst_parent)

        source = folder_path(parent, src_id)
        target = folder_path(target_parent, dst_id)
        if self.storage.exists(target):
            raise ExistError(f"folder already exists: {dst_name}", {"path": str(target)})

        current = self._read_info(parent, src_id)
        if _is_within(target, source):
            raise BadPathError(
                f"cannot duplicate a folder into itself: {src_name}",
                {"source": str(source), "target": str(target)},
            )

        duplicate = current.reborn(dst_id, dst_name, self.clock())
        content = self._encode(duplicate)

        try:
            self.storage.copy_dir_recursive(source, target)
            self.storage.update_file(info_path(target_parent, dst_id), content)
        except FSEntryError:
            self._compensate(
                lambda: self.storage.remove_dir_recursive(target),
                "folder_duplicate_cleanup_failed",
                path=str(target),
            )
            raise

        self.logger.info(
            "folder_duplicated", source=str(source), target=str(target), id=dst_id
        )
        return duplicate

    def _move(
        self, parent: Path, old_name: str, new_name: str, keep_timestamps: bool
    ) -> FolderInfo:
        old_id = self.normalizer.require(old_name)
        new_id = self.normalizer.require(new_name)
        self._require_parent(parent)

        source = folder_path(parent, old_id)
        target = folder_path(parent, new_id)
        if self.storage.exists(target):
            raise ExistError(f"folder already exists: {new_name}", {"path": str(target)})

        current = self._read_info(parent, old_id)
        updated_at = current.updated_at if keep_timestamps else self.clock()
        moved = current.renamed(new_id, new_name, updated_at)

        # Metadata is rewritten in place first, the directory rename follows
        self.storage.update_file(info_path(parent, old_id), self._encode(moved))
        try:
            self.storage.rename(source, target)
        except FSEntryError as e:
            e.details["metadata_rewritten"] = True
            self.logger.warning(
                "folder_move_left_inconsistent",
                path=str(source),
                new_id=new_id,
                error=str(e),
            )
            raise

        self.logger.info(
            "folder_moved", old_id=old_id, new_id=new_id, keep_timestamps=keep_timestamps
        )
        return moved

    def _read_info(self, parent: Path, identifier: str) -> FolderInfo:
        """Read the info file, treating directory and file as separate facts"""
        directory = folder_path(parent, identifier)
        if not self.storage.dir_exists(directory):
            raise NotExistError(
                f"folder not exist: {identifier}", {"path": str(directory)}
            )

        path = info_path(parent, identifier)
        try:
            raw = self.storage.read_file(path)
        except NotExistError as e:
            raise CorruptedError(
                f"folder has no info file: {identifier}", {"path": str(directory)}
            ) from e
        return self._decode(FolderInfo, raw, path)


def _is_within(path: Path, directory: Path) -> bool:
    try:
        path.resolve().relative_to(directory.resolve())
    except ValueError:
        return False
    return True
