"""Binary object management"""
from pathlib import Path
from typing import Optional

from fsentry.core.exceptions import ExistError, NotExistError
from fsentry.core.models import Binary
from fsentry.core.path_builder import binary_path
from fsentry.core.services.base import ObjectManager


class BinaryManager(ObjectManager):
    """Stores raw bytes; nothing inside the file has to change on rename"""

    kind = "binary"

    def create(self, parent: Path, name: str, data: bytes) -> Binary:
        identifier = self.normalizer.require(name)
        self._require_parent(parent)

        self.storage.create_file(binary_path(parent, identifier), bytes(data))
        self.logger.info("binary_created", id=identifier, size=len(data))
        return Binary(id=identifier, data=bytes(data))

    def get(self, parent: Path, name: str) -> Binary:
        identifier = self.normalizer.require(name)
        self._require_parent(parent)

        data = self.storage.read_file(binary_path(parent, identifier))
        return Binary(id=identifier, data=data)

    def update(self, parent: Path, name: str, data: bytes) -> Binary:
        identifier = self.normalizer.require(name)
        self._require_parent(parent)

        self.storage.update_file(binary_path(parent, identifier), bytes(data))
        self.logger.info("binary_updated", id=identifier, size=len(data))
        return Binary(id=identifier, data=bytes(data))

    def remove(self, parent: Path, name: str) -> None:
        identifier = self.normalizer.require(name)
        self._require_parent(parent)

        self.storage.remove_file(binary_path(parent, identifier))
        self.logger.info("binary_removed", id=identifier)

    def move(self, parent: Path, old_name: str, new_name: str) -> None:
        old_id = self.normalizer.require(old_name)
        new_id = self.normalizer.require(new_name)
        self._require_parent(parent)

        source = binary_path(parent, old_id)
        target = binary_path(parent, new_id)
        if not self.storage.file_exists(source):
            raise NotExistError(f"binary not exist: {old_name}", {"path": str(source)})
        if self.storage.exists(target):
            raise ExistError(f"binary already exists: {new_name}", {"path": str(target)})

        self.storage.rename(source, target)
        self.logger.info("binary_moved", old_id=old_id, new_id=new_id)

    def duplicate(
        self,
        parent: Path,
        src_name: str,
        dst_name: str,
        dst_parent: Optional[Path] = None,
    ) -> Binary:
        dst_id = self.normalizer.require(dst_name)
        source = self.get(parent, src_name)
        target_parent = parent if dst_parent is None else dst_parent
        if dst_parent is not None:
            self._require_parent(dst_parent)

        self.storage.create_file(binary_path(target_parent, dst_id), source.data)
        self.logger.info("binary_duplicated", source_id=source.id, id=dst_id)
        return Binary(id=dst_id, data=source.data)
