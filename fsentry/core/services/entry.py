"""Entry object management

An entry is one JSON file holding its own identifier and name, so a rename
has to rewrite the content as well as move the file.
"""
from pathlib import Path
from typing import Any, Optional

from fsentry.core.exceptions import ExistError, FSEntryError
from fsentry.core.models import Entry
from fsentry.core.path_builder import entry_path
from fsentry.core.services.base import MetadataManager


class EntryManager(MetadataManager):
    """Creates, reads, renames, updates, removes and copies entries"""

    kind = "entry"

    def create(self, parent: Path, name: str, data: Any = None) -> Entry:
        identifier = self.normalizer.require(name)
        self._require_parent(parent)

        entry = Entry(id=identifier, name=name, created_at=self.clock(), data=data)
        path = entry_path(parent, identifier)
        self.storage.create_file(path, self._encode(entry))

        self.logger.info("entry_created", id=identifier, path=str(path))
        return entry

    def get(self, parent: Path, name: str) -> Entry:
        identifier = self.normalizer.require(name)
        self._require_parent(parent)
        return self._read(parent, identifier)

    def update(self, parent: Path, name: str, data: Any = None) -> Entry:
        identifier = self.normalizer.require(name)
        self._require_parent(parent)

        current = self._read(parent, identifier)
        updated = current.model_copy(update={"data": data, "updated_at": self.clock()})
        self.storage.update_file(entry_path(parent, identifier), self._encode(updated))

        self.logger.info("entry_updated", id=identifier)
        return updated

    def remove(self, parent: Path, name: str) -> None:
        identifier = self.normalizer.require(name)
        self._require_parent(parent)

        path = entry_path(parent, identifier)
        self.storage.remove_file(path)
        self.logger.info("entry_removed", id=identifier, path=str(path))

    def move(self, parent: Path, old_name: str, new_name: str) -> Entry:
        """
        Rename an entry

        The file is renamed first and its content rewritten afterwards. If the
        rewrite fails the file is renamed back; if that fails as well the entry
        stays at the new path with its old content.

        Raises:
            ExistError: If an object already uses the new name
            NotExistError: If the entry does not exist
        """
        old_id = self.normalizer.require(old_name)
        new_id = self.normalizer.require(new_name)
        self._require_parent(parent)

        source = entry_path(parent, old_id)
        target = entry_path(parent, new_id)
        if self.storage.exists(target):
            raise ExistError(f"entry already exists: {new_name}", {"path": str(target)})

        current = self._decode(Entry, self.storage.read_file(source), source)
        moved = current.renamed(new_id, new_name, self.clock())
        content = self._encode(moved)

        self.storage.rename(source, target)
        try:
            self.storage.update_file(target, content)
        except FSEntryError:
            restored = self._compensate(
                lambda: self.storage.rename(target, source),
                "entry_move_rollback_failed",
                source=str(source),
                target=str(target),
            )
            if not restored:
                self.logger.warning(
                    "entry_move_left_inconsistent", path=str(target), stale_id=old_id
                )
            raise

        self.logger.info("entry_moved", old_id=old_id, new_id=new_id)
        return moved

    def duplicate(
        self,
        parent: Path,
        src_name: str,
        dst_name: str,
        dst_parent: Optional[Path] = None,
    ) -> Entry:
        """Copy an entry's payload into a new entry with a fresh lifecycle"""
        src_id = self.normalizer.require(src_name)
        dst_id = self.normalizer.require(dst_name)
        self._require_parent(parent)
        target_parent = parent if dst_parent is None else dst_parent
        if dst_parent is not None:
            self._require_parent(dst_parent)

        current = self._read(parent, src_id)
        duplicate = current.reborn(dst_id, dst_name, self.clock())
        target = entry_path(target_parent, dst_id)
        self.storage.create_file(target, self._encode(duplicate))

        self.logger.info("entry_duplicated", source_id=src_id, id=dst_id)
        return duplicate

    def _read(self, parent: Path, identifier: str) -> Entry:
        path = entry_path(parent, identifier)
        return self._decode(Entry, self.storage.read_file(path), path)
