"""Tests for binary management"""

import pytest

from fsentry.core.exceptions import (
    BadNameError,
    BadPathError,
    ExistError,
    NotExistError,
)
from fsentry.core.services import BinaryManager

PAYLOAD = bytes(range(256))


@pytest.fixture
def manager(storage) -> BinaryManager:
    return BinaryManager(storage)


class TestBinary:
    """Test binary operations"""

    def test_manager_has_no_metadata_settings(self, storage):
        manager = BinaryManager(storage)

        assert not hasattr(manager, "clock")
        assert not hasattr(manager, "pretty")

    def test_create_and_get(self, manager, tmp_path):
        created = manager.create(tmp_path, "Avatar Image", PAYLOAD)

        assert created.id == "avatar_image"
        assert created.size == 256
        assert (tmp_path / "avatar_image.bin").read_bytes() == PAYLOAD
        assert manager.get(tmp_path, "Avatar Image").data == PAYLOAD

    def test_empty_content(self, manager, tmp_path):
        manager.create(tmp_path, "empty", b"")
        assert manager.get(tmp_path, "empty").data == b""

    def test_create_twice(self, manager, tmp_path):
        manager.create(tmp_path, "blob", b"one")

        with pytest.raises(ExistError):
            manager.create(tmp_path, "blob", b"two")
        assert manager.get(tmp_path, "blob").data == b"one"

    def test_bad_name_and_path(self, manager, tmp_path):
        with pytest.raises(BadNameError):
            manager.create(tmp_path, "aux", b"")
        with pytest.raises(BadPathError):
            manager.create(tmp_path / "missing", "blob", b"")

    def test_get_missing(self, manager, tmp_path):
        with pytest.raises(NotExistError):
            manager.get(tmp_path, "missing")

    def test_update(self, manager, tmp_path):
        manager.create(tmp_path, "blob", b"one")

        updated = manager.update(tmp_path, "blob", b"two")

        assert updated.data == b"two"
        assert manager.get(tmp_path, "blob").data == b"two"

    def test_update_missing(self, manager, tmp_path):
        with pytest.raises(NotExistError):
            manager.update(tmp_path, "missing", b"data")
        assert not (tmp_path / "missing.bin").exists()

    def test_move(self, manager, tmp_path):
        manager.create(tmp_path, "old", PAYLOAD)

        manager.move(tmp_path, "old", "New")

        assert not (tmp_path / "old.bin").exists()
        assert manager.get(tmp_path, "new").data == PAYLOAD

    def test_move_missing(self, manager, tmp_path):
        with pytest.raises(NotExistError):
            manager.move(tmp_path, "missing", "other")

    def test_move_to_existing(self, manager, tmp_path):
        manager.create(tmp_path, "a", b"a")
        manager.create(tmp_path, "b", b"b")

        with pytest.raises(ExistError):
            manager.move(tmp_path, "a", "b")
        assert manager.get(tmp_path, "b").data == b"b"

    def test_remove(self, manager, tmp_path):
        manager.create(tmp_path, "blob", b"data")
        manager.remove(tmp_path, "blob")

        with pytest.raises(NotExistError):
            manager.remove(tmp_path, "blob")

    def test_duplicate(self, manager, tmp_path):
        (tmp_path / "other").mkdir()
        manager.create(tmp_path, "blob", PAYLOAD)

        same_parent = manager.duplicate(tmp_path, "blob", "copy")
        other_parent = manager.duplicate(tmp_path, "blob", "blob", tmp_path / "other")

        assert same_parent.id == "copy"
        assert other_parent.data == PAYLOAD
        assert (tmp_path / "copy.bin").read_bytes() == PAYLOAD
        assert (tmp_path / "other" / "blob.bin").read_bytes() == PAYLOAD

    def test_duplicate_to_existing(self, manager, tmp_path):
        manager.create(tmp_path, "a", b"a")
        manager.create(tmp_path, "b", b"b")

        with pytest.raises(ExistError):
            manager.duplicate(tmp_path, "a", "b")
