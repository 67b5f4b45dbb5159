"""Tests for entry management"""

import json
from unittest.mock import Mock

import pytest

from fsentry.core.exceptions import (
    BadNameError,
    BadPathError,
    ExistError,
    InternalError,
    NotExistError,
    PermissionDeniedError,
)
from fsentry.core.services import EntryManager
from fsentry.infrastructure.filesystem import FileStorage


@pytest.fixture
def manager(storage, clock) -> EntryManager:
    return EntryManager(storage, clock=clock)


@pytest.fixture
def failing_storage() -> Mock:
    return Mock(wraps=FileStorage())


class TestEntryCreateAndGet:
    """Test entry creation and reads"""

    def test_create_entry(self, manager, tmp_path):
        entry = manager.create(tmp_path, "Notes", {"text": "hi"})

        assert entry.id == "notes"
        assert entry.name == "Notes"
        assert entry.updated_at is None

        stored = json.loads((tmp_path / "notes.json").read_text(encoding="utf-8"))
        assert stored["id"] == "notes"
        assert stored["name"] == "Notes"
        assert stored["data"] == {"text": "hi"}

    def test_round_trip_keeps_unicode(self, manager, tmp_path):
        manager.create(tmp_path, "Café Menu", {"dish": "crème brûlée"})

        entry = manager.get(tmp_path, "Café Menu")

        assert entry.id == "café_menu"
        assert entry.name == "Café Menu"
        assert entry.data == {"dish": "crème brûlée"}
        assert "crème brûlée" in (tmp_path / "café_menu.json").read_text("utf-8")

    def test_null_payload(self, manager, tmp_path):
        manager.create(tmp_path, "empty")
        assert manager.get(tmp_path, "empty").data is None

    def test_create_twice(self, manager, tmp_path):
        manager.create(tmp_path, "entry")

        with pytest.raises(ExistError):
            manager.create(tmp_path, "ENTRY")

    def test_create_bad_name(self, manager, tmp_path):
        with pytest.raises(BadNameError):
            manager.create(tmp_path, "prn")

    def test_create_missing_parent(self, manager, tmp_path):
        with pytest.raises(BadPathError):
            manager.create(tmp_path / "missing", "entry")

    def test_get_missing(self, manager, tmp_path):
        with pytest.raises(NotExistError):
            manager.get(tmp_path, "missing")

    def test_get_invalid_content(self, manager, tmp_path):
        (tmp_path / "broken.json").write_text("[]")

        with pytest.raises(InternalError):
            manager.get(tmp_path, "broken")

    def test_get_without_creation_time(self, manager, tmp_path):
        (tmp_path / "entry.json").write_text('{"id": "entry", "name": "entry"}')

        with pytest.raises(InternalError):
            manager.get(tmp_path, "entry")

    def test_create_with_nan_payload(self, manager, tmp_path):
        with pytest.raises(InternalError):
            manager.create(tmp_path, "nan", {"v": float("nan")})
        assert list(tmp_path.iterdir()) == []

    def test_update_with_infinite_payload_keeps_content(self, manager, tmp_path):
        manager.create(tmp_path, "entry", {"v": 1})

        with pytest.raises(InternalError):
            manager.update(tmp_path, "entry", [float("inf")])
        assert manager.get(tmp_path, "entry").data == {"v": 1}


class TestEntryMove:
    """Test entry renames"""

    def test_move_rewrites_identity(self, manager, tmp_path):
        created = manager.create(tmp_path, "Draft", [1, 2])

        moved = manager.move(tmp_path, "Draft", "Final Version")

        assert moved.id == "final_version"
        assert moved.name == "Final Version"
        assert moved.data == [1, 2]
        assert moved.created_at == created.created_at
        assert moved.updated_at > created.created_at
        assert not (tmp_path / "draft.json").exists()

        stored = json.loads((tmp_path / "final_version.json").read_text())
        assert stored["id"] == "final_version"
        assert stored["name"] == "Final Version"

    def test_move_to_existing(self, manager, tmp_path):
        manager.create(tmp_path, "a", "first")
        manager.create(tmp_path, "b", "second")

        with pytest.raises(ExistError):
            manager.move(tmp_path, "a", "b")
        assert manager.get(tmp_path, "b").data == "second"

    def test_move_missing(self, manager, tmp_path):
        with pytest.raises(NotExistError):
            manager.move(tmp_path, "missing", "other")

    def test_move_rolls_back_rename_when_rewrite_fails(
        self, failing_storage, tmp_path
    ):
        manager = EntryManager(failing_storage)
        original = manager.create(tmp_path, "old", {"keep": True})
        failing_storage.update_file.side_effect = PermissionDeniedError("denied")

        with pytest.raises(PermissionDeniedError):
            manager.move(tmp_path, "old", "new")

        assert not (tmp_path / "new.json").exists()
        assert manager.get(tmp_path, "old") == original

    def test_move_rollback_failure_returns_original_error(
        self, failing_storage, tmp_path
    ):
        manager = EntryManager(failing_storage)
        manager.create(tmp_path, "old")
        storage = FileStorage()
        calls = []

        def rename_once(source, target):
            calls.append((source, target))
            if len(calls) > 1:
                raise InternalError("rename back failed")
            storage.rename(source, target)

        failing_storage.rename.side_effect = rename_once
        failing_storage.update_file.side_effect = PermissionDeniedError("denied")

        with pytest.raises(PermissionDeniedError):
            manager.move(tmp_path, "old", "new")

        assert calls == [
            (tmp_path / "old.json", tmp_path / "new.json"),
            (tmp_path / "new.json", tmp_path / "old.json"),
        ]
        # The entry is stranded under the new path with its old content
        stored = json.loads((tmp_path / "new.json").read_text())
        assert stored["id"] == "old"


class TestEntryUpdateRemoveDuplicate:
    """Test payload updates, removal and copies"""

    def test_update(self, manager, tmp_path):
        created = manager.create(tmp_path, "entry", {"v": 1})

        updated = manager.update(tmp_path, "entry", {"v": 2})

        assert updated.data == {"v": 2}
        assert updated.name == "entry"
        assert updated.created_at == created.created_at
        assert updated.updated_at > created.created_at

    def test_update_missing(self, manager, tmp_path):
        with pytest.raises(NotExistError):
            manager.update(tmp_path, "missing", 1)

    def test_remove(self, manager, tmp_path):
        manager.create(tmp_path, "entry")
        manager.remove(tmp_path, "entry")

        with pytest.raises(NotExistError):
            manager.get(tmp_path, "entry")
        with pytest.raises(NotExistError):
            manager.remove(tmp_path, "entry")

    def test_duplicate(self, manager, tmp_path):
        source = manager.create(tmp_path, "Source", {"x": 1})
        manager.update(tmp_path, "Source", {"x": 2})

        copy = manager.duplicate(tmp_path, "Source", "Copy")

        assert copy.id == "copy"
        assert copy.name == "Copy"
        assert copy.data == {"x": 2}
        assert copy.created_at >= source.created_at
        assert copy.updated_at is None
        assert manager.get(tmp_path, "copy") == copy
        assert manager.get(tmp_path, "source").data == {"x": 2}

    def test_duplicate_to_other_parent(self, manager, tmp_path):
        (tmp_path / "other").mkdir()
        manager.create(tmp_path, "entry", "payload")

        manager.duplicate(tmp_path, "entry", "entry", tmp_path / "other")

        assert manager.get(tmp_path / "other", "entry").data == "payload"

    def test_duplicate_to_missing_parent(self, manager, tmp_path):
        manager.create(tmp_path, "entry")

        with pytest.raises(BadPathError):
            manager.duplicate(tmp_path, "entry", "copy", tmp_path / "missing")

    def test_duplicate_to_existing(self, manager, tmp_path):
        manager.create(tmp_path, "a")
        manager.create(tmp_path, "b")

        with pytest.raises(ExistError):
            manager.duplicate(tmp_path, "a", "b")
