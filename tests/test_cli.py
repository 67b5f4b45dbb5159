"""Tests for the command line interface"""

import json
import logging

import pytest
from typer.testing import CliRunner

from fsentry.cli import __version__
from fsentry.cli import main as cli_main
from fsentry.cli.main import app
from fsentry.cli.utils.context import split_path
from fsentry.infrastructure.logging import clear_context

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_settings(settings, monkeypatch):
    """Keep log records out of the captured command output"""
    quiet = settings.model_copy(update={"log_level": "ERROR"})
    monkeypatch.setattr(cli_main, "get_settings", lambda: quiet)
    yield
    logging.getLogger().handlers.clear()
    clear_context()


@pytest.fixture
def invoke(tmp_path):
    root = tmp_path / "store"

    def _invoke(*args, **kwargs):
        return runner.invoke(app, ["--root", str(root), *args], **kwargs)

    _invoke.root = root
    return _invoke


def test_split_path():
    assert split_path(None) == []
    assert split_path("") == []
    assert split_path("/a/b/") == ["a", "b"]
    assert split_path("a//b") == ["a", "b"]


class TestRootCommands:
    """Test init, drop and list"""

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_init(self, invoke):
        result = invoke("init")

        assert result.exit_code == 0
        assert invoke.root.is_dir()
        assert "Store initialized" in result.stdout

    def test_drop_with_confirmation(self, invoke):
        invoke("init")

        declined = invoke("drop", input="n\n")
        assert declined.exit_code == 1
        assert invoke.root.exists()

        accepted = invoke("drop", input="y\n")
        assert accepted.exit_code == 0
        assert not invoke.root.exists()

    def test_drop_yes(self, invoke):
        invoke("init")

        result = invoke("drop", "--yes")

        assert result.exit_code == 0
        assert not invoke.root.exists()

    def test_list_json(self, invoke):
        invoke("init")
        invoke("folder", "create", "Project A")
        invoke("entry", "create", "Notes", "--path", "project_a")

        root_listing = json.loads(invoke("-o", "json", "list").stdout)
        nested_listing = json.loads(invoke("-o", "json", "list", "project_a").stdout)

        assert root_listing == {
            "folders": ["project_a"],
            "entries": [],
            "corrupted_folders": [],
        }
        assert nested_listing["entries"] == ["notes"]

    def test_list_table(self, invoke):
        invoke("init")
        invoke("entry", "create", "notes")

        result = invoke("list")

        assert result.exit_code == 0
        assert "notes" in result.stdout

    def test_list_missing_path(self, invoke):
        invoke("init")

        result = invoke("list", "missing")

        assert result.exit_code == 1
        assert "Failed to list" in result.stdout


class TestFolderCommands:
    """Test the folder command group"""

    def test_create_and_get(self, invoke):
        invoke("init")

        created = invoke("folder", "create", "Project A", "--data", '{"tag": 1}')
        fetched = invoke("-o", "json", "folder", "get", "Project A")

        assert created.exit_code == 0
        assert "project_a" in created.stdout
        info = json.loads(fetched.stdout)
        assert info["id"] == "project_a"
        assert info["name"] == "Project A"
        assert info["data"] == {"tag": 1}
        assert info["updated_at"] is None

    def test_invalid_data(self, invoke):
        invoke("init")

        result = invoke("folder", "create", "folder", "--data", "{oops")

        assert result.exit_code != 0
        assert not (invoke.root / "folder").exists()

    def test_error_json(self, invoke):
        invoke("init")

        result = invoke("-o", "json", "folder", "get", "missing")

        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["status"] == "error"
        assert payload["error"]["kind"] == "not_exist"
        assert payload["error"]["code"] == "FSE-404"

    def test_bad_name(self, invoke):
        invoke("init")

        result = invoke("-o", "json", "folder", "create", "con")

        assert result.exit_code == 1
        assert json.loads(result.stdout)["error"]["kind"] == "bad_name"

    def test_move_keep_timestamps(self, invoke):
        invoke("init")
        invoke("folder", "create", "old")

        result = invoke("folder", "move", "old", "new", "--keep-timestamps")
        info = json.loads(invoke("-o", "json", "folder", "get", "new").stdout)

        assert result.exit_code == 0
        assert info["updated_at"] is None

    def test_update_remove_duplicate(self, invoke):
        invoke("init")
        invoke("folder", "create", "parent")
        invoke("folder", "create", "child", "--path", "parent")

        updated = invoke("folder", "update", "child", "--path", "parent", "--data", "[1]")
        copied = invoke(
            "folder", "duplicate", "child", "copy", "--path", "parent", "--dst-path", ""
        )
        removed = invoke("folder", "remove", "parent")

        assert updated.exit_code == 0
        assert copied.exit_code == 0
        assert removed.exit_code == 0
        info = json.loads(invoke("-o", "json", "folder", "get", "copy").stdout)
        assert info["data"] == [1]
        assert not (invoke.root / "parent").exists()


class TestEntryCommands:
    """Test the entry command group"""

    def test_entry_workflow(self, invoke):
        invoke("init")

        assert invoke("entry", "create", "Draft", "--data", '"text"').exit_code == 0
        assert invoke("entry", "update", "draft", "--data", '"final"').exit_code == 0
        assert invoke("entry", "move", "draft", "Final").exit_code == 0
        assert invoke("entry", "duplicate", "final", "copy").exit_code == 0

        entry = json.loads(invoke("-o", "json", "entry", "get", "copy").stdout)
        assert entry["name"] == "copy"
        assert entry["data"] == "final"

        assert invoke("entry", "remove", "final").exit_code == 0
        assert invoke("entry", "get", "final").exit_code == 1

    def test_yaml_output(self, invoke):
        invoke("init")
        invoke("entry", "create", "notes", "--data", '{"text": "hi"}')

        result = invoke("-o", "yaml", "entry", "get", "notes")

        assert result.exit_code == 0
        assert "id: notes" in result.stdout
        assert "text: hi" in result.stdout


class TestBinaryCommands:
    """Test the binary command group"""

    def test_binary_workflow(self, invoke, tmp_path):
        invoke("init")
        source = tmp_path / "input.bin"
        source.write_bytes(b"\x00\x01\x02")
        replacement = tmp_path / "replacement.bin"
        replacement.write_bytes(b"\xff")
        out = tmp_path / "output.bin"

        assert invoke("binary", "create", "blob", "--file", str(source)).exit_code == 0
        assert invoke("binary", "update", "blob", "--file", str(replacement)).exit_code == 0
        assert invoke("binary", "move", "blob", "renamed").exit_code == 0
        assert invoke("binary", "duplicate", "renamed", "copy").exit_code == 0

        result = invoke("binary", "get", "copy", "--out", str(out))
        assert result.exit_code == 0
        assert out.read_bytes() == b"\xff"

        detail = json.loads(invoke("-o", "json", "binary", "get", "renamed").stdout)
        assert detail == {"id": "renamed", "size": 1}

        assert invoke("binary", "remove", "renamed").exit_code == 0
        assert invoke("binary", "get", "renamed").exit_code == 1

    def test_create_from_missing_file(self, invoke, tmp_path):
        invoke("init")

        result = invoke("binary", "create", "blob", "--file", str(tmp_path / "none"))

        assert result.exit_code != 0
        assert not (invoke.root / "blob.bin").exists()
