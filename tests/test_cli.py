"""Tests for the command line launcher."""
from pathlib import Path

from typer.testing import CliRunner

from chatmock.cli.app import app
from chatmock.cli.providers import (
    DEFAULT_STORE_PATH,
    get_participant_store,
    resolve_store_settings,
)
from chatmock.persistence import DEFAULT_QUOTA_CHARS
from chatmock.persistence.in_memory import InMemoryKeyValueStore
from chatmock.persistence.sqlite import SQLiteKeyValueStore

runner = CliRunner()


class TestProviders:
    """Tests for store configuration."""

    def test_defaults(self, monkeypatch):
        for name in ("CHATMOCK_STORE", "CHATMOCK_STORE_PATH", "CHATMOCK_QUOTA_CHARS"):
            monkeypatch.delenv(name, raising=False)

        assert resolve_store_settings() == ("sqlite", DEFAULT_STORE_PATH, DEFAULT_QUOTA_CHARS)

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CHATMOCK_STORE", "memory")
        monkeypatch.setenv("CHATMOCK_STORE_PATH", str(tmp_path / "x.db"))
        monkeypatch.setenv("CHATMOCK_QUOTA_CHARS", "1234")

        assert resolve_store_settings() == ("memory", tmp_path / "x.db", 1234)

    def test_options_beat_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CHATMOCK_STORE", "memory")

        store = get_participant_store("sqlite", tmp_path / "kv.db")

        assert isinstance(store.backend, SQLiteKeyValueStore)
        assert store.backend.db_path == Path(tmp_path / "kv.db")

    def test_memory_backend(self):
        assert isinstance(get_participant_store("memory").backend, InMemoryKeyValueStore)


class TestCommands:
    """Tests for the non-interactive commands."""

    def test_preview_prints_conversation(self):
        result = runner.invoke(app, ["preview", "--store", "memory"])

        assert result.exit_code == 0
        assert "Group Chat" in result.output
        assert "vâng ạ" in result.output

    def test_show_lists_defaults(self):
        result = runner.invoke(app, ["show", "--store", "memory"])

        assert result.exit_code == 0
        assert "PHAN XUAN" in result.output
        assert "showing defaults" in result.output

    def test_reset_with_sqlite(self, tmp_path):
        result = runner.invoke(
            app, ["reset", "--yes", "--store", "sqlite", "--store-path", str(tmp_path / "kv.db")]
        )

        assert result.exit_code == 0
        assert "Participants reset!" in result.output

    def test_reset_aborts_without_confirmation(self):
        result = runner.invoke(app, ["reset", "--store", "memory"], input="n\n")

        assert result.exit_code == 0
        assert "Aborted" in result.output
