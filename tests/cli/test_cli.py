"""CLI tests."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

import tasktracker
from tasktracker import __version__
from tasktracker.cli.main import MIGRATIONS_DIR, alembic_config, app

runner = CliRunner()


class TestServe:
    """Tests for the serve command."""

    def test_uses_settings_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Host and port fall back to HOST and PORT."""
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "4000")

        with patch("tasktracker.cli.main.uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0, result.output
        mock_run.assert_called_once_with(
            "tasktracker.api.main:app",
            host="127.0.0.1",
            port=4000,
            reload=False,
            log_config=None,
        )

    def test_options_override_settings(self) -> None:
        """Command line options win over settings."""
        with patch("tasktracker.cli.main.uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--host", "0.0.0.0", "--port", "9000"])

        assert result.exit_code == 0, result.output
        assert mock_run.call_args.kwargs["port"] == 9000
        assert "9000" in result.output


class TestMigrate:
    """Tests for the migrate command."""

    def test_migrations_ship_inside_the_package(self) -> None:
        """The Alembic scripts are found next to the installed package."""
        package_dir = Path(tasktracker.__file__).resolve().parent

        assert MIGRATIONS_DIR.parent == package_dir
        assert (MIGRATIONS_DIR / "env.py").is_file()
        assert any((MIGRATIONS_DIR / "versions").glob("*.py"))
        assert alembic_config("sqlite://").get_main_option("script_location") == str(
            MIGRATIONS_DIR
        )

    def test_creates_tasks_table(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Upgrading to head creates the tasks table."""
        db_path = tmp_path / "tasks.db"
        monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")

        result = runner.invoke(app, ["migrate"])

        assert result.exit_code == 0, result.output
        with sqlite3.connect(db_path) as conn:
            columns = {row[1] for row in conn.execute("PRAGMA table_info(tasks)")}
        assert columns == {"id", "title", "description", "done", "created_at"}

    def test_passes_revision(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The target revision is forwarded to Alembic."""
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

        with patch("tasktracker.cli.main.command.upgrade") as mock_upgrade:
            result = runner.invoke(app, ["migrate", "--revision", "3f9c2a7d1b10"])

        assert result.exit_code == 0, result.output
        config, revision = mock_upgrade.call_args.args
        assert revision == "3f9c2a7d1b10"
        assert config.get_main_option("sqlalchemy.url") == "sqlite+aiosqlite:///:memory:"


class TestVersion:
    """Tests for the version command."""

    def test_prints_version(self) -> None:
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output
