"""Unit tests for the config commands."""

from pathlib import Path
from unittest.mock import patch

import pytest
from explorefs.cli.main import app
from explorefs.core.config import load_config
from typer.testing import CliRunner

runner = CliRunner()

FIND = "explorefs.cli.commands.config.find_bridge_binary"


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at tmp_path and return the config file path."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path / "explorefs" / "config.toml"


class TestConfigShow:
    """Tests for explorefs config show."""

    def test_defaults(self, config_home: Path) -> None:
        with patch(FIND, return_value="/usr/bin/adb"):
            result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "defaults" in result.stdout
        assert "/usr/bin/adb" in result.stdout
        assert "adb://" in result.stdout

    def test_invalid_file(self, config_home: Path) -> None:
        config_home.parent.mkdir(parents=True)
        config_home.write_text("scheme = ")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1
        assert "Invalid TOML" in result.output


class TestConfigInit:
    """Tests for explorefs config init."""

    def test_records_discovered_adb(self, config_home: Path) -> None:
        with patch(FIND, return_value="/sdk/platform-tools/adb"):
            result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert load_config(config_home).adb_path == "/sdk/platform-tools/adb"

    def test_explicit_adb_path(self, config_home: Path) -> None:
        with patch(FIND) as mock_find:
            result = runner.invoke(app, ["config", "init", "--adb-path", "/opt/adb"])

        assert result.exit_code == 0
        mock_find.assert_not_called()
        assert load_config(config_home).adb_path == "/opt/adb"

    def test_existing_needs_force(self, config_home: Path) -> None:
        config_home.parent.mkdir(parents=True)
        config_home.write_text('adb_path = "/old/adb"\n')

        result = runner.invoke(app, ["config", "init", "--adb-path", "/new/adb"])
        assert result.exit_code == 0
        assert load_config(config_home).adb_path == "/old/adb"

        result = runner.invoke(app, ["config", "init", "--adb-path", "/new/adb", "--force"])
        assert result.exit_code == 0
        assert load_config(config_home).adb_path == "/new/adb"


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "explorefs version 0.1.0" in result.stdout
