"""Unit tests for XDG path helpers."""

from pathlib import Path

import pytest
from explorefs.core.paths import APP_NAME, get_config_dir, get_config_path


class TestConfigPaths:
    """Tests for the config directory and file paths."""

    def test_xdg_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """XDG_CONFIG_HOME wins over the home directory."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_dir() == tmp_path / APP_NAME
        assert get_config_path() == tmp_path / APP_NAME / "config.toml"

    def test_home_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without XDG_CONFIG_HOME the path lives under ~/.config."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", lambda: tmp_path)

        assert get_config_dir() == tmp_path / ".config" / "explorefs"

    def test_empty_xdg_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """An empty XDG_CONFIG_HOME counts as unset."""
        monkeypatch.setenv("XDG_CONFIG_HOME", "")
        monkeypatch.setattr(Path, "home", lambda: tmp_path)

        assert get_config_path() == tmp_path / ".config" / "explorefs" / "config.toml"
