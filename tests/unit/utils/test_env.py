"""Unit tests for fillup_stats.utils.env module."""

import logging

from fillup_stats.utils.env import (
    cache_dir_for_home,
    config_dir_for_home,
    get_cache_dir,
    get_config_dir,
    get_home_dir,
)


class TestGetHomeDir:
    """Test get_home_dir function."""

    def test_uses_home_variable(self, isolated_home):
        """Test HOME takes precedence."""
        assert get_home_dir() == isolated_home


class TestConfigDir:
    """Test config directory resolution."""

    def test_default(self, isolated_home):
        """Test ~/.config/fillup-stats is the default."""
        assert get_config_dir() == config_dir_for_home(isolated_home)
        assert get_config_dir() == isolated_home / ".config" / "fillup-stats"

    def test_xdg_absolute(self, isolated_home, tmp_path, monkeypatch):
        """Test an absolute XDG_CONFIG_HOME is used."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

        assert get_config_dir() == tmp_path / "xdg" / "fillup-stats"

    def test_xdg_relative_ignored(self, isolated_home, monkeypatch, caplog):
        """Test a relative XDG_CONFIG_HOME is ignored with a warning."""
        monkeypatch.setenv("XDG_CONFIG_HOME", "relative/config")

        with caplog.at_level(logging.WARNING):
            result = get_config_dir()

        assert result == config_dir_for_home(isolated_home)
        assert "XDG_CONFIG_HOME" in caplog.text


class TestCacheDir:
    """Test cache directory resolution."""

    def test_default(self, isolated_home):
        """Test ~/.cache/fillup-stats is the default."""
        assert get_cache_dir() == cache_dir_for_home(isolated_home)

    def test_xdg_absolute(self, isolated_home, tmp_path, monkeypatch):
        """Test an absolute XDG_CACHE_HOME is used."""
        monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))

        assert get_cache_dir() == tmp_path / "cache" / "fillup-stats"
