"""Configuration management for fillup-stats.

This module handles locating, loading, validating, and creating the
settings file that selects the unit system, locale, and label overrides
used when rendering statistics tables.
"""

import logging
from pathlib import Path

import yaml

from fillup_stats.models import Settings
from fillup_stats.utils.env import get_config_dir

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Configuration-related error."""

    pass


class Configurator:
    """Configuration manager for fillup-stats.

    Examples:
        # Use default path
        settings = Configurator().load()

        # Use custom path (useful for testing)
        settings = Configurator(settings_path="/tmp/settings.yaml").load()
    """

    def __init__(self, settings_path: Path | str | None = None) -> None:
        """Initialize configuration manager.

        Args:
            settings_path: Path to settings.yaml. If None, uses default
                location (~/.config/fillup-stats/settings.yaml
                or $XDG_CONFIG_HOME/fillup-stats/settings.yaml)
        """
        self.settings_path = (
            Path(settings_path) if settings_path else self._get_default_settings_path()
        )

    @staticmethod
    def _get_default_settings_path() -> Path:
        """Get default path for settings.yaml."""
        return get_config_dir() / "settings.yaml"

    def load(self) -> Settings:
        """Load and validate settings from the settings file.

        Returns:
            Validated Settings instance

        Raises:
            ConfigError: If the file doesn't exist or is invalid
        """
        if not self.settings_path.exists():
            raise ConfigError(
                f"Configuration file not found: {self.settings_path}\n\n"
                "Please run 'fillup-stats config --init' to create one."
            )

        try:
            settings = Settings.from_yaml_file(self.settings_path)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML in configuration file:\n{e}\n\n"
                f"Please check {self.settings_path} for syntax errors."
            ) from e
        except (TypeError, ValueError) as e:
            raise ConfigError(
                f"Invalid configuration in {self.settings_path}:\n{e}"
            ) from e

        logger.debug("Loaded settings from %s", self.settings_path)
        return settings

    def load_or_default(self) -> Settings:
        """Load settings, falling back to defaults when no file exists.

        Raises:
            ConfigError: If the file exists but is invalid
        """
        if not self.settings_path.exists():
            logger.debug(
                "No settings file at %s, using defaults", self.settings_path
            )
            return Settings()
        return self.load()

    def create(self, force: bool = False) -> Path:
        """Create a settings file with default values.

        Args:
            force: Overwrite an existing settings file

        Returns:
            Path to the created file

        Raises:
            ConfigError: If the file exists and force is False, or it
                cannot be written
        """
        if self.settings_path.exists() and not force:
            raise ConfigError(
                f"Configuration file already exists: {self.settings_path}. "
                "Use --force to overwrite."
            )

        try:
            Settings().to_yaml_file(self.settings_path)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration: {e}") from e

        logger.info("Created settings file %s", self.settings_path)
        return self.settings_path


# Convenience functions that use default paths


def load_settings() -> Settings:
    """Load settings from the default file, or defaults if it is missing.

    Raises:
        ConfigError: If the settings file is invalid
    """
    return Configurator().load_or_default()


def get_config_path() -> Path:
    """Return path to default settings.yaml file (may not exist yet)."""
    return Configurator._get_default_settings_path()


def create_default_config(force: bool = False) -> Path:
    """Create the default settings file.

    Raises:
        ConfigError: If the file exists and force is False
    """
    return Configurator().create(force=force)
