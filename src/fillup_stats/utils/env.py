"""Environment-aware path resolution utilities.

Resolves the configuration and cache directories of fillup-stats, following
the XDG Base Directory specification and the HOME environment variable.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

APP_DIR_NAME = "fillup-stats"


def _validate_xdg_path(xdg_var_name: str, xdg_value: str) -> Path | None:
    """Validate an XDG base directory value.

    Args:
        xdg_var_name: Name of the XDG environment variable
        xdg_value: Value from the environment variable

    Returns:
        Application directory under the XDG path, or None if the value is
        relative (the default location should be used instead)
    """
    xdg_path = Path(xdg_value)
    if not xdg_path.is_absolute():
        logger.warning(
            "%s contains relative path '%s' which violates "
            "XDG Base Directory specification. Ignoring and using default.",
            xdg_var_name,
            xdg_value,
        )
        return None
    return xdg_path / APP_DIR_NAME


def get_home_dir() -> Path:
    """Get the user's home directory, honoring HOME."""
    home = os.environ.get("HOME")
    return Path(home) if home else Path.home()


def config_dir_for_home(home_dir: Path) -> Path:
    """Build the config directory path (~/.config/fillup-stats) for a home."""
    return home_dir / ".config" / APP_DIR_NAME


def cache_dir_for_home(home_dir: Path) -> Path:
    """Build the cache directory path (~/.cache/fillup-stats) for a home."""
    return home_dir / ".cache" / APP_DIR_NAME


def _resolve_dir(xdg_var_name: str, fallback: Path) -> Path:
    xdg_value = os.environ.get(xdg_var_name)
    if xdg_value:
        validated_path = _validate_xdg_path(xdg_var_name, xdg_value)
        if validated_path:
            return validated_path
    return fallback


def get_config_dir() -> Path:
    """Get the application's configuration directory.

    Uses $XDG_CONFIG_HOME/fillup-stats when set to an absolute path,
    otherwise ~/.config/fillup-stats.
    """
    return _resolve_dir("XDG_CONFIG_HOME", config_dir_for_home(get_home_dir()))


def get_cache_dir() -> Path:
    """Get the application's cache directory.

    Uses $XDG_CACHE_HOME/fillup-stats when set to an absolute path,
    otherwise ~/.cache/fillup-stats.
    """
    return _resolve_dir("XDG_CACHE_HOME", cache_dir_for_home(get_home_dir()))
