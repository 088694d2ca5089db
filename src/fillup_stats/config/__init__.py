"""Configuration management for fillup-stats.

This module provides settings loading, validation, and creation
functionality for the fillup-stats application.
"""

from fillup_stats.config.base import (
    ConfigError,
    Configurator,
    create_default_config,
    get_config_path,
    load_settings,
)

__all__ = [
    "ConfigError",
    "Configurator",
    "create_default_config",
    "get_config_path",
    "load_settings",
]
