"""
Config Module - Black Box Interface

Purpose: Application configuration management
Interface: get_config(), reset_config(), ConfigModule
Hidden: Config sources, validation logic, environment parsing

Can be replaced with a different config source (settings file, remote store).
"""

import logging
import os
from typing import Any, Dict

# Configuration Contract: Required and Optional Keys

REQUIRED_CONFIG_KEYS = {
    "log_level": "Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    "default_blocking_enabled": "Whether new sessions start with tracking protection on",
}

OPTIONAL_CONFIG_KEYS = {
    "debug": {
        "description": "Enable debug mode (log full session URLs)",
        "default": False,
    },
}

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class ConfigModule:
    """Configuration management module."""

    def __init__(self):
        """Initialize with environment variables."""
        self._config = self._load_from_env()
        self._validate_required_keys()
        self._validate_log_level()

    def _validate_required_keys(self) -> None:
        """
        Validate that all required configuration keys are present.

        Raises:
            ValueError: If required keys are missing
        """
        missing_keys = [
            key for key in REQUIRED_CONFIG_KEYS if self._config.get(key) is None
        ]

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}. "
                f"Check environment variables."
            )

    def _validate_log_level(self) -> None:
        if self._config["log_level"] not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid LOG_LEVEL '{self._config['log_level']}'. "
                f"Expected one of: {', '.join(VALID_LOG_LEVELS)}"
            )

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment."""
        return {
            "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
            "debug": _env_flag("DEBUG", "false"),
            # Session settings
            "default_blocking_enabled": _env_flag("BLOCKING_ENABLED", "true"),
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value."""
        self._config[key] = value

    def get_all(self) -> Dict[str, Any]:
        """Get all configuration values."""
        return self._config.copy()

    @property
    def log_level(self) -> int:
        """Configured log level as a logging module constant."""
        return logging.getLevelName(self._config["log_level"])

    @staticmethod
    def get_config_schema() -> Dict[str, Any]:
        """
        Get the configuration schema (contract) for this module.

        Returns:
            Dictionary with 'required' and 'optional' key specifications

        Example:
            >>> schema = ConfigModule.get_config_schema()
            >>> print(schema['required']['log_level'])
            Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        return {
            "required": REQUIRED_CONFIG_KEYS.copy(),
            "optional": OPTIONAL_CONFIG_KEYS.copy(),
        }


# Singleton instance
_instance = None


def get_config() -> ConfigModule:
    """Get the configuration module singleton."""
    global _instance
    if _instance is None:
        _instance = ConfigModule()
    return _instance


def reset_config() -> None:
    """Drop the singleton so the next get_config() re-reads the environment."""
    global _instance
    _instance = None


__all__ = ["get_config", "reset_config", "ConfigModule"]
