"""
Config Module - Black Box Interface

Purpose: Application configuration management
Interface: get_config(), get_backend_capabilities(), get_configured_capabilities()
Hidden: Config sources, YAML loading, environment parsing

Can be replaced with different config systems without affecting the parsers.
"""

import os
from typing import Any, Dict


class ConfigModule:
    """Configuration management module."""

    def __init__(self):
        """Initialize with environment variables."""
        self._config = self._load_from_env()

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment."""
        return {
            "log_level": os.getenv("EOS_CDMI_LOG_LEVEL", "INFO").upper(),
            "entry_metadata_suffix": os.getenv("EOS_CDMI_ENTRY_METADATA_SUFFIX", "_provided"),
            # Searched in the default locations if not provided
            "capabilities_file": os.getenv("EOS_CDMI_CAPABILITIES_FILE"),
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)


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
    clear_capability_cache()


# Public capability loader interface
from .capabilities import (
    DEFAULT_CAPABILITIES,
    clear_capability_cache,
    get_backend_capabilities,
    get_configured_capabilities,
)

__all__ = [
    "get_config",
    "reset_config",
    "ConfigModule",
    "get_backend_capabilities",
    "get_configured_capabilities",
    "DEFAULT_CAPABILITIES",
]
