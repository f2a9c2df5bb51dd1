"""Override configuration management."""

from .store import CONFIGURATION_DIRECTORY, ConfigurationStore

__all__ = ["CONFIGURATION_DIRECTORY", "ConfigurationStore"]
