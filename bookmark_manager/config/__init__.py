"""Configuration for the Bookmark Manager."""

from .configuration import Configuration
from .pydantic_config import ConfigurationManager, ManagerConfig, format_config_error

__all__ = [
    "Configuration",
    "ConfigurationManager",
    "ManagerConfig",
    "format_config_error",
]
