"""
Configuration management for the Bookmark Manager.

This module wraps the Pydantic configuration system with the accessors the
application and CLI use.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from .pydantic_config import ConfigurationManager, ManagerConfig


class Configuration:
    """
    Application configuration.

    Thin layer over ConfigurationManager that exposes the handful of
    settings the components need as plain attributes.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to user configuration file (TOML/JSON)
        """
        self._manager = ConfigurationManager(config_path)
        self._config = self._manager.config

    @property
    def config(self) -> ManagerConfig:
        """Get the underlying Pydantic configuration."""
        return self._config

    @property
    def source(self) -> Optional[Path]:
        """Configuration file that was loaded, if any."""
        return self._manager.source

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Update configuration from command-line arguments.

        Args:
            args: Dictionary of validated arguments
        """
        self._manager.update_from_cli_args(args)
        self._config = self._manager.config

    @property
    def store_path(self) -> Path:
        return self._config.storage.path

    @property
    def bookmarks_key(self) -> str:
        return self._config.storage.bookmarks_key

    @property
    def theme_key(self) -> str:
        return self._config.storage.theme_key

    @property
    def export_path(self) -> Path:
        """Default destination of an export."""
        return self._config.export.download_dir / self._config.export.filename

    @property
    def export_title(self) -> str:
        return self._config.export.title

    @property
    def skip_existing_urls(self) -> bool:
        return self._config.importing.skip_existing_urls

    @property
    def import_base_url(self) -> Optional[str]:
        return self._config.importing.base_url

    @property
    def accepted_extensions(self):
        return list(self._config.importing.accepted_extensions)

    @property
    def default_theme(self) -> str:
        return self._config.ui.default_theme

    def __repr__(self) -> str:
        return f"Configuration(store={self.store_path}, source={self.source})"
