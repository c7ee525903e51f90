"""
Pydantic-based configuration system for the Bookmark Manager.

Settings are grouped by concern (storage, export, import, ui, logging) and
can be supplied as TOML or JSON. Every option has a working default, so no
configuration file is required.
"""

import json
import os
import warnings
from pathlib import Path
from typing import Dict, List, Literal, Optional

import toml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from bookmark_manager.utils.error_handler import ConfigurationError

APP_DIR = Path.home() / ".bookmark_manager"
STORE_ENV_VAR = "BOOKMARK_MANAGER_STORE"


def _default_store_path() -> Path:
    return APP_DIR / "local_storage.json"


class StorageConfig(BaseModel):
    """Local store location and keys."""

    path: Path = Field(
        default_factory=_default_store_path,
        description="JSON file backing the local store",
    )
    bookmarks_key: str = Field(
        default="bookmarks",
        min_length=1,
        description="Store key holding the bookmark collection",
    )
    theme_key: str = Field(
        default="theme",
        min_length=1,
        description="Store key holding the selected theme",
    )

    @field_validator("path", mode="before")
    @classmethod
    def validate_path(cls, v):
        """Expand ``~`` in the store path."""
        if isinstance(v, str):
            v = Path(v)
        if isinstance(v, Path):
            return v.expanduser()
        return v

    @model_validator(mode="after")
    def validate_distinct_keys(self):
        """Bookmarks and theme must not share a store key."""
        if self.bookmarks_key == self.theme_key:
            raise ValueError("bookmarks_key and theme_key must be different")
        return self


class ExportConfig(BaseModel):
    """HTML export settings."""

    filename: str = Field(
        default="bookmarks.html",
        description="Name of the exported file",
    )
    title: str = Field(
        default="Bookmarks",
        min_length=1,
        description="TITLE and H1 of the exported document",
    )
    download_dir: Path = Field(
        default=Path("."),
        description="Directory the export is written to",
    )

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v):
        """Export files are plain HTML files without directory parts."""
        if not v.lower().endswith(".html"):
            raise ValueError("Export filename must end with .html")
        if "/" in v or "\\" in v:
            raise ValueError("Export filename must not contain a directory")
        return v

    @field_validator("download_dir", mode="before")
    @classmethod
    def validate_download_dir(cls, v):
        if isinstance(v, str):
            return Path(v).expanduser()
        return v


class ImportConfig(BaseModel):
    """HTML import settings."""

    skip_existing_urls: bool = Field(
        default=False,
        description="Skip imported links whose URL is already bookmarked",
    )
    base_url: Optional[str] = Field(
        default=None,
        description="Base URL for resolving relative links",
    )
    accepted_extensions: List[str] = Field(
        default_factory=lambda: [".html", ".htm", ".txt"],
        description="File extensions accepted for upload",
    )

    @field_validator("accepted_extensions")
    @classmethod
    def validate_extensions(cls, v):
        """Normalize extensions to lowercase with a leading dot."""
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        if not normalized:
            raise ValueError("At least one accepted extension is required")
        return normalized

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v):
        if v and not v.startswith(("http://", "https://", "file:")):
            warnings.warn(
                f"Import base URL '{v}' is not absolute; relative links will "
                "stay relative.",
                UserWarning,
            )
        return v or None


class UIConfig(BaseModel):
    """Presentation settings."""

    default_theme: Literal["light", "dark"] = Field(
        default="light",
        description="Theme used until the user toggles it",
    )


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file",
    )
    console_output: bool = Field(
        default=True,
        description="Log to stderr",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


class ManagerConfig(BaseModel):
    """Main configuration model."""

    model_config = ConfigDict(populate_by_name=True)

    storage: StorageConfig = Field(default_factory=StorageConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    importing: ImportConfig = Field(default_factory=ImportConfig, alias="import")
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigurationManager:
    """Manages loading and validation of configuration from multiple sources."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)
        """
        self._config: Optional[ManagerConfig] = None
        self.source: Optional[Path] = None
        self._load_configuration(config_path)

    def _get_default_config_paths(self) -> List[Path]:
        """Get list of default configuration file paths to try."""
        cwd = Path.cwd()
        return [
            cwd / "user_config.toml",
            cwd / "user_config.json",
            APP_DIR / "config.toml",
            APP_DIR / "config.json",
        ]

    def _load_configuration(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from file or use defaults."""
        config_data: Dict = {}

        if config_path:
            config_data = self._load_config_file(Path(config_path))
            self.source = Path(config_path)
        else:
            for path in self._get_default_config_paths():
                if path.exists():
                    config_data = self._load_config_file(path)
                    self.source = path
                    break

        self._load_store_path_from_env(config_data)

        try:
            self._config = ManagerConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(format_config_error(e)) from e

    def _load_config_file(self, config_path: Path) -> Dict:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise ConfigurationError(
                format_config_error(
                    FileNotFoundError(2, "No such file", str(config_path))
                )
            )

        try:
            if config_path.suffix.lower() == ".toml":
                return toml.load(config_path)
            elif config_path.suffix.lower() == ".json":
                with open(config_path, "r", encoding="utf-8") as f:
                    return json.load(f)
        except (toml.TomlDecodeError, json.JSONDecodeError, OSError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {e}"
            ) from e

        raise ConfigurationError(
            f"Unsupported configuration file format: {config_path.suffix}"
        )

    def _load_store_path_from_env(self, config_data: Dict) -> None:
        """Environment variable overrides the configured store path."""
        store_path = os.getenv(STORE_ENV_VAR)
        if store_path:
            config_data.setdefault("storage", {})["path"] = store_path

    def update_from_cli_args(self, args: Dict) -> None:
        """Update configuration from command-line arguments."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")

        config_dict = self._config.model_dump(by_alias=True)

        if args.get("store"):
            config_dict["storage"]["path"] = args["store"]

        if args.get("verbose"):
            config_dict["logging"]["level"] = "DEBUG"

        if args.get("skip_existing"):
            config_dict["import"]["skip_existing_urls"] = True

        try:
            self._config = ManagerConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(format_config_error(e)) from e

    @property
    def config(self) -> ManagerConfig:
        """Get the current configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")
        return self._config

    @staticmethod
    def create_sample_config(output_path: Path, format: str = "toml") -> None:
        """Create a sample configuration file."""
        sample_config = {
            "storage": {
                "path": str(_default_store_path()),
                "bookmarks_key": "bookmarks",
                "theme_key": "theme",
            },
            "export": {
                "filename": "bookmarks.html",
                "title": "Bookmarks",
                "download_dir": ".",
            },
            "import": {
                "skip_existing_urls": False,
                "accepted_extensions": [".html", ".htm", ".txt"],
            },
            "ui": {"default_theme": "light"},
            "logging": {"level": "WARNING", "console_output": True},
        }

        if format.lower() == "toml":
            with open(output_path, "w", encoding="utf-8") as f:
                toml.dump(sample_config, f)
        elif format.lower() == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(sample_config, f, indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")


# Hints shown below validation errors, by top-level section
SECTION_HINTS = {
    "storage": (
        "storage.path is the JSON store file; BOOKMARK_MANAGER_STORE or "
        "--store override it"
    ),
    "export": "export.filename must be a bare file name ending in .html",
    "import": "import.accepted_extensions lists upload suffixes such as \".html\"",
    "ui": 'ui.default_theme is "light" or "dark"',
    "logging": "logging.level is DEBUG, INFO, WARNING or ERROR",
}


class ConfigurationErrorFormatter:
    """Turns Pydantic validation errors into messages about config keys."""

    @staticmethod
    def format_validation_error(error: ValidationError) -> str:
        lines = []
        sections = []

        for detail in error.errors():
            location = detail["loc"]
            lines.append(
                f"✗ {ConfigurationErrorFormatter._key_path(location)}: "
                f"{ConfigurationErrorFormatter._describe(detail)}"
            )
            if location and location[0] in SECTION_HINTS and location[0] not in sections:
                sections.append(location[0])

        message = "Configuration Validation Failed:\n" + "\n".join(lines)
        hints = [SECTION_HINTS[s] for s in sections]
        hints.append("'bookmark-manager create-config' writes a file with every default")
        return message + "\n\n" + "\n".join(f"• {hint}" for hint in hints)

    @staticmethod
    def _key_path(location: tuple) -> str:
        """Dotted key as written in the file, e.g. ``ui → default_theme``."""
        if not location:
            return "configuration"
        return " → ".join(
            str(part) if isinstance(part, str) else f"[{part}]" for part in location
        )

    @staticmethod
    def _describe(detail: dict) -> str:
        error_type = detail["type"]
        ctx = detail.get("ctx", {})
        got = detail.get("input", "N/A")

        if error_type == "literal_error":
            return f"must be one of {ctx.get('expected', 'the allowed values')} (got: {got})"
        if error_type == "string_too_short":
            return "must not be empty"
        if error_type == "value_error":
            # Our own validators; drop pydantic's "Value error, " prefix
            return str(ctx.get("error", detail.get("msg", "invalid value")))
        return f"{detail.get('msg', 'invalid value')} (got: {got})"


def format_config_error(error: Exception) -> str:
    """
    Format a configuration problem for display on stderr.

    Args:
        error: Validation error or the error raised while locating the file

    Returns:
        Message text
    """
    if isinstance(error, ValidationError):
        return ConfigurationErrorFormatter.format_validation_error(error)

    if isinstance(error, FileNotFoundError):
        return (
            "Configuration File Not Found:\n"
            f"✗ {error.filename}\n\n"
            "• Run 'bookmark-manager create-config --output <file>' to create one\n"
            "• Or drop --config to use user_config.toml, "
            "~/.bookmark_manager/config.toml or the defaults"
        )

    return f"Unexpected Configuration Error:\n✗ {error}"
