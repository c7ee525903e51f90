"""
Input validation utilities for the Bookmark Manager.

This module provides validation functions for command-line arguments
and other user inputs.
"""

import os
from pathlib import Path
from typing import Iterable, Optional, Union

from bookmark_manager.utils.error_handler import ValidationError


def validate_input_file(
    file_path: Union[str, Path], allowed_extensions: Iterable[str]
) -> Path:
    """
    Validate that an upload exists, is readable and has an accepted extension.

    Args:
        file_path: Path to the file to import
        allowed_extensions: Accepted lowercase extensions, with leading dot

    Returns:
        Validated absolute Path

    Raises:
        ValidationError: If the file doesn't exist, isn't readable or has
            the wrong extension
    """
    path = Path(file_path).expanduser()

    if not path.exists():
        raise ValidationError(f"Input file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Input path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Input file is not readable: {file_path}")

    allowed = [ext.lower() for ext in allowed_extensions]
    if path.suffix.lower() not in allowed:
        raise ValidationError(
            f"Input file must be one of {', '.join(allowed)}, got: {path.suffix or '(none)'}"
        )

    return path.absolute()


def validate_output_file(file_path: Union[str, Path]) -> Path:
    """
    Validate that an export destination can be written.

    Args:
        file_path: Path to the output file

    Returns:
        Validated absolute Path

    Raises:
        ValidationError: If the path is a directory or its parent isn't writable
    """
    path = Path(file_path).expanduser()

    if path.exists() and path.is_dir():
        raise ValidationError(f"Output path is a directory: {file_path}")

    parent = path.parent if str(path.parent) else Path(".")
    if parent.exists() and not os.access(parent, os.W_OK):
        raise ValidationError(f"Output directory is not writable: {parent}")

    if path.suffix.lower() != ".html":
        raise ValidationError(f"Output file must be .html, got: {path.suffix or '(none)'}")

    return path.absolute()


def validate_config_file(file_path: Optional[Union[str, Path]]) -> Optional[Path]:
    """
    Validate configuration file path.

    Args:
        file_path: Path to configuration file, or None

    Returns:
        Validated Path object, or None if not provided

    Raises:
        ValidationError: If the file is missing or not TOML/JSON
    """
    if file_path is None:
        return None

    path = Path(file_path).expanduser()

    if not path.exists():
        raise ValidationError(f"Configuration file does not exist: {file_path}")

    if path.suffix.lower() not in (".toml", ".json"):
        raise ValidationError(
            f"Configuration file must be TOML or JSON, got: {path.suffix}"
        )

    return path.absolute()
