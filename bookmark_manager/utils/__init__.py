"""
Utility modules for the Bookmark Manager.

This package contains the exception hierarchy, logging setup and input
validation helpers.
"""

from .error_handler import (
    BookmarkManagerError,
    BookmarkNotFoundError,
    ConfigurationError,
    EditInProgressError,
    EditorError,
    ExportError,
    FormValidationError,
    ImportParseError,
    StorageError,
    ValidationError,
)
from .logging_setup import setup_logging

__all__ = [
    "BookmarkManagerError",
    "BookmarkNotFoundError",
    "ConfigurationError",
    "EditInProgressError",
    "EditorError",
    "ExportError",
    "FormValidationError",
    "ImportParseError",
    "StorageError",
    "ValidationError",
    "setup_logging",
]
