"""
Exception hierarchy for the Bookmark Manager.

All custom exceptions for the project are defined here. Import them from
bookmark_manager.utils.error_handler.
"""

from typing import Optional


class BookmarkManagerError(Exception):
    """Base exception for all bookmark manager errors."""

    pass


# ============================================================================
# Validation Errors
# ============================================================================


class ValidationError(BookmarkManagerError):
    """General validation errors."""

    pass


class FormValidationError(ValidationError):
    """Raised when the editor form is submitted with missing required fields."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(BookmarkManagerError):
    """Configuration-related errors."""

    pass


# ============================================================================
# Storage Errors
# ============================================================================


class StorageError(BookmarkManagerError):
    """Local store could not be read or written."""

    pass


class BookmarkNotFoundError(BookmarkManagerError):
    """No bookmark with the requested id exists in the collection."""

    def __init__(self, bookmark_id: str):
        self.bookmark_id = bookmark_id
        super().__init__(f"Bookmark not found: {bookmark_id}")


# ============================================================================
# Import / Export Errors
# ============================================================================


class ImportParseError(BookmarkManagerError):
    """Uploaded bookmark file could not be parsed."""

    pass


class ExportError(BookmarkManagerError):
    """
    Exception raised when export fails.

    Attributes:
        message: Error description
        path: Target path if available
        original_error: Underlying exception if any
    """

    def __init__(
        self,
        message: str,
        path=None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"(path: {self.path})")
        if self.original_error:
            parts.append(
                f"Caused by: {type(self.original_error).__name__}: {self.original_error}"
            )
        return " ".join(parts)


# ============================================================================
# Editor Errors
# ============================================================================


class EditorError(BookmarkManagerError):
    """Base class for editor state errors."""

    pass


class EditInProgressError(EditorError):
    """Raised when a second edit is started before the first is finished."""

    def __init__(self, editing_id: str):
        self.editing_id = editing_id
        super().__init__(
            f"Bookmark {editing_id} is already being edited; submit or cancel first"
        )
