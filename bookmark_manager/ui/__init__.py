"""
Interactive components of the Bookmark Manager.

The editor, list view, header, file upload and notifications are plain
objects; BookmarkManagerApp wires them to the collection.
"""

from .app import BookmarkManagerApp
from .editor import BookmarkEditor, FormData
from .file_upload import FileUpload
from .header import Header, Theme, ThemeState
from .list_view import BookmarkListView, ListRow
from .notifications import Notification, NotificationCenter, NotificationLevel

__all__ = [
    "BookmarkEditor",
    "BookmarkListView",
    "BookmarkManagerApp",
    "FileUpload",
    "FormData",
    "Header",
    "ListRow",
    "Notification",
    "NotificationCenter",
    "NotificationLevel",
    "Theme",
    "ThemeState",
]
