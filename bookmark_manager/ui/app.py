"""
Bookmark Manager application.

This module wires the collection, editor, list view, header, file upload
and export together and exposes the user-event handlers. Every handler is
synchronous and every mutation is persisted before it returns.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from bookmark_manager.config.configuration import Configuration
from bookmark_manager.core.collection import BookmarkCollection
from bookmark_manager.core.data_models import Bookmark
from bookmark_manager.core.html_exporter import ExportResult, NetscapeHTMLExporter
from bookmark_manager.core.html_importer import BookmarkHTMLImporter, ImportResult
from bookmark_manager.core.local_store import LocalStore
from bookmark_manager.core.repository import BookmarkRepository
from bookmark_manager.utils.error_handler import ImportParseError

from .editor import BookmarkEditor
from .file_upload import FileUpload
from .header import Header, Theme, ThemeState
from .list_view import BookmarkListView
from .notifications import NotificationCenter


class BookmarkManagerApp:
    """The bookmark manager page."""

    def __init__(self, config: Configuration, store: Optional[LocalStore] = None):
        """
        Open the store and load the collection.

        Args:
            config: Application configuration
            store: Local store to use instead of the configured one
        """
        self.config = config
        self.logger = logging.getLogger(__name__)
        self.notifications = NotificationCenter()

        self.store = store if store is not None else LocalStore(config.store_path)
        if self.store.recovered_from is not None:
            self.notifications.warning(
                f"Saved data was unreadable and has been moved to {self.store.recovered_from}"
            )

        self.repository = BookmarkRepository(self.store, key=config.bookmarks_key)
        self.collection = BookmarkCollection(self.repository)
        if self.repository.last_error:
            self.notifications.warning(
                f"{self.repository.last_error}. Starting with an empty list."
            )

        self.editor = BookmarkEditor(self.collection)
        self.list_view = BookmarkListView(self.collection, self.editor)
        self.header = Header(
            ThemeState(
                self.store, key=config.theme_key, default=Theme(config.default_theme)
            )
        )
        self.importer = BookmarkHTMLImporter(
            base_url=config.import_base_url,
            skip_existing_urls=config.skip_existing_urls,
        )
        self.exporter = NetscapeHTMLExporter(title=config.export_title)
        self.file_upload = FileUpload(
            self.handle_file_upload, accepted_extensions=config.accepted_extensions
        )

        self.logger.debug(f"Loaded {len(self.collection)} bookmarks")

    # ------------------------------------------------------------------
    # Editor and list actions
    # ------------------------------------------------------------------

    def handle_submit(self) -> Bookmark:
        return self.editor.submit()

    def handle_edit(self, bookmark_id: str) -> Bookmark:
        return self.list_view.on_edit(bookmark_id)

    def handle_cancel(self) -> None:
        self.editor.cancel()

    def handle_delete(self, bookmark_id: str) -> Bookmark:
        return self.list_view.on_delete(bookmark_id)

    def toggle_theme(self) -> Theme:
        return self.header.on_toggle_theme()

    # ------------------------------------------------------------------
    # Import / export
    # ------------------------------------------------------------------

    def handle_file_upload(self, content: str) -> ImportResult:
        """
        Import bookmarks from uploaded file text.

        Parse failures are logged and reported as an error notification.
        The collection is left unchanged and the returned result carries
        the error message.
        """
        try:
            result = self.importer.parse(
                content,
                existing_ids=self.collection.ids(),
                existing_urls=[b.url for b in self.collection],
            )
        except ImportParseError as e:
            self.logger.error(f"Error parsing bookmarks file: {e}")
            self.notifications.error(f"Could not import bookmarks: {e}")
            return ImportResult(error=str(e))

        if not result.bookmarks:
            self.notifications.warning("No bookmarks found in the uploaded file")
            return result

        self.collection.extend(result.bookmarks)

        message = f"Imported {result.count} bookmarks"
        if result.duplicates:
            message += f" ({result.duplicates} already bookmarked, skipped)"
        self.notifications.info(message)
        return result

    def import_file(self, file_path: Union[str, Path]) -> ImportResult:
        """Upload a file from disk and import it."""
        return self.file_upload.on_drop(file_path)

    def handle_export(self, output_path: Optional[Union[str, Path]] = None) -> ExportResult:
        """
        Export the whole collection as a Netscape bookmark file.

        Args:
            output_path: Destination; defaults to the configured download
                directory and filename

        Raises:
            ExportError: If the file cannot be written
        """
        destination = Path(output_path) if output_path else self.config.export_path
        result = self.exporter.export(self.collection.items, destination)
        self.notifications.info(f"Exported {result.count} bookmarks to {result.path}")
        return result
