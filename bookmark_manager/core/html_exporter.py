"""
Netscape HTML Bookmark Exporter

This module serializes the bookmark collection into a Netscape-Bookmark-file-1
document and writes it to disk. Bookmarks are emitted flat, in collection
order, with the non-standard DESCRIPTION and TAGS attributes the importer
reads back.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Sequence, Union

from bookmark_manager.utils.error_handler import ExportError

from .data_models import Bookmark

DEFAULT_EXPORT_FILENAME = "bookmarks.html"
MIME_TYPE = "text/html"


@dataclass
class ExportResult:
    """
    Result of an export operation.

    Attributes:
        path: Path to the exported file
        count: Number of bookmarks exported
        format_name: Name of the export format used
        exported_at: Timestamp of the export
    """

    path: Path
    count: int
    format_name: str = "Netscape HTML"
    mime_type: str = MIME_TYPE
    exported_at: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return (
            f"ExportResult(format={self.format_name}, "
            f"count={self.count}, path={self.path})"
        )


def escape_html(text: str) -> str:
    """Escape the characters that are unsafe in element text and quoted attributes."""
    if not text:
        return ""

    text = text.replace("&", "&amp;")
    text = text.replace("<", "&lt;")
    text = text.replace(">", "&gt;")
    text = text.replace('"', "&quot;")

    return text


class NetscapeHTMLExporter:
    """
    Generator for Netscape-format HTML bookmark files.

    The output can be imported by browsers and by BookmarkHTMLImporter.
    """

    def __init__(self, title: str = "Bookmarks"):
        """
        Initialize the exporter.

        Args:
            title: Document TITLE and H1 heading
        """
        self.title = title
        self.logger = logging.getLogger(__name__)

    def render(self, bookmarks: Sequence[Bookmark]) -> str:
        """
        Build the complete HTML document.

        Args:
            bookmarks: Bookmarks in the order they should appear

        Returns:
            HTML document text
        """
        html_parts = [
            "<!DOCTYPE NETSCAPE-Bookmark-file-1>",
            "<!-- This is an automatically generated file.",
            "     It will be read and overwritten.",
            "     DO NOT EDIT! -->",
            '<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">',
            f"<TITLE>{escape_html(self.title)}</TITLE>",
            f"<H1>{escape_html(self.title)}</H1>",
            "<DL><p>",
        ]

        for bookmark in bookmarks:
            html_parts.append(f"    <DT>{self._bookmark_html(bookmark)}")

        html_parts.append("</DL><p>")

        return "\n".join(html_parts) + "\n"

    def _bookmark_html(self, bookmark: Bookmark) -> str:
        attrs = [f'HREF="{escape_html(bookmark.url)}"']

        if bookmark.description:
            attrs.append(f'DESCRIPTION="{escape_html(bookmark.description)}"')

        if bookmark.tags:
            attrs.append(f'TAGS="{escape_html(",".join(bookmark.tags))}"')

        return f"<A {' '.join(attrs)}>{escape_html(bookmark.title)}</A>"

    def export(
        self, bookmarks: Sequence[Bookmark], output_path: Union[str, Path]
    ) -> ExportResult:
        """
        Write the HTML document for ``bookmarks`` to ``output_path``.

        Args:
            bookmarks: Bookmarks to export
            output_path: File to create or overwrite

        Returns:
            ExportResult describing the written file

        Raises:
            ExportError: If the file cannot be written
        """
        output_path = Path(output_path)

        try:
            self.logger.info(f"Exporting {len(bookmarks)} bookmarks to {output_path}")
            html_content = self.render(bookmarks)

            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(html_content)

        except OSError as e:
            self.logger.error(f"Failed to export bookmarks: {e}")
            raise ExportError(
                "Failed to write bookmark file", path=output_path, original_error=e
            ) from e

        return ExportResult(path=output_path, count=len(bookmarks))

    def export_to_directory(
        self,
        bookmarks: Sequence[Bookmark],
        directory: Union[str, Path],
        filename: str = DEFAULT_EXPORT_FILENAME,
    ) -> ExportResult:
        """Export as ``filename`` inside ``directory``, like a browser download."""
        return self.export(bookmarks, Path(directory).expanduser() / filename)
