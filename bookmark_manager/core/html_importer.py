"""
HTML bookmark import module.

This module converts the anchor elements of an uploaded HTML bookmark file
(Netscape bookmark format or any HTML page) into bookmark records. The
non-standard DESCRIPTION and TAGS attributes written by the exporter are
recognized.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from bookmark_manager.utils.error_handler import ImportParseError

from .data_models import Bookmark, generate_id, normalize_url, split_tags

UNTITLED = "Untitled"


@dataclass
class ImportResult:
    """
    Result of parsing an uploaded bookmark file.

    Attributes:
        bookmarks: New records in document order
        skipped: Anchors with a missing or blank href
        duplicates: Anchors skipped by the duplicate URL check
        error: Parse failure message, if the file could not be read
    """

    bookmarks: List[Bookmark] = field(default_factory=list)
    skipped: int = 0
    duplicates: int = 0
    error: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.bookmarks)

    def __str__(self) -> str:
        return (
            f"ImportResult(count={self.count}, skipped={self.skipped}, "
            f"duplicates={self.duplicates})"
        )


class BookmarkHTMLImporter:
    """
    Parser for HTML bookmark files.

    Every ``<a>`` element in document order becomes one bookmark; folder
    structure is ignored.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        skip_existing_urls: bool = False,
    ):
        """
        Initialize the importer.

        Args:
            base_url: URL relative hrefs resolve against when the document
                has no ``<base href>`` of its own
            skip_existing_urls: Skip anchors whose URL is already present
        """
        self.base_url = base_url
        self.skip_existing_urls = skip_existing_urls
        self.logger = logging.getLogger(__name__)

    def parse(
        self,
        content: str,
        existing_ids: Iterable[str] = (),
        existing_urls: Iterable[str] = (),
    ) -> ImportResult:
        """
        Parse HTML text into new bookmarks.

        Args:
            content: Raw text of the uploaded file
            existing_ids: Ids already in the collection
            existing_urls: URLs already in the collection, used only when
                ``skip_existing_urls`` is set

        Returns:
            ImportResult with freshly identified bookmarks

        Raises:
            ImportParseError: If the content cannot be parsed
        """
        if not isinstance(content, str):
            raise ImportParseError(
                f"Bookmark file content must be text, got {type(content).__name__}"
            )

        try:
            soup = BeautifulSoup(content, "html.parser")
        except Exception as e:
            # html.parser surfaces malformed markup as assorted exception types
            raise ImportParseError(f"Failed to parse bookmark file: {e}") from e

        base_url = self._document_base(soup)
        taken_ids = set(existing_ids)
        seen_urls = (
            {normalize_url(u) for u in existing_urls}
            if self.skip_existing_urls
            else set()
        )

        result = ImportResult()
        for anchor in soup.find_all("a"):
            href = (anchor.get("href") or "").strip()
            if not href:
                self.logger.warning("Anchor found without href, skipping")
                result.skipped += 1
                continue

            url = self._resolve_href(href, base_url)

            if self.skip_existing_urls:
                key = normalize_url(url)
                if key in seen_urls:
                    self.logger.debug(f"Skipping duplicate URL: {url}")
                    result.duplicates += 1
                    continue
                seen_urls.add(key)

            bookmark_id = generate_id(taken_ids)
            taken_ids.add(bookmark_id)
            result.bookmarks.append(self._build_bookmark(anchor, bookmark_id, url))

        self.logger.info(f"Parsed {result.count} bookmarks from uploaded file")
        return result

    def _document_base(self, soup: BeautifulSoup) -> Optional[str]:
        base = soup.find("base", href=True)
        if base:
            href = base["href"].strip()
            return urljoin(self.base_url, href) if self.base_url else href
        return self.base_url

    def _resolve_href(self, href: str, base_url: Optional[str]) -> str:
        if base_url:
            return urljoin(base_url, href)
        return href

    def _build_bookmark(self, anchor, bookmark_id: str, url: str) -> Bookmark:
        title = anchor.get_text().strip() or UNTITLED
        description = anchor.get("description") or None
        tags = split_tags(anchor.get("tags"))
        return Bookmark(
            id=bookmark_id,
            title=title,
            url=url,
            description=description,
            tags=tags,
        )
