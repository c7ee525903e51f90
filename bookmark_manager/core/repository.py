"""
Persistence adapter for the bookmark collection.

The whole collection is stored as one JSON array under a fixed key of the
local store. There are no partial updates and no schema versions.
"""

import json
import logging
from typing import List, Optional, Sequence

from bookmark_manager.utils.error_handler import StorageError

from .data_models import Bookmark
from .local_store import LocalStore

DEFAULT_BOOKMARKS_KEY = "bookmarks"


class BookmarkRepository:
    """
    Loads and saves the full bookmark collection.

    ``load`` never raises for bad stored content: it returns an empty list,
    keeps the unreadable payload under a backup key (see ``_keep_corrupt``)
    and records the problem in ``last_error``.
    """

    def __init__(self, store: LocalStore, key: str = DEFAULT_BOOKMARKS_KEY):
        self.store = store
        self.key = key
        self.last_error: Optional[str] = None
        self.backup_key: Optional[str] = None
        self.logger = logging.getLogger(__name__)

    @property
    def corrupt_key(self) -> str:
        return f"{self.key}.corrupt"

    def load(self) -> List[Bookmark]:
        """
        Read the stored collection.

        Returns:
            Bookmarks in stored order; empty if nothing is stored or the
            stored content is malformed
        """
        self.last_error = None
        self.backup_key = None
        raw = self.store.get_item(self.key)
        if raw is None or not raw.strip():
            return []

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            bookmarks = [Bookmark.from_dict(item) for item in data]
        except ValueError as e:
            # json.JSONDecodeError is a ValueError subclass
            self.last_error = f"Stored bookmarks could not be read: {e}"
            self.logger.warning(f"{self.last_error}; starting with an empty collection")
            self._keep_corrupt(raw)
            return []

        self.logger.debug(f"Loaded {len(bookmarks)} bookmarks from key '{self.key}'")
        return bookmarks

    def _backup_keys(self) -> List[str]:
        prefix = f"{self.corrupt_key}."
        return [
            k for k in self.store.keys() if k == self.corrupt_key or k.startswith(prefix)
        ]

    def _keep_corrupt(self, raw: str) -> None:
        """
        Copy an unreadable payload to a backup key.

        The first backup goes to ``<key>.corrupt``, later ones to
        ``<key>.corrupt.1``, ``<key>.corrupt.2`` and so on. A payload that is
        already backed up is not copied again. Write failures are logged
        and otherwise ignored.
        """
        existing = self._backup_keys()
        for key in existing:
            if self.store.get_item(key) == raw:
                self.backup_key = key
                return

        backup_key = self.corrupt_key
        n = 0
        while backup_key in existing:
            n += 1
            backup_key = f"{self.corrupt_key}.{n}"

        try:
            self.store.set_item(backup_key, raw)
        except StorageError as e:
            self.logger.warning(f"Could not back up unreadable bookmarks: {e}")
            return
        self.backup_key = backup_key
        self.logger.info(f"Unreadable bookmarks kept under key '{backup_key}'")

    def save(self, bookmarks: Sequence[Bookmark]) -> None:
        """Replace the stored collection with ``bookmarks``."""
        payload = json.dumps([b.to_dict() for b in bookmarks], ensure_ascii=False)
        self.store.set_item(self.key, payload)
        self.logger.debug(f"Saved {len(bookmarks)} bookmarks to key '{self.key}'")
