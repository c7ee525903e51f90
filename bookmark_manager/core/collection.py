"""
In-memory bookmark collection.

The collection owns the ordered list of bookmarks and persists the whole
list through the repository after every mutation. A mutation whose save
fails leaves the in-memory list unchanged.
"""

import logging
from typing import Iterator, List, Optional, Sequence

from bookmark_manager.utils.error_handler import BookmarkNotFoundError

from .data_models import Bookmark, generate_id
from .repository import BookmarkRepository


class BookmarkCollection:
    """Ordered, persisted list of bookmarks keyed by id."""

    def __init__(self, repository: BookmarkRepository):
        """
        Load the collection from the repository.

        Args:
            repository: Persistence adapter, read once here
        """
        self.repository = repository
        self.logger = logging.getLogger(__name__)
        self._items: List[Bookmark] = repository.load()

    def __iter__(self) -> Iterator[Bookmark]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, bookmark_id: str) -> bool:
        return self.find(bookmark_id) is not None

    @property
    def items(self) -> List[Bookmark]:
        return list(self._items)

    def ids(self) -> List[str]:
        return [b.id for b in self._items]

    def find(self, bookmark_id: str) -> Optional[Bookmark]:
        for bookmark in self._items:
            if bookmark.id == bookmark_id:
                return bookmark
        return None

    def get(self, bookmark_id: str) -> Bookmark:
        bookmark = self.find(bookmark_id)
        if bookmark is None:
            raise BookmarkNotFoundError(bookmark_id)
        return bookmark

    def new_id(self, reserved: Sequence[str] = ()) -> str:
        """Generate an id unused by the collection and by ``reserved``."""
        return generate_id(set(self.ids()) | set(reserved))

    def _commit(self, items: List[Bookmark]) -> None:
        """Save ``items`` and make them current; on StorageError nothing changes."""
        self.repository.save(items)
        self._items = items

    def add(
        self,
        title: str,
        url: str,
        description: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> Bookmark:
        """Append a new bookmark with a fresh id."""
        bookmark = Bookmark(
            id=self.new_id(),
            title=title,
            url=url,
            description=description or None,
            tags=list(tags or []),
        )
        self._commit(self._items + [bookmark])
        self.logger.info(f"Added bookmark {bookmark.id}: {bookmark.url}")
        return bookmark

    def update(
        self,
        bookmark_id: str,
        title: str,
        url: str,
        description: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> Bookmark:
        """
        Replace the fields of an existing bookmark, keeping its id and position.

        Raises:
            BookmarkNotFoundError: If no bookmark has ``bookmark_id``
        """
        for index, current in enumerate(self._items):
            if current.id == bookmark_id:
                updated = Bookmark(
                    id=bookmark_id,
                    title=title,
                    url=url,
                    description=description or None,
                    tags=list(tags or []),
                )
                items = list(self._items)
                items[index] = updated
                self._commit(items)
                self.logger.info(f"Updated bookmark {bookmark_id}")
                return updated
        raise BookmarkNotFoundError(bookmark_id)

    def delete(self, bookmark_id: str) -> Bookmark:
        """
        Remove a bookmark by id.

        Raises:
            BookmarkNotFoundError: If no bookmark has ``bookmark_id``
        """
        bookmark = self.get(bookmark_id)
        self._commit([b for b in self._items if b.id != bookmark_id])
        self.logger.info(f"Deleted bookmark {bookmark_id}")
        return bookmark

    def extend(self, bookmarks: Sequence[Bookmark]) -> None:
        """
        Append already-built bookmarks, e.g. from an import.

        Raises:
            ValueError: If an id collides with an existing or sibling record
        """
        seen = set(self.ids())
        for bookmark in bookmarks:
            if bookmark.id in seen:
                raise ValueError(f"Duplicate bookmark id: {bookmark.id}")
            seen.add(bookmark.id)
        if not bookmarks:
            return
        self._commit(self._items + list(bookmarks))
        self.logger.info(f"Appended {len(bookmarks)} bookmarks")
