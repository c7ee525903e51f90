"""
Bookmark list view.

Renders the collection and dispatches the per-row edit and delete actions.
"""

import json
import logging
from dataclasses import dataclass
from typing import List, Optional

from bookmark_manager.core.collection import BookmarkCollection
from bookmark_manager.core.data_models import Bookmark

from .editor import BookmarkEditor


@dataclass
class ListRow:
    """One rendered bookmark card."""

    id: str
    title: str
    url: str
    description: Optional[str]
    tags: List[str]

    @classmethod
    def from_bookmark(cls, bookmark: Bookmark) -> "ListRow":
        return cls(
            id=bookmark.id,
            title=bookmark.title,
            url=bookmark.url,
            description=bookmark.description,
            tags=list(bookmark.tags),
        )

    def render(self) -> str:
        lines = [f"{self.title}  [{self.id}]", f"  {self.url}"]
        if self.description:
            lines.append(f"  {self.description}")
        if self.tags:
            lines.append("  " + " ".join(f"#{tag}" for tag in self.tags))
        return "\n".join(lines)


class BookmarkListView:
    """List of bookmark cards with Edit and Delete actions."""

    EMPTY_MESSAGE = "No bookmarks yet."

    def __init__(self, collection: BookmarkCollection, editor: BookmarkEditor):
        self.collection = collection
        self.editor = editor
        self.logger = logging.getLogger(__name__)

    def rows(self) -> List[ListRow]:
        return [ListRow.from_bookmark(b) for b in self.collection]

    def render(self) -> str:
        rows = self.rows()
        if not rows:
            return self.EMPTY_MESSAGE
        return "\n\n".join(row.render() for row in rows)

    def render_json(self) -> str:
        return json.dumps(
            [b.to_dict() for b in self.collection], ensure_ascii=False, indent=2
        )

    def on_edit(self, bookmark_id: str) -> Bookmark:
        """
        Start editing the bookmark with ``bookmark_id``.

        Raises:
            BookmarkNotFoundError: If the id is unknown
            EditInProgressError: If a different bookmark is being edited
        """
        bookmark = self.collection.get(bookmark_id)
        self.editor.begin_edit(bookmark)
        return bookmark

    def on_delete(self, bookmark_id: str) -> Bookmark:
        """
        Delete the bookmark immediately; cancels its edit if one is open.

        Raises:
            BookmarkNotFoundError: If the id is unknown
        """
        removed = self.collection.delete(bookmark_id)
        if self.editor.editing_id == bookmark_id:
            self.editor.cancel()
        return removed
