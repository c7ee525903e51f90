"""
Bookmark editor form.

The editor holds the state of the create-or-update form. It is bound to at
most one bookmark at a time: while an edit is in progress a second edit
cannot start until the first is submitted or cancelled.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from bookmark_manager.core.collection import BookmarkCollection
from bookmark_manager.core.data_models import Bookmark, split_tags
from bookmark_manager.utils.error_handler import (
    EditInProgressError,
    FormValidationError,
)


@dataclass
class FormData:
    """Current values of the editor fields."""

    title: str = ""
    url: str = ""
    description: str = ""
    tags: List[str] = field(default_factory=list)

    @property
    def tags_text(self) -> str:
        """Tags as shown in the comma-separated input."""
        return ", ".join(self.tags)

    @classmethod
    def from_bookmark(cls, bookmark: Bookmark) -> "FormData":
        return cls(
            title=bookmark.title,
            url=bookmark.url,
            description=bookmark.description or "",
            tags=list(bookmark.tags),
        )


class BookmarkEditor:
    """Create-or-update form bound to a bookmark collection."""

    def __init__(self, collection: BookmarkCollection):
        self.collection = collection
        self.form = FormData()
        self.editing_id: Optional[str] = None
        self.logger = logging.getLogger(__name__)

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    @property
    def heading(self) -> str:
        return "Edit Bookmark" if self.is_editing else "Add New Bookmark"

    @property
    def submit_label(self) -> str:
        return "Update Bookmark" if self.is_editing else "Add Bookmark"

    def set_title(self, value: str) -> None:
        self.form.title = value

    def set_url(self, value: str) -> None:
        self.form.url = value

    def set_description(self, value: str) -> None:
        self.form.description = value

    def set_tags_text(self, value: str) -> None:
        self.form.tags = split_tags(value)

    def set_tags(self, tags: List[str]) -> None:
        self.form.tags = [t.strip() for t in tags if t.strip()]

    def begin_edit(self, bookmark: Bookmark) -> None:
        """
        Load a bookmark into the form and enter edit mode.

        Raises:
            EditInProgressError: If another bookmark is already being edited
        """
        if self.is_editing and self.editing_id != bookmark.id:
            raise EditInProgressError(self.editing_id)
        self.form = FormData.from_bookmark(bookmark)
        self.editing_id = bookmark.id
        self.logger.debug(f"Editing bookmark {bookmark.id}")

    def cancel(self) -> None:
        """Discard form values and leave edit mode."""
        if self.is_editing:
            self.logger.debug(f"Edit of bookmark {self.editing_id} cancelled")
        self.reset()

    def reset(self) -> None:
        self.form = FormData()
        self.editing_id = None

    def _validate(self) -> None:
        if not self.form.title.strip():
            raise FormValidationError("Title is required", field="title")
        if not self.form.url.strip():
            raise FormValidationError("URL is required", field="url")

    def submit(self) -> Bookmark:
        """
        Create or update a bookmark from the form, then reset the form.

        Returns:
            The created or updated bookmark

        Raises:
            FormValidationError: If title or URL is empty
            BookmarkNotFoundError: If the edited bookmark no longer exists
        """
        self._validate()

        title = self.form.title.strip()
        url = self.form.url.strip()
        description = self.form.description.strip() or None
        tags = list(self.form.tags)

        if self.is_editing:
            bookmark = self.collection.update(
                self.editing_id, title=title, url=url, description=description, tags=tags
            )
        else:
            bookmark = self.collection.add(
                title=title, url=url, description=description, tags=tags
            )

        self.reset()
        return bookmark
