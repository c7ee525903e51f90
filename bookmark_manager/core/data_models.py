"""
Data models for the Bookmark Manager.

This module defines the bookmark record stored in the collection and the
helpers used to serialize it to and from the local store.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import parse_qs, urlencode, urlparse


def generate_id(existing: Iterable[str] = ()) -> str:
    """
    Generate a bookmark identifier not present in ``existing``.

    Args:
        existing: Identifiers already in use

    Returns:
        New unique identifier
    """
    taken = set(existing)
    while True:
        candidate = uuid.uuid4().hex
        if candidate not in taken:
            return candidate


def split_tags(text: Optional[str]) -> List[str]:
    """Split comma-separated tag text into trimmed, non-empty tags."""
    if not text:
        return []
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def normalize_url(url: str) -> str:
    """
    Normalize URL for duplicate comparison.

    Args:
        url: Raw URL string

    Returns:
        Normalized URL string
    """
    if not url or not url.strip():
        return ""

    url = url.strip()

    # Don't modify special protocols
    if url.startswith(("javascript:", "data:", "mailto:", "ftp:", "file:")):
        return url

    if not url.startswith(("http://", "https://")):
        return url

    try:
        parsed = urlparse(url)

        normalized = f"{parsed.scheme.lower()}://{parsed.netloc.lower()}"

        path = parsed.path.rstrip("/")
        if path:
            normalized += path

        if parsed.query:
            # Sort query parameters for consistency
            params = parse_qs(parsed.query, keep_blank_values=True)
            normalized += "?" + urlencode(sorted(params.items()), doseq=True)

        if parsed.fragment:
            normalized += f"#{parsed.fragment}"

        return normalized

    except ValueError:
        return url


@dataclass
class Bookmark:
    """
    A stored reference to a URL with title, description and tag metadata.

    The ``id`` is assigned once at creation and never changes; edits keep it.
    """

    id: str
    title: str
    url: str
    description: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    @property
    def normalized_url(self) -> str:
        return normalize_url(self.url)

    def content_key(self) -> Tuple[str, str, Optional[str], Tuple[str, ...]]:
        """Fields that identify the bookmark's content, ignoring the id."""
        return (self.title, self.url, self.description, tuple(self.tags))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the JSON-compatible dict written to the local store.

        ``description`` is omitted when absent.
        """
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "url": self.url,
        }
        if self.description:
            data["description"] = self.description
        data["tags"] = list(self.tags)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bookmark":
        """
        Build a bookmark from a stored record.

        Args:
            data: Decoded JSON object

        Returns:
            Bookmark instance

        Raises:
            ValueError: If the record is malformed
        """
        if not isinstance(data, dict):
            raise ValueError(f"Bookmark record must be an object, got {type(data).__name__}")

        for key in ("id", "title", "url"):
            if not isinstance(data.get(key), str):
                raise ValueError(f"Bookmark record field '{key}' must be a string")

        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise ValueError("Bookmark record field 'description' must be a string")

        tags = data.get("tags")
        if tags is None:
            tags = []
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise ValueError("Bookmark record field 'tags' must be a list of strings")

        return cls(
            id=data["id"],
            title=data["title"],
            url=data["url"],
            description=description or None,
            tags=list(tags),
        )
