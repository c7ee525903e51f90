"""
Local key-value store.

This module provides the on-disk counterpart of browser local storage: a
flat mapping of string keys to string values kept in a single JSON file.
Every write replaces the file atomically; a failed write leaves both the
file and the in-memory contents as they were.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from bookmark_manager.utils.error_handler import StorageError


class LocalStore:
    """
    String key-value store persisted to one JSON file.

    The file is read once when the store is opened. A missing file is an
    empty store. A file that cannot be decoded is moved aside to
    ``<name>.corrupt`` and the store starts empty; ``recovered_from`` then
    points at the moved file.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Open the store.

        Args:
            path: Path of the backing JSON file
        """
        self.path = Path(path).expanduser()
        self.logger = logging.getLogger(__name__)
        self.recovered_from: Optional[Path] = None
        self._items: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            self.logger.debug(f"Local store not found, starting empty: {self.path}")
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise StorageError(f"Unable to read local store {self.path}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            self._move_aside(f"invalid JSON ({e})")
            return {}

        if not isinstance(data, dict) or not all(
            isinstance(v, str) for v in data.values()
        ):
            self._move_aside("content is not a string mapping")
            return {}

        return data

    def _move_aside(self, reason: str) -> None:
        backup = self.path.with_name(self.path.name + ".corrupt")
        self.logger.warning(
            f"Local store {self.path} is unreadable: {reason}; moved to {backup}"
        )
        try:
            self.path.replace(backup)
        except OSError as e:
            raise StorageError(f"Unable to move aside corrupt store {self.path}: {e}") from e
        self.recovered_from = backup

    def _flush(self, items: Dict[str, str]) -> None:
        """Write ``items`` to disk, then make them the current contents."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)

            # Save to temporary file first for atomic operation
            temp_file = self.path.with_suffix(self.path.suffix + ".tmp")
            with open(temp_file, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False, indent=2)

            temp_file.replace(self.path)
        except OSError as e:
            self.logger.error(f"Failed to write local store {self.path}: {e}")
            raise StorageError(f"Unable to write local store {self.path}: {e}") from e

        self._items = items

    def get_item(self, key: str) -> Optional[str]:
        """Return the value stored under ``key``, or None."""
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        if not isinstance(value, str):
            raise TypeError(f"Local store values must be strings, got {type(value).__name__}")
        self._flush({**self._items, key: value})

    def remove_item(self, key: str) -> None:
        """Remove ``key`` if present."""
        if key in self._items:
            self._flush({k: v for k, v in self._items.items() if k != key})

    def keys(self) -> List[str]:
        return list(self._items)

    def clear(self) -> None:
        self._flush({})

    def __contains__(self, key: str) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)
