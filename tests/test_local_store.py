"""
Tests for the local key-value store.
"""

import json
from unittest.mock import patch

import pytest

from bookmark_manager.core.local_store import LocalStore
from bookmark_manager.utils.error_handler import StorageError


class TestLocalStore:
    """Test cases for LocalStore."""

    def test_missing_file_is_empty(self, store_path):
        """Should open as empty when the file does not exist."""
        store = LocalStore(store_path)
        assert len(store) == 0
        assert store.get_item("bookmarks") is None
        assert not store_path.exists()

    def test_set_item_persists(self, store_path):
        """Should write values through to disk."""
        store = LocalStore(store_path)
        store.set_item("theme", "dark")

        assert json.loads(store_path.read_text(encoding="utf-8")) == {"theme": "dark"}
        assert LocalStore(store_path).get_item("theme") == "dark"

    def test_set_item_replaces(self, store):
        store.set_item("k", "one")
        store.set_item("k", "two")
        assert store.get_item("k") == "two"

    def test_values_must_be_strings(self, store):
        """Should reject non-string values like browser storage would coerce them."""
        with pytest.raises(TypeError):
            store.set_item("k", 1)

    def test_remove_item(self, store_path):
        store = LocalStore(store_path)
        store.set_item("a", "1")
        store.set_item("b", "2")
        store.remove_item("a")

        reopened = LocalStore(store_path)
        assert "a" not in reopened
        assert reopened.keys() == ["b"]

    def test_remove_missing_item(self, store):
        """Should ignore removal of unknown keys."""
        store.remove_item("missing")
        assert len(store) == 0

    def test_clear(self, store_path):
        store = LocalStore(store_path)
        store.set_item("a", "1")
        store.clear()
        assert len(LocalStore(store_path)) == 0

    def test_no_temp_file_left(self, store_path):
        """Should replace the file atomically without leftovers."""
        store = LocalStore(store_path)
        store.set_item("a", "1")
        assert [p.name for p in store_path.parent.iterdir()] == [store_path.name]

    def test_corrupt_file_moved_aside(self, store_path):
        """Should start empty and keep the unreadable file."""
        store_path.parent.mkdir(parents=True)
        store_path.write_text("{not json", encoding="utf-8")

        store = LocalStore(store_path)

        assert len(store) == 0
        assert store.recovered_from == store_path.with_name("local_storage.json.corrupt")
        assert store.recovered_from.read_text(encoding="utf-8") == "{not json"
        assert not store_path.exists()

    def test_non_mapping_file_moved_aside(self, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("[1, 2, 3]", encoding="utf-8")

        store = LocalStore(store_path)

        assert len(store) == 0
        assert store.recovered_from is not None

    def test_healthy_file_not_flagged(self, seeded_store):
        assert seeded_store.recovered_from is None
        assert "bookmarks" in seeded_store


class TestFailedWrites:
    """A write that cannot reach disk changes nothing."""

    def _failing_dump(self):
        return patch(
            "bookmark_manager.core.local_store.json.dump",
            side_effect=OSError("No space left on device"),
        )

    def test_set_item_failure_keeps_previous_value(self, store_path):
        store = LocalStore(store_path)
        store.set_item("theme", "light")

        with self._failing_dump():
            with pytest.raises(StorageError, match="No space left"):
                store.set_item("theme", "dark")

        assert store.get_item("theme") == "light"
        assert LocalStore(store_path).get_item("theme") == "light"

    def test_new_key_not_visible_after_failure(self, store):
        with self._failing_dump():
            with pytest.raises(StorageError):
                store.set_item("bookmarks", "[]")

        assert "bookmarks" not in store
        assert len(store) == 0

    def test_remove_and_clear_failures(self, store):
        store.set_item("a", "1")

        with self._failing_dump():
            with pytest.raises(StorageError):
                store.remove_item("a")
            with pytest.raises(StorageError):
                store.clear()

        assert store.get_item("a") == "1"
