"""
Tests for the persisted bookmark collection.
"""

import pytest

from bookmark_manager.core.collection import BookmarkCollection
from bookmark_manager.core.data_models import Bookmark
from bookmark_manager.core.local_store import LocalStore
from bookmark_manager.core.repository import BookmarkRepository
from bookmark_manager.utils.error_handler import BookmarkNotFoundError, StorageError


def _reload(store_path):
    """Fresh collection reading the same store file."""
    return BookmarkCollection(BookmarkRepository(LocalStore(store_path)))


class TestBookmarkCollection:
    """Test cases for BookmarkCollection."""

    def test_empty_on_first_run(self, collection):
        assert len(collection) == 0
        assert collection.items == []

    def test_loads_saved_records_in_order(self, seeded_collection):
        assert seeded_collection.ids() == [
            "1700000000001",
            "1700000000002",
            "1700000000003",
        ]

    def test_add_appends_and_persists(self, collection, store_path):
        bookmark = collection.add(
            title="Example", url="https://example.com", tags=["demo"]
        )

        assert collection.items[-1] == bookmark
        assert bookmark.id
        reloaded = _reload(store_path)
        assert reloaded.items == [bookmark]

    def test_add_generates_unique_ids(self, collection):
        ids = {collection.add(title=str(i), url=f"https://e.com/{i}").id for i in range(25)}
        assert len(ids) == 25

    def test_add_empty_description_stored_as_absent(self, collection):
        bookmark = collection.add(title="T", url="https://t.com", description="")
        assert bookmark.description is None
        assert "description" not in bookmark.to_dict()

    def test_update_keeps_id_and_position(self, seeded_collection, seeded_store):
        updated = seeded_collection.update(
            "1700000000002",
            title="GitHub Home",
            url="https://github.com/home",
            description="Code hosting",
            tags=["git"],
        )

        assert updated.id == "1700000000002"
        assert seeded_collection.ids()[1] == "1700000000002"
        assert seeded_collection.items[1].title == "GitHub Home"
        assert _reload(seeded_store.path).items[1] == updated

    def test_update_unknown_id(self, seeded_collection):
        before = seeded_collection.items
        with pytest.raises(BookmarkNotFoundError):
            seeded_collection.update("missing", title="x", url="https://x.com")
        assert seeded_collection.items == before

    def test_delete_removes_record(self, seeded_collection, seeded_store):
        removed = seeded_collection.delete("1700000000001")

        assert removed.title == "Python Documentation"
        assert "1700000000001" not in seeded_collection
        assert len(_reload(seeded_store.path)) == 2

    def test_delete_unknown_id(self, seeded_collection):
        with pytest.raises(BookmarkNotFoundError, match="missing"):
            seeded_collection.delete("missing")
        assert len(seeded_collection) == 3

    def test_get_and_find(self, seeded_collection):
        assert seeded_collection.get("1700000000003").title == "Stack Overflow"
        assert seeded_collection.find("nope") is None
        with pytest.raises(BookmarkNotFoundError):
            seeded_collection.get("nope")

    def test_extend_appends_in_order(self, seeded_collection, seeded_store):
        new = [
            Bookmark(id="a", title="A", url="https://a.com"),
            Bookmark(id="b", title="B", url="https://b.com"),
        ]
        seeded_collection.extend(new)

        assert seeded_collection.ids()[-2:] == ["a", "b"]
        assert _reload(seeded_store.path).ids()[-2:] == ["a", "b"]

    def test_extend_rejects_duplicate_ids(self, seeded_collection):
        with pytest.raises(ValueError, match="Duplicate bookmark id"):
            seeded_collection.extend(
                [Bookmark(id="1700000000001", title="X", url="https://x.com")]
            )
        assert len(seeded_collection) == 3

    def test_extend_empty_does_not_write(self, collection, store_path):
        collection.extend([])
        assert not store_path.exists()

    def test_new_id_avoids_reserved(self, seeded_collection):
        new_id = seeded_collection.new_id(reserved=["r1"])
        assert new_id not in seeded_collection.ids()
        assert new_id != "r1"

    def test_iteration_is_snapshot(self, seeded_collection):
        """Mutating during iteration should not disturb the iterator."""
        for bookmark in seeded_collection:
            seeded_collection.delete(bookmark.id)
        assert len(seeded_collection) == 0


class TestFailedSaves:
    """A mutation whose save fails leaves the collection as it was."""

    @pytest.fixture
    def failing_store(self, seeded_collection, monkeypatch):
        def disk_full(key, value):
            raise StorageError("Unable to write local store: disk full")

        monkeypatch.setattr(seeded_collection.repository.store, "set_item", disk_full)
        return seeded_collection.repository.store

    def test_add(self, seeded_collection, failing_store):
        with pytest.raises(StorageError):
            seeded_collection.add(title="X", url="https://x.com")
        assert len(seeded_collection) == 3

    def test_update(self, seeded_collection, failing_store):
        with pytest.raises(StorageError):
            seeded_collection.update("1700000000002", title="Changed", url="https://c.com")
        assert seeded_collection.get("1700000000002").title == "GitHub"

    def test_delete(self, seeded_collection, failing_store):
        with pytest.raises(StorageError):
            seeded_collection.delete("1700000000001")
        assert "1700000000001" in seeded_collection

    def test_extend(self, seeded_collection, failing_store):
        with pytest.raises(StorageError):
            seeded_collection.extend([Bookmark(id="a", title="A", url="https://a.com")])
        assert seeded_collection.ids() == [
            "1700000000001",
            "1700000000002",
            "1700000000003",
        ]

    def test_memory_matches_disk(self, seeded_collection, seeded_store, failing_store):
        with pytest.raises(StorageError):
            seeded_collection.add(title="X", url="https://x.com")
        assert _reload(seeded_store.path).items == seeded_collection.items
