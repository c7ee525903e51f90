"""
Pytest configuration and shared fixtures for bookmark manager tests.

This module provides the temporary store, configuration and sample data
fixtures shared across test modules.
"""

import json
from pathlib import Path
from typing import List

import pytest

from bookmark_manager.config.configuration import Configuration
from bookmark_manager.core.collection import BookmarkCollection
from bookmark_manager.core.data_models import Bookmark
from bookmark_manager.core.local_store import LocalStore
from bookmark_manager.core.repository import BookmarkRepository
from bookmark_manager.ui.app import BookmarkManagerApp
from tests.fixtures.test_data import (
    SAMPLE_BOOKMARK_RECORDS,
    SAMPLE_NETSCAPE_HTML,
    create_sample_bookmarks,
)

# ============================================================================
# Environment Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch):
    """Keep every test away from the user's home directory and config files."""
    monkeypatch.delenv("BOOKMARK_MANAGER_STORE", raising=False)
    monkeypatch.setattr(
        "bookmark_manager.config.pydantic_config.APP_DIR", tmp_path / "app_home"
    )
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)


# ============================================================================
# Store Fixtures
# ============================================================================


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Path of the local store file for this test."""
    return tmp_path / "store" / "local_storage.json"


@pytest.fixture
def store(store_path: Path) -> LocalStore:
    """Empty local store."""
    return LocalStore(store_path)


@pytest.fixture
def repository(store: LocalStore) -> BookmarkRepository:
    return BookmarkRepository(store)


@pytest.fixture
def seeded_store(store_path: Path) -> LocalStore:
    """Local store already holding the sample collection."""
    store_path.parent.mkdir(parents=True, exist_ok=True)
    store_path.write_text(
        json.dumps({"bookmarks": json.dumps(SAMPLE_BOOKMARK_RECORDS)}),
        encoding="utf-8",
    )
    return LocalStore(store_path)


@pytest.fixture
def collection(repository: BookmarkRepository) -> BookmarkCollection:
    """Empty collection backed by a temporary store."""
    return BookmarkCollection(repository)


@pytest.fixture
def seeded_collection(seeded_store: LocalStore) -> BookmarkCollection:
    return BookmarkCollection(BookmarkRepository(seeded_store))


# ============================================================================
# Configuration and Application Fixtures
# ============================================================================


@pytest.fixture
def test_config(tmp_path: Path, store_path: Path) -> Configuration:
    """Configuration pointing at temporary store and download directories."""
    config_path = tmp_path / "test_config.toml"
    downloads = tmp_path / "downloads"
    config_path.write_text(
        f"""
[storage]
path = "{store_path.as_posix()}"

[export]
download_dir = "{downloads.as_posix()}"
""",
        encoding="utf-8",
    )
    return Configuration(config_path)


@pytest.fixture
def app(test_config: Configuration) -> BookmarkManagerApp:
    return BookmarkManagerApp(test_config)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_bookmarks() -> List[Bookmark]:
    return create_sample_bookmarks()


@pytest.fixture
def sample_html_file(tmp_path: Path) -> Path:
    """Netscape bookmark file on disk."""
    path = tmp_path / "exported_bookmarks.html"
    path.write_text(SAMPLE_NETSCAPE_HTML, encoding="utf-8")
    return path
