"""
Core bookmark modules.

This package contains the bookmark data model, the local store and
repository that persist it, the in-memory collection, and the HTML
import/export routines.
"""

from .collection import BookmarkCollection
from .data_models import Bookmark, generate_id, normalize_url, split_tags
from .html_exporter import ExportResult, NetscapeHTMLExporter
from .html_importer import BookmarkHTMLImporter, ImportResult
from .local_store import LocalStore
from .repository import BookmarkRepository

__all__ = [
    'Bookmark',
    'BookmarkCollection',
    'BookmarkHTMLImporter',
    'BookmarkRepository',
    'ExportResult',
    'ImportResult',
    'LocalStore',
    'NetscapeHTMLExporter',
    'generate_id',
    'normalize_url',
    'split_tags',
]
