"""
Bookmark Manager.

A local bookmark manager: add, edit, delete, import and export bookmarks
kept in a local key-value store.
"""

__version__ = "1.0.0"
