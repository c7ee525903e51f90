"""
Page header with the light/dark theme toggle.
"""

import logging
from enum import Enum
from typing import Optional

from bookmark_manager.core.local_store import LocalStore

APP_TITLE = "Bookmark Manager"


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def icon(self) -> str:
        """Icon of the toggle button; shows the theme it switches to."""
        return "🌞" if self is Theme.DARK else "🌙"

    def toggled(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


class ThemeState:
    """Selected theme, remembered in the local store."""

    def __init__(self, store: LocalStore, key: str = "theme", default: Theme = Theme.LIGHT):
        self.store = store
        self.key = key
        self.logger = logging.getLogger(__name__)
        self._theme = self._load(default)

    def _load(self, default: Theme) -> Theme:
        stored: Optional[str] = self.store.get_item(self.key)
        if stored is None:
            return default
        try:
            return Theme(stored)
        except ValueError:
            self.logger.warning(f"Ignoring unknown stored theme '{stored}'")
            return default

    @property
    def theme(self) -> Theme:
        return self._theme

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.store.set_item(self.key, theme.value)

    def toggle(self) -> Theme:
        self.set_theme(self._theme.toggled())
        return self._theme


class Header:
    """Application title plus theme toggle."""

    def __init__(self, theme_state: ThemeState, title: str = APP_TITLE):
        self.theme_state = theme_state
        self.title = title

    def on_toggle_theme(self) -> Theme:
        return self.theme_state.toggle()

    def render(self) -> str:
        return f"{self.title}  {self.theme_state.theme.icon}"
