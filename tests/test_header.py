"""
Tests for the header and theme toggle.
"""

from bookmark_manager.core.local_store import LocalStore
from bookmark_manager.ui.header import APP_TITLE, Header, Theme, ThemeState


class TestTheme:
    """Test Theme enum."""

    def test_toggled(self):
        assert Theme.LIGHT.toggled() is Theme.DARK
        assert Theme.DARK.toggled() is Theme.LIGHT

    def test_icon_shows_target_theme(self):
        assert Theme.LIGHT.icon == "🌙"
        assert Theme.DARK.icon == "🌞"


class TestThemeState:
    """Test ThemeState persistence."""

    def test_default(self, store):
        assert ThemeState(store).theme is Theme.LIGHT
        assert ThemeState(store, default=Theme.DARK).theme is Theme.DARK

    def test_toggle_persists(self, store, store_path):
        state = ThemeState(store)
        assert state.toggle() is Theme.DARK
        assert LocalStore(store_path).get_item("theme") == "dark"
        assert ThemeState(LocalStore(store_path)).theme is Theme.DARK

    def test_custom_key(self, store):
        ThemeState(store, key="ui-theme").set_theme(Theme.DARK)
        assert store.get_item("ui-theme") == "dark"
        assert store.get_item("theme") is None

    def test_unknown_stored_value_falls_back(self, store):
        store.set_item("theme", "sepia")
        assert ThemeState(store).theme is Theme.LIGHT


class TestHeader:
    """Test Header component."""

    def test_render(self, store):
        header = Header(ThemeState(store))
        assert header.render() == f"{APP_TITLE}  🌙"
        header.on_toggle_theme()
        assert header.render() == "Bookmark Manager  🌞"

    def test_double_toggle(self, store):
        header = Header(ThemeState(store))
        header.on_toggle_theme()
        assert header.on_toggle_theme() is Theme.LIGHT
        assert store.get_item("theme") == "light"
