"""Dungeon directory page object."""

from __future__ import annotations

from dungeon_finder.pages.base_page import BasePage
from dungeon_finder.targets import DungeonDirectory


class DungeonDirectoryPage(BasePage):
    URL_PATH = "/"

    def assert_loaded(self) -> None:
        """Assert that the directory title and search box are visible."""
        self.assert_visible(DungeonDirectory.TITLE)
        self.assert_visible(DungeonDirectory.SEARCH)

    def search(self, term: str) -> None:
        self.type(DungeonDirectory.SEARCH, term)
