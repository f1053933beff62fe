"""Classic page objects for the Dungeon Team Finder."""

from dungeon_finder.pages.base_page import BasePage
from dungeon_finder.pages.dungeon_directory_page import DungeonDirectoryPage
from dungeon_finder.pages.login_page import LoginPage

__all__ = ["BasePage", "DungeonDirectoryPage", "LoginPage"]
