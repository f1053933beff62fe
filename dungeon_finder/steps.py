"""
Step library built on the page objects.

The pages a step library needs are passed in through its constructor,
so nothing is wired up behind the caller's back.
"""

from __future__ import annotations

import logging

from actorflow.abilities.browse_the_web import BrowseTheWeb
from dungeon_finder.pages import DungeonDirectoryPage, LoginPage

logger = logging.getLogger(__name__)


class LoginSteps:
    """Login-related steps for page-object style tests."""

    def __init__(self, login_page: LoginPage, directory_page: DungeonDirectoryPage):
        self.login_page = login_page
        self.directory_page = directory_page

    @classmethod
    def for_browser(cls, browser: BrowseTheWeb) -> "LoginSteps":
        """Build the step library with pages sharing one browser ability."""
        return cls(LoginPage(browser), DungeonDirectoryPage(browser))

    def login(self, user: str, password: str) -> None:
        logger.info("Logging in as %s", user)
        self.login_page.login_to_app(user, password)

    def verify_dungeon_directory_loaded(self) -> None:
        logger.info("Checking the dungeon directory is loaded")
        self.directory_page.assert_loaded()
