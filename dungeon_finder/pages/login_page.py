"""Login page object."""

from __future__ import annotations

from dungeon_finder.pages.base_page import BasePage
from dungeon_finder.targets import LoginForm


class LoginPage(BasePage):
    """Page object for the login form shown at the app root."""

    URL_PATH = "/"

    def login_to_app(self, user: str, password: str) -> None:
        """
        Open the page, fill credentials and submit the form.

        Args:
            user: Username to enter.
            password: Password to enter.
        """
        self.open()
        self.assert_visible(LoginForm.USERNAME)
        self.type(LoginForm.USERNAME, user)
        self.assert_visible(LoginForm.PASSWORD)
        self.type(LoginForm.PASSWORD, password)
        self.click(LoginForm.SUBMIT)
