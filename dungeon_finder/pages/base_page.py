"""
Base Page class for the Page Object Model.

This class provides common functionality shared by all page objects,
including navigation, element lookup and assertion helpers.  Pages talk
to the browser through a BrowseTheWeb ability, so they share its base
URL and bounded wait with the screenplay tasks.

Key Concepts Demonstrated:
- Base class pattern for code reuse
- Waiting for elements instead of sleeping
- Assertion helpers with descriptive failures
"""

from __future__ import annotations

from actorflow.abilities.browse_the_web import BrowseTheWeb
from actorflow.exceptions import AssertionMismatch
from actorflow.targets import Target


class BasePage:
    """
    Base class for all page objects.

    Attributes:
        browser: Browser ability the page drives.
    """

    URL_PATH = "/"

    def __init__(self, browser: BrowseTheWeb):
        """
        Initialize the base page.

        Args:
            browser: Browser ability bound to a live driver.
        """
        self.browser = browser

    @property
    def driver(self):
        return self.browser.driver

    # -------------------------------------------------------------------------
    # Navigation Methods
    # -------------------------------------------------------------------------

    def open(self) -> "BasePage":
        """
        Navigate to the page's default URL.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.URL_PATH)
        return self

    def navigate_to(self, path: str = "") -> None:
        """
        Navigate to a specific path.

        Args:
            path: URL path relative to base URL.
        """
        self.driver.goto(self.browser.url_for(path))

    # -------------------------------------------------------------------------
    # Element Methods
    # -------------------------------------------------------------------------

    def type(self, target: Target, value: str) -> None:
        """Wait for a field and type into it."""
        self.driver.fill(self.browser.find(target), value)

    def click(self, target: Target) -> None:
        """Wait for an element and click it."""
        self.driver.click(self.browser.find(target))

    def is_visible(self, target: Target) -> bool:
        return self.driver.is_present(target.selector) and self.driver.is_visible(
            target.selector
        )

    # -------------------------------------------------------------------------
    # Assertion Methods
    # -------------------------------------------------------------------------

    def assert_visible(self, target: Target) -> None:
        """
        Assert that an element is displayed, waiting for it first.

        Args:
            target: Element expected to be visible.
        """
        self.browser.find(target)
        if not self.driver.is_visible(target.selector):
            raise AssertionMismatch(f"the visibility of {target}", "true", False)

    def assert_url_contains(self, expected: str) -> None:
        """
        Assert that current URL contains expected string.

        Args:
            expected: String expected to be in the URL.
        """
        actual = self.driver.current_url
        if expected not in actual:
            raise AssertionMismatch("the current URL", f"something containing {expected!r}", actual)
