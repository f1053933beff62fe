"""
Ability to drive a web browser.

Holds a browser driver handle together with the base URL and the wait
window used when looking up targets.  Lookups hand that window to the
driver, which blocks until the element is attached or the window closes;
this is the only place the library waits for the page.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar

from actorflow.abilities.base import Ability
from actorflow.drivers.base import BrowserDriver
from actorflow.exceptions import TargetNotFound
from actorflow.targets import Target

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowseTheWeb(Ability):
    """
    Browser session bound to an actor.

    Attributes:
        driver: Browser driver issuing the actual commands.
        base_url: Prefix joined to relative paths.
        wait_timeout: Seconds to wait for a target to appear.
    """

    kind: ClassVar[str] = "browse the web"

    driver: BrowserDriver
    base_url: str = ""
    wait_timeout: float = 5.0

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def with_driver(
        cls,
        driver: BrowserDriver,
        base_url: str = "",
        wait_timeout: float = 5.0,
    ) -> "BrowseTheWeb":
        """Bind the ability to any object implementing BrowserDriver."""
        return cls(driver, base_url, wait_timeout)

    @classmethod
    def with_page(
        cls,
        page: Any,
        base_url: str = "",
        wait_timeout: float = 5.0,
        action_timeout: float = 5.0,
    ) -> "BrowseTheWeb":
        """
        Bind the ability to a Playwright page.

        Args:
            page: ``playwright.sync_api.Page`` instance.
            base_url: Prefix joined to relative paths.
            wait_timeout: Seconds to wait for targets to appear.
            action_timeout: Seconds a single browser action may take.

        Returns:
            A BrowseTheWeb ability backed by a PlaywrightDriver.
        """
        from actorflow.drivers.playwright_driver import PlaywrightDriver

        return cls(PlaywrightDriver(page, action_timeout), base_url, wait_timeout)

    @classmethod
    def from_config(cls, config: Any, driver: BrowserDriver) -> "BrowseTheWeb":
        """Build the ability from already-resolved configuration values."""
        return cls(driver, config.BASE_URL, config.WAIT_TIMEOUT)

    # -------------------------------------------------------------------------
    # Helpers used by interactions
    # -------------------------------------------------------------------------

    def url_for(self, path: str) -> str:
        """Return ``path`` unchanged if absolute, otherwise joined to ``base_url``."""
        if path.startswith(("http://", "https://", "file://", "about:")):
            return path
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def find(self, target: Target) -> str:
        """
        Wait for a target to be present and return its selector.

        Args:
            target: The element to look for.

        Returns:
            The target's selector, safe to pass to driver actions.

        Raises:
            TargetNotFound: The element did not appear within ``wait_timeout``.
        """
        try:
            self.driver.wait_for_present(target.selector, self.wait_timeout)
        except TargetNotFound:
            logger.debug("Gave up waiting for %s (%s)", target, target.selector)
            raise TargetNotFound(f"{target} ({target.selector})", self.wait_timeout) from None
        return target.selector

    def describe(self) -> str:
        return f"browse the web at {self.base_url or 'any URL'}"
