"""
Playwright adapter for the BrowserDriver protocol.

Wraps a synchronous Playwright :class:`~playwright.sync_api.Page` and
translates Playwright's exceptions into the library's error taxonomy so
that interactions never need to know which automation tool is underneath.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from actorflow.exceptions import ActionTimeout, DriverError, TargetNotFound

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PlaywrightDriver:
    """
    Drive a Playwright page through the BrowserDriver protocol.

    Attributes:
        page: Playwright page instance.
        action_timeout: Upper bound in seconds for a single action.
    """

    def __init__(self, page: Page, action_timeout: float = 5.0):
        """
        Initialize the adapter.

        Args:
            page: Playwright page instance.
            action_timeout: Seconds an action may take before it is
                reported as an :class:`ActionTimeout`.
        """
        self.page = page
        self.action_timeout = action_timeout

    @property
    def _timeout_ms(self) -> float:
        return self.action_timeout * 1000

    def _run(self, action: str, command: Callable[[], T]) -> T:
        try:
            return command()
        except PlaywrightTimeoutError as exc:
            raise ActionTimeout(action, self.action_timeout) from exc
        except PlaywrightError as exc:
            raise DriverError(f"Browser failed to {action}: {exc.message}") from exc

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    @property
    def current_url(self) -> str:
        return self.page.url

    def goto(self, url: str) -> None:
        # "commit" returns as soon as the navigation is issued; waiting for the
        # page to load is a separate command.
        logger.debug("Navigating to %s", url)
        self._run(
            f"open {url}",
            lambda: self.page.goto(url, wait_until="commit", timeout=self._timeout_ms),
        )

    def wait_for_load_state(self, state: str = "load") -> None:
        self._run(
            f"wait for the page to reach '{state}'",
            lambda: self.page.wait_for_load_state(state, timeout=self._timeout_ms),
        )

    # -------------------------------------------------------------------------
    # Element lookup
    # -------------------------------------------------------------------------

    def is_present(self, selector: str) -> bool:
        return self._run(
            f"look up {selector}",
            lambda: self.page.locator(selector).count() > 0,
        )

    def wait_for_present(self, selector: str, timeout: float) -> None:
        try:
            self.page.locator(selector).first.wait_for(state="attached", timeout=timeout * 1000)
        except PlaywrightTimeoutError as exc:
            raise TargetNotFound(selector, timeout) from exc
        except PlaywrightError as exc:
            raise DriverError(f"Browser failed to look up {selector}: {exc.message}") from exc

    def is_visible(self, selector: str) -> bool:
        return self._run(
            f"check visibility of {selector}",
            lambda: self.page.locator(selector).first.is_visible(),
        )

    def text_of(self, selector: str) -> str:
        return self._run(
            f"read the text of {selector}",
            lambda: self.page.locator(selector).first.inner_text(timeout=self._timeout_ms),
        )

    def texts_of(self, selector: str) -> list[str]:
        return self._run(
            f"read the texts of {selector}",
            lambda: self.page.locator(selector).all_inner_texts(),
        )

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def fill(self, selector: str, value: str) -> None:
        self._run(
            f"type into {selector}",
            lambda: self.page.locator(selector).first.fill(value, timeout=self._timeout_ms),
        )

    def click(self, selector: str) -> None:
        self._run(
            f"click {selector}",
            lambda: self.page.locator(selector).first.click(timeout=self._timeout_ms),
        )

    def select_option(self, selector: str, value: str) -> None:
        self._run(
            f"select '{value}' in {selector}",
            lambda: self.page.locator(selector).first.select_option(
                value, timeout=self._timeout_ms
            ),
        )

    def scroll_to(self, selector: str) -> None:
        self._run(
            f"scroll to {selector}",
            lambda: self.page.locator(selector).first.scroll_into_view_if_needed(
                timeout=self._timeout_ms
            ),
        )
