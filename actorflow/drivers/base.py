"""Browser driver boundary consumed by the BrowseTheWeb ability."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BrowserDriver(Protocol):
    """
    Minimal set of browser commands the library issues.

    Selectors are plain strings in whatever syntax the concrete driver
    understands (CSS for the Playwright adapter).  Action methods return
    once the command has been issued; they raise
    :class:`~actorflow.exceptions.ActionTimeout` when the driver gives up
    and :class:`~actorflow.exceptions.DriverError` for anything else.
    """

    @property
    def current_url(self) -> str: ...

    def goto(self, url: str) -> None: ...

    def is_present(self, selector: str) -> bool: ...

    def wait_for_present(self, selector: str, timeout: float) -> None:
        """Block until ``selector`` matches an element, or raise TargetNotFound."""
        ...

    def fill(self, selector: str, value: str) -> None: ...

    def click(self, selector: str) -> None: ...

    def select_option(self, selector: str, value: str) -> None: ...

    def scroll_to(self, selector: str) -> None: ...

    def text_of(self, selector: str) -> str: ...

    def texts_of(self, selector: str) -> list[str]: ...

    def is_visible(self, selector: str) -> bool: ...

    def wait_for_load_state(self, state: str = "load") -> None: ...
