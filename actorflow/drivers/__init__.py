"""Browser driver protocol and adapters."""

from actorflow.drivers.base import BrowserDriver
from actorflow.drivers.playwright_driver import PlaywrightDriver

__all__ = ["BrowserDriver", "PlaywrightDriver"]
