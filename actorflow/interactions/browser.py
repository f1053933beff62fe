"""
Browser interactions.

Each interaction is a frozen dataclass holding only what it needs for one
action.  Element interactions first wait for their target through
:meth:`BrowseTheWeb.find`, so a missing element surfaces as
:class:`~actorflow.exceptions.TargetNotFound` after the configured wait.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from actorflow.abilities.browse_the_web import BrowseTheWeb
from actorflow.exceptions import InvalidTaskParameters
from actorflow.interactions.base import Interaction
from actorflow.targets import Target

if TYPE_CHECKING:
    from actorflow.actor import Actor

MASK = "****"


def _check_target(interaction: str, target: object) -> None:
    if not isinstance(target, Target):
        raise InvalidTaskParameters(interaction, [f"{target!r} is not a Target"])


@dataclass(frozen=True)
class Open(Interaction):
    """Navigate to a URL; returns once the navigation has been issued."""

    requires: ClassVar = (BrowseTheWeb,)

    location: str

    @classmethod
    def url(cls, location: str) -> "Open":
        if not location:
            raise InvalidTaskParameters("open", ["location is required"])
        return cls(location)

    @classmethod
    def browser_on(cls, path: str = "/") -> "Open":
        return cls.url(path)

    def act(self, actor: "Actor", browser: BrowseTheWeb) -> None:
        browser.driver.goto(browser.url_for(self.location))

    def describe(self) -> str:
        return f"open {self.location}"


@dataclass(frozen=True)
class WaitForLoad(Interaction):
    """Wait until the page reaches a load state ("load", "domcontentloaded", "networkidle")."""

    requires: ClassVar = (BrowseTheWeb,)

    load_state: str = "load"

    @classmethod
    def state(cls, load_state: str = "load") -> "WaitForLoad":
        return cls(load_state)

    def act(self, actor: "Actor", browser: BrowseTheWeb) -> None:
        browser.driver.wait_for_load_state(self.load_state)

    def describe(self) -> str:
        return f"wait for the page to reach '{self.load_state}'"


@dataclass(frozen=True)
class WaitUntil(Interaction):
    """Block until a target is present, up to the ability's wait window."""

    requires: ClassVar = (BrowseTheWeb,)

    target: Target

    @classmethod
    def present(cls, target: Target) -> "WaitUntil":
        _check_target("wait until present", target)
        return cls(target)

    def act(self, actor: "Actor", browser: BrowseTheWeb) -> None:
        browser.find(self.target)

    def describe(self) -> str:
        return f"wait until {self.target} is present"


@dataclass(frozen=True)
class Enter(Interaction):
    """
    Type a value into a field.

    Use :meth:`the_secret` for passwords so the value never appears in
    traces or error messages.
    """

    requires: ClassVar = (BrowseTheWeb,)

    value: str
    target: Target
    masked: bool = False

    @staticmethod
    def the_value(value: str) -> "_EnterBuilder":
        return _EnterBuilder(value, masked=False)

    @staticmethod
    def the_secret(value: str) -> "_EnterBuilder":
        return _EnterBuilder(value, masked=True)

    def act(self, actor: "Actor", browser: BrowseTheWeb) -> None:
        selector = browser.find(self.target)
        browser.driver.fill(selector, self.value)

    def describe(self) -> str:
        shown = MASK if self.masked else self.value
        return f"enter '{shown}' into {self.target}"


@dataclass(frozen=True)
class _EnterBuilder:
    value: str
    masked: bool

    def into(self, target: Target) -> Enter:
        if self.value is None:
            raise InvalidTaskParameters("enter", ["value is required"])
        _check_target("enter", target)
        return Enter(str(self.value), target, self.masked)


@dataclass(frozen=True)
class Click(Interaction):
    """Click a target."""

    requires: ClassVar = (BrowseTheWeb,)

    target: Target

    @classmethod
    def on(cls, target: Target) -> "Click":
        _check_target("click", target)
        return cls(target)

    def act(self, actor: "Actor", browser: BrowseTheWeb) -> None:
        selector = browser.find(self.target)
        browser.driver.click(selector)

    def describe(self) -> str:
        return f"click on {self.target}"


@dataclass(frozen=True)
class Select(Interaction):
    """Pick an option in a dropdown."""

    requires: ClassVar = (BrowseTheWeb,)

    value: str
    target: Target

    @staticmethod
    def option(value: str) -> "_SelectBuilder":
        return _SelectBuilder(value)

    def act(self, actor: "Actor", browser: BrowseTheWeb) -> None:
        selector = browser.find(self.target)
        browser.driver.select_option(selector, self.value)

    def describe(self) -> str:
        return f"select '{self.value}' from {self.target}"


@dataclass(frozen=True)
class _SelectBuilder:
    value: str

    def from_(self, target: Target) -> Select:
        if self.value is None:
            raise InvalidTaskParameters("select", ["option is required"])
        _check_target("select", target)
        return Select(str(self.value), target)


@dataclass(frozen=True)
class Scroll(Interaction):
    """Scroll a target into view."""

    requires: ClassVar = (BrowseTheWeb,)

    target: Target

    @classmethod
    def to(cls, target: Target) -> "Scroll":
        _check_target("scroll", target)
        return cls(target)

    def act(self, actor: "Actor", browser: BrowseTheWeb) -> None:
        selector = browser.find(self.target)
        browser.driver.scroll_to(selector)

    def describe(self) -> str:
        return f"scroll to {self.target}"
