"""Questions about what the browser currently shows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from actorflow.abilities.browse_the_web import BrowseTheWeb
from actorflow.questions.base import Question
from actorflow.targets import Target

if TYPE_CHECKING:
    from actorflow.actor import Actor


class Text(Question):
    """The visible text of a target, waiting for it to appear first."""

    def __init__(self, target: Target, all_matches: bool = False):
        self.target = target
        self.all_matches = all_matches

    @classmethod
    def of(cls, target: Target) -> "Text":
        return cls(target)

    @classmethod
    def of_all(cls, target: Target) -> "Text":
        return cls(target, all_matches=True)

    def answered_by(self, actor: "Actor") -> str | list[str]:
        browser = actor.ability_to(BrowseTheWeb)
        if self.all_matches:
            if not browser.driver.is_present(self.target.selector):
                return []
            return [text.strip() for text in browser.driver.texts_of(self.target.selector)]
        selector = browser.find(self.target)
        return browser.driver.text_of(selector).strip()

    def describe(self) -> str:
        if self.all_matches:
            return f"the texts of every {self.target}"
        return f"the text of {self.target}"


class Visibility(Question):
    """Whether a target is currently displayed. Does not wait."""

    def __init__(self, target: Target):
        self.target = target

    @classmethod
    def of(cls, target: Target) -> "Visibility":
        return cls(target)

    def answered_by(self, actor: "Actor") -> bool:
        driver = actor.ability_to(BrowseTheWeb).driver
        return driver.is_present(self.target.selector) and driver.is_visible(
            self.target.selector
        )

    def describe(self) -> str:
        return f"the visibility of {self.target}"


class Presence(Question):
    """Whether a target exists in the page right now. Does not wait."""

    def __init__(self, target: Target):
        self.target = target

    @classmethod
    def of(cls, target: Target) -> "Presence":
        return cls(target)

    def answered_by(self, actor: "Actor") -> bool:
        return actor.ability_to(BrowseTheWeb).driver.is_present(self.target.selector)

    def describe(self) -> str:
        return f"the presence of {self.target}"


class CurrentUrl(Question):
    def answered_by(self, actor: "Actor") -> str:
        return actor.ability_to(BrowseTheWeb).driver.current_url

    def describe(self) -> str:
        return "the current URL"
