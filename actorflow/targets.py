"""Named element locators used by browser interactions and questions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Target:
    """
    A human-readable description paired with a selector.

    The description is what shows up in traces and error messages, so
    write it the way a tester would say it out loud ("the login button").

    Example:
        >>> SUBMIT = Target.the("login button").located_by("button[type='submit']")
        >>> ROW = Target.the("task row {}").located_by("[data-testid='task-item-{}']")
        >>> ROW.of(7).selector
        "[data-testid='task-item-7']"
    """

    description: str
    selector: str

    @staticmethod
    def the(description: str) -> "_TargetBuilder":
        """Start building a target with the given description."""
        return _TargetBuilder(description)

    def of(self, *args: object) -> "Target":
        """Fill ``{}`` placeholders in both description and selector."""
        return Target(self.description.format(*args), self.selector.format(*args))

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True)
class _TargetBuilder:
    description: str

    def located_by(self, selector: str) -> Target:
        if not selector:
            raise ValueError(f"Target '{self.description}' needs a selector")
        return Target(self.description, selector)
