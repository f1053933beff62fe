"""Base class for abilities an actor can hold."""

from __future__ import annotations

from typing import Any, ClassVar


class Ability:
    """
    A capability binding an actor to one external resource.

    Concrete abilities are frozen dataclasses: to rebind an actor to a
    fresh session, grant it a new ability instead of mutating the old one.
    Each subclass declares a ``kind`` tag; an actor holds at most one
    ability per kind.
    """

    kind: ClassVar[str] = "ability"

    @staticmethod
    def kind_of(value: Any) -> str:
        """
        Normalize an ability class, instance or kind string to its kind tag.

        Args:
            value: ``BrowseTheWeb``, ``BrowseTheWeb(...)`` or ``"browse the web"``.

        Returns:
            The kind tag as a string.
        """
        if isinstance(value, str):
            return value
        if isinstance(value, Ability) or (
            isinstance(value, type) and issubclass(value, Ability)
        ):
            return value.kind
        raise TypeError(f"Not an ability or ability kind: {value!r}")

    def describe(self) -> str:
        return self.kind
