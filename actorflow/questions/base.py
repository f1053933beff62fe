"""Questions read state through an actor's abilities without changing it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from actorflow.actor import Actor


class Question(ABC):
    """
    A side-effect-free read of system state.

    Implementations must not click, type, navigate or send requests:
    they only look at what the actor's abilities can already see.
    """

    @abstractmethod
    def answered_by(self, actor: "Actor") -> Any:
        """Return the answer as seen by ``actor``."""

    @abstractmethod
    def describe(self) -> str:
        """Short noun phrase, e.g. "the text of the page title"."""

    @staticmethod
    def about(description: str, reader: Callable[["Actor"], Any]) -> "Question":
        """Wrap a plain function as a question."""
        return _AdHocQuestion(description, reader)

    def __str__(self) -> str:
        return self.describe()


class _AdHocQuestion(Question):
    def __init__(self, description: str, reader: Callable[["Actor"], Any]):
        self._description = description
        self._reader = reader

    def answered_by(self, actor: "Actor") -> Any:
        return self._reader(actor)

    def describe(self) -> str:
        return self._description
