"""
Questions about the last HTTP response an actor received.

Field paths are dotted, with integer segments indexing into lists:
``"data.items.0.name"`` reads ``body["data"]["items"][0]["name"]``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from actorflow.interactions.api import LAST_RESPONSE
from actorflow.questions.base import Question

if TYPE_CHECKING:
    from actorflow.actor import Actor


def read_path(document: Any, path: str) -> Any:
    """
    Follow a dotted field path through nested dicts and lists.

    Args:
        document: Parsed JSON value.
        path: Dotted path; an empty path returns the document itself.

    Returns:
        The value found at ``path``.

    Raises:
        KeyError: A segment does not exist in the document.
    """
    current = document
    if not path:
        return current
    for segment in path.split("."):
        if isinstance(current, list):
            try:
                current = current[int(segment)]
            except (ValueError, IndexError):
                raise KeyError(f"No element '{segment}' in list while reading '{path}'") from None
        elif isinstance(current, dict):
            if segment not in current:
                raise KeyError(f"No field '{segment}' while reading '{path}'")
            current = current[segment]
        else:
            raise KeyError(f"Cannot read '{segment}' from {type(current).__name__} in '{path}'")
    return current


class LastResponse(Question):
    """
    Read part of the last response noted by an API interaction.

    Example:
        >>> actor.should(see_that(LastResponse.status_code(), equals(200)))
        >>> actor.asks_for(LastResponse.field("user.id"))
    """

    def __init__(self, description: str, reader: Callable[[Any], Any]):
        self._description = description
        self._reader = reader

    @classmethod
    def status_code(cls) -> "LastResponse":
        return cls("the last response status code", lambda response: response.status_code)

    @classmethod
    def header(cls, name: str) -> "LastResponse":
        return cls(
            f"the '{name}' header of the last response",
            lambda response: response.headers.get(name),
        )

    @classmethod
    def body(cls) -> "LastResponse":
        return cls("the last response body", lambda response: response.json())

    @classmethod
    def field(cls, path: str) -> "LastResponse":
        return cls(
            f"the '{path}' field of the last response",
            lambda response: read_path(response.json(), path),
        )

    def answered_by(self, actor: "Actor") -> Any:
        return self._reader(actor.recall(LAST_RESPONSE))

    def describe(self) -> str:
        return self._description
