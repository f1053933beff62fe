"""
Expectations and consequences for actor assertions.

An :class:`Expectation` is a described predicate.  :func:`see_that`
pairs it with a question; the actor evaluates the pair in
:meth:`Actor.should` and raises :class:`AssertionMismatch` with the
question, the expectation and the actual answer when it does not hold.

Example:
    >>> alice.should(
    ...     see_that(CurrentUrl(), contains("/dungeons")),
    ...     see_that(Text.of(PAGE_TITLE), equals("Dungeon Directory")),
    ... )
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from actorflow.exceptions import AssertionMismatch
from actorflow.questions.base import Question

if TYPE_CHECKING:
    from actorflow.actor import Actor


@dataclass(frozen=True)
class Expectation:
    """A predicate with a description such as "equal to 200"."""

    description: str
    predicate: Callable[[Any], bool]

    def __call__(self, actual: Any) -> bool:
        try:
            return bool(self.predicate(actual))
        except TypeError:
            return False

    def __str__(self) -> str:
        return self.description


def equals(expected: Any) -> Expectation:
    return Expectation(f"equal to {expected!r}", lambda actual: actual == expected)


def contains(expected: Any) -> Expectation:
    return Expectation(f"something containing {expected!r}", lambda actual: expected in actual)


def matches(pattern: str) -> Expectation:
    compiled = re.compile(pattern)
    return Expectation(
        f"a string matching /{pattern}/",
        lambda actual: compiled.search(actual) is not None,
    )


def is_true() -> Expectation:
    return Expectation("true", lambda actual: actual is True)


def is_false() -> Expectation:
    return Expectation("false", lambda actual: actual is False)


def has_length(length: int) -> Expectation:
    return Expectation(f"of length {length}", lambda actual: len(actual) == length)


def is_greater_than(bound: Any) -> Expectation:
    return Expectation(f"greater than {bound!r}", lambda actual: actual > bound)


@dataclass(frozen=True)
class Consequence:
    """A question paired with the expectation its answer must meet."""

    question: Question
    expectation: Expectation

    def evaluate_for(self, actor: "Actor") -> None:
        actual = actor.asks_for(self.question)
        if not self.expectation(actual):
            raise AssertionMismatch(
                self.question.describe(), self.expectation.description, actual
            )

    def describe(self) -> str:
        return f"see that {self.question.describe()} is {self.expectation.description}"


def see_that(question: Question, expectation: Expectation) -> Consequence:
    """Pair a question with an expectation for :meth:`Actor.should`."""
    if not isinstance(question, Question):
        raise TypeError(f"{question!r} is not a Question")
    return Consequence(question, expectation)
