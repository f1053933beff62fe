"""
Error taxonomy for actor-driven test flows.

Every failure raised by the library derives from :class:`ScreenplayError`
so callers can catch the whole family in one place, while still being able
to tell a missing ability apart from a missing element or a timeout.

Errors are never swallowed or retried here.  As a failure travels up
through nested tasks and the actor, each layer appends one line of
context (which step, which task, which actor) instead of wrapping the
exception in a new type.
"""

from __future__ import annotations

from typing import Any


class ScreenplayError(Exception):
    """
    Base class for all actorflow errors.

    Attributes:
        message: The original failure message.
        context: Ordered lines added as the error propagated, innermost first.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.context: list[str] = []

    def add_context(self, line: str) -> "ScreenplayError":
        """Append a line of context and return self for re-raising."""
        self.context.append(line)
        return self

    def __str__(self) -> str:
        if not self.context:
            return self.message
        lines = [self.message] + [f"  while {line}" for line in self.context]
        return "\n".join(lines)


class MissingAbility(ScreenplayError):
    """Raised when an actor is asked for an ability it was never granted."""

    def __init__(self, actor_name: str, kind: str):
        super().__init__(f"{actor_name} does not have the ability to {kind}")
        self.actor_name = actor_name
        self.kind = kind


class InvalidTaskParameters(ScreenplayError, ValueError):
    """Raised by a task factory before anything runs when its inputs are unusable."""

    def __init__(self, task_name: str, problems: list[str]):
        joined = "; ".join(problems)
        super().__init__(f"Cannot build task '{task_name}': {joined}")
        self.task_name = task_name
        self.problems = list(problems)


class TargetNotFound(ScreenplayError):
    """Raised when a target does not appear within the ability's wait window."""

    def __init__(self, target: str, timeout: float):
        super().__init__(f"Could not find {target} within {timeout:g}s")
        self.target = target
        self.timeout = timeout


class ActionTimeout(ScreenplayError):
    """Raised when an issued action does not complete within its bound."""

    def __init__(self, action: str, timeout: float | None = None):
        if timeout is None:
            message = f"Timed out while trying to {action}"
        else:
            message = f"Timed out after {timeout:g}s while trying to {action}"
        super().__init__(message)
        self.action = action
        self.timeout = timeout


class DriverError(ScreenplayError):
    """Any other failure reported by a browser driver or HTTP client."""


class AssertionMismatch(ScreenplayError, AssertionError):
    """
    Raised when a question's answer does not meet an expectation.

    Subclasses :class:`AssertionError` so test runners report it as a
    regular test failure rather than an error.
    """

    def __init__(self, question: str, expected: str, actual: Any):
        super().__init__(
            f"Expected {question} to be {expected}, but was {actual!r}"
        )
        self.question = question
        self.expected = expected
        self.actual = actual


def attach_context(error: BaseException, line: str) -> None:
    """
    Record where an error happened without changing its type.

    Library errors keep the line in :attr:`ScreenplayError.context`; any
    other exception gets it as a note so tracebacks still show it.
    """
    if isinstance(error, ScreenplayError):
        error.add_context(line)
    else:
        error.add_note(f"while {line}")
