"""
Performables and task composition.

A :class:`Task` is a named, fixed sequence of steps (interactions or
other tasks).  The sequence is decided entirely by the constructor
arguments: branching such as "also tick remember-me" is baked in when
the task is built, never decided while it runs.

Tasks check their inputs in :meth:`Task.validate`, which the
constructor calls before any step is built, so a task built from bad
data fails before any browser or API call is made.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from actorflow.exceptions import InvalidTaskParameters, attach_context

if TYPE_CHECKING:
    from actorflow.actor import Actor

logger = logging.getLogger(__name__)


class Performable(ABC):
    """Anything an actor can attempt: an interaction or a task."""

    @abstractmethod
    def perform_as(self, actor: "Actor") -> None:
        """Carry out this step on behalf of ``actor``."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable description used in traces and error messages."""

    def requirements(self) -> tuple[str, ...]:
        """Ability kinds this step needs, in the order they are first used."""
        return ()

    def __str__(self) -> str:
        return self.describe()


def require(task_name: str, **params: Any) -> None:
    """
    Reject missing or blank task parameters.

    Every offending parameter is reported at once so the caller can fix
    them all in one go.

    Args:
        task_name: Name of the task being built, used in the error.
        **params: Parameter values keyed by their names.

    Raises:
        InvalidTaskParameters: At least one value is ``None`` or a blank string.
    """
    problems = []
    for name, value in params.items():
        if value is None:
            problems.append(f"{name} is required")
        elif isinstance(value, str) and not value.strip():
            problems.append(f"{name} must not be blank")
    if problems:
        raise InvalidTaskParameters(task_name, problems)


def _unique_kinds(steps: Iterable[Performable]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for step in steps:
        for kind in step.requirements():
            seen.setdefault(kind, None)
    return tuple(seen)


class Task(Performable):
    """
    A named business-level action composed of ordered steps.

    Steps are either passed to the constructor or produced by
    :meth:`build_steps`.  Subclasses keep their parameters as attributes,
    check them in :meth:`validate` and then call ``super().__init__``; the
    constructor runs ``validate()`` before any step exists.

    Example:
        >>> class SearchFor(Task):
        ...     def __init__(self, term):
        ...         self.term = term
        ...         super().__init__(name="search")
        ...
        ...     def validate(self):
        ...         require(self.name, term=self.term)
        ...
        ...     def build_steps(self):
        ...         return [Enter.the_value(self.term).into(SEARCH_BOX)]
    """

    def __init__(self, *steps: Performable, name: str | None = None):
        self._name = name or type(self).__name__
        self.validate()
        if not steps:
            steps = tuple(self.build_steps())
        for step in steps:
            if not isinstance(step, Performable):
                raise InvalidTaskParameters(
                    self._name, [f"{step!r} is not an interaction or task"]
                )
        self._steps = tuple(steps)

    def validate(self) -> None:
        """
        Check the task's parameters.

        Raises:
            InvalidTaskParameters: A parameter is missing or malformed.
        """

    def build_steps(self) -> Iterable[Performable]:
        """Steps for tasks that do not pass them to the constructor."""
        return ()

    @classmethod
    def where(cls, name: str, *steps: Performable) -> "Task":
        """Build an ad hoc task from a name and its steps."""
        require("ad hoc task", name=name)
        return Task(*steps, name=name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def steps(self) -> tuple[Performable, ...]:
        return self._steps

    def requirements(self) -> tuple[str, ...]:
        return _unique_kinds(self._steps)

    def describe(self) -> str:
        return self._name

    def perform_as(self, actor: "Actor") -> None:
        """
        Run every step in order, stopping at the first failure.

        All abilities needed anywhere in the task are resolved before the
        first step runs, so a missing ability never leaves the task half
        done.  A failing step's error is re-raised unchanged apart from a
        line of context naming the step and this task.
        """
        for kind in self.requirements():
            actor.ability_to(kind)

        total = len(self._steps)
        for position, step in enumerate(self._steps, start=1):
            try:
                actor.perform(step)
            except Exception as exc:
                attach_context(
                    exc,
                    f"step {position}/{total} of task '{self.describe()}': {step.describe()}",
                )
                raise
