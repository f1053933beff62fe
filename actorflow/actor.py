"""
Actors perform tasks and interactions using the abilities they hold.

An :class:`Actor` runs on a single timeline: steps execute strictly in
order and the first failure stops the run.  Everything an actor performs
is recorded in its :attr:`Actor.trace`, nested tasks included, which is
what the pytest plugin prints when a test fails.

Actors never reach for a global browser or session.  Abilities are
granted explicitly with :meth:`Actor.can`, and a :class:`Cast` hands out
actors that each get their own freshly built abilities, which is what
parallel workers need.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from actorflow.abilities.base import Ability
from actorflow.exceptions import MissingAbility, attach_context
from actorflow.expectations import Consequence
from actorflow.questions.base import Question
from actorflow.tasks import Performable

logger = logging.getLogger(__name__)

PENDING = "pending"
PASSED = "passed"
FAILED = "failed"


@dataclass
class TraceEntry:
    """
    One performed step in an actor's trace.

    Attributes:
        actor: Name of the actor who performed the step.
        description: The step's ``describe()`` text.
        depth: Nesting level; 0 for steps passed to ``attempts_to``.
        outcome: ``"pending"`` while running, then ``"passed"`` or ``"failed"``.
        error: Failure message when the step failed.
    """

    actor: str
    description: str
    depth: int
    outcome: str = PENDING
    error: str | None = None


class Actor:
    """
    A named performer holding at most one ability per kind.

    Example:
        >>> admin = Actor.named("Admin").who_can(BrowseTheWeb.with_page(page))
        >>> admin.attempts_to(Login.as_admin())
        >>> admin.should(see_that(CurrentUrl(), contains("/dungeons")))
    """

    def __init__(self, name: str):
        self.name = name
        self._abilities: dict[str, Ability] = {}
        self._notes: dict[str, Any] = {}
        self._trace: list[TraceEntry] = []
        self._depth = 0

    @classmethod
    def named(cls, name: str) -> "Actor":
        return cls(name)

    def __repr__(self) -> str:
        return f"Actor({self.name!r})"

    # -------------------------------------------------------------------------
    # Abilities
    # -------------------------------------------------------------------------

    def can(self, *abilities: Ability) -> "Actor":
        """
        Grant abilities, replacing any held ability of the same kind.

        Returns:
            Self for method chaining.
        """
        for ability in abilities:
            if not isinstance(ability, Ability):
                raise TypeError(f"{ability!r} is not an Ability")
            previous = self._abilities.get(ability.kind)
            if previous is not None and previous is not ability:
                logger.debug("%s replaces ability to %s", self.name, ability.kind)
            self._abilities[ability.kind] = ability
        return self

    who_can = can

    def ability_to(self, kind: type[Ability] | str) -> Any:
        """
        Return the held ability of ``kind``.

        Args:
            kind: An Ability subclass or its kind tag.

        Raises:
            MissingAbility: The actor holds no ability of that kind.
        """
        tag = Ability.kind_of(kind)
        try:
            return self._abilities[tag]
        except KeyError:
            raise MissingAbility(self.name, tag) from None

    def has_ability_to(self, kind: type[Ability] | str) -> bool:
        return Ability.kind_of(kind) in self._abilities

    @property
    def abilities(self) -> Mapping[str, Ability]:
        return MappingProxyType(self._abilities)

    # -------------------------------------------------------------------------
    # Notepad
    # -------------------------------------------------------------------------

    def remember(self, key: str, value: Any) -> None:
        self._notes[key] = value

    def recall(self, key: str) -> Any:
        try:
            return self._notes[key]
        except KeyError:
            raise KeyError(f"{self.name} does not remember '{key}'") from None

    # -------------------------------------------------------------------------
    # Performing
    # -------------------------------------------------------------------------

    @property
    def trace(self) -> list[TraceEntry]:
        return list(self._trace)

    def _record(self, description: str, action: Callable[[], None]) -> None:
        entry = TraceEntry(self.name, description, self._depth)
        self._trace.append(entry)
        if self._depth == 0:
            logger.info("%s attempts to %s", self.name, description)
        else:
            logger.debug("%s%s", "  " * self._depth, description)

        self._depth += 1
        try:
            action()
        except Exception as exc:
            entry.outcome = FAILED
            entry.error = f"{type(exc).__name__}: {getattr(exc, 'message', exc)}"
            if self._depth == 1:
                logger.warning("%s failed to %s: %s", self.name, description, entry.error)
            raise
        else:
            entry.outcome = PASSED
        finally:
            self._depth -= 1

    def perform(self, step: Performable) -> None:
        """Perform a single step and record it in the trace."""
        self._record(step.describe(), lambda: step.perform_as(self))

    def attempts_to(self, *steps: Performable) -> None:
        """
        Perform steps in order, stopping at the first failure.

        The failing step's exception propagates with one more line of
        context naming this actor and what it attempted.
        """
        for step in steps:
            if not isinstance(step, Performable):
                raise TypeError(f"{step!r} is not an interaction or task")
        for step in steps:
            try:
                self.perform(step)
            except Exception as exc:
                attach_context(exc, f"{self.name} attempted to {step.describe()}")
                raise

    def asks_for(self, question: Question) -> Any:
        """Answer a question without side effects."""
        answer = question.answered_by(self)
        logger.debug("%s sees %s: %r", self.name, question.describe(), answer)
        return answer

    def should(self, *consequences: Consequence) -> None:
        """
        Check each consequence in order.

        Raises:
            AssertionMismatch: The first consequence that does not hold.
        """
        for consequence in consequences:
            try:
                self._record(
                    consequence.describe(), lambda c=consequence: c.evaluate_for(self)
                )
            except Exception as exc:
                attach_context(exc, f"{self.name} checked: {consequence.describe()}")
                raise


class Cast:
    """
    Hands out actors, each with its own set of abilities.

    The factory is called for each new actor name, so every actor gets
    independent resource handles (its own browser page, its own HTTP
    session).  Asking for the same name again returns the same actor; if two
    threads race for a new name, one set of abilities wins and the other is
    discarded.

    Example:
        >>> cast = Cast(lambda name: [CallAnApi.at("https://api.example.com")])
        >>> ann = cast.actor_named("Ann")
    """

    def __init__(self, ability_factory: Callable[[str], Iterable[Ability]] | None = None):
        self._ability_factory = ability_factory
        self._actors: dict[str, Actor] = {}
        self._lock = threading.Lock()

    def actor_named(self, name: str) -> Actor:
        with self._lock:
            actor = self._actors.get(name)
        if actor is not None:
            return actor

        # Only roster access is locked; the factory may launch a browser.
        candidate = Actor.named(name)
        if self._ability_factory is not None:
            candidate.can(*self._ability_factory(name))
        with self._lock:
            return self._actors.setdefault(name, candidate)

    @property
    def actors(self) -> list[Actor]:
        with self._lock:
            return list(self._actors.values())
