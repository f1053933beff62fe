"""Base class for atomic interactions."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from actorflow.abilities.base import Ability
from actorflow.tasks import Performable

if TYPE_CHECKING:
    from actorflow.actor import Actor


class Interaction(Performable):
    """
    A single stateless action that consumes one or more abilities.

    Subclasses list the ability classes they need in ``requires`` and
    implement :meth:`act`, which receives the resolved abilities in the
    same order.  Every required ability is resolved before ``act`` runs.
    """

    requires: ClassVar[tuple[type[Ability], ...]] = ()

    def requirements(self) -> tuple[str, ...]:
        return tuple(ability.kind for ability in self.requires)

    def perform_as(self, actor: "Actor") -> None:
        abilities = [actor.ability_to(ability) for ability in self.requires]
        self.act(actor, *abilities)

    @abstractmethod
    def act(self, actor: "Actor", *abilities: Any) -> None:
        """Issue the action using the resolved abilities."""
