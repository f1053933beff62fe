"""Abilities bind actors to browsers and HTTP endpoints."""

from actorflow.abilities.base import Ability
from actorflow.abilities.browse_the_web import BrowseTheWeb
from actorflow.abilities.call_an_api import CallAnApi

__all__ = ["Ability", "BrowseTheWeb", "CallAnApi"]
