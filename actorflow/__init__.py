"""
actorflow: actor, task and ability composition for UI and API tests.

Express test flows as what a user intends ("log in as admin") rather than
as a list of driver calls:

    >>> admin = Actor.named("Admin").who_can(BrowseTheWeb.with_page(page, base_url))
    >>> admin.attempts_to(Login.as_admin())
    >>> admin.should(see_that(CurrentUrl(), contains("/dungeons")))
"""

from actorflow.abilities import Ability, BrowseTheWeb, CallAnApi
from actorflow.actor import Actor, Cast, TraceEntry
from actorflow.exceptions import (
    ActionTimeout,
    AssertionMismatch,
    DriverError,
    InvalidTaskParameters,
    MissingAbility,
    ScreenplayError,
    TargetNotFound,
)
from actorflow.expectations import (
    Consequence,
    Expectation,
    contains,
    equals,
    has_length,
    is_false,
    is_greater_than,
    is_true,
    matches,
    see_that,
)
from actorflow.interactions import (
    Click,
    Delete,
    Enter,
    Get,
    Interaction,
    Open,
    Patch,
    Post,
    Put,
    Scroll,
    Select,
    WaitForLoad,
    WaitUntil,
)
from actorflow.questions import CurrentUrl, LastResponse, Presence, Question, Text, Visibility
from actorflow.targets import Target
from actorflow.tasks import Performable, Task, require

__all__ = [
    "Ability",
    "ActionTimeout",
    "Actor",
    "AssertionMismatch",
    "BrowseTheWeb",
    "CallAnApi",
    "Cast",
    "Click",
    "Consequence",
    "CurrentUrl",
    "Delete",
    "DriverError",
    "Enter",
    "Expectation",
    "Get",
    "Interaction",
    "InvalidTaskParameters",
    "LastResponse",
    "MissingAbility",
    "Open",
    "Patch",
    "Performable",
    "Post",
    "Presence",
    "Put",
    "Question",
    "ScreenplayError",
    "Scroll",
    "Select",
    "Target",
    "TargetNotFound",
    "Task",
    "TraceEntry",
    "Text",
    "Visibility",
    "WaitForLoad",
    "WaitUntil",
    "contains",
    "equals",
    "has_length",
    "is_false",
    "is_greater_than",
    "is_true",
    "matches",
    "require",
    "see_that",
]
