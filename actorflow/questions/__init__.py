"""Side-effect-free reads used in assertions."""

from actorflow.questions.api import LastResponse, read_path
from actorflow.questions.base import Question
from actorflow.questions.browser import CurrentUrl, Presence, Text, Visibility

__all__ = [
    "CurrentUrl",
    "LastResponse",
    "Presence",
    "Question",
    "Text",
    "Visibility",
    "read_path",
]
