"""Questions about the Dungeon Team Finder state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from actorflow.questions import Question, Text, Visibility
from dungeon_finder.targets import DungeonDirectory, QueueForm

if TYPE_CHECKING:
    from actorflow.actor import Actor


class QueuedPlayers:
    @staticmethod
    def names() -> Question:
        return Text.of_all(QueueForm.QUEUED_PLAYERS)


class DungeonDirectoryLoaded(Question):
    """Whether both the directory title and its search box are displayed."""

    def answered_by(self, actor: "Actor") -> bool:
        return actor.asks_for(Visibility.of(DungeonDirectory.TITLE)) and actor.asks_for(
            Visibility.of(DungeonDirectory.SEARCH)
        )

    def describe(self) -> str:
        return "whether the dungeon directory is loaded"
