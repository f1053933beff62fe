"""Element targets for the Dungeon Team Finder pages."""

from actorflow.targets import Target


class LoginForm:
    USERNAME = Target.the("username field").located_by("#username")
    PASSWORD = Target.the("password field").located_by("#password")
    REMEMBER_ME = Target.the("remember me checkbox").located_by("#remember")
    SUBMIT = Target.the("login button").located_by("button[type='submit']")


class DungeonDirectory:
    TITLE = Target.the("dungeon directory title").located_by(
        "xpath=//h2[text()='Dungeon Directory']"
    )
    SEARCH = Target.the("dungeon search box").located_by("#dungeon-search")
    FIRST_DUNGEON = Target.the("first available dungeon").located_by(
        ".dungeon-card:not(.full) >> nth=0"
    )
    QUEUE_BUTTON = Target.the("queue button").located_by("#queue-button")


class QueueForm:
    PLAYER_NAME = Target.the("player name field").located_by("#player-name")
    EXPERIENCE_LEVEL = Target.the("'{}' experience level").located_by(
        "input[name='experience'][value='{}']"
    )
    JOIN = Target.the("join queue button").located_by("#join-queue")
    QUEUED_PLAYERS = Target.the("queued player name").located_by(
        "#queued-players .player-name"
    )
