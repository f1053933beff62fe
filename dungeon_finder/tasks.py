"""
Business-level tasks for the Dungeon Team Finder.

Each task checks its inputs in ``validate()`` before any step is built,
and any optional behaviour (remember me) is decided here, at
construction time.
"""

from __future__ import annotations

from actorflow.interactions import Click, Enter, Open, WaitForLoad
from actorflow.tasks import Task, require
from dungeon_finder.targets import DungeonDirectory, LoginForm, QueueForm

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin"


class Login(Task):
    """Open the app and submit the login form."""

    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password
        super().__init__(name="log in")

    @classmethod
    def as_admin(cls) -> "Login":
        return cls(ADMIN_USERNAME, ADMIN_PASSWORD)

    @classmethod
    def with_credentials(cls, username: str, password: str) -> "Login":
        return cls(username, password)

    def validate(self) -> None:
        require(self.name, username=self.username, password=self.password)

    def build_steps(self):
        return [
            Open.browser_on("/"),
            Enter.the_value(self.username).into(LoginForm.USERNAME),
            Enter.the_secret(self.password).into(LoginForm.PASSWORD),
            Click.on(LoginForm.SUBMIT),
        ]

    def describe(self) -> str:
        return f"log in as {self.username}"


class AdvancedLogin(Task):
    """
    Login with an optional remember-me tick and an explicit load wait.

    The remember-me click is part of the step list only when requested,
    so the steps are fixed as soon as the task exists.
    """

    def __init__(self, username: str, password: str, remember_me: bool = False):
        self.username = username
        self.password = password
        self.remember_me = bool(remember_me)
        super().__init__(name="advanced log in")

    @classmethod
    def as_admin(cls) -> "AdvancedLogin":
        return cls(ADMIN_USERNAME, ADMIN_PASSWORD)

    @classmethod
    def as_user(cls, username: str, password: str) -> "AdvancedLogin":
        return cls(username, password)

    @classmethod
    def with_remember_me(cls, username: str, password: str) -> "AdvancedLogin":
        return cls(username, password, remember_me=True)

    def validate(self) -> None:
        require(self.name, username=self.username, password=self.password)

    def build_steps(self):
        steps = [
            Open.browser_on("/"),
            Enter.the_value(self.username).into(LoginForm.USERNAME),
            Enter.the_secret(self.password).into(LoginForm.PASSWORD),
        ]
        if self.remember_me:
            steps.append(Click.on(LoginForm.REMEMBER_ME))
        steps.append(Click.on(LoginForm.SUBMIT))
        steps.append(WaitForLoad.state("load"))
        return steps

    def describe(self) -> str:
        suffix = " and stay signed in" if self.remember_me else ""
        return f"log in as {self.username}{suffix}"


class SearchForDungeon(Task):
    def __init__(self, term: str):
        self.term = term
        super().__init__(name="search for a dungeon")

    @classmethod
    def named(cls, term: str) -> "SearchForDungeon":
        return cls(term)

    def validate(self) -> None:
        require(self.name, term=self.term)

    def build_steps(self):
        return [Enter.the_value(self.term).into(DungeonDirectory.SEARCH)]

    def describe(self) -> str:
        return f"search for dungeon '{self.term}'"


class QueueForDungeon(Task):
    """Pick the first open dungeon and join its queue."""

    def __init__(self, player_name: str, experience: str):
        self.player_name = player_name
        self.experience = experience
        super().__init__(name="queue for a dungeon")

    @classmethod
    def as_player(cls, player_name: str, experience: str) -> "QueueForDungeon":
        return cls(player_name, experience)

    def validate(self) -> None:
        require(self.name, player_name=self.player_name, experience=self.experience)

    def build_steps(self):
        return [
            Click.on(DungeonDirectory.FIRST_DUNGEON),
            Click.on(DungeonDirectory.QUEUE_BUTTON),
            Enter.the_value(self.player_name).into(QueueForm.PLAYER_NAME),
            Click.on(QueueForm.EXPERIENCE_LEVEL.of(self.experience)),
            Click.on(QueueForm.JOIN),
        ]

    def describe(self) -> str:
        return f"queue for the first dungeon as {self.player_name} ({self.experience})"
