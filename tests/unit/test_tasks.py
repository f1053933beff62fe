"""
Unit tests for task composition, validation and failure propagation.
"""

import pytest

from actorflow import (
    Actor,
    CallAnApi,
    Click,
    Get,
    InvalidTaskParameters,
    MissingAbility,
    Open,
    Target,
    TargetNotFound,
    Task,
    require,
)
from tests.fakes import Note

pytestmark = pytest.mark.unit

USERNAME = Target.the("username field").located_by("#username")
MISSING = Target.the("queue button").located_by("#queue-button")


class TestRequire:
    def test_accepts_present_values(self):
        require("log in", username="admin", password="admin")

    def test_reports_every_problem_at_once(self):
        with pytest.raises(InvalidTaskParameters) as exc_info:
            require("log in", username=None, password="   ")

        assert exc_info.value.task_name == "log in"
        assert exc_info.value.problems == [
            "username is required",
            "password must not be blank",
        ]

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            require("log in", username=None)


class TestTaskConstruction:
    def test_steps_are_fixed_at_construction(self):
        log = []
        first, second = Note("a", log), Note("b", log)

        task = Task.where("do things", first, second)

        assert task.steps == (first, second)
        assert isinstance(task.steps, tuple)

    def test_non_performable_step_is_rejected(self):
        with pytest.raises(InvalidTaskParameters):
            Task.where("do things", "click the button")

    def test_where_requires_a_name(self):
        with pytest.raises(InvalidTaskParameters):
            Task.where("", Note("a", []))

    def test_describe_defaults_to_name(self):
        assert Task.where("sign out").describe() == "sign out"

    def test_validate_runs_before_steps_are_built(self):
        """Test that the constructor checks parameters before building any step."""
        # Arrange
        events = []

        class Greet(Task):
            def __init__(self, who):
                self.who = who
                super().__init__(name="greet")

            def validate(self):
                events.append("validate")
                require(self.name, who=self.who)

            def build_steps(self):
                events.append("build")
                return [Note(f"hello {self.who}", [])]

        # Act
        task = Greet("Ann")
        with pytest.raises(InvalidTaskParameters, match="who must not be blank"):
            Greet(" ")

        # Assert
        assert task.steps == (Note("hello Ann", []),)
        assert events == ["validate", "build", "validate"]

    def test_validate_default_accepts_anything(self):
        assert Task(Note("a", []), name="plain").steps == (Note("a", []),)

    def test_requirements_are_collected_from_nested_steps(self):
        inner = Task.where("open home", Open.browser_on("/"))
        outer = Task.where("check api", inner, Get.resource("/health"), Click.on(USERNAME))

        assert outer.requirements() == ("browse the web", "call an API")


class TestTaskExecution:
    """Tests for ordered, fail-fast task execution."""

    def test_middle_step_failure_skips_the_rest(self):
        """Test S1 runs, S2 fails, and S3 never runs."""
        # Arrange
        log = []
        task = Task.where(
            "three steps",
            Note("S1", log),
            Note("S2", log, fail_with=RuntimeError("S2 broke")),
            Note("S3", log),
        )

        # Act
        with pytest.raises(RuntimeError, match="S2 broke") as exc_info:
            Actor.named("Anna").attempts_to(task)

        # Assert
        assert log == ["S1", "S2"]
        assert exc_info.value.__notes__ == [
            "while step 2/3 of task 'three steps': note 'S2'",
            "while Anna attempted to three steps",
        ]

    def test_failure_keeps_its_type_and_gains_task_context(self, admin, driver):
        task = Task.where("queue up", Click.on(USERNAME), Click.on(MISSING), Click.on(USERNAME))

        with pytest.raises(TargetNotFound) as exc_info:
            admin.attempts_to(task)

        assert driver.calls == [("click", "#username")]
        assert exc_info.value.context == [
            "step 2/3 of task 'queue up': click on queue button",
            "Admin attempted to queue up",
        ]

    def test_missing_ability_is_detected_before_first_step(self, admin, driver):
        """Test that a task needing an API never starts on a browser-only actor."""
        # Arrange
        task = Task.where("open then call", Open.browser_on("/"), Get.resource("/health"))

        # Act
        with pytest.raises(MissingAbility) as exc_info:
            admin.attempts_to(task)

        # Assert
        assert exc_info.value.kind == CallAnApi.kind
        assert driver.calls == []

    def test_nested_tasks_are_traced_with_depth(self):
        log = []
        actor = Actor.named("Anna")
        inner = Task.where("inner", Note("a", log))
        outer = Task.where("outer", inner, Note("b", log))

        actor.attempts_to(outer)

        assert [(e.description, e.depth) for e in actor.trace] == [
            ("outer", 0),
            ("inner", 1),
            ("note 'a'", 2),
            ("note 'b'", 1),
        ]

    def test_task_can_be_performed_again(self):
        log = []
        task = Task.where("twice", Note("a", log))
        actor = Actor.named("Anna")

        actor.attempts_to(task, task)

        assert log == ["a", "a"]
