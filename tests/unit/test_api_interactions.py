"""
Unit tests for the CallAnApi ability, request interactions and
LastResponse questions.

HTTP traffic is served by a FakeSession so no network is involved.
"""

import pytest
import requests

from actorflow import (
    ActionTimeout,
    Actor,
    AssertionMismatch,
    CallAnApi,
    Delete,
    DriverError,
    Get,
    InvalidTaskParameters,
    LastResponse,
    Post,
    Put,
    equals,
    see_that,
)
from actorflow.interactions import LAST_RESPONSE
from actorflow.questions import read_path
from tests.fakes import FakeResponse, FakeSession

pytestmark = pytest.mark.unit

BASE_URL = "https://jsonplaceholder.typicode.com"


@pytest.fixture
def session() -> FakeSession:
    return FakeSession(
        {
            ("GET", f"{BASE_URL}/posts/1"): FakeResponse(
                200,
                {"id": 1, "title": "hello", "tags": [{"name": "intro"}]},
                {"Content-Type": "application/json", "X-Request-Id": "abc"},
            ),
            ("POST", f"{BASE_URL}/posts"): FakeResponse(201, {"id": 101}),
            ("PUT", f"{BASE_URL}/posts/1"): FakeResponse(200, {"id": 1}),
            ("DELETE", f"{BASE_URL}/posts/1"): FakeResponse(200, {}),
        }
    )


@pytest.fixture
def anna(session: FakeSession) -> Actor:
    return Actor.named("Anna").who_can(CallAnApi.at(BASE_URL, session=session, timeout=3.0))


class TestRequests:
    """Tests for what request interactions send."""

    def test_get_sends_request_with_ability_timeout(self, anna, session):
        anna.attempts_to(Get.resource("/posts/1"))

        assert session.requests == [
            {"method": "GET", "url": f"{BASE_URL}/posts/1", "timeout": 3.0}
        ]

    def test_post_sends_json_body_and_headers(self, anna, session):
        # Arrange
        create = Post.to("/posts").with_json({"title": "new"}).with_headers(Accept="application/json")

        # Act
        anna.attempts_to(create)

        # Assert
        sent = session.requests[0]
        assert sent["method"] == "POST"
        assert sent["json"] == {"title": "new"}
        assert sent["headers"] == {"Accept": "application/json"}

    def test_put_and_delete(self, anna, session):
        anna.attempts_to(Put.to("/posts/1").with_json({"title": "edited"}), Delete.resource("/posts/1"))

        assert [r["method"] for r in session.requests] == ["PUT", "DELETE"]

    def test_query_params_are_passed_through(self, anna, session):
        anna.attempts_to(Get.resource("/posts").with_params(userId=1))

        assert session.requests[0]["params"] == {"userId": 1}

    def test_builders_do_not_mutate_the_original(self):
        base = Get.resource("/posts")

        base.with_headers(Accept="text/plain")

        assert dict(base.headers) == {}

    def test_response_is_remembered(self, anna):
        anna.attempts_to(Post.to("/posts").with_json({"title": "new"}))

        assert anna.recall(LAST_RESPONSE).status_code == 201

    def test_empty_path_is_rejected(self):
        with pytest.raises(InvalidTaskParameters):
            Get.resource("")

    def test_describe_names_method_and_path(self):
        assert Delete.resource("/posts/1").describe() == "send a DELETE request to /posts/1"


class TestTransportFailures:
    def test_timeout_becomes_action_timeout(self, anna, session):
        session.routes[("GET", f"{BASE_URL}/slow")] = requests.Timeout("too slow")

        with pytest.raises(ActionTimeout) as exc_info:
            anna.attempts_to(Get.resource("/slow"))

        assert exc_info.value.timeout == 3.0
        assert isinstance(exc_info.value.__cause__, requests.Timeout)

    def test_connection_error_becomes_driver_error(self, anna, session):
        session.routes[("GET", f"{BASE_URL}/down")] = requests.ConnectionError("refused")

        with pytest.raises(DriverError, match="Could not reach"):
            anna.attempts_to(Get.resource("/down"))


class TestLastResponse:
    """Tests for questions about the last response."""

    def test_status_code_header_and_fields(self, anna):
        anna.attempts_to(Get.resource("/posts/1"))

        assert anna.asks_for(LastResponse.status_code()) == 200
        assert anna.asks_for(LastResponse.header("X-Request-Id")) == "abc"
        assert anna.asks_for(LastResponse.field("title")) == "hello"
        assert anna.asks_for(LastResponse.field("tags.0.name")) == "intro"
        assert anna.asks_for(LastResponse.body())["id"] == 1

    def test_mismatch_describes_the_status_code(self, anna):
        anna.attempts_to(Get.resource("/missing"))

        with pytest.raises(AssertionMismatch) as exc_info:
            anna.should(see_that(LastResponse.status_code(), equals(200)))

        assert exc_info.value.question == "the last response status code"
        assert exc_info.value.actual == 404

    def test_asking_before_any_request_fails(self):
        with pytest.raises(KeyError):
            Actor.named("Anna").asks_for(LastResponse.status_code())


class TestReadPath:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("", {"a": [{"b": 1}]}),
            ("a", [{"b": 1}]),
            ("a.0", {"b": 1}),
            ("a.0.b", 1),
        ],
    )
    def test_reads_nested_values(self, path, expected):
        assert read_path({"a": [{"b": 1}]}, path) == expected

    @pytest.mark.parametrize("path", ["x", "a.5", "a.first", "a.0.b.c"])
    def test_unknown_paths_raise_key_error(self, path):
        with pytest.raises(KeyError):
            read_path({"a": [{"b": 1}]}, path)
