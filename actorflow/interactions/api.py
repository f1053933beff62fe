"""
HTTP interactions.

Each request interaction sends one call through the actor's
:class:`CallAnApi` ability and notes the response on the actor under
:data:`LAST_RESPONSE`, where the ``LastResponse`` questions read it back.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar

from actorflow.abilities.call_an_api import CallAnApi
from actorflow.exceptions import InvalidTaskParameters
from actorflow.interactions.base import Interaction

if TYPE_CHECKING:
    from actorflow.actor import Actor

logger = logging.getLogger(__name__)

LAST_RESPONSE = "last response"

_NO_BODY = object()


@dataclass(frozen=True)
class Request(Interaction):
    """
    Base for HTTP request interactions.

    Attributes:
        method: HTTP method name.
        path: Path relative to the ability's base URL.
        body: JSON body, or a sentinel when the request has none.
        headers: Extra request headers.
        params: Query string parameters.
    """

    requires: ClassVar = (CallAnApi,)
    method: ClassVar[str] = "GET"

    path: str
    body: Any = field(default=_NO_BODY, compare=False)
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def _for(cls, path: str) -> "Request":
        if not path:
            raise InvalidTaskParameters(cls.method, ["path is required"])
        return cls(path)

    def with_headers(self, **headers: str) -> "Request":
        merged = {**self.headers, **headers}
        return replace(self, headers=MappingProxyType(merged))

    def with_params(self, **params: Any) -> "Request":
        merged = {**self.params, **params}
        return replace(self, params=MappingProxyType(merged))

    def with_json(self, body: Any) -> "Request":
        return replace(self, body=body)

    def act(self, actor: "Actor", api: CallAnApi) -> None:
        kwargs: dict[str, Any] = {}
        if self.headers:
            kwargs["headers"] = dict(self.headers)
        if self.params:
            kwargs["params"] = dict(self.params)
        if self.body is not _NO_BODY:
            kwargs["json"] = self.body
        response = api.send(self.method, self.path, **kwargs)
        logger.debug("%s %s -> %s", self.method, self.path, response.status_code)
        actor.remember(LAST_RESPONSE, response)

    def describe(self) -> str:
        return f"send a {self.method} request to {self.path}"


@dataclass(frozen=True)
class Get(Request):
    method: ClassVar[str] = "GET"

    @classmethod
    def resource(cls, path: str) -> "Get":
        return cls._for(path)


@dataclass(frozen=True)
class Post(Request):
    method: ClassVar[str] = "POST"

    @classmethod
    def to(cls, path: str) -> "Post":
        return cls._for(path)


@dataclass(frozen=True)
class Put(Request):
    method: ClassVar[str] = "PUT"

    @classmethod
    def to(cls, path: str) -> "Put":
        return cls._for(path)


@dataclass(frozen=True)
class Patch(Request):
    method: ClassVar[str] = "PATCH"

    @classmethod
    def to(cls, path: str) -> "Patch":
        return cls._for(path)


@dataclass(frozen=True)
class Delete(Request):
    method: ClassVar[str] = "DELETE"

    @classmethod
    def resource(cls, path: str) -> "Delete":
        return cls._for(path)
