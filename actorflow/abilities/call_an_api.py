"""
Ability to call an HTTP API.

Binds an actor to a base endpoint and a ``requests`` session.  The
session carries connection pooling and cookies, so give each concurrently
running actor its own CallAnApi instead of sharing one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar

import requests

from actorflow.abilities.base import Ability
from actorflow.exceptions import ActionTimeout, DriverError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallAnApi(Ability):
    """
    HTTP client bound to an actor.

    Attributes:
        base_url: Root of the API, e.g. ``https://api.example.com``.
        session: Session used to issue requests.
        timeout: Seconds a single request may take.
    """

    kind: ClassVar[str] = "call an API"

    base_url: str
    session: requests.Session = field(default_factory=requests.Session, compare=False)
    timeout: float = 10.0

    @classmethod
    def at(
        cls,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ) -> "CallAnApi":
        """Bind the ability to ``base_url``, creating a session when none is given."""
        return cls(base_url, session if session is not None else requests.Session(), timeout)

    @classmethod
    def from_config(cls, config: Any, session: requests.Session | None = None) -> "CallAnApi":
        """Build the ability from already-resolved configuration values."""
        return cls.at(config.API_BASE_URL, session=session, timeout=config.API_TIMEOUT)

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def send(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        """
        Issue a request and return the response.

        Args:
            method: HTTP method name.
            path: Path relative to ``base_url`` (or an absolute URL).
            **kwargs: Passed through to ``requests.Session.request``.

        Returns:
            The ``requests.Response``, whatever its status code.

        Raises:
            ActionTimeout: The request did not complete within ``timeout``.
            DriverError: The endpoint could not be reached.
        """
        url = self.url_for(path)
        kwargs.setdefault("timeout", self.timeout)
        logger.info("%s %s", method.upper(), url)
        try:
            return self.session.request(method.upper(), url, **kwargs)
        except requests.Timeout as exc:
            raise ActionTimeout(f"{method.upper()} {url}", kwargs["timeout"]) from exc
        except requests.ConnectionError as exc:
            raise DriverError(f"Could not reach {url}: {exc}") from exc

    def describe(self) -> str:
        return f"call the API at {self.base_url}"
