"""
pytest integration.

Provides fixtures for configuration and actors, and attaches the trace
of every actor a failing test used to the failure report.  Enable it
from a ``conftest.py`` with ``pytest_plugins = ["actorflow.pytest_plugin"]``.
"""

from __future__ import annotations

import pytest

from actorflow.actor import Cast
from actorflow.config import Config, get_config
from actorflow.log_config import configure_logging
from actorflow.reporting import format_trace


@pytest.fixture(scope="session")
def actor_config() -> type[Config]:
    """Configuration class for the current ACTORFLOW_ENV."""
    config_class = get_config()
    configure_logging(config_class.LOG_LEVEL)
    return config_class


@pytest.fixture
def cast() -> Cast:
    """
    Fresh cast for each test.

    Grant abilities to the actors it hands out, or subclass the fixture
    in a conftest to give every actor the same kind of abilities.
    """
    return Cast()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Attach actor traces to failed test reports."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        test_cast = item.funcargs.get("cast")
        if isinstance(test_cast, Cast):
            traces = [format_trace(actor.trace) for actor in test_cast.actors if actor.trace]
            if traces:
                report.sections.append(("actorflow trace", "\n".join(traces)))
