"""
Playwright fixtures for end-to-end runs against a live Dungeon Team Finder.

The suite only runs when ACTORFLOW_BASE_URL points at a running app;
otherwise every E2E test is skipped.  Browser, context and page come
from pytest-playwright, which gives every test its own page so actors
never share a session.
"""

from __future__ import annotations

import os
import re

import pytest
import requests
from playwright.sync_api import Page

from actorflow import Actor, BrowseTheWeb
from actorflow.actor import FAILED, Cast
from actorflow.config import Config

SCREENSHOT_DIR = "test-results/screenshots"


def _wait_for_app(url: str, timeout: float) -> None:
    """Fail fast with a clear message when the app is not reachable."""
    try:
        requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise RuntimeError(f"Dungeon Team Finder at {url} is not reachable: {exc}") from exc


def _screenshot_name(test_name: str, test_cast: Cast | None) -> str:
    """Name a screenshot after the actor and the deepest step that failed."""
    parts = [test_name]
    if test_cast is not None:
        for actor in test_cast.actors:
            failed = [entry for entry in actor.trace if entry.outcome == FAILED]
            if failed:
                parts += [actor.name, failed[-1].description]
                break
    return re.sub(r"[^A-Za-z0-9_.-]+", "_", "-".join(parts)).strip("_")


@pytest.fixture(scope="session")
def live_app(actor_config: type[Config]) -> str:
    """Base URL of the running app, or skip when none is configured."""
    if not os.getenv("ACTORFLOW_BASE_URL"):
        pytest.skip("set ACTORFLOW_BASE_URL to run E2E tests")
    _wait_for_app(actor_config.BASE_URL, actor_config.ACTION_TIMEOUT)
    return actor_config.BASE_URL


@pytest.fixture
def player(live_app: str, cast: Cast, page: Page, actor_config: type[Config]) -> Actor:
    """Actor "Jose" browsing the live app in this test's own page."""
    actor = cast.actor_named("Jose")
    actor.can(
        BrowseTheWeb.with_page(
            page,
            base_url=live_app,
            wait_timeout=actor_config.WAIT_TIMEOUT,
            action_timeout=actor_config.ACTION_TIMEOUT,
        )
    )
    return actor


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Save a screenshot named after the failing actor and step."""
    outcome = yield
    report = outcome.get_result()

    if report.when != "call" or not report.failed:
        return
    page = item.funcargs.get("page")
    if page is None:
        return

    os.makedirs(SCREENSHOT_DIR, exist_ok=True)
    path = os.path.join(
        SCREENSHOT_DIR, _screenshot_name(item.name, item.funcargs.get("cast")) + ".png"
    )
    try:
        page.screenshot(path=path)
    except Exception as exc:  # pragma: no cover - the page may already be closed
        report.sections.append(("screenshot", f"Failed to capture screenshot: {exc}"))
    else:
        report.sections.append(("screenshot", path))
