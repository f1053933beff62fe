"""
Shared pytest fixtures for the actorflow test suite.

Fixtures provide fresh fakes for every test so that no recorded calls
or actor state leak between tests.

Key Concepts Demonstrated:
- Fixture dependencies (driver -> ability -> actor)
- Test data factories with Faker
- Short wait windows so negative-path tests stay fast
"""

from collections.abc import Callable

import pytest
from faker import Faker

from actorflow import Actor, BrowseTheWeb
from tests.fakes import InMemoryDriver

pytest_plugins = ["actorflow.pytest_plugin", "pytester"]

# Initialize Faker for generating test data
fake = Faker()

LOGIN_FORM_SELECTORS = (
    "#username",
    "#password",
    "#remember",
    "button[type='submit']",
)

# Keeps TargetNotFound tests quick while still exercising the wait window.
SHORT_WAIT = 0.2


# -----------------------------------------------------------------------------
# Browser Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def driver() -> InMemoryDriver:
    """Fake driver seeded with the login form."""
    return InMemoryDriver(*LOGIN_FORM_SELECTORS)


@pytest.fixture
def browser(driver: InMemoryDriver) -> BrowseTheWeb:
    """Browser ability bound to the fake driver."""
    return BrowseTheWeb.with_driver(driver, wait_timeout=SHORT_WAIT)


@pytest.fixture
def admin(browser: BrowseTheWeb) -> Actor:
    """Actor "Admin" able to browse the web."""
    return Actor.named("Admin").who_can(browser)


# -----------------------------------------------------------------------------
# Data Factories
# -----------------------------------------------------------------------------

@pytest.fixture
def credential_factory() -> Callable[[], dict[str, str]]:
    """Factory for unique user credentials."""

    def _make() -> dict[str, str]:
        return {
            "username": fake.user_name(),
            "password": fake.password(length=12),
        }

    return _make


# -----------------------------------------------------------------------------
# Dungeon Team Finder Simulation
# -----------------------------------------------------------------------------

DIRECTORY_SELECTORS = (
    "xpath=//h2[text()='Dungeon Directory']",
    "#dungeon-search",
    ".dungeon-card:not(.full) >> nth=0",
)


def _show_directory(driver: InMemoryDriver) -> None:
    driver.current_url = driver.current_url.rstrip("/") + "/dungeons"
    for selector in DIRECTORY_SELECTORS:
        driver.add(selector)


def _show_queue_form(driver: InMemoryDriver) -> None:
    driver.add("#player-name")
    for level in ("beginner", "intermediate", "expert"):
        driver.add(f"input[name='experience'][value='{level}']")
    driver.add("#join-queue")


def _join_queue(driver: InMemoryDriver) -> None:
    name = driver.elements["#player-name"][0].value
    driver.add("#queued-players .player-name", text=name)


@pytest.fixture
def app_driver(driver: InMemoryDriver) -> InMemoryDriver:
    """
    Fake driver that behaves like the Dungeon Team Finder.

    Submitting the login form reveals the directory, the queue button
    reveals the queue form, and joining lists the typed player name.
    """
    driver.on_click("button[type='submit']", _show_directory)
    driver.add("#queue-button")
    driver.on_click("#queue-button", _show_queue_form)
    driver.on_click("#join-queue", _join_queue)
    return driver
