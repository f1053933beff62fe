"""
Run configuration.

This module defines configuration classes for the environments tests run
in (local, ci).  Values are loaded from environment variables with
sensible defaults and are already resolved to plain scalars by the time
ability factories see them.
"""

from __future__ import annotations

import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("ACTORFLOW_BASE_URL", "http://127.0.0.1:5500")
    API_BASE_URL: str = os.environ.get("ACTORFLOW_API_BASE_URL", "http://127.0.0.1:5500/api")

    # Browser driver
    BROWSER: str = os.environ.get("ACTORFLOW_BROWSER", "chromium")
    HEADLESS: bool = _env_bool("ACTORFLOW_HEADLESS", True)

    # Timeouts in seconds
    WAIT_TIMEOUT: float = _env_float("ACTORFLOW_WAIT_TIMEOUT", 5.0)
    ACTION_TIMEOUT: float = _env_float("ACTORFLOW_ACTION_TIMEOUT", 10.0)
    API_TIMEOUT: float = _env_float("ACTORFLOW_API_TIMEOUT", 10.0)

    LOG_LEVEL: str = os.environ.get("ACTORFLOW_LOG_LEVEL", "INFO")


class LocalConfig(Config):
    """Local runs: headed browser so the flow can be watched."""

    HEADLESS: bool = _env_bool("ACTORFLOW_HEADLESS", False)
    LOG_LEVEL: str = os.environ.get("ACTORFLOW_LOG_LEVEL", "DEBUG")


class CIConfig(Config):
    """CI runs: headless with longer waits for slower shared runners."""

    HEADLESS: bool = True
    WAIT_TIMEOUT: float = _env_float("ACTORFLOW_WAIT_TIMEOUT", 10.0)
    ACTION_TIMEOUT: float = _env_float("ACTORFLOW_ACTION_TIMEOUT", 20.0)


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": Config,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses the ACTORFLOW_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("ACTORFLOW_ENV", "default")
    return config.get(env, config["default"])
