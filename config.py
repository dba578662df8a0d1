"""
Harness configuration module.

This module defines configuration classes for the environments the
landing page suite runs against (local fixture site, live site).
Configuration values are loaded from environment variables with
sensible defaults. Browser selection is left to the pytest-playwright
command line options (``--browser``, ``--headed``).
"""

import os
from pathlib import Path
from urllib.parse import urlparse

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


def expected_domain_for(base_url: str | None, default: str) -> str:
    """
    Domain a page loaded from ``base_url`` is expected to be on.

    Args:
        base_url: Configured base URL, or None when none is configured.
        default: Domain to use when there is no usable base URL.

    Returns:
        Host name of ``base_url``, or ``default``.
    """
    if not base_url:
        return default
    return urlparse(base_url).hostname or default


class Config:
    """Base configuration with default settings."""

    VIEWPORT: dict = {"width": 1280, "height": 720}

    # Driver-owned timeouts (milliseconds)
    DEFAULT_TIMEOUT_MS: int = int(os.environ.get("DEFAULT_TIMEOUT_MS", "5000"))
    NAVIGATION_TIMEOUT_MS: int = int(os.environ.get("NAVIGATION_TIMEOUT_MS", "30000"))

    # Fixture site
    SITE_TITLE: str = "Waitly"
    HIDDEN_CONTROLS: tuple = ()
    SERVER_HOST: str = os.environ.get("SERVER_HOST", "127.0.0.1")
    SERVER_PORT: int = int(os.environ.get("SERVER_PORT", "5001"))


class LocalConfig(Config):
    """Run against the bundled fixture site started by the suite."""

    # None means "start the fixture site"; set BASE_URL to reuse a running one
    BASE_URL: str | None = os.environ.get("BASE_URL")
    EXPECTED_DOMAIN: str = os.environ.get("EXPECTED_DOMAIN") or expected_domain_for(
        BASE_URL, Config.SERVER_HOST
    )


class LiveConfig(Config):
    """Run against the deployed Waitly site."""

    BASE_URL: str | None = os.environ.get("LIVE_BASE_URL", "https://waitly.eu")
    EXPECTED_DOMAIN: str = os.environ.get("LIVE_EXPECTED_DOMAIN") or expected_domain_for(
        BASE_URL, "waitly.eu"
    )

    # Public internet is slower than the loopback fixture site
    DEFAULT_TIMEOUT_MS: int = int(os.environ.get("DEFAULT_TIMEOUT_MS", "10000"))


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "live": LiveConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, live).
             If None, uses HARNESS_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("HARNESS_ENV", "local")
    return config.get(env, config["default"])
