"""
Shared pytest fixtures for the landing page test suite.

Key Concepts Demonstrated:
- Environment-driven configuration (local fixture site or live site)
- Session-scoped fixtures shared by every suite
- Flask test client for checking the fixture site without a browser
"""

import pytest

from app import create_app
from config import Config, get_config


@pytest.fixture(scope="session")
def settings() -> type[Config]:
    """
    Configuration for the current run.

    Selected by the HARNESS_ENV environment variable ("local" by
    default, "live" to target the deployed site).

    Returns:
        Configuration class for the environment.
    """
    return get_config()


@pytest.fixture(scope="session")
def app():
    """Create the fixture site application for non-browser tests."""
    return create_app("local")


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests to the fixture site.

    Yields:
        Flask test client.
    """
    with app.test_client() as test_client:
        yield test_client
