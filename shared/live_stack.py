"""Shared live-site helpers for the browser and smoke suites."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Generator

import requests
from flask import Flask
from werkzeug.serving import make_server

logger = logging.getLogger(__name__)

FIXTURE_HEALTH_PATH = "/api/health"


def is_site_ready(url: str, path: str = "/", timeout: int = 2) -> bool:
    """Return True when ``url + path`` answers with a non-error status."""
    try:
        response = requests.get(f"{url.rstrip('/')}{path}", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code < 400


def wait_for_site_ready(
    url: str,
    path: str = "/",
    timeout: int = 60,
    interval: float = 1,
) -> None:
    """Poll the site until it answers or ``timeout`` seconds have passed."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_ready(url, path):
            return
        time.sleep(interval)
    raise RuntimeError(f"Site at {url} not ready after {timeout}s")


class FixtureServer:
    """Serve a Flask app from a daemon thread until ``shutdown()``."""

    def __init__(self, app: Flask, host: str, port: int):
        self.app = app
        self.host = host
        self.port = port
        self._server = make_server(host, port, app, threaded=True)
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def start(self) -> None:
        logger.info("Starting fixture site on %s", self.url)
        self._thread.start()

    def shutdown(self) -> None:
        logger.info("Stopping fixture site on %s", self.url)
        self._server.shutdown()
        self._thread.join(timeout=5)


def live_site_url(
    *,
    base_url: str | None,
    app_factory,
    host: str = "127.0.0.1",
    port: int = 5001,
    ready_timeout: int = 30,
) -> Generator[str, None, None]:
    """
    Yield a ready base URL, starting the fixture site when none is configured.

    Priority:
    1. Use `base_url` when one is configured (and wait for it to answer).
    2. Start the app built by `app_factory` on `host:port`, wait for its
       health endpoint, then stop it on exit.
    """
    if base_url:
        logger.info("Using configured site: %s", base_url)
        wait_for_site_ready(base_url, timeout=ready_timeout)
        yield base_url.rstrip("/")
        return

    try:
        server = FixtureServer(app_factory(), host, port)
    except OSError as exc:
        raise RuntimeError(
            f"Failed to start fixture site on {host}:{port}: {exc}. "
            "Set BASE_URL or SERVER_PORT to use another address."
        ) from exc

    server.start()
    try:
        wait_for_site_ready(server.url, FIXTURE_HEALTH_PATH, timeout=ready_timeout)
        yield server.url
    finally:
        server.shutdown()
