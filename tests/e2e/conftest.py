"""
Fixtures for the e2e suite.
Requests travel over a real socket, either to API_BASE_URL or to a
uvicorn server started on a free localhost port for the session.
"""

import os
import threading
import time

import pytest
import uvicorn

from hello_vibe.app import app

from .helpers import fetch, free_port

STARTUP_TIMEOUT = 10.0


@pytest.fixture(scope="session")
def api_url():
    """Base URL of the API under test."""
    external = os.environ.get("API_BASE_URL")
    if external:
        yield external.rstrip("/")
        return

    port = free_port()
    server = uvicorn.Server(
        uvicorn.Config(app, host="127.0.0.1", port=port, log_level="warning")
    )
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + STARTUP_TIMEOUT
    while not server.started:
        if not thread.is_alive() or time.monotonic() > deadline:
            pytest.fail(f"uvicorn did not start on port {port}")
        time.sleep(0.05)

    yield f"http://127.0.0.1:{port}"

    server.should_exit = True
    thread.join(timeout=STARTUP_TIMEOUT)


@pytest.fixture
def get(api_url):
    """GET a path on the API under test."""

    def _get(path):
        return fetch(f"{api_url}{path}")

    return _get
