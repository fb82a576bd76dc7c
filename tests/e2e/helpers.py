"""Shared helpers for the e2e suite."""

import socket

import pytest
import requests


def free_port():
    """Return a localhost port nothing is listening on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def fetch(url, timeout=5):
    """GET url, reporting connection problems apart from assertion failures."""
    try:
        return requests.get(url, timeout=timeout)
    except requests.ConnectionError as exc:
        pytest.fail(f"API unreachable at {url}: {exc}", pytrace=False)
