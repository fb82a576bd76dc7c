"""Containerized test runner for the Hello Vibe API."""

from .main import HelloVibeTesting as HelloVibeTesting
