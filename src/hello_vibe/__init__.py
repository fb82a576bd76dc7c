"""Hello Vibe API: a single-endpoint FastAPI service."""

__version__ = "1.0.0"
