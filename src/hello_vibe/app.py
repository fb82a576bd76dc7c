"""
Hello Vibe FastAPI application.
One greeting endpoint plus a health check for service monitoring.
"""
import logging

from fastapi import FastAPI

from hello_vibe.config import Settings, get_settings
from hello_vibe.schemas import HELLO_MESSAGE, HealthResponse, HelloResponse

logger = logging.getLogger(__name__)

SERVICE_NAME = "hello-vibe"


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application from settings."""
    settings = settings or get_settings()
    application = FastAPI(title=settings.title, version=settings.version)

    @application.get("/api/hello", response_model=HelloResponse)
    async def hello() -> HelloResponse:
        """Return the fixed greeting."""
        logger.debug("Serving greeting")
        return HelloResponse(message=HELLO_MESSAGE)

    @application.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint for service monitoring."""
        return HealthResponse(status="healthy", service=SERVICE_NAME)

    return application


app = create_app()
