"""Response models for the Hello Vibe API."""

from pydantic import BaseModel, Field

HELLO_MESSAGE = "Hello Vibe!"


class HelloResponse(BaseModel):
    """Greeting returned by GET /api/hello."""

    message: str = Field(..., description="The greeting message")

    model_config = {"json_schema_extra": {"examples": [{"message": HELLO_MESSAGE}]}}


class HealthResponse(BaseModel):
    """Service status returned by GET /health."""

    status: str
    service: str
