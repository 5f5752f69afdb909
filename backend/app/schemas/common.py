"""
Pinboard Backend — Shared Response Schemas
============================================

What:  Response models shared by every route module.
Why:   Error and confirmation bodies have one shape across the whole API, so
       clients can parse them without knowing which endpoint answered.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for API models: snake_case in Python, camelCase on the wire.

    populate_by_name lets services build models with Python names while
    FastAPI serializes responses by alias.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """
    Body for confirmations and every error response.

    Examples:
        {"message": "Board deleted"}
        {"message": "Board not found"}
        {"message": "Server error"}
        {"message": "Invalid request: body.title: Field required"}  (422)
    """
    message: str = Field(description="Human-readable outcome")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
