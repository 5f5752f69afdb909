"""
Pinboard Backend — Pin Request/Response Schemas
=================================================

What:  Pydantic models defining the pin API contract.
How:   FastAPI validates request bodies against PinCreate and serializes
       PinResponse by alias (imageUrl, createdAt).

Note on validation:
    PinCreate only checks shape (presence and type of the four fields).
    PinService adds no rules of its own; anything else the database rejects
    surfaces as a server error.
"""

from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


class PinCreate(CamelModel):
    """Body of POST /api/pins."""
    title: str = Field(description="Pin title")
    description: str = Field(description="Pin description")
    image_url: str = Field(description="URL of the pinned image")
    user_id: str = Field(description="Id of the owning user")


class PinResponse(CamelModel):
    """A persisted pin, as returned by create/get/list."""
    id: str = Field(description="Store-assigned pin identifier")
    title: str
    description: str
    image_url: str
    user: str = Field(description="Owning user id")
    created_at: datetime = Field(description="When the pin was created (UTC)")
