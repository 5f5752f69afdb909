"""
Pinboard Backend — Board Request/Response Schemas
===================================================

What:  Pydantic models defining the board API contract.

Why two response models:
    - BoardResponse: `pins` is the raw list of pin ids. Returned by list,
      create, update and the membership endpoints.
    - BoardDetailResponse: `pins` expanded to full PinResponse records.
      Returned only by GET /api/boards/{id}.

BoardUpdate carries only title/description. Any other keys in the request
body (user, pins, ...) are dropped by pydantic before the service sees them,
and the service additionally projects to the fields the client actually set.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from app.schemas.common import CamelModel
from app.schemas.pin import PinResponse


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class BoardCreate(CamelModel):
    """Body of POST /api/boards."""
    title: str = Field(description="Board title")
    description: Optional[str] = Field(default=None, description="Optional board description")
    user_id: str = Field(description="Id of the owning user")


class BoardUpdate(CamelModel):
    """Body of PUT /api/boards/{id}. Partial: omitted fields are left as they are."""
    title: Optional[str] = None
    description: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> Optional[str]:
        # Omit the key to keep the current title; null would clear a NOT NULL column
        if v is None:
            raise ValueError("title may be omitted but not null")
        return v


class BoardPinAdd(CamelModel):
    """Body of POST /api/boards/{id}/pins."""
    pin_id: str = Field(description="Id of the pin to add")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class BoardResponse(CamelModel):
    id: str = Field(description="Store-assigned board identifier")
    title: str
    description: Optional[str] = None
    user: str = Field(description="Owning user id")
    pins: List[str] = Field(default_factory=list, description="Ordered pin ids")
    created_at: datetime
    updated_at: datetime


class BoardDetailResponse(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    user: str
    pins: List[PinResponse] = Field(
        default_factory=list,
        description="Pins in board order; ids with no matching pin are omitted",
    )
    created_at: datetime
    updated_at: datetime
