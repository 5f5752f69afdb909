"""
Pinboard Backend — Pin SQLAlchemy Model
=========================================

What:  ORM model representing the `pins` table.
Why:   Maps Python objects to database rows for type-safe database operations.
Who:   Used by PinService (create, fetch) and BoardService (expanding a board's pins).

Table Design Rationale:
    - String primary key: ids are opaque to callers; a UUID4 is generated
      client-side so the id is known before the INSERT is flushed.
    - image_url: Stored verbatim; the service never fetches or validates it.
    - user: Owning user id. There is no users table in this service, so this
      is a plain indexed column, not a foreign key.
    - created_at: UTC with timezone.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def new_id() -> str:
    return str(uuid.uuid4())


class Pin(Base):
    """
    A user-owned item with a title, description and image reference.

    Lifecycle:
        Created by PinService.create_pin; never updated or deleted by this API.
    """

    __tablename__ = "pins"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
        comment="Opaque pin identifier (UUID4 text)",
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False)

    image_url: Mapped[str] = mapped_column(
        String(2048),
        nullable=False,
        comment="Image URL as submitted by the client",
    )

    user: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Owning user id",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # "Pins for user X, newest first" is the only list query
    __table_args__ = (
        Index("idx_pins_user_created_at", "user", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Pin(id={self.id}, user='{self.user}', title='{self.title}')>"
