"""
Pinboard Backend — Board SQLAlchemy Model
===========================================

What:  ORM model representing the `boards` table.
Who:   Used by BoardService for CRUD and pin-membership operations.

Table Design Rationale:
    - pins: JSON array of pin ids, kept in insertion order. It mirrors a
      document-style embedded array rather than a join table: membership
      edits are a read-modify-write of the whole list, and ids are not
      checked against the pins table.
    - No duplicate ids in `pins`: enforced by BoardService.add_pin, not here.
    - updated_at: Set by every board write, including a remove_pin that
      filtered nothing out, so that write always reaches the database.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import JSON, DateTime, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.pin import new_id


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Board(Base):
    """
    A named, user-owned, ordered collection of pin references.

    Lifecycle:
        1. Created with pins = []
        2. Mutated by update (title/description), add_pin, remove_pin
        3. Destroyed by delete
    """

    __tablename__ = "boards"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
        comment="Opaque board identifier (UUID4 text)",
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    user: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Owning user id",
    )

    # Always assign a new list; in-place mutation is not tracked
    pins: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Ordered pin ids (no duplicates)",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_boards_user_created_at", "user", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Board(id={self.id}, user='{self.user}', pins={len(self.pins or [])})>"
