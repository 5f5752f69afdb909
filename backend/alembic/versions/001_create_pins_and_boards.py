"""Create pins and boards tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates `pins` and `boards`.
How:   boards.pins is a JSON array of pin ids, not a foreign-key join table;
       see app/models/board.py.

Rollback: downgrade() drops both tables (all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "pins",
        sa.Column("id", sa.String(36), nullable=False, comment="Opaque pin identifier (UUID4 text)"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "image_url",
            sa.String(2048),
            nullable=False,
            comment="Image URL as submitted by the client",
        ),
        sa.Column("user", sa.String(64), nullable=False, comment="Owning user id"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_pins_user_created_at",
        "pins",
        ["user", sa.text("created_at DESC")],
    )

    op.create_table(
        "boards",
        sa.Column("id", sa.String(36), nullable=False, comment="Opaque board identifier (UUID4 text)"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("user", sa.String(64), nullable=False, comment="Owning user id"),
        sa.Column("pins", sa.JSON(), nullable=False, comment="Ordered pin ids (no duplicates)"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_boards_user_created_at",
        "boards",
        ["user", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    op.drop_index("idx_boards_user_created_at", table_name="boards")
    op.drop_table("boards")
    op.drop_index("idx_pins_user_created_at", table_name="pins")
    op.drop_table("pins")
