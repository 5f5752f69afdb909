"""
Pinboard Backend — Board Service
==================================

What:  Business logic for boards: CRUD plus the pin-membership list.
Who:   Called by the /api/boards route handlers.

Persistence Pattern:
    Each operation does at most one read and at most one write of the board
    row. get_board additionally reads the referenced pins to expand them.
    There is no locking: two concurrent add_pin/remove_pin calls on the same
    board both read the old list and the later write wins.

Membership Rules (board, pin):
    add_pin     ABSENT  → PRESENT   write
                PRESENT → PRESENT   no write (flush is never called)
    remove_pin  PRESENT → ABSENT    write
                ABSENT  → ABSENT    write anyway (updated_at still moves)

    add_pin and remove_pin are kept as two separate code paths so the
    elided write on a repeated add stays observable.

Error Handling:
    NotFoundError propagates as-is (→ 404). Any other exception from the
    session is logged once with the operation tag and converted to
    DatabaseError (→ 500 "Server error").
"""

import logging
from typing import List, Sequence

from sqlalchemy import delete, desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, NotFoundError
from app.models.board import Board, utcnow
from app.models.pin import Pin
from app.schemas.board import (
    BoardCreate,
    BoardDetailResponse,
    BoardResponse,
    BoardUpdate,
)
from app.schemas.common import MessageResponse
from app.schemas.pin import PinResponse

logger = logging.getLogger(__name__)

# The only board fields a PUT may write
UPDATABLE_FIELDS = {"title", "description"}


class BoardService:
    """
    Stateless board operations; the session is passed in on every call.
    """

    async def list_boards_for_user(self, db: AsyncSession, user_id: str) -> List[BoardResponse]:
        """
        Boards owned by `user_id`, newest first.

        Query plan:
            SELECT * FROM boards WHERE user = :user_id ORDER BY created_at DESC
            → idx_boards_user_created_at
        """
        try:
            result = await db.execute(
                select(Board)
                .where(Board.user == user_id)
                .order_by(desc(Board.created_at))
            )
            return [BoardResponse.model_validate(board) for board in result.scalars().all()]

        except Exception as e:
            logger.error("Get boards error: %s", e, exc_info=True)
            raise DatabaseError(context={"operation": "list_boards", "user_id": user_id})

    async def get_board(self, db: AsyncSession, board_id: str) -> BoardDetailResponse:
        """
        Retrieve a board with its pin ids expanded to full pin records.

        Pins come back in board order. Ids that no longer match a pin are
        left out of the response (they stay in the stored list).

        Raises:
            NotFoundError: No board with this id (→ 404)
            DatabaseError: Either query failed (→ 500)
        """
        try:
            board = await db.get(Board, board_id)
            if board is None:
                raise NotFoundError(resource="Board", resource_id=board_id)

            pins = await self._load_pins(db, board.pins)
            return BoardDetailResponse(
                id=board.id,
                title=board.title,
                description=board.description,
                user=board.user,
                pins=pins,
                created_at=board.created_at,
                updated_at=board.updated_at,
            )

        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Get board error: %s", e, exc_info=True)
            raise DatabaseError(context={"operation": "get_board", "board_id": board_id})

    async def create_board(self, db: AsyncSession, payload: BoardCreate) -> BoardResponse:
        """Persist a new, empty board for `payload.user_id`."""
        try:
            board = Board(
                title=payload.title,
                description=payload.description,
                user=payload.user_id,
                pins=[],
            )
            db.add(board)
            await db.flush()
            logger.info("Board %s created for user %s", board.id, board.user)
            return BoardResponse.model_validate(board)

        except Exception as e:
            logger.error("Create board error: %s", e, exc_info=True)
            raise DatabaseError(context={"operation": "create_board"})

    async def update_board(
        self, db: AsyncSession, board_id: str, payload: BoardUpdate
    ) -> BoardResponse:
        """
        Write title and/or description, whichever the client supplied.

        The projection below is the whitelist: `user`, `pins` and anything
        else never reach the UPDATE. With nothing to write, the current board
        is returned without touching it.

        Raises:
            NotFoundError: No board with this id (→ 404)
            DatabaseError: The update failed (→ 500)
        """
        fields = payload.model_dump(include=UPDATABLE_FIELDS, exclude_unset=True)

        try:
            if not fields:
                board = await db.get(Board, board_id)
            else:
                result = await db.execute(
                    update(Board)
                    .where(Board.id == board_id)
                    .values(**fields)
                    .returning(Board)
                    .execution_options(populate_existing=True)
                )
                board = result.scalar_one_or_none()

            if board is None:
                raise NotFoundError(resource="Board", resource_id=board_id)

            logger.info("Board %s updated: %s", board_id, sorted(fields))
            return BoardResponse.model_validate(board)

        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Update board error: %s", e, exc_info=True)
            raise DatabaseError(context={"operation": "update_board", "board_id": board_id})

    async def delete_board(self, db: AsyncSession, board_id: str) -> MessageResponse:
        """
        Remove a board. Its pins are untouched.

        Raises:
            NotFoundError: No board with this id (→ 404)
            DatabaseError: The delete failed (→ 500)
        """
        try:
            result = await db.execute(
                delete(Board).where(Board.id == board_id).returning(Board.id)
            )
            if result.scalar_one_or_none() is None:
                raise NotFoundError(resource="Board", resource_id=board_id)

            logger.info("Board %s deleted", board_id)
            return MessageResponse(message="Board deleted")

        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Delete board error: %s", e, exc_info=True)
            raise DatabaseError(context={"operation": "delete_board", "board_id": board_id})

    async def add_pin(self, db: AsyncSession, board_id: str, pin_id: str) -> BoardResponse:
        """
        Append `pin_id` to the board's pins unless it is already there.

        A repeated add returns the board as loaded and does not flush. The pin
        id is not checked against the pins table.

        Raises:
            NotFoundError: No board with this id (→ 404)
            DatabaseError: The lookup or the write failed (→ 500)
        """
        try:
            board = await db.get(Board, board_id)
            if board is None:
                raise NotFoundError(resource="Board", resource_id=board_id)

            if pin_id in board.pins:
                return BoardResponse.model_validate(board)

            board.pins = [*board.pins, pin_id]
            board.updated_at = utcnow()
            await db.flush()
            logger.info("Pin %s added to board %s", pin_id, board_id)
            return BoardResponse.model_validate(board)

        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Add pin to board error: %s", e, exc_info=True)
            raise DatabaseError(context={"operation": "add_pin", "board_id": board_id})

    async def remove_pin(self, db: AsyncSession, board_id: str, pin_id: str) -> BoardResponse:
        """
        Filter `pin_id` out of the board's pins and save, whether or not it
        was present.

        Raises:
            NotFoundError: No board with this id (→ 404)
            DatabaseError: The lookup or the write failed (→ 500)
        """
        try:
            board = await db.get(Board, board_id)
            if board is None:
                raise NotFoundError(resource="Board", resource_id=board_id)

            board.pins = [p for p in board.pins if p != pin_id]
            board.updated_at = utcnow()
            await db.flush()
            logger.info("Pin %s removed from board %s", pin_id, board_id)
            return BoardResponse.model_validate(board)

        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Remove pin from board error: %s", e, exc_info=True)
            raise DatabaseError(context={"operation": "remove_pin", "board_id": board_id})

    async def _load_pins(self, db: AsyncSession, pin_ids: Sequence[str]) -> List[PinResponse]:
        if not pin_ids:
            return []
        result = await db.execute(select(Pin).where(Pin.id.in_(pin_ids)))
        by_id = {pin.id: pin for pin in result.scalars().all()}
        return [PinResponse.model_validate(by_id[pid]) for pid in pin_ids if pid in by_id]


# ── Singleton Instance ────────────────────────────────────────────────────
board_service = BoardService()
