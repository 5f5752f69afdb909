"""
Pinboard Backend — Board Route Handlers
=========================================

What:  Board CRUD and pin-membership endpoints under /api/boards.
How:   Extracts path params and bodies, delegates to BoardService, returns JSON.

Route Inventory:
    GET    /api/boards/user/{userId}        list a user's boards (newest first)
    GET    /api/boards/{id}                 board with pins expanded
    POST   /api/boards                      create
    PUT    /api/boards/{id}                 update title/description
    DELETE /api/boards/{id}                 delete
    POST   /api/boards/{id}/pins            add a pin (no write if already present)
    DELETE /api/boards/{id}/pins/{pinId}    remove a pin (always writes)

Caching:
    Boards are mutable, so GET responses are marked no-cache.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.board import (
    BoardCreate,
    BoardDetailResponse,
    BoardPinAdd,
    BoardResponse,
    BoardUpdate,
)
from app.schemas.common import MessageResponse
from app.services.board_service import board_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/boards", tags=["Boards"])

NOT_FOUND = {"description": "Board not found", "model": MessageResponse}
SERVER_ERROR = {"description": "Server error", "model": MessageResponse}


@router.get(
    "/user/{user_id}",
    response_model=List[BoardResponse],
    responses={500: SERVER_ERROR},
    summary="List a user's boards, newest first",
)
async def list_boards_for_user(
    user_id: str,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> List[BoardResponse]:
    boards = await board_service.list_boards_for_user(db=db, user_id=user_id)
    response.headers["X-Total-Count"] = str(len(boards))
    response.headers["Cache-Control"] = "no-cache"
    return boards


@router.get(
    "/{board_id}",
    response_model=BoardDetailResponse,
    responses={404: NOT_FOUND, 500: SERVER_ERROR},
    summary="Get a board with its pins expanded",
)
async def get_board(
    board_id: str,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> BoardDetailResponse:
    result = await board_service.get_board(db=db, board_id=board_id)
    response.headers["Cache-Control"] = "no-cache"
    return result


@router.post(
    "",
    status_code=201,
    response_model=BoardResponse,
    responses={500: SERVER_ERROR},
    summary="Create a board",
)
async def create_board(
    payload: BoardCreate,
    db: AsyncSession = Depends(get_db_session),
) -> BoardResponse:
    return await board_service.create_board(db=db, payload=payload)


@router.put(
    "/{board_id}",
    response_model=BoardResponse,
    responses={404: NOT_FOUND, 500: SERVER_ERROR},
    summary="Update a board's title and/or description",
    description="Only title and description are written; other keys in the body are ignored.",
)
async def update_board(
    board_id: str,
    payload: BoardUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> BoardResponse:
    return await board_service.update_board(db=db, board_id=board_id, payload=payload)


@router.delete(
    "/{board_id}",
    response_model=MessageResponse,
    responses={404: NOT_FOUND, 500: SERVER_ERROR},
    summary="Delete a board",
)
async def delete_board(
    board_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await board_service.delete_board(db=db, board_id=board_id)


@router.post(
    "/{board_id}/pins",
    response_model=BoardResponse,
    responses={404: NOT_FOUND, 500: SERVER_ERROR},
    summary="Add a pin to a board",
)
async def add_pin_to_board(
    board_id: str,
    payload: BoardPinAdd,
    db: AsyncSession = Depends(get_db_session),
) -> BoardResponse:
    return await board_service.add_pin(db=db, board_id=board_id, pin_id=payload.pin_id)


@router.delete(
    "/{board_id}/pins/{pin_id}",
    response_model=BoardResponse,
    responses={404: NOT_FOUND, 500: SERVER_ERROR},
    summary="Remove a pin from a board",
)
async def remove_pin_from_board(
    board_id: str,
    pin_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> BoardResponse:
    return await board_service.remove_pin(db=db, board_id=board_id, pin_id=pin_id)
