"""
Pinboard Backend — Pin Route Handlers
=======================================

What:  POST /api/pins, GET /api/pins/{id}, GET /api/pins/user/{userId}.
How:   Parses the request, delegates to PinService, returns JSON.
       Errors raised by the service are rendered by the global handlers.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import MessageResponse
from app.schemas.pin import PinCreate, PinResponse
from app.services.pin_service import pin_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/pins", tags=["Pins"])


@router.post(
    "",
    status_code=201,
    response_model=PinResponse,
    responses={
        201: {"description": "Pin created", "model": PinResponse},
        500: {"description": "Server error", "model": MessageResponse},
    },
    summary="Create a pin",
)
async def create_pin(
    payload: PinCreate,
    db: AsyncSession = Depends(get_db_session),
) -> PinResponse:
    return await pin_service.create_pin(db=db, payload=payload)


@router.get(
    "/user/{user_id}",
    response_model=List[PinResponse],
    responses={500: {"description": "Server error", "model": MessageResponse}},
    summary="List a user's pins, newest first",
)
async def list_pins_for_user(
    user_id: str,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> List[PinResponse]:
    pins = await pin_service.list_pins_for_user(db=db, user_id=user_id)
    response.headers["X-Total-Count"] = str(len(pins))
    return pins


@router.get(
    "/{pin_id}",
    response_model=PinResponse,
    responses={
        404: {"description": "Pin not found", "model": MessageResponse},
        500: {"description": "Server error", "model": MessageResponse},
    },
    summary="Get a single pin",
)
async def get_pin(
    pin_id: str,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> PinResponse:
    result = await pin_service.get_pin(db=db, pin_id=pin_id)
    # Pins are immutable after creation
    response.headers["Cache-Control"] = "private, max-age=3600"
    return result
