"""
Pinboard Backend — Pin Service
================================

What:  Business logic for pin records: create, fetch one, list a user's pins.
Who:   Called by the /api/pins route handlers.

Error Handling:
    Every method wraps its persistence calls in one try block. A missing pin
    becomes NotFoundError; anything else raised by the session is logged once
    with the operation tag ("Create pin error:", ...) and re-raised as
    DatabaseError, which the global handler renders as a generic 500.
"""

import logging
from typing import List

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, NotFoundError
from app.models.pin import Pin
from app.schemas.pin import PinCreate, PinResponse

logger = logging.getLogger(__name__)


class PinService:
    """
    Stateless pin operations; the session is passed in on every call.
    """

    async def create_pin(self, db: AsyncSession, payload: PinCreate) -> PinResponse:
        """
        Persist a new pin built from the four submitted fields.

        `user_id` from the request becomes the `user` column. No validation
        beyond the request schema happens here: NOT NULL and length limits
        are left to the database.

        Raises:
            DatabaseError: The insert failed for any reason (→ 500)
        """
        try:
            pin = Pin(
                title=payload.title,
                description=payload.description,
                image_url=payload.image_url,
                user=payload.user_id,
            )
            db.add(pin)
            await db.flush()  # Assigns defaults and surfaces constraint errors now
            logger.info("Pin %s created for user %s", pin.id, pin.user)
            return PinResponse.model_validate(pin)

        except Exception as e:
            logger.error("Create pin error: %s", e, exc_info=True)
            raise DatabaseError(context={"operation": "create_pin"})

    async def get_pin(self, db: AsyncSession, pin_id: str) -> PinResponse:
        """
        Retrieve a single pin by id.

        Raises:
            NotFoundError: No pin with this id (→ 404)
            DatabaseError: Lookup failed (→ 500)
        """
        try:
            pin = await db.get(Pin, pin_id)
            if pin is None:
                raise NotFoundError(resource="Pin", resource_id=pin_id)
            return PinResponse.model_validate(pin)

        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Get pin error: %s", e, exc_info=True)
            raise DatabaseError(context={"operation": "get_pin", "pin_id": pin_id})

    async def list_pins_for_user(self, db: AsyncSession, user_id: str) -> List[PinResponse]:
        """All pins owned by `user_id`, newest first. An empty list is not an error."""
        try:
            result = await db.execute(
                select(Pin)
                .where(Pin.user == user_id)
                .order_by(desc(Pin.created_at))
            )
            return [PinResponse.model_validate(pin) for pin in result.scalars().all()]

        except Exception as e:
            logger.error("Get pins error: %s", e, exc_info=True)
            raise DatabaseError(context={"operation": "list_pins", "user_id": user_id})


# ── Singleton Instance ────────────────────────────────────────────────────
pin_service = PinService()
