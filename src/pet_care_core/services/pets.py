"""
Action handlers for pets.
"""

import logging
from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Pet, generate_id
from ..schemas import (
    ActionResponse,
    PetCreate,
    PetDelete,
    PetList,
    PetResponse,
    PetUpdate,
    list_response,
)
from ..utils.datetime_utils import get_current_utc
from .identity import UserIdentity, require_user
from .ownership import assert_pet_ownership

logger = logging.getLogger(__name__)


async def create_pet(
    session: AsyncSession, identity: Optional[UserIdentity], request: PetCreate
) -> ActionResponse:
    """Create a pet owned by the caller and return it."""
    user = require_user(identity)
    now = get_current_utc()

    pet = Pet(
        id=generate_id(),
        user_id=user.user_id,
        **request.model_dump(),
        created_at=now,
        updated_at=now,
    )
    session.add(pet)
    await session.flush()

    logger.info(f"Created pet {pet.id} for user {user.user_id}")
    return ActionResponse(data={"pet": PetResponse.model_validate(pet)})


async def update_pet(
    session: AsyncSession, identity: Optional[UserIdentity], request: PetUpdate
) -> ActionResponse:
    """
    Apply the fields present in ``request`` to an owned pet.

    Fields that were not sent keep their stored values; ``updated_at`` is
    always bumped.
    """
    user = require_user(identity)
    await assert_pet_ownership(session, request.id, user.user_id)

    updates = request.get_updates()
    updates["updated_at"] = get_current_utc()

    await session.execute(
        update(Pet)
        .where(Pet.id == request.id, Pet.owned_by(user.user_id))
        .values(**updates)
    )

    logger.info(f"Updated pet {request.id} fields {sorted(updates)}")
    return ActionResponse()


async def delete_pet(
    session: AsyncSession, identity: Optional[UserIdentity], request: PetDelete
) -> ActionResponse:
    """
    Delete an owned pet.

    Routines, logs and visits referencing the pet are left in place.
    """
    user = require_user(identity)
    await assert_pet_ownership(session, request.id, user.user_id)

    await session.execute(
        delete(Pet).where(Pet.id == request.id, Pet.owned_by(user.user_id))
    )

    logger.info(f"Deleted pet {request.id} for user {user.user_id}")
    return ActionResponse()


async def list_pets(
    session: AsyncSession,
    identity: Optional[UserIdentity],
    request: Optional[PetList] = None,
) -> ActionResponse:
    """Return every pet owned by the caller, oldest first."""
    user = require_user(identity)

    result = await session.execute(
        select(Pet).where(Pet.owned_by(user.user_id)).order_by(Pet.created_at)
    )
    pets = result.scalars().all()

    return list_response([PetResponse.model_validate(pet) for pet in pets])
