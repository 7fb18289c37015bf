"""
Action handlers for care routines.

Routines are archived rather than deleted; there is no hard-delete handler.
"""

import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import PetCareRoutine, generate_id
from ..schemas import (
    ActionResponse,
    PetCareRoutineArchive,
    PetCareRoutineCreate,
    PetCareRoutineList,
    PetCareRoutineResponse,
    PetCareRoutineUpdate,
    list_response,
)
from ..utils.datetime_utils import get_current_utc
from .identity import UserIdentity, require_user
from .ownership import assert_pet_ownership, assert_routine_ownership

logger = logging.getLogger(__name__)


async def create_pet_care_routine(
    session: AsyncSession,
    identity: Optional[UserIdentity],
    request: PetCareRoutineCreate,
) -> ActionResponse:
    """Create an active routine for one of the caller's pets."""
    user = require_user(identity)
    await assert_pet_ownership(session, request.pet_id, user.user_id)
    now = get_current_utc()

    routine = PetCareRoutine(
        id=generate_id(),
        user_id=user.user_id,
        **request.model_dump(),
        is_active=True,
        created_at=now,
        updated_at=now,
    )
    session.add(routine)
    await session.flush()

    logger.info(f"Created care routine {routine.id} for pet {routine.pet_id}")
    return ActionResponse(data={"routine": PetCareRoutineResponse.model_validate(routine)})


async def update_pet_care_routine(
    session: AsyncSession,
    identity: Optional[UserIdentity],
    request: PetCareRoutineUpdate,
) -> ActionResponse:
    """
    Apply the fields present in ``request`` to an owned routine.

    The pet the routine ends up attached to, new or unchanged, must also be
    owned by the caller.
    """
    user = require_user(identity)
    routine = await assert_routine_ownership(session, request.id, user.user_id)

    updates = request.get_updates()
    target_pet_id = updates.get("pet_id", routine.pet_id)
    await assert_pet_ownership(session, target_pet_id, user.user_id)

    updates["updated_at"] = get_current_utc()

    await session.execute(
        update(PetCareRoutine)
        .where(
            PetCareRoutine.id == request.id,
            PetCareRoutine.owned_by(user.user_id),
        )
        .values(**updates)
    )

    logger.info(f"Updated care routine {request.id} fields {sorted(updates)}")
    return ActionResponse()


async def archive_pet_care_routine(
    session: AsyncSession,
    identity: Optional[UserIdentity],
    request: PetCareRoutineArchive,
) -> ActionResponse:
    """Mark an owned routine inactive. Archiving twice is harmless."""
    user = require_user(identity)
    await assert_routine_ownership(session, request.id, user.user_id)

    await session.execute(
        update(PetCareRoutine)
        .where(
            PetCareRoutine.id == request.id,
            PetCareRoutine.owned_by(user.user_id),
        )
        .values(is_active=False, updated_at=get_current_utc())
    )

    logger.info(f"Archived care routine {request.id}")
    return ActionResponse()


async def list_pet_care_routines(
    session: AsyncSession,
    identity: Optional[UserIdentity],
    request: Optional[PetCareRoutineList] = None,
) -> ActionResponse:
    """
    List the caller's routines.

    Archived routines are hidden unless ``include_inactive`` is set. An
    unknown ``pet_id`` simply yields an empty list.
    """
    user = require_user(identity)
    request = request or PetCareRoutineList()

    stmt = select(PetCareRoutine).where(PetCareRoutine.owned_by(user.user_id))
    if request.pet_id:
        stmt = stmt.where(PetCareRoutine.pet_id == request.pet_id)
    if not request.include_inactive:
        stmt = stmt.where(PetCareRoutine.is_active.is_(True))

    result = await session.execute(stmt.order_by(PetCareRoutine.created_at))
    routines = result.scalars().all()

    return list_response(
        [PetCareRoutineResponse.model_validate(routine) for routine in routines]
    )
