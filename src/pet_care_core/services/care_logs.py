"""
Action handlers for care logs.

Logs are append/delete only. A log tied to a routine must be for the same
pet as that routine.
"""

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ForbiddenException
from ..models import PetCareLog, generate_id
from ..schemas import (
    ActionResponse,
    PetCareLogCreate,
    PetCareLogDelete,
    PetCareLogList,
    PetCareLogResponse,
    list_response,
)
from ..utils.datetime_utils import get_current_utc
from .identity import UserIdentity, require_user
from .ownership import (
    assert_care_log_ownership,
    assert_pet_ownership,
    assert_routine_ownership,
)

logger = logging.getLogger(__name__)


async def create_pet_care_log(
    session: AsyncSession,
    identity: Optional[UserIdentity],
    request: PetCareLogCreate,
) -> ActionResponse:
    """
    Record a care log for one of the caller's pets.

    Raises:
        NotFoundException: If the pet or the routine is not the caller's
        ForbiddenException: If the routine belongs to a different pet
    """
    user = require_user(identity)
    await assert_pet_ownership(session, request.pet_id, user.user_id)

    if request.routine_id:
        routine = await assert_routine_ownership(
            session, request.routine_id, user.user_id
        )
        if routine.pet_id != request.pet_id:
            raise ForbiddenException(
                "Routine does not belong to this pet.",
                rule_name="routine_pet_match",
                context={"routine_id": routine.id, "pet_id": request.pet_id},
            )

    now = get_current_utc()
    log = PetCareLog(
        id=generate_id(),
        pet_id=request.pet_id,
        routine_id=request.routine_id,
        user_id=user.user_id,
        log_date_time=request.log_date_time or now,
        status=request.status,
        notes=request.notes,
        created_at=now,
    )
    session.add(log)
    await session.flush()

    logger.info(f"Created care log {log.id} for pet {log.pet_id}")
    return ActionResponse(data={"log": PetCareLogResponse.model_validate(log)})


async def list_pet_care_logs(
    session: AsyncSession,
    identity: Optional[UserIdentity],
    request: PetCareLogList,
) -> ActionResponse:
    """Return the logs of one owned pet, most recent first."""
    user = require_user(identity)
    await assert_pet_ownership(session, request.pet_id, user.user_id)

    result = await session.execute(
        select(PetCareLog)
        .where(
            PetCareLog.pet_id == request.pet_id,
            PetCareLog.owned_by(user.user_id),
        )
        .order_by(PetCareLog.log_date_time.desc())
    )
    logs = result.scalars().all()

    return list_response([PetCareLogResponse.model_validate(log) for log in logs])


async def delete_pet_care_log(
    session: AsyncSession,
    identity: Optional[UserIdentity],
    request: PetCareLogDelete,
) -> ActionResponse:
    """Delete an owned care log."""
    user = require_user(identity)
    await assert_care_log_ownership(session, request.id, user.user_id)

    await session.execute(
        delete(PetCareLog).where(
            PetCareLog.id == request.id, PetCareLog.owned_by(user.user_id)
        )
    )

    logger.info(f"Deleted care log {request.id}")
    return ActionResponse()
