"""
Action handlers for vet visits.
"""

import logging
from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import VetVisit, generate_id
from ..schemas import (
    ActionResponse,
    VetVisitCreate,
    VetVisitDelete,
    VetVisitList,
    VetVisitResponse,
    VetVisitUpdate,
    list_response,
)
from ..utils.datetime_utils import get_current_utc
from .identity import UserIdentity, require_user
from .ownership import assert_pet_ownership, assert_vet_visit_ownership

logger = logging.getLogger(__name__)


async def create_vet_visit(
    session: AsyncSession,
    identity: Optional[UserIdentity],
    request: VetVisitCreate,
) -> ActionResponse:
    """Record a vet visit for one of the caller's pets."""
    user = require_user(identity)
    await assert_pet_ownership(session, request.pet_id, user.user_id)
    now = get_current_utc()

    fields = request.model_dump()
    fields["visit_date"] = request.visit_date or now

    visit = VetVisit(id=generate_id(), user_id=user.user_id, **fields, created_at=now)
    session.add(visit)
    await session.flush()

    logger.info(f"Created vet visit {visit.id} for pet {visit.pet_id}")
    return ActionResponse(data={"visit": VetVisitResponse.model_validate(visit)})


async def update_vet_visit(
    session: AsyncSession,
    identity: Optional[UserIdentity],
    request: VetVisitUpdate,
) -> ActionResponse:
    """
    Apply the fields present in ``request`` to an owned visit.

    Visits have no ``updated_at``, so nothing beyond the sent fields changes.
    """
    user = require_user(identity)
    visit = await assert_vet_visit_ownership(session, request.id, user.user_id)

    updates = request.get_updates()
    target_pet_id = updates.get("pet_id", visit.pet_id)
    await assert_pet_ownership(session, target_pet_id, user.user_id)

    if updates:
        await session.execute(
            update(VetVisit)
            .where(VetVisit.id == request.id, VetVisit.owned_by(user.user_id))
            .values(**updates)
        )

    logger.info(f"Updated vet visit {request.id} fields {sorted(updates)}")
    return ActionResponse()


async def delete_vet_visit(
    session: AsyncSession,
    identity: Optional[UserIdentity],
    request: VetVisitDelete,
) -> ActionResponse:
    """Delete an owned vet visit."""
    user = require_user(identity)
    await assert_vet_visit_ownership(session, request.id, user.user_id)

    await session.execute(
        delete(VetVisit).where(
            VetVisit.id == request.id, VetVisit.owned_by(user.user_id)
        )
    )

    logger.info(f"Deleted vet visit {request.id}")
    return ActionResponse()


async def list_vet_visits(
    session: AsyncSession,
    identity: Optional[UserIdentity],
    request: VetVisitList,
) -> ActionResponse:
    """Return the visits of one owned pet, most recent first."""
    user = require_user(identity)
    await assert_pet_ownership(session, request.pet_id, user.user_id)

    result = await session.execute(
        select(VetVisit)
        .where(VetVisit.pet_id == request.pet_id, VetVisit.owned_by(user.user_id))
        .order_by(VetVisit.visit_date.desc())
    )
    visits = result.scalars().all()

    return list_response([VetVisitResponse.model_validate(visit) for visit in visits])
