"""
Ownership guards shared by the action handlers.

A guard loads one row filtered by both its id and the caller's user id. A row
that does not exist and a row that belongs to another user both fail the same
way, so callers cannot probe for other users' data.
"""

import logging
from typing import Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NotFoundException
from ..models import OwnedModel, Pet, PetCareLog, PetCareRoutine, VetVisit

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=OwnedModel)

ENTITY_LABELS = {
    Pet: "Pet",
    PetCareRoutine: "Care routine",
    PetCareLog: "Care log",
    VetVisit: "Vet visit",
}


async def assert_owned(
    session: AsyncSession, model: Type[T], entity_id: str, user_id: str
) -> T:
    """
    Fetch a row owned by ``user_id`` or raise.

    Args:
        session: Active database session
        model: Model class of the entity kind
        entity_id: Identifier of the row
        user_id: Identifier of the caller

    Returns:
        The matching row

    Raises:
        NotFoundException: If no row matches both the id and the owner
    """
    result = await session.execute(
        select(model).where(model.id == entity_id, model.owned_by(user_id))
    )
    entity = result.scalars().first()

    if entity is None:
        label = ENTITY_LABELS.get(model, model.__name__)
        logger.debug(f"{label} {entity_id} not found for user {user_id}")
        raise NotFoundException(entity=label)

    return entity


async def assert_pet_ownership(
    session: AsyncSession, pet_id: str, user_id: str
) -> Pet:
    return await assert_owned(session, Pet, pet_id, user_id)


async def assert_routine_ownership(
    session: AsyncSession, routine_id: str, user_id: str
) -> PetCareRoutine:
    return await assert_owned(session, PetCareRoutine, routine_id, user_id)


async def assert_care_log_ownership(
    session: AsyncSession, log_id: str, user_id: str
) -> PetCareLog:
    return await assert_owned(session, PetCareLog, log_id, user_id)


async def assert_vet_visit_ownership(
    session: AsyncSession, visit_id: str, user_id: str
) -> VetVisit:
    return await assert_owned(session, VetVisit, visit_id, user_id)
