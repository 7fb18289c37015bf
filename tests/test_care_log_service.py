"""
Tests for the care log action handlers.
"""

from datetime import datetime, timedelta

import pytest

from pet_care_core.exceptions import ForbiddenException, NotFoundException
from pet_care_core.models import CareLogStatus, PetCareLog
from pet_care_core.schemas import PetCareLogCreate, PetCareLogDelete, PetCareLogList
from pet_care_core.services import (
    create_pet_care_log,
    delete_pet_care_log,
    list_pet_care_logs,
)
from pet_care_core.utils import UTC, get_current_utc


class TestCreateCareLog:
    """Test cases for createPetCareLog."""

    @pytest.mark.asyncio
    async def test_create_without_routine(self, run, owner, make_pet):
        pet = await make_pet(owner)
        before = get_current_utc()

        response = await run(
            create_pet_care_log,
            owner,
            PetCareLogCreate(pet_id=pet.id, status="done", notes="Ate everything"),
        )

        log = response.data["log"]
        assert log.pet_id == pet.id
        assert log.routine_id is None
        assert log.status == CareLogStatus.DONE.value
        assert before <= log.log_date_time <= get_current_utc()
        assert log.log_date_time == log.created_at

    @pytest.mark.asyncio
    async def test_create_with_matching_routine(
        self, run, owner, make_pet, make_routine
    ):
        pet = await make_pet(owner)
        routine = await make_routine(owner, pet.id)

        response = await run(
            create_pet_care_log,
            owner,
            PetCareLogCreate(
                pet_id=pet.id,
                routine_id=routine.id,
                log_date_time="2024-03-01T07:00:00Z",
            ),
        )

        log = response.data["log"]
        assert log.routine_id == routine.id
        assert log.log_date_time == datetime(2024, 3, 1, 7, 0, tzinfo=UTC)

    @pytest.mark.asyncio
    async def test_routine_of_another_pet_is_forbidden(
        self, run, owner, make_pet, make_routine
    ):
        bruno = await make_pet(owner, name="Bruno")
        luna = await make_pet(owner, name="Luna")
        routine = await make_routine(owner, bruno.id)

        with pytest.raises(ForbiddenException) as exc_info:
            await run(
                create_pet_care_log,
                owner,
                PetCareLogCreate(pet_id=luna.id, routine_id=routine.id),
            )

        assert exc_info.value.error_code == "FORBIDDEN"
        assert exc_info.value.message == "Routine does not belong to this pet."
        for pet in (bruno, luna):
            logs = await run(list_pet_care_logs, owner, PetCareLogList(pet_id=pet.id))
            assert logs.data["total"] == 0

    @pytest.mark.asyncio
    async def test_other_users_routine_looks_missing(
        self, run, owner, stranger, make_pet, make_routine
    ):
        pet = await make_pet(owner)
        foreign_pet = await make_pet(stranger, name="Whiskers")
        foreign_routine = await make_routine(stranger, foreign_pet.id)

        with pytest.raises(NotFoundException, match="Care routine not found."):
            await run(
                create_pet_care_log,
                owner,
                PetCareLogCreate(pet_id=pet.id, routine_id=foreign_routine.id),
            )

    @pytest.mark.asyncio
    async def test_other_users_pet_looks_missing(
        self, run, owner, stranger, make_pet
    ):
        pet = await make_pet(owner)

        with pytest.raises(NotFoundException, match="Pet not found."):
            await run(create_pet_care_log, stranger, PetCareLogCreate(pet_id=pet.id))


class TestListCareLogs:
    """Test cases for listPetCareLogs."""

    @pytest.mark.asyncio
    async def test_most_recent_first(self, run, owner, make_pet):
        pet = await make_pet(owner)
        base = datetime(2024, 3, 1, 7, 0, tzinfo=UTC)
        for offset in (0, 2, 1):
            await run(
                create_pet_care_log,
                owner,
                PetCareLogCreate(
                    pet_id=pet.id, log_date_time=base + timedelta(days=offset)
                ),
            )

        response = await run(list_pet_care_logs, owner, PetCareLogList(pet_id=pet.id))

        times = [log.log_date_time for log in response.data["items"]]
        assert times == [
            base + timedelta(days=2),
            base + timedelta(days=1),
            base,
        ]

    @pytest.mark.asyncio
    async def test_only_requested_pet(self, run, owner, make_pet):
        bruno = await make_pet(owner, name="Bruno")
        luna = await make_pet(owner, name="Luna")
        await run(create_pet_care_log, owner, PetCareLogCreate(pet_id=bruno.id))
        await run(create_pet_care_log, owner, PetCareLogCreate(pet_id=luna.id))

        response = await run(list_pet_care_logs, owner, PetCareLogList(pet_id=luna.id))

        assert [log.pet_id for log in response.data["items"]] == [luna.id]

    @pytest.mark.asyncio
    async def test_other_users_pet(self, run, owner, stranger, make_pet):
        pet = await make_pet(owner)

        with pytest.raises(NotFoundException):
            await run(list_pet_care_logs, stranger, PetCareLogList(pet_id=pet.id))


class TestDeleteCareLog:
    """Test cases for deletePetCareLog."""

    @pytest.mark.asyncio
    async def test_delete(self, run, fetch, owner, make_pet):
        pet = await make_pet(owner)
        created = await run(create_pet_care_log, owner, PetCareLogCreate(pet_id=pet.id))
        log_id = created.data["log"].id

        await run(delete_pet_care_log, owner, PetCareLogDelete(id=log_id))

        assert await fetch(PetCareLog, log_id) is None

    @pytest.mark.asyncio
    async def test_delete_other_users_log(self, run, fetch, owner, stranger, make_pet):
        pet = await make_pet(owner)
        created = await run(create_pet_care_log, owner, PetCareLogCreate(pet_id=pet.id))
        log_id = created.data["log"].id

        with pytest.raises(NotFoundException, match="Care log not found."):
            await run(delete_pet_care_log, stranger, PetCareLogDelete(id=log_id))

        assert await fetch(PetCareLog, log_id) is not None
