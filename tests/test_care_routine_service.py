"""
Tests for the care routine action handlers.
"""

import pytest

from pet_care_core.exceptions import NotFoundException, UnauthorizedException
from pet_care_core.models import PetCareRoutine
from pet_care_core.schemas import (
    PetCareRoutineArchive,
    PetCareRoutineCreate,
    PetCareRoutineList,
    PetCareRoutineUpdate,
)
from pet_care_core.services import (
    archive_pet_care_routine,
    create_pet_care_routine,
    list_pet_care_routines,
    update_pet_care_routine,
)


class TestCreateRoutine:
    """Test cases for createPetCareRoutine."""

    @pytest.mark.asyncio
    async def test_create_routine(self, run, owner, make_pet):
        pet = await make_pet(owner)

        response = await run(
            create_pet_care_routine,
            owner,
            PetCareRoutineCreate(
                pet_id=pet.id,
                name="Morning feeding",
                frequency="daily",
                time_of_day_local="07:30",
                days_of_week=["Mon", "Wed"],
            ),
        )

        routine = response.data["routine"]
        assert routine.pet_id == pet.id
        assert routine.user_id == owner.user_id
        assert routine.is_active is True
        assert routine.days_of_week == ["mon", "wed"]

    @pytest.mark.asyncio
    async def test_create_for_other_users_pet(self, run, owner, stranger, make_pet):
        pet = await make_pet(owner)

        with pytest.raises(NotFoundException, match="Pet not found."):
            await run(
                create_pet_care_routine,
                stranger,
                PetCareRoutineCreate(pet_id=pet.id, name="Walk"),
            )

        response = await run(
            list_pet_care_routines, owner, PetCareRoutineList(include_inactive=True)
        )
        assert response.data["total"] == 0


class TestUpdateRoutine:
    """Test cases for updatePetCareRoutine."""

    @pytest.mark.asyncio
    async def test_partial_update(self, run, fetch, owner, make_pet, make_routine):
        pet = await make_pet(owner)
        routine = await make_routine(
            owner, pet.id, frequency="daily", days_of_week=["mon", "tue"]
        )

        await run(
            update_pet_care_routine,
            owner,
            PetCareRoutineUpdate(id=routine.id, days_of_week=["sat"]),
        )

        stored = await fetch(PetCareRoutine, routine.id)
        assert stored.days_of_week == ["sat"]
        assert stored.frequency == "daily"
        assert stored.name == "Morning feeding"
        assert stored.updated_at >= stored.created_at

    @pytest.mark.asyncio
    async def test_move_to_another_owned_pet(
        self, run, fetch, owner, make_pet, make_routine
    ):
        first = await make_pet(owner, name="Bruno")
        second = await make_pet(owner, name="Luna")
        routine = await make_routine(owner, first.id)

        await run(
            update_pet_care_routine,
            owner,
            PetCareRoutineUpdate(id=routine.id, pet_id=second.id),
        )

        assert (await fetch(PetCareRoutine, routine.id)).pet_id == second.id

    @pytest.mark.asyncio
    async def test_move_to_other_users_pet(
        self, run, fetch, owner, stranger, make_pet, make_routine
    ):
        pet = await make_pet(owner)
        foreign_pet = await make_pet(stranger, name="Whiskers")
        routine = await make_routine(owner, pet.id)

        with pytest.raises(NotFoundException, match="Pet not found."):
            await run(
                update_pet_care_routine,
                owner,
                PetCareRoutineUpdate(id=routine.id, pet_id=foreign_pet.id, name="X"),
            )

        stored = await fetch(PetCareRoutine, routine.id)
        assert stored.pet_id == pet.id
        assert stored.name == "Morning feeding"

    @pytest.mark.asyncio
    async def test_update_other_users_routine(
        self, run, owner, stranger, make_pet, make_routine
    ):
        pet = await make_pet(owner)
        routine = await make_routine(owner, pet.id)

        with pytest.raises(NotFoundException, match="Care routine not found."):
            await run(
                update_pet_care_routine,
                stranger,
                PetCareRoutineUpdate(id=routine.id, name="Mine now"),
            )

    @pytest.mark.asyncio
    async def test_reactivate_through_update(
        self, run, fetch, owner, make_pet, make_routine
    ):
        pet = await make_pet(owner)
        routine = await make_routine(owner, pet.id)
        await run(archive_pet_care_routine, owner, PetCareRoutineArchive(id=routine.id))

        await run(
            update_pet_care_routine,
            owner,
            PetCareRoutineUpdate(id=routine.id, is_active=True),
        )

        assert (await fetch(PetCareRoutine, routine.id)).is_active is True


class TestArchiveRoutine:
    """Test cases for archivePetCareRoutine."""

    @pytest.mark.asyncio
    async def test_archive_is_idempotent(
        self, run, fetch, owner, make_pet, make_routine
    ):
        pet = await make_pet(owner)
        routine = await make_routine(owner, pet.id)
        request = PetCareRoutineArchive(id=routine.id)

        first = await run(archive_pet_care_routine, owner, request)
        second = await run(archive_pet_care_routine, owner, request)

        assert first.success and second.success
        stored = await fetch(PetCareRoutine, routine.id)
        assert stored.is_active is False
        assert stored.is_archived

    @pytest.mark.asyncio
    async def test_archive_other_users_routine(
        self, run, fetch, owner, stranger, make_pet, make_routine
    ):
        pet = await make_pet(owner)
        routine = await make_routine(owner, pet.id)

        with pytest.raises(NotFoundException):
            await run(
                archive_pet_care_routine, stranger, PetCareRoutineArchive(id=routine.id)
            )

        assert (await fetch(PetCareRoutine, routine.id)).is_active is True


class TestListRoutines:
    """Test cases for listPetCareRoutines."""

    @pytest.mark.asyncio
    async def test_filters(self, run, owner, stranger, make_pet, make_routine):
        bruno = await make_pet(owner, name="Bruno")
        luna = await make_pet(owner, name="Luna")
        whiskers = await make_pet(stranger, name="Whiskers")
        feeding = await make_routine(owner, bruno.id, name="Feeding")
        walk = await make_routine(owner, bruno.id, name="Walk")
        await make_routine(owner, luna.id, name="Brushing")
        await make_routine(stranger, whiskers.id, name="Litter")
        await run(archive_pet_care_routine, owner, PetCareRoutineArchive(id=walk.id))

        everything = await run(list_pet_care_routines, owner)
        for_bruno = await run(
            list_pet_care_routines, owner, PetCareRoutineList(pet_id=bruno.id)
        )
        with_archived = await run(
            list_pet_care_routines,
            owner,
            PetCareRoutineList(pet_id=bruno.id, include_inactive=True),
        )

        assert [r.name for r in everything.data["items"]] == ["Feeding", "Brushing"]
        assert [r.id for r in for_bruno.data["items"]] == [feeding.id]
        assert [r.name for r in with_archived.data["items"]] == ["Feeding", "Walk"]
        assert with_archived.data["total"] == 2

    @pytest.mark.asyncio
    async def test_unknown_pet_gives_empty_list(self, run, owner):
        response = await run(
            list_pet_care_routines, owner, PetCareRoutineList(pet_id="no-such-pet")
        )

        assert response.data == {"items": [], "total": 0}

    @pytest.mark.asyncio
    async def test_requires_identity(self, run):
        with pytest.raises(UnauthorizedException):
            await run(list_pet_care_routines, None, PetCareRoutineList())
