"""
Pytest configuration and fixtures for pet-care-core tests.

Every test gets a fresh in-memory SQLite database with the full schema, two
caller identities and a few small helpers for running handlers and reading
rows back outside the handler's transaction.
"""

from typing import Any, AsyncGenerator, Optional, Type

import pytest
import pytest_asyncio
from sqlalchemy import event

from pet_care_core.actions import ActionDispatcher
from pet_care_core.database.connection import create_engine
from pet_care_core.database.session import SessionManager
from pet_care_core.models import Base
from pet_care_core.schemas import PetCareRoutineCreate, PetCreate
from pet_care_core.services import (
    UserIdentity,
    create_pet,
    create_pet_care_routine,
)

SQLITE_TEST_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def session_manager() -> AsyncGenerator[SessionManager, None]:
    """Session manager bound to a fresh in-memory database."""
    engine = create_engine(SQLITE_TEST_URL)
    manager = SessionManager(engine)
    assert await manager.initialize_database(Base.metadata)

    yield manager

    await manager.close_all_sessions()


@pytest_asyncio.fixture
async def strict_session_manager() -> AsyncGenerator[SessionManager, None]:
    """Like ``session_manager`` but with SQLite foreign key enforcement on."""
    engine = create_engine(SQLITE_TEST_URL)

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    manager = SessionManager(engine)
    assert await manager.initialize_database(Base.metadata)

    yield manager

    await manager.close_all_sessions()


@pytest.fixture
def dispatcher(session_manager: SessionManager) -> ActionDispatcher:
    """Dispatcher running actions against the test database."""
    return ActionDispatcher(session_manager)


@pytest.fixture
def owner() -> UserIdentity:
    return UserIdentity(user_id="user_owner")


@pytest.fixture
def stranger() -> UserIdentity:
    return UserIdentity(user_id="user_stranger")


@pytest.fixture
def run(session_manager: SessionManager):
    """
    Run a handler inside its own committed transaction.

    Example:
        response = await run(create_pet, owner, PetCreate(name="Bruno"))
    """

    async def _run(handler, identity: Optional[UserIdentity], request: Any = None):
        async with session_manager.get_transaction() as session:
            return await handler(session, identity, request)

    return _run


@pytest.fixture
def fetch(session_manager: SessionManager):
    """Load a row by primary key in a separate session, or None."""

    async def _fetch(model: Type[Base], entity_id: str):
        async with session_manager.get_session() as session:
            return await session.get(model, entity_id)

    return _fetch


@pytest.fixture
def make_pet(run):
    """Create a pet for the given identity and return its response struct."""

    async def _make_pet(identity: UserIdentity, name: str = "Bruno", **fields):
        response = await run(create_pet, identity, PetCreate(name=name, **fields))
        return response.data["pet"]

    return _make_pet


@pytest.fixture
def make_routine(run):
    """Create a routine on a pet and return its response struct."""

    async def _make_routine(
        identity: UserIdentity, pet_id: str, name: str = "Morning feeding", **fields
    ):
        response = await run(
            create_pet_care_routine,
            identity,
            PetCareRoutineCreate(pet_id=pet_id, name=name, **fields),
        )
        return response.data["routine"]

    return _make_routine
