"""
Pet Care Core Package

A record-keeping core for pet owners: pets, recurring care routines, care
logs and vet visits, all scoped to the user that owns them.

This package provides:

- SQLAlchemy models for the stored entities (Pet, PetCareRoutine,
  PetCareLog, VetVisit)
- Pydantic request structs, one per remote-callable operation
- Async action handlers with per-user ownership guards
- An action dispatcher producing a uniform success/error envelope
- Database connection and session utilities for PostgreSQL and SQLite

Quick Start:
    >>> from pet_care_core import ActionDispatcher, UserIdentity
    >>> from pet_care_core.database import SessionManager, create_engine
    >>> from pet_care_core.models import Base

    >>> engine = create_engine("sqlite+aiosqlite:///./pet_care.db")
    >>> manager = SessionManager(engine)
    >>> await manager.initialize_database(Base.metadata)

    >>> dispatcher = ActionDispatcher(manager)
    >>> owner = UserIdentity(user_id="user_123")
    >>> created = await dispatcher.dispatch("createPet", {"name": "Bruno"}, owner)
    >>> created["data"]["pet"]["name"]
    'Bruno'

Requirements:
    - Python 3.11+
    - SQLAlchemy 2.0+
    - Pydantic 2.5+
"""

__version__ = "0.1.0"
__license__ = "MIT"

from . import database, exceptions, models, schemas, services, utils
from .actions import ACTIONS, ActionDefinition, ActionDispatcher, get_action
from .database import SessionManager, create_engine, get_session, get_transaction
from .exceptions import (
    ForbiddenException,
    NotFoundException,
    PetCareException,
    UnauthorizedException,
    ValidationException,
)
from .models import Pet, PetCareLog, PetCareRoutine, VetVisit
from .services import UserIdentity

__all__ = [
    # Version and metadata
    "__version__",
    "__license__",
    # Core modules
    "database",
    "exceptions",
    "models",
    "schemas",
    "services",
    "utils",
    # Action surface
    "ACTIONS",
    "ActionDefinition",
    "ActionDispatcher",
    "get_action",
    "UserIdentity",
    # Convenience imports
    "SessionManager",
    "create_engine",
    "get_session",
    "get_transaction",
    "PetCareException",
    "ValidationException",
    "UnauthorizedException",
    "NotFoundException",
    "ForbiddenException",
    "Pet",
    "PetCareRoutine",
    "PetCareLog",
    "VetVisit",
]
