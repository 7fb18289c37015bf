"""
Action handlers for the pet-care-core package.

Every handler takes an open session, the caller's identity and a validated
request struct, and returns an ``ActionResponse``. Handlers never commit;
the caller owns the transaction.
"""

from .care_logs import create_pet_care_log, delete_pet_care_log, list_pet_care_logs
from .care_routines import (
    archive_pet_care_routine,
    create_pet_care_routine,
    list_pet_care_routines,
    update_pet_care_routine,
)
from .identity import UserIdentity, require_user
from .ownership import (
    assert_care_log_ownership,
    assert_owned,
    assert_pet_ownership,
    assert_routine_ownership,
    assert_vet_visit_ownership,
)
from .pets import create_pet, delete_pet, list_pets, update_pet
from .vet_visits import create_vet_visit, delete_vet_visit, list_vet_visits, update_vet_visit

__all__ = [
    # Identity
    "UserIdentity",
    "require_user",
    # Ownership guards
    "assert_owned",
    "assert_pet_ownership",
    "assert_routine_ownership",
    "assert_care_log_ownership",
    "assert_vet_visit_ownership",
    # Pets
    "create_pet",
    "update_pet",
    "delete_pet",
    "list_pets",
    # Care routines
    "create_pet_care_routine",
    "update_pet_care_routine",
    "archive_pet_care_routine",
    "list_pet_care_routines",
    # Care logs
    "create_pet_care_log",
    "list_pet_care_logs",
    "delete_pet_care_log",
    # Vet visits
    "create_vet_visit",
    "update_vet_visit",
    "delete_vet_visit",
    "list_vet_visits",
]
