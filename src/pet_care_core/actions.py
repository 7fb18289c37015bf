"""
Remote-callable action surface for the pet-care-core package.

Each operation name (``createPet``, ``listVetVisits``, ...) maps to a request
struct and a handler. The dispatcher validates raw input against the struct
before anything else runs, executes the handler inside its own transaction,
and turns the outcome into the uniform response envelope:

    {"success": True, "data": {...}}
    {"success": False, "error": {"type": ..., "code": ..., "message": ...}}

Example:
    >>> dispatcher = ActionDispatcher(session_manager)
    >>> await dispatcher.dispatch(
    ...     "createPet", {"name": "Bruno"}, UserIdentity(user_id="user_123")
    ... )
    {'success': True, 'data': {'pet': {...}}}
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Type

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .database.session import SessionManager
from .exceptions import (
    PetCareException,
    SchemaValidationException,
    TransactionException,
    ValidationException,
    create_error_response,
    format_validation_errors,
    log_exception_context,
)
from .schemas import (
    ActionResponse,
    PetCareLogCreate,
    PetCareLogDelete,
    PetCareLogList,
    PetCareRoutineArchive,
    PetCareRoutineCreate,
    PetCareRoutineList,
    PetCareRoutineUpdate,
    PetCreate,
    PetDelete,
    PetList,
    PetUpdate,
    RequestSchema,
    VetVisitCreate,
    VetVisitDelete,
    VetVisitList,
    VetVisitUpdate,
)
from .services import (
    UserIdentity,
    archive_pet_care_routine,
    create_pet,
    create_pet_care_log,
    create_pet_care_routine,
    create_vet_visit,
    delete_pet,
    delete_pet_care_log,
    delete_vet_visit,
    list_pet_care_logs,
    list_pet_care_routines,
    list_pets,
    list_vet_visits,
    require_user,
    update_pet,
    update_pet_care_routine,
    update_vet_visit,
)

logger = logging.getLogger(__name__)

Handler = Callable[
    [AsyncSession, Optional[UserIdentity], Any], Awaitable[ActionResponse]
]


@dataclass(frozen=True)
class ActionDefinition:
    """Binding between an operation name, its request struct and its handler."""

    name: str
    request_schema: Type[RequestSchema]
    handler: Handler

    def parse(self, raw_input: Optional[Mapping[str, Any]]) -> RequestSchema:
        """
        Validate raw input into the request struct.

        Raises:
            SchemaValidationException: With field-level errors on bad input
        """
        if raw_input is None:
            raw_input = {}
        elif isinstance(raw_input, self.request_schema):
            return raw_input
        elif not isinstance(raw_input, Mapping):
            raise ValidationException(
                f"Input for '{self.name}' must be an object",
                value=type(raw_input).__name__,
            )

        try:
            return self.request_schema.model_validate(dict(raw_input))
        except ValidationError as e:
            raise SchemaValidationException(
                f"Invalid input for '{self.name}'",
                schema_name=self.request_schema.__name__,
                validation_errors=format_validation_errors(e.errors()),
            ) from e


ACTIONS: Dict[str, ActionDefinition] = {
    action.name: action
    for action in (
        ActionDefinition("createPet", PetCreate, create_pet),
        ActionDefinition("updatePet", PetUpdate, update_pet),
        ActionDefinition("deletePet", PetDelete, delete_pet),
        ActionDefinition("listPets", PetList, list_pets),
        ActionDefinition(
            "createPetCareRoutine", PetCareRoutineCreate, create_pet_care_routine
        ),
        ActionDefinition(
            "updatePetCareRoutine", PetCareRoutineUpdate, update_pet_care_routine
        ),
        ActionDefinition(
            "archivePetCareRoutine", PetCareRoutineArchive, archive_pet_care_routine
        ),
        ActionDefinition(
            "listPetCareRoutines", PetCareRoutineList, list_pet_care_routines
        ),
        ActionDefinition("createPetCareLog", PetCareLogCreate, create_pet_care_log),
        ActionDefinition("listPetCareLogs", PetCareLogList, list_pet_care_logs),
        ActionDefinition("deletePetCareLog", PetCareLogDelete, delete_pet_care_log),
        ActionDefinition("createVetVisit", VetVisitCreate, create_vet_visit),
        ActionDefinition("updateVetVisit", VetVisitUpdate, update_vet_visit),
        ActionDefinition("deleteVetVisit", VetVisitDelete, delete_vet_visit),
        ActionDefinition("listVetVisits", VetVisitList, list_vet_visits),
    )
}


def get_action(name: str) -> ActionDefinition:
    """
    Look up an operation by name.

    Raises:
        ValidationException: If no operation has that name
    """
    try:
        return ACTIONS[name]
    except KeyError:
        raise ValidationException(f"Unknown action '{name}'", field="action", value=name)


class ActionDispatcher:
    """Runs named operations against a session manager."""

    def __init__(self, session_manager: SessionManager, include_debug: bool = False):
        """
        Args:
            session_manager: Source of per-call transactions
            include_debug: Whether error envelopes carry debug information
        """
        self.session_manager = session_manager
        self.include_debug = include_debug

    async def execute(
        self,
        name: str,
        raw_input: Optional[Mapping[str, Any]],
        identity: Optional[UserIdentity],
    ) -> ActionResponse:
        """
        Run an operation and return its success envelope.

        Input is validated first, then identity is required, and only then is
        a transaction opened.

        Raises:
            PetCareException: For validation, identity, ownership and
                consistency failures, and wrapped database errors
        """
        action = get_action(name)
        request = action.parse(raw_input)
        require_user(identity)

        try:
            async with self.session_manager.get_transaction() as session:
                return await action.handler(session, identity, request)
        except SQLAlchemyError as e:
            logger.error(f"Database operation failed in '{name}': {e}")
            raise TransactionException(
                "Database transaction failed", operation=name, original_error=e
            ) from e

    async def dispatch(
        self,
        name: str,
        raw_input: Optional[Mapping[str, Any]],
        identity: Optional[UserIdentity],
    ) -> Dict[str, Any]:
        """
        Run an operation and return the JSON-ready envelope.

        Package errors become failure envelopes; anything else is logged with
        context and re-raised.
        """
        try:
            response = await self.execute(name, raw_input, identity)
        except PetCareException as e:
            e.log_error(logger, level=logging.WARNING)
            return create_error_response(e, include_debug=self.include_debug)
        except Exception as e:
            log_exception_context(
                e,
                {
                    "action": name,
                    "user_id": identity.user_id if identity else None,
                },
                logger=logger,
            )
            raise

        return response.to_envelope()
