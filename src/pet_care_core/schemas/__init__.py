"""
Pydantic schemas for data validation and serialization.

This module contains one request struct per remote-callable operation and the
response representations of each stored entity.
"""

from .care_log import (
    PetCareLogCreate,
    PetCareLogDelete,
    PetCareLogList,
    PetCareLogResponse,
)
from .care_routine import (
    PetCareRoutineArchive,
    PetCareRoutineCreate,
    PetCareRoutineList,
    PetCareRoutineResponse,
    PetCareRoutineUpdate,
)
from .common import (
    ActionResponse,
    RequestSchema,
    ResponseSchema,
    UpdateRequestSchema,
    list_response,
)
from .pet import PetCreate, PetDelete, PetList, PetResponse, PetUpdate
from .vet_visit import (
    VetVisitCreate,
    VetVisitDelete,
    VetVisitList,
    VetVisitResponse,
    VetVisitUpdate,
)

__all__ = [
    # Shared
    "ActionResponse",
    "RequestSchema",
    "ResponseSchema",
    "UpdateRequestSchema",
    "list_response",
    # Pet schemas
    "PetCreate",
    "PetUpdate",
    "PetDelete",
    "PetList",
    "PetResponse",
    # Care routine schemas
    "PetCareRoutineCreate",
    "PetCareRoutineUpdate",
    "PetCareRoutineArchive",
    "PetCareRoutineList",
    "PetCareRoutineResponse",
    # Care log schemas
    "PetCareLogCreate",
    "PetCareLogList",
    "PetCareLogDelete",
    "PetCareLogResponse",
    # Vet visit schemas
    "VetVisitCreate",
    "VetVisitUpdate",
    "VetVisitDelete",
    "VetVisitList",
    "VetVisitResponse",
]
