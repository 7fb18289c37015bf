"""
Database models for the pet-care-core package.

This module contains the SQLAlchemy models for the four stored entities:
pets, care routines, care logs and vet visits.
"""

# Base model will be imported by all other models
from .base import Base, OwnedModel, TimestampMixin, generate_id
from .care_log import CareLogStatus, PetCareLog
from .care_routine import PetCareRoutine
from .pet import Pet
from .vet_visit import VetVisit

__all__ = [
    "Base",
    "OwnedModel",
    "TimestampMixin",
    "generate_id",
    "Pet",
    "PetCareRoutine",
    "PetCareLog",
    "CareLogStatus",
    "VetVisit",
]
