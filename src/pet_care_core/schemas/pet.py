"""
Pet Pydantic schemas for request validation and serialization.

This module contains the request structs for the pet operations
(create, update, delete) and the pet response representation.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field, field_validator

from .common import (
    RequestSchema,
    ResponseSchema,
    UpdateRequestSchema,
    normalize_date,
    restore_utc,
)


class PetCreate(RequestSchema):
    """Request struct for ``createPet``."""

    name: str = Field(..., description="Pet's name", min_length=1, max_length=100)
    species: Optional[str] = Field(None, description="Pet's species", max_length=100)
    breed: Optional[str] = Field(None, description="Pet's breed", max_length=100)
    gender: Optional[str] = Field(None, description="Pet's gender", max_length=50)
    date_of_birth: Optional[datetime] = Field(None, description="Pet's birth date")
    color: Optional[str] = Field(None, description="Pet's color", max_length=100)
    weight_kg: Optional[float] = Field(None, description="Pet's weight in kilograms")
    notes: Optional[str] = Field(None, description="Free-form notes")

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def validate_date_of_birth(cls, v):
        """Accept dates, datetimes and ISO strings."""
        return normalize_date(v)


class PetUpdate(UpdateRequestSchema):
    """Request struct for ``updatePet``; absent fields are left untouched."""

    NON_NULLABLE: ClassVar[tuple] = ("name",)

    name: Optional[str] = Field(
        None, description="Pet's name", min_length=1, max_length=100
    )
    species: Optional[str] = Field(None, max_length=100)
    breed: Optional[str] = Field(None, max_length=100)
    gender: Optional[str] = Field(None, max_length=50)
    date_of_birth: Optional[datetime] = None
    color: Optional[str] = Field(None, max_length=100)
    weight_kg: Optional[float] = None
    notes: Optional[str] = None

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def validate_date_of_birth(cls, v):
        return normalize_date(v)


class PetDelete(RequestSchema):
    """Request struct for ``deletePet``."""

    id: str = Field(..., min_length=1)


class PetList(RequestSchema):
    """Request struct for ``listPets``; it takes no parameters."""


class PetResponse(ResponseSchema):
    """Schema for pet response data."""

    id: str = Field(..., description="Pet's unique identifier")
    user_id: str = Field(..., description="Owner's identifier")
    name: str = Field(..., description="Pet's name")
    species: Optional[str] = None
    breed: Optional[str] = None
    gender: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    color: Optional[str] = None
    weight_kg: Optional[float] = None
    notes: Optional[str] = None
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @field_validator("date_of_birth", "created_at", "updated_at")
    @classmethod
    def validate_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        return restore_utc(v)
