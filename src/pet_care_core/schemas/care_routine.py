"""
Care routine Pydantic schemas for request validation and serialization.
"""

from datetime import datetime
from typing import ClassVar, List, Optional

from pydantic import Field, field_validator

from .common import (
    RequestSchema,
    ResponseSchema,
    UpdateRequestSchema,
    normalize_weekdays,
    restore_utc,
)


class PetCareRoutineCreate(RequestSchema):
    """Request struct for ``createPetCareRoutine``."""

    pet_id: str = Field(..., min_length=1, description="Pet the routine is for")
    name: str = Field(
        ..., min_length=1, max_length=200, description="e.g. 'Morning feeding'"
    )
    description: Optional[str] = None
    frequency: Optional[str] = Field(
        None, max_length=50, description="Free-form label such as 'daily'"
    )
    time_of_day_local: Optional[str] = Field(
        None, max_length=50, description="Local time label such as '07:30'"
    )
    days_of_week: Optional[List[str]] = Field(
        None, description="Weekday labels such as ['mon', 'wed', 'fri']"
    )

    @field_validator("days_of_week")
    @classmethod
    def validate_days_of_week(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        """Normalize weekday labels."""
        return normalize_weekdays(v)


class PetCareRoutineUpdate(UpdateRequestSchema):
    """
    Request struct for ``updatePetCareRoutine``.

    A provided ``days_of_week`` replaces the stored list rather than merging
    with it. ``is_active`` may be set directly here, unlike the dedicated
    archive operation which only ever deactivates.
    """

    NON_NULLABLE: ClassVar[tuple] = ("pet_id", "name", "is_active")

    pet_id: Optional[str] = Field(None, min_length=1)
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    frequency: Optional[str] = Field(None, max_length=50)
    time_of_day_local: Optional[str] = Field(None, max_length=50)
    days_of_week: Optional[List[str]] = None
    is_active: Optional[bool] = None

    @field_validator("days_of_week")
    @classmethod
    def validate_days_of_week(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return normalize_weekdays(v)


class PetCareRoutineArchive(RequestSchema):
    """Request struct for ``archivePetCareRoutine``."""

    id: str = Field(..., min_length=1)


class PetCareRoutineList(RequestSchema):
    """Request struct for ``listPetCareRoutines``."""

    pet_id: Optional[str] = Field(None, description="Only routines for this pet")
    include_inactive: bool = Field(
        False, description="Whether archived routines are included"
    )


class PetCareRoutineResponse(ResponseSchema):
    """Schema for care routine response data."""

    id: str
    pet_id: str
    user_id: str
    name: str
    description: Optional[str] = None
    frequency: Optional[str] = None
    time_of_day_local: Optional[str] = None
    days_of_week: Optional[List[str]] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def validate_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        return restore_utc(v)
