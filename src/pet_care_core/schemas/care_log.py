"""
Care log Pydantic schemas for request validation and serialization.

Logs have no update schema: once written they can only be listed or deleted.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from ..models.care_log import CareLogStatus
from .common import RequestSchema, ResponseSchema, normalize_date, restore_utc


class PetCareLogCreate(RequestSchema):
    """Request struct for ``createPetCareLog``."""

    pet_id: str = Field(..., min_length=1)
    routine_id: Optional[str] = Field(
        None, min_length=1, description="Routine fulfilled by this log"
    )
    log_date_time: Optional[datetime] = Field(
        None, description="When the task happened; defaults to now"
    )
    status: Optional[CareLogStatus] = Field(None, description="'done' or 'skipped'")
    notes: Optional[str] = None

    @field_validator("log_date_time", mode="before")
    @classmethod
    def validate_log_date_time(cls, v):
        return normalize_date(v)


class PetCareLogList(RequestSchema):
    """Request struct for ``listPetCareLogs``."""

    pet_id: str = Field(..., min_length=1)


class PetCareLogDelete(RequestSchema):
    """Request struct for ``deletePetCareLog``."""

    id: str = Field(..., min_length=1)


class PetCareLogResponse(ResponseSchema):
    """Schema for care log response data."""

    id: str
    pet_id: str
    routine_id: Optional[str] = None
    user_id: str
    log_date_time: datetime
    status: Optional[CareLogStatus] = None
    notes: Optional[str] = None
    created_at: datetime

    @field_validator("log_date_time", "created_at")
    @classmethod
    def validate_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        return restore_utc(v)
