"""
Vet visit Pydantic schemas for request validation and serialization.
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


class VetVisitCreate(RequestSchema):
    """Request struct for ``createVetVisit``."""

    pet_id: str = Field(..., min_length=1)
    visit_date: Optional[datetime] = Field(
        None, description="Date of the visit; defaults to now"
    )
    clinic_name: Optional[str] = Field(None, max_length=200)
    reason: Optional[str] = Field(None, description="e.g. 'vaccination'")
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None
    medications: Optional[str] = None
    follow_up_date: Optional[datetime] = None

    @field_validator("visit_date", "follow_up_date", mode="before")
    @classmethod
    def validate_dates(cls, v):
        return normalize_date(v)


class VetVisitUpdate(UpdateRequestSchema):
    """Request struct for ``updateVetVisit``; absent fields are left untouched."""

    NON_NULLABLE: ClassVar[tuple] = ("pet_id", "visit_date")

    pet_id: Optional[str] = Field(None, min_length=1)
    visit_date: Optional[datetime] = None
    clinic_name: Optional[str] = Field(None, max_length=200)
    reason: Optional[str] = None
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None
    medications: Optional[str] = None
    follow_up_date: Optional[datetime] = None

    @field_validator("visit_date", "follow_up_date", mode="before")
    @classmethod
    def validate_dates(cls, v):
        return normalize_date(v)


class VetVisitDelete(RequestSchema):
    """Request struct for ``deleteVetVisit``."""

    id: str = Field(..., min_length=1)


class VetVisitList(RequestSchema):
    """Request struct for ``listVetVisits``."""

    pet_id: str = Field(..., min_length=1)


class VetVisitResponse(ResponseSchema):
    """Schema for vet visit response data."""

    id: str
    pet_id: str
    user_id: str
    visit_date: datetime
    clinic_name: Optional[str] = None
    reason: Optional[str] = None
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None
    medications: Optional[str] = None
    follow_up_date: Optional[datetime] = None
    created_at: datetime

    @field_validator("visit_date", "follow_up_date", "created_at")
    @classmethod
    def validate_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        return restore_utc(v)
