"""
Vet visit model for the pet-care-core package.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from ..utils.datetime_utils import get_current_utc
from .base import OwnedModel


class VetVisit(OwnedModel):
    """
    Record of a veterinary visit for a pet.

    Unlike pets and routines, visits carry no ``updated_at``; edits leave
    ``created_at`` as the only timestamp.
    """

    __tablename__ = "vet_visits"

    # Plain reference to pets.id, see PetCareRoutine.pet_id.
    pet_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        index=True,
    )

    visit_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=get_current_utc,
        server_default=func.now(),
    )

    clinic_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    reason: Mapped[Optional[str]] = mapped_column(
        Text, nullable=True, comment="e.g. 'vaccination', 'check-up'"
    )

    diagnosis: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    treatment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    medications: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    follow_up_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        Index("idx_vet_visits_user_pet_date", "user_id", "pet_id", "visit_date"),
    )

    def __repr__(self) -> str:
        return f"<VetVisit(id={self.id}, pet_id={self.pet_id})>"
