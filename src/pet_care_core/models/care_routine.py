"""
Care routine model for the pet-care-core package.

A routine describes a recurring task for one pet, such as "Morning feeding"
or "Evening walk". Routines are never hard-deleted: archiving flips
``is_active`` to false and keeps the row for history.
"""

from typing import List, Optional

from sqlalchemy import Boolean, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from ..database.types import JSONEncodedList
from .base import OwnedModel, TimestampMixin


class PetCareRoutine(TimestampMixin, OwnedModel):
    """Recurring care task attached to a pet."""

    __tablename__ = "pet_care_routines"

    # Plain reference to pets.id; deleting a pet leaves its routines in place.
    pet_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        index=True,
        comment="Pet this routine is for",
    )

    name: Mapped[str] = mapped_column(
        String(200), nullable=False, comment="Routine name, e.g. 'Morning feeding'"
    )

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Free-form label; no schedule is derived from it.
    frequency: Mapped[Optional[str]] = mapped_column(
        String(50), nullable=True, comment="'daily', 'weekly', 'monthly', ..."
    )

    time_of_day_local: Mapped[Optional[str]] = mapped_column(
        String(50), nullable=True, comment="Local time label, e.g. '07:30'"
    )

    days_of_week: Mapped[Optional[List[str]]] = mapped_column(
        "days_of_week_json",
        JSONEncodedList,
        nullable=True,
        comment='JSON list of weekday labels, e.g. ["mon","wed","fri"]',
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
        comment="False once the routine is archived",
    )

    __table_args__ = (
        Index("idx_routines_user_pet_active", "user_id", "pet_id", "is_active"),
    )

    @property
    def is_archived(self) -> bool:
        """Whether the routine has been archived."""
        return not self.is_active

    def __repr__(self) -> str:
        return (
            f"<PetCareRoutine(id={self.id}, pet_id={self.pet_id}, "
            f"name='{self.name}', is_active={self.is_active})>"
        )
