"""
Care log model for the pet-care-core package.

A care log records that a care task was done or skipped at a point in time.
Logs are append/delete only; there is no update path.
"""

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from ..utils.datetime_utils import get_current_utc
from .base import OwnedModel


class CareLogStatus(enum.Enum):
    """Outcome recorded for a care task."""

    DONE = "done"
    SKIPPED = "skipped"


class PetCareLog(OwnedModel):
    """Completion record for a pet's care task, optionally tied to a routine."""

    __tablename__ = "pet_care_logs"

    # Plain reference to pets.id, see PetCareRoutine.pet_id.
    pet_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        index=True,
    )

    routine_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("pet_care_routines.id"),
        nullable=True,
        index=True,
        comment="Routine this log fulfils, if any",
    )

    log_date_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=get_current_utc,
        server_default=func.now(),
    )

    status: Mapped[Optional[CareLogStatus]] = mapped_column(
        Enum(
            CareLogStatus,
            native_enum=False,
            length=20,
            values_callable=lambda statuses: [status.value for status in statuses],
        ),
        nullable=True,
    )

    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("idx_care_logs_user_pet_time", "user_id", "pet_id", "log_date_time"),
    )

    def __repr__(self) -> str:
        return (
            f"<PetCareLog(id={self.id}, pet_id={self.pet_id}, "
            f"status={self.status.value if self.status else None})>"
        )
