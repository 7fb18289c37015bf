"""
Pet model for the pet-care-core package.

A pet belongs to exactly one user. Routines, care logs and vet visits all
reference a pet, but deleting a pet leaves those rows in place.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, Float, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import OwnedModel, TimestampMixin


class Pet(TimestampMixin, OwnedModel):
    """Pet profile with basic identifying and physical details."""

    __tablename__ = "pets"

    name: Mapped[str] = mapped_column(String(100), nullable=False, comment="Pet's name")

    species: Mapped[Optional[str]] = mapped_column(
        String(100), nullable=True, comment="Free-form species, e.g. 'dog', 'cat'"
    )

    breed: Mapped[Optional[str]] = mapped_column(
        String(100), nullable=True, comment="Pet's breed"
    )

    gender: Mapped[Optional[str]] = mapped_column(
        String(50), nullable=True, comment="Free-form gender, e.g. 'male'"
    )

    date_of_birth: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, comment="Pet's date of birth"
    )

    color: Mapped[Optional[str]] = mapped_column(
        String(100), nullable=True, comment="Coat or feather color"
    )

    weight_kg: Mapped[Optional[float]] = mapped_column(
        Float, nullable=True, comment="Pet's weight in kilograms"
    )

    notes: Mapped[Optional[str]] = mapped_column(
        Text, nullable=True, comment="Free-form notes"
    )

    __table_args__ = (
        CheckConstraint("length(name) > 0", name="ck_pets_name_not_empty"),
        Index("idx_pets_user_created", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Pet(id={self.id}, name='{self.name}')>"
