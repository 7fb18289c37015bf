"""
Base model classes for all SQLAlchemy models in the pet-care-core package.

Every stored entity is owned by exactly one user, so the shared base carries
the primary key, the owner reference and the creation timestamp. Entities that
are edited in place additionally mix in ``TimestampMixin`` for ``updated_at``.

Example:
    >>> from pet_care_core.models.base import OwnedModel
    >>> from sqlalchemy.orm import Mapped, mapped_column
    >>> from sqlalchemy import String

    >>> class Note(OwnedModel):
    ...     __tablename__ = "notes"
    ...     body: Mapped[str] = mapped_column(String(500))

    >>> note = Note(user_id="user_123", body="Buy food")
    >>> note.to_dict()["user_id"]
    'user_123'
"""

import uuid
from datetime import datetime
from typing import Any, Dict

from sqlalchemy import DateTime, String, inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func

from ..utils.datetime_utils import get_current_utc


def generate_id() -> str:
    """Generate a new opaque entity id."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base declarative class for all SQLAlchemy models."""


class OwnedModel(Base):
    """
    Abstract base model for user-owned entities.

    Attributes:
        id (str): Primary key, a UUID4 rendered as text
        user_id (str): Opaque identifier of the owning user
        created_at (datetime): Timestamp when record was created (UTC)

    Note:
        This is an abstract base class and cannot be instantiated directly.
        All concrete models must define a __tablename__ attribute.
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_id,
    )

    user_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Identifier of the owning user",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=get_current_utc,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        """Return string representation: <ModelName(id=...)>."""
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert model instance to dictionary representation.

        Datetime values are rendered as ISO strings; everything else is
        returned as stored.
        """
        result = {}
        for attr in inspect(self.__class__).column_attrs:
            value = getattr(self, attr.key)
            if isinstance(value, datetime):
                result[attr.key] = value.isoformat()
            else:
                result[attr.key] = value
        return result

    @classmethod
    def get_table_name(cls) -> str:
        """Get the database table name for this model."""
        return cls.__tablename__

    @classmethod
    def owned_by(cls, user_id: str):
        """
        Create a filter expression restricting rows to one owner.

        Example:
            >>> stmt = select(Pet).where(Pet.owned_by("user_123"))
        """
        return cls.user_id == user_id


class TimestampMixin:
    """Adds an ``updated_at`` column bumped on every in-place edit."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=get_current_utc,
        server_default=func.now(),
        onupdate=get_current_utc,
    )
