"""
Shared schema building blocks.

Request structs accept both the camelCase names used on the wire
(``petId``, ``includeInactive``) and the snake_case attribute names, and
responses serialize back to camelCase.
"""

from datetime import datetime
from typing import Any, ClassVar, Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ..utils.datetime_utils import ensure_utc, parse_date_input


class RequestSchema(BaseModel):
    """Base class for per-operation request structs."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class UpdateRequestSchema(RequestSchema):
    """
    Base class for partial-update request structs.

    Only fields the caller actually sent are applied; ``NON_NULLABLE``
    lists fields that may be omitted but never explicitly cleared.
    """

    NON_NULLABLE: ClassVar[tuple] = ()

    id: str = Field(..., min_length=1, description="Identifier of the record")

    def get_updates(self) -> Dict[str, Any]:
        """Return the explicitly provided fields, keyed by attribute name."""
        return self.model_dump(exclude_unset=True, exclude={"id"})

    @model_validator(mode="after")
    def validate_non_nullable(self) -> "UpdateRequestSchema":
        """Reject explicit nulls for fields that are required on the record."""
        for field_name in self.NON_NULLABLE:
            if field_name in self.model_fields_set and getattr(self, field_name) is None:
                raise ValueError(f"{to_camel(field_name)} cannot be null")
        return self


class ResponseSchema(BaseModel):
    """Base class for record representations returned to callers."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


def normalize_date(value: Any) -> Optional[datetime]:
    """Field validator body shared by every date-typed request field."""
    return parse_date_input(value)


def restore_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Field validator body shared by every date-typed response field."""
    return ensure_utc(value)


def normalize_weekdays(value: Optional[Iterable[str]]) -> Optional[list]:
    """
    Clean a list of weekday labels.

    Labels are stripped and lower-cased; blanks and repeats are dropped while
    keeping first-seen order.
    """
    if value is None:
        return None

    seen = []
    for label in value:
        cleaned = label.strip().lower()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen


class ActionResponse(BaseModel):
    """
    Success envelope returned by every action handler.

    Example:
        >>> ActionResponse(data={"total": 0, "items": []}).to_envelope()
        {'success': True, 'data': {'total': 0, 'items': []}}
    """

    success: bool = True
    data: Optional[Dict[str, Any]] = None

    def to_envelope(self) -> Dict[str, Any]:
        """Serialize to the JSON-ready wire form, omitting empty ``data``."""
        envelope = self.model_dump(mode="json", by_alias=True)
        if envelope["data"] is None:
            del envelope["data"]
        return envelope


def list_response(items: list) -> ActionResponse:
    """Build the ``{"items": [...], "total": n}`` envelope for list operations."""
    return ActionResponse(data={"items": items, "total": len(items)})
