"""
Database-agnostic column types for pet-care-core.

This module provides column types that behave the same on PostgreSQL and
SQLite, in particular the JSON-encoded text column used to persist weekday
lists on care routines.
"""

import json
from typing import Any, List, Optional

from sqlalchemy import Text, TypeDecorator
from sqlalchemy.engine import Dialect


class JSONEncodedList(TypeDecorator):
    """
    List of strings stored as a JSON array in a plain text column.

    A text column keeps the stored form identical across backends
    (``'["mon", "wed", "fri"]'``), which is what other consumers of the
    table read.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(
        self, value: Optional[List[str]], dialect: Dialect
    ) -> Optional[str]:
        """Serialize the list when storing to database."""
        if value is None:
            return None
        if not isinstance(value, (list, tuple)):
            raise TypeError(
                f"JSONEncodedList expects a list, got {type(value).__name__}"
            )
        return json.dumps(list(value))

    def process_result_value(
        self, value: Optional[str], dialect: Dialect
    ) -> Optional[List[Any]]:
        """Decode the stored JSON text when loading from database."""
        if value is None:
            return None
        return json.loads(value)
