"""
Utility functions and helper modules.

This module provides datetime normalization and configuration management
shared by the rest of the package.
"""

from .config import (
    DEFAULT_DATABASE_URL,
    DatabaseURLValidator,
    EnvironmentConfig,
    LoggingConfigurator,
    LogLevel,
    PetCareSettings,
)
from .datetime_utils import (
    UTC,
    convert_timezone,
    ensure_utc,
    get_current_utc,
    parse_date_input,
    to_utc,
)

__all__ = [
    # DateTime utilities
    "UTC",
    "get_current_utc",
    "convert_timezone",
    "to_utc",
    "parse_date_input",
    "ensure_utc",
    # Configuration utilities
    "DEFAULT_DATABASE_URL",
    "LogLevel",
    "EnvironmentConfig",
    "DatabaseURLValidator",
    "LoggingConfigurator",
    "PetCareSettings",
]
