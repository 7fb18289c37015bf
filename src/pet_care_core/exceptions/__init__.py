"""
Custom exceptions for the pet-care-core package.

This module defines the exception hierarchy and error formatting helpers
used by the action handlers and dispatcher.
"""

from .core_exceptions import (
    AuthorizationException,
    ConfigurationException,
    DatabaseException,
    ForbiddenException,
    NotFoundException,
    PetCareException,
    SchemaValidationException,
    TransactionException,
    UnauthorizedException,
    ValidationException,
    create_error_response,
    format_validation_errors,
    log_exception_context,
)

__all__ = [
    # Exception classes
    "PetCareException",
    "AuthorizationException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ValidationException",
    "SchemaValidationException",
    "DatabaseException",
    "TransactionException",
    "ConfigurationException",
    # Utility functions
    "format_validation_errors",
    "create_error_response",
    "log_exception_context",
]
