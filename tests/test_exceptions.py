"""
Tests for the pet-care-core exception hierarchy and helpers.
"""

import logging
from unittest.mock import Mock

import pytest

from pet_care_core.exceptions import (
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


class TestPetCareException:
    """Test cases for the base exception."""

    def test_basic_exception_creation(self):
        """Test creating a basic exception."""
        exc = PetCareException("Something went wrong")

        assert str(exc) == "Something went wrong"
        assert exc.message == "Something went wrong"
        assert exc.error_code == "PetCareException"
        assert exc.details == {}

    def test_exception_with_details(self):
        """Test details show up in the string form."""
        exc = PetCareException("Broken", error_code="BROKEN", details={"key": "v"})

        assert exc.error_code == "BROKEN"
        assert "Details" in str(exc)

    def test_to_dict_method(self):
        """Test dictionary conversion."""
        exc = PetCareException("Broken", error_code="BROKEN", details={"a": 1})
        result = exc.to_dict()

        assert result["error_type"] == "PetCareException"
        assert result["error_code"] == "BROKEN"
        assert result["message"] == "Broken"
        assert result["details"] == {"a": 1}
        assert "timestamp" in result

    def test_log_error(self):
        """Test logging goes to the given logger at the given level."""
        logger = Mock()
        exc = NotFoundException(entity="Pet")

        exc.log_error(logger, level=logging.WARNING)

        logger.log.assert_called_once()
        level, message = logger.log.call_args[0]
        assert level == logging.WARNING
        assert "Pet not found." in message


class TestActionErrors:
    """Test cases for the errors surfaced by action handlers."""

    def test_unauthorized(self):
        exc = UnauthorizedException()

        assert exc.error_code == "UNAUTHORIZED"
        assert exc.message == "You must be signed in to perform this action."
        assert isinstance(exc, AuthorizationException)

    def test_forbidden_with_rule(self):
        exc = ForbiddenException(
            "Routine does not belong to this pet.",
            rule_name="routine_pet_match",
            context={"pet_id": "p1"},
        )

        assert exc.error_code == "FORBIDDEN"
        assert exc.details["rule_name"] == "routine_pet_match"
        assert exc.details["context"] == {"pet_id": "p1"}

    def test_not_found_uses_entity_label(self):
        exc = NotFoundException(entity="Care routine")

        assert exc.error_code == "NOT_FOUND"
        assert exc.message == "Care routine not found."
        assert exc.details == {"entity": "Care routine"}

    def test_not_found_without_entity(self):
        assert NotFoundException().message == "Entity not found."

    def test_validation_exception(self):
        exc = ValidationException("Bad input", field="name", value=42)

        assert exc.error_code == "VALIDATION_ERROR"
        assert exc.details["field"] == "name"
        assert exc.details["value"] == "42"

    def test_schema_validation_keeps_validation_code(self):
        exc = SchemaValidationException(
            "Invalid input",
            schema_name="PetCreate",
            validation_errors={"name": ["This field is required"]},
        )

        assert isinstance(exc, ValidationException)
        assert exc.error_code == "VALIDATION_ERROR"
        assert exc.details["schema_name"] == "PetCreate"
        assert exc.details["validation_errors"] == {"name": ["This field is required"]}


class TestDatabaseException:
    """Test cases for database-related exceptions."""

    def test_database_exception_creation(self):
        original = RuntimeError("disk full")
        exc = DatabaseException("Write failed", original_error=original)

        assert exc.error_code == "DATABASE_ERROR"
        assert exc.original_error is original
        assert "original_error" not in exc.details
        assert exc.to_dict()["original_error"] == "disk full"

    def test_driver_error_only_reaches_logs(self):
        """Test the driver error is logged but not returned to callers."""
        logger = Mock()
        exc = TransactionException(
            operation="deletePet",
            original_error=RuntimeError("[SQL: DELETE FROM pets] [parameters: ('u1',)]"),
        )

        exc.log_error(logger)
        response = create_error_response(exc, include_debug=True)

        logged = logger.log.call_args[1]["extra"]["exception_data"]
        assert "DELETE FROM pets" in logged["original_error"]
        assert "original_error" not in response["error"]["details"]
        assert "DELETE FROM pets" not in str(response)

    def test_transaction_exception_creation(self):
        exc = TransactionException(operation="createPet")

        assert isinstance(exc, DatabaseException)
        assert exc.error_code == "DATABASE_TRANSACTION_ERROR"
        assert exc.details["operation"] == "createPet"


class TestConfigurationException:
    """Test cases for configuration exceptions."""

    def test_configuration_exception_creation(self):
        exc = ConfigurationException(
            "Bad pool size", config_key="PET_CARE_DB_POOL_SIZE", config_value="abc"
        )

        assert exc.error_code == "CONFIGURATION_ERROR"
        assert exc.details["config_value"] == "abc"

    @pytest.mark.parametrize(
        "key", ["PET_CARE_DATABASE_URL", "db_password", "API_TOKEN", "secret"]
    )
    def test_sensitive_value_sanitization(self, key):
        exc = ConfigurationException("Bad value", config_key=key, config_value="xyz")

        assert exc.details["config_value"] == "[REDACTED]"


class TestUtilityFunctions:
    """Test cases for error formatting helpers."""

    def test_format_validation_errors(self):
        errors = [
            {"loc": ("name",), "msg": "Field required", "type": "missing"},
            {
                "loc": ("visitDate",),
                "msg": "Value error, Date must be in ISO format",
                "type": "value_error",
            },
            {
                "loc": ("weightKg",),
                "msg": "Input should be greater than 0",
                "type": "greater_than",
            },
            {"loc": (), "msg": "Value error, nameX", "type": "value_error"},
        ]

        formatted = format_validation_errors(errors)

        assert formatted["name"] == ["This field is required"]
        assert formatted["visitDate"] == ["Value error, Date must be in ISO format"]
        assert formatted["weightKg"] == [
            "Input should be greater than 0 (type: greater_than)"
        ]
        assert "root" in formatted

    def test_create_error_response(self):
        response = create_error_response(NotFoundException(entity="Pet"))

        assert response == {
            "success": False,
            "error": {
                "type": "NotFoundException",
                "code": "NOT_FOUND",
                "message": "Pet not found.",
                "details": {"entity": "Pet"},
            },
        }

    def test_create_error_response_without_details(self):
        response = create_error_response(UnauthorizedException())

        assert "details" not in response["error"]
        assert "debug" not in response

    def test_create_error_response_with_debug(self):
        response = create_error_response(UnauthorizedException(), include_debug=True)

        assert response["debug"]["class_name"] == "UnauthorizedException"
        assert response["debug"]["module"] == "pet_care_core.exceptions.core_exceptions"

    def test_log_exception_context_for_plain_exception(self):
        logger = Mock()

        log_exception_context(RuntimeError("boom"), {"action": "listPets"}, logger)

        logger.log.assert_called_once()
        assert logger.log.call_args[1]["extra"]["context"] == {"action": "listPets"}
