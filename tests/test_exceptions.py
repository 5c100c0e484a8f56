"""Tests for the exception hierarchy."""

import pytest

from schemaknobs.exceptions import (
    ConfigurationError,
    OperationError,
    SchemaDepthError,
    SchemaknobsError,
    SchemaValidationError,
    ValidationError,
)
from schemaknobs.issues import Issue


class TestSchemaknobsError:
    """Test the base SchemaknobsError class."""

    def test_basic_exception(self):
        """Test basic exception without context."""
        error = SchemaknobsError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.context == {}
        assert error.details == {}

    def test_exception_with_context(self):
        error = SchemaknobsError("Operation failed", context={"path": "a.b"})
        assert error.context == {"path": "a.b"}
        assert error.details == {"path": "a.b"}

    def test_details_takes_precedence(self):
        error = SchemaknobsError(
            "Error",
            context={"key": "context_value"},
            details={"key": "details_value"},
        )
        assert error.context == {"key": "details_value"}

    def test_exception_catchable_as_base(self):
        with pytest.raises(SchemaknobsError):
            raise ValidationError("Invalid data")
        with pytest.raises(SchemaknobsError):
            raise ConfigurationError("Bad settings")


class TestSchemaValidationError:
    """Test the error raised by parse."""

    def test_carries_issues(self):
        issues = [Issue("first", "string", 1), Issue("second", "number", "x", "a")]
        error = SchemaValidationError("first", issues)
        assert str(error) == "first"
        assert error.issues == issues
        assert error.name == "SchemaValidationError"
        assert error.context["issues"][1]["path"] == "a"

    def test_defaults_to_no_issues(self):
        error = SchemaValidationError("empty")
        assert error.issues == []


class TestSchemaDepthError:
    """Test the depth guard error."""

    def test_context(self):
        error = SchemaDepthError("a.b.c", 3, 2)
        assert isinstance(error, OperationError)
        assert error.context == {"path": "a.b.c", "depth": 3, "max_depth": 2}
        assert "a.b.c" in str(error)
