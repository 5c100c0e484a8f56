"""Tests for is_/parse/safe_parse and ParseResult."""

import datetime

import pytest

from schemaknobs import (
    Issue,
    Origin,
    ParseResult,
    SchemaValidationError,
    ValidationError,
    and_,
    array,
    date,
    is_,
    min_,
    number,
    object_,
    or_,
    parse,
    safe_parse,
    strict,
    string,
    tuple_,
)


class TestIs:
    """Test is_()."""

    def test_is(self):
        assert is_(string(), 2) is False
        assert is_(string(), "Hello") is True


class TestParse:
    """Test parse()."""

    def test_returns_value_unchanged(self):
        value = {"key": "value"}
        assert parse(object_({"key": string()}), value) is value
        assert parse(string(), "hello") == "hello"
        assert parse(date(), datetime.date(2021, 1, 1)) == datetime.date(2021, 1, 1)
        assert parse(array(string()), ["a", "b", "c"]) == ["a", "b", "c"]
        assert parse(tuple_([string(), number()]), ["hello", 123]) == ["hello", 123]
        assert parse(or_(string(), number()), 1) == 1
        assert parse(and_(string(), min_(2)), "123") == "123"

    def test_raises_with_first_message_and_all_issues(self):
        schema = object_({"a": string(), "b": number()})
        with pytest.raises(SchemaValidationError) as exc_info:
            parse(schema, {"a": 1, "b": "x"})
        error = exc_info.value
        assert str(error) == "Expected string, received int"
        assert error.name == "SchemaValidationError"
        assert [issue.path for issue in error.issues] == ["a", "b"]
        assert isinstance(error, ValidationError)

    def test_error_context(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            parse(number(), "x")
        assert exc_info.value.context == {
            "issues": [
                {
                    "message": "Expected number, received str",
                    "expected": "number",
                    "received": "x",
                    "path": "",
                    "origin": "value",
                }
            ]
        }


class TestSafeParse:
    """Test safe_parse()."""

    def test_success(self):
        result = safe_parse(string(), "test")
        assert result == ParseResult(success=True, data="test")
        assert bool(result) is True
        assert result.issues == []

    def test_failure(self):
        result = safe_parse(string(), 123)
        assert result.success is False
        assert bool(result) is False
        assert isinstance(result.error, SchemaValidationError)
        assert result.data is None
        assert result.issues == [
            Issue("Expected string, received int", "string", 123, "", Origin.VALUE)
        ]

    def test_failure_matches_parse(self):
        schema = strict({"key1": string(), "key2": number()})
        value = {"key1": "value", "key2": 123, "key3": "extra"}
        result = safe_parse(schema, value)
        with pytest.raises(SchemaValidationError) as exc_info:
            parse(schema, value)
        assert str(result.error) == str(exc_info.value) == "Unexpected keys found: key3"
        assert result.error.issues == exc_info.value.issues


class TestParseResult:
    """Test ParseResult constructors."""

    def test_ok(self):
        result = ParseResult.ok(5)
        assert result.success is True
        assert result.data == 5
        assert result.error is None

    def test_fail(self):
        error = SchemaValidationError("boom", [Issue("boom", "string", 1)])
        result = ParseResult.fail(error)
        assert result.success is False
        assert result.error is error
        assert result.issues == error.issues
