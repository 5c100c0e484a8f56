"""Outer-boundary helpers that turn issue lists into booleans, errors or results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from .exceptions import SchemaValidationError
from .issues import Issue

logger = logging.getLogger(__name__)

Schema = Callable[..., list[Issue]]


@dataclass
class ParseResult:
    """Outcome of ``safe_parse``.

    On success ``data`` is the validated value, unchanged. On failure
    ``error`` carries the first issue's message and the full issue list.
    """

    success: bool
    data: Any = None
    error: SchemaValidationError | None = None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check success."""
        return self.success

    @property
    def issues(self) -> list[Issue]:
        """Issues behind a failure; empty on success."""
        return self.error.issues if self.error is not None else []

    @classmethod
    def ok(cls, data: Any) -> ParseResult:
        """Create a successful result.

        Args:
            data: The validated value

        Returns:
            Successful ParseResult
        """
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: SchemaValidationError) -> ParseResult:
        """Create a failed result.

        Args:
            error: Error describing the failure

        Returns:
            Failed ParseResult
        """
        return cls(success=False, error=error)


def is_(schema: Schema, value: Any) -> bool:
    """Return True when ``value`` satisfies ``schema``."""
    return len(schema(value)) == 0


def parse(schema: Schema, value: Any) -> Any:
    """Return ``value`` unchanged if it satisfies ``schema``.

    Args:
        schema: Validator to apply
        value: Value to validate

    Returns:
        The value, as given

    Raises:
        SchemaValidationError: If any issue is found; the message is the first
            issue's message
    """
    issues = schema(value)
    if issues:
        logger.debug(f"Validation failed with {len(issues)} issue(s)")
        raise SchemaValidationError(issues[0].message, issues)
    return value


def safe_parse(schema: Schema, value: Any) -> ParseResult:
    """Validate without raising for invalid values.

    Exceptions raised by the schema itself (e.g. by a custom predicate)
    still propagate.

    Args:
        schema: Validator to apply
        value: Value to validate

    Returns:
        ParseResult with ``data`` on success or ``error`` on failure
    """
    try:
        return ParseResult.ok(parse(schema, value))
    except SchemaValidationError as e:
        return ParseResult.fail(e)
