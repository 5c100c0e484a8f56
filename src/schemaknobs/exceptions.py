"""Exception hierarchy for schemaknobs.

Invalid input is never reported through exceptions: validators return issue
lists. Exceptions are reserved for the outer boundary (``parse``), for
configuration problems, and for resource guards.

Example:
    ```python
    from schemaknobs import parse, string
    from schemaknobs.exceptions import SchemaValidationError

    try:
        parse(string(), 42)
    except SchemaValidationError as e:
        logger.error(f"Error: {e}")
        for issue in e.issues:
            logger.error(f"{issue.path}: {issue.message}")
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from .issues import Issue


class SchemaknobsError(Exception):
    """Base exception for schemaknobs.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (both are supported)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        # Details takes precedence if both are provided
        self.context = details or context or {}
        self.details = self.context


class ValidationError(SchemaknobsError):
    """Raised when a value is rejected at an outer boundary."""

    pass


class ConfigurationError(SchemaknobsError):
    """Raised when settings are invalid or cannot be loaded."""

    pass


class OperationError(SchemaknobsError):
    """Raised when a validation run cannot be carried out."""

    pass


class SchemaValidationError(ValidationError):
    """Raised by ``parse`` when a value does not satisfy a schema.

    The message is the first issue's message; the complete issue list stays
    available on ``issues``.

    Example:
        ```python
        error = SchemaValidationError(
            "Expected string, received int",
            [Issue("Expected string, received int", "string", 42)],
        )
        error.name
        # 'SchemaValidationError'
        len(error.issues)
        # 1
        ```
    """

    name = "SchemaValidationError"

    def __init__(self, message: str, issues: list[Issue] | None = None):
        self.issues = list(issues or [])
        super().__init__(
            message,
            context={"issues": [issue.to_dict() for issue in self.issues]},
        )


class SchemaDepthError(OperationError):
    """Raised when a lazy schema descends past the configured depth limit."""

    def __init__(self, path: str, depth: int, max_depth: int):
        self.path = path
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Maximum schema depth {max_depth} exceeded at '{path}' (depth {depth})",
            context={"path": path, "depth": depth, "max_depth": max_depth},
        )


__all__ = [
    "SchemaknobsError",
    "ValidationError",
    "ConfigurationError",
    "OperationError",
    "SchemaValidationError",
    "SchemaDepthError",
]
