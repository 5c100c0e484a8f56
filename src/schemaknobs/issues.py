"""Issue records and the helpers that describe where they occur.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Origin(str, Enum):
    """Whether an issue concerns a container's value or one of its keys."""

    VALUE = "value"
    KEY = "key"

    def __str__(self) -> str:
        return self.value


class _Missing:
    """Marker for a value that is absent, as opposed to ``None``."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class Issue:
    """One validation failure.

    Attributes:
        message: Human-readable description
        expected: Type tag of the schema that rejected the value
            (empty for custom validators)
        received: The offending value, or a summary such as a length
        path: Accessor from the validation root, e.g. ``"a.b[2]"``
        origin: Whether the failure concerns a key or a value
    """

    message: str
    expected: str
    received: Any
    path: str = ""
    origin: Origin = Origin.VALUE

    def to_dict(self) -> dict[str, Any]:
        """Convert the issue to a plain dictionary.

        Returns:
            Dictionary with the issue fields, origin as a plain string
        """
        return {
            "message": self.message,
            "expected": self.expected,
            "received": self.received,
            "path": self.path,
            "origin": str(Origin(self.origin)),
        }


def type_name(value: Any) -> str:
    """Name the runtime type of a value for use in messages."""
    if value is MISSING:
        return "missing"
    if value is None:
        return "None"
    return type(value).__name__


def join_path(path: str, key: Any) -> str:
    """Extend a path with a named member."""
    return f"{path}.{key}" if path else str(key)


def index_path(path: str, index: int) -> str:
    """Extend a path with a positional member."""
    return f"{path}[{index}]"

