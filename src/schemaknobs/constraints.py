"""Constraint validators, usually attached to another schema.

    ```python
    tags = array(string(), validations=[min_(1), max_(10)])
    port = and_(integer(), min_(1), max_(65535))
    ```
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from re import Pattern as RegexPattern
from typing import Any

from .composites import ContainerKind, kind_of
from .validator import Check, Leaf, define

_SIZED_KINDS = frozenset(
    {ContainerKind.TEXT, ContainerKind.SEQUENCE, ContainerKind.MAPPING, ContainerKind.SET}
)


def measure(value: Any) -> Any:
    """Return what size constraints compare: a length or the value itself."""
    if kind_of(value) in _SIZED_KINDS:
        return len(value)
    return value


def _compare(value: Any, test: Callable[[Any], bool]) -> bool:
    try:
        return bool(test(measure(value)))
    except TypeError:
        # Not orderable against a number
        return False


def min_(
    minimum: Any, message: str = "", validations: Iterable[Check] | None = None
) -> Leaf:
    """Require a length, size or value of at least ``minimum``."""
    return define("min", lambda value: _compare(value, lambda m: m >= minimum))(
        message or f"Min {minimum}", validations
    )


def max_(
    maximum: Any, message: str = "", validations: Iterable[Check] | None = None
) -> Leaf:
    """Require a length, size or value of at most ``maximum``."""
    return define("max", lambda value: _compare(value, lambda m: m <= maximum))(
        message or f"Max {maximum}", validations
    )


def length(
    size: int, message: str = "", validations: Iterable[Check] | None = None
) -> Leaf:
    """Require a string or container of exactly ``size`` members."""
    if size < 0:
        raise ValueError(f"length cannot be negative: {size}")
    return define(
        "length",
        lambda value: kind_of(value) in _SIZED_KINDS and len(value) == size,
    )(message or f"Length {size}", validations)


def pattern(
    regex: str | RegexPattern[str],
    message: str = "",
    validations: Iterable[Check] | None = None,
) -> Leaf:
    """Require a string matching ``regex`` from its start."""
    compiled = re.compile(regex) if isinstance(regex, str) else regex
    return define(
        "pattern",
        lambda value: isinstance(value, str) and compiled.match(value) is not None,
    )(message or f"Does not match pattern '{compiled.pattern}'", validations)


def custom(
    predicate: Callable[[Any], bool],
    message: str = "Invalid value",
    validations: Iterable[Check] | None = None,
) -> Leaf:
    """Wrap an arbitrary predicate as a validator.

    Exceptions raised by the predicate are not caught.

    Args:
        predicate: Returns True for acceptable values
        message: Message for rejected values
        validations: Extension checks run once the predicate passes

    Returns:
        Validator with an empty type tag
    """
    return define("", predicate)(message, validations)
