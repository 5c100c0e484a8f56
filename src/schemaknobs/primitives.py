"""Primitive (leaf) validators.

Each factory takes an optional ``message`` overriding the generated one and an
optional list of ``validations`` that run once the type test passes:

    ```python
    username = string("Username must be text", [min_(3), max_(20)])
    ```
"""

from __future__ import annotations

import datetime
import enum
import inspect
import numbers
from collections.abc import Iterable
from typing import Any

from .issues import MISSING
from .validator import Check, Leaf, define


def same_value(left: Any, right: Any) -> bool:
    """Strict equality: identical, or of the same type and equal.

    Unlike ``==``, ``1``, ``1.0`` and ``True`` are all distinct.
    """
    if left is right:
        return True
    return type(left) is type(right) and left == right


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


string = define("string", lambda value: isinstance(value, str))
number = define("number", _is_number)
boolean = define("boolean", lambda value: isinstance(value, bool))
bigint = define(
    "bigint", lambda value: isinstance(value, int) and not isinstance(value, bool)
)
# Enum members are Python's named, identity-compared tokens.
symbol = define("symbol", lambda value: isinstance(value, enum.Enum))
func = define("function", callable)
date = define("date", lambda value: isinstance(value, datetime.date))
promise = define("promise", inspect.isawaitable)
integer = define("integer", _is_integer)
never = define("never", lambda value: False)
any_ = define("any", lambda value: True)
unknown = define("unknown", lambda value: True)
nullish = define("nullish", lambda value: value is None or value is MISSING)
none = define("null", lambda value: value is None)
missing = define("undefined", lambda value: value is MISSING)


def literal(
    expected: Any, message: str = "", validations: Iterable[Check] | None = None
) -> Leaf:
    """Accept exactly one value.

    Args:
        expected: The only accepted value (compared with ``same_value``)
        message: Message overriding the generated one
        validations: Extension checks

    Returns:
        Validator tagged ``"literal"``
    """
    return define("literal", lambda value: same_value(value, expected))(
        message, validations
    )


def instance(
    ref: type | tuple[type, ...],
    message: str = "",
    validations: Iterable[Check] | None = None,
) -> Leaf:
    """Accept instances of a class."""
    return define("instance", lambda value: isinstance(value, ref))(
        message, validations
    )


def enums(
    values: Iterable[Any],
    message: str = "",
    validations: Iterable[Check] | None = None,
) -> Leaf:
    """Accept any one of a fixed collection of values.

    Args:
        values: Accepted values (compared with ``same_value``)
        message: Message overriding the generated one
        validations: Extension checks

    Returns:
        Validator tagged ``"enums"``
    """
    allowed = tuple(values)
    return define(
        "enums", lambda value: any(same_value(value, v) for v in allowed)
    )(message, validations)
