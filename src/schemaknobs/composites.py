"""Composite validators: schemas for containers and their members.

Every composite is a leaf whose type test checks the container's kind and
whose first extension check descends into the members, extending the path.
Caller-supplied ``validations`` run after the member checks.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from collections.abc import Set as AbstractSet
from enum import Enum
from typing import Any

from .issues import MISSING, Issue, Origin, index_path, join_path
from .validator import Check, Leaf, define

Schema = Callable[..., list[Issue]]


class ContainerKind(Enum):
    """The closed set of value shapes the composites dispatch on."""

    TEXT = "text"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SET = "set"
    SCALAR = "scalar"


def kind_of(value: Any) -> ContainerKind:
    """Classify a value by container shape."""
    if isinstance(value, str):
        return ContainerKind.TEXT
    if isinstance(value, (list, tuple)):
        return ContainerKind.SEQUENCE
    if isinstance(value, Mapping):
        return ContainerKind.MAPPING
    if isinstance(value, AbstractSet):
        return ContainerKind.SET
    return ContainerKind.SCALAR


def _is_kind(kind: ContainerKind) -> Callable[[Any], bool]:
    return lambda value: kind_of(value) is kind


def array(
    schema: Schema, message: str = "", validations: Iterable[Check] | None = None
) -> Leaf:
    """Validate every element of a list or tuple against one schema."""

    def elements(value: Sequence[Any], path: str, origin: Origin) -> list[Issue]:
        issues: list[Issue] = []
        for index, item in enumerate(value):
            issues.extend(schema(item, index_path(path, index)))
        return issues

    return define("array", _is_kind(ContainerKind.SEQUENCE))(
        message, [elements, *(validations or ())]
    )


def tuple_(
    schemas: Sequence[Schema],
    message: str = "",
    validations: Iterable[Check] | None = None,
) -> Leaf:
    """Validate a fixed-length sequence element by element.

    A length mismatch yields a single issue whose ``received`` is the actual
    length; the elements are then not checked.
    """
    schemas = tuple(schemas)

    def elements(value: Sequence[Any], path: str, origin: Origin) -> list[Issue]:
        if len(value) != len(schemas):
            return [
                Issue(
                    message=f"Expected tuple of length {len(schemas)}, received {len(value)}",
                    expected="tuple",
                    received=len(value),
                    path=path,
                    origin=origin,
                )
            ]
        issues: list[Issue] = []
        for index, (schema, item) in enumerate(zip(schemas, value)):
            issues.extend(schema(item, index_path(path, index)))
        return issues

    return define("tuple", _is_kind(ContainerKind.SEQUENCE))(
        message, [elements, *(validations or ())]
    )


def object_(
    schema: Mapping[str, Schema],
    message: str = "",
    validations: Iterable[Check] | None = None,
    exact: bool = False,
) -> Leaf:
    """Validate the declared fields of a mapping.

    Absent fields are validated as ``MISSING``. Undeclared keys are ignored
    unless ``exact`` is set, in which case their presence is reported as one
    key issue and the declared fields are not checked.

    Args:
        schema: Field name to schema
        message: Message overriding the generated one
        validations: Extension checks run after the field checks
        exact: Reject keys not declared in ``schema``

    Returns:
        Validator tagged ``"object"``
    """
    fields = dict(schema)

    def members(value: Mapping[Any, Any], path: str, origin: Origin) -> list[Issue]:
        if exact:
            extra_keys = [key for key in value if key not in fields]
            if extra_keys:
                return [
                    Issue(
                        message="Unexpected keys found: "
                        + ", ".join(str(key) for key in extra_keys),
                        expected="object",
                        received=value,
                        path=path,
                        origin=Origin.KEY,
                    )
                ]
        issues: list[Issue] = []
        for key, field_schema in fields.items():
            issues.extend(field_schema(value.get(key, MISSING), join_path(path, key)))
        return issues

    return define("object", _is_kind(ContainerKind.MAPPING))(
        message, [members, *(validations or ())]
    )


def strict(
    schema: Mapping[str, Schema],
    message: str = "",
    validations: Iterable[Check] | None = None,
) -> Leaf:
    """Validate a mapping that may hold only the declared fields."""
    return object_(schema, message, validations, exact=True)


def record(
    key_schema: Schema,
    value_schema: Schema,
    message: str = "",
    validations: Iterable[Check] | None = None,
) -> Leaf:
    """Validate every entry of a mapping.

    Key and value share one path segment and are told apart by ``origin``.
    """

    def entries(value: Mapping[Any, Any], path: str, origin: Origin) -> list[Issue]:
        issues: list[Issue] = []
        for key, item in value.items():
            entry_path = join_path(path, key)
            issues.extend(key_schema(key, entry_path, Origin.KEY))
            issues.extend(value_schema(item, entry_path, Origin.VALUE))
        return issues

    return define("record", _is_kind(ContainerKind.MAPPING))(
        message, [entries, *(validations or ())]
    )


def map_(
    key_schema: Schema,
    value_schema: Schema,
    message: str = "",
    validations: Iterable[Check] | None = None,
) -> Leaf:
    """Validate every entry of a mapping, addressed by position."""

    def entries(value: Mapping[Any, Any], path: str, origin: Origin) -> list[Issue]:
        issues: list[Issue] = []
        for index, (key, item) in enumerate(value.items()):
            entry_path = index_path(path, index)
            issues.extend(key_schema(key, entry_path, Origin.KEY))
            issues.extend(value_schema(item, entry_path, Origin.VALUE))
        return issues

    return define("map", _is_kind(ContainerKind.MAPPING))(
        message, [entries, *(validations or ())]
    )


def set_(
    schema: Schema, message: str = "", validations: Iterable[Check] | None = None
) -> Leaf:
    """Validate every member of a set, addressed by iteration position."""

    def members(value: AbstractSet[Any], path: str, origin: Origin) -> list[Issue]:
        issues: list[Issue] = []
        for index, item in enumerate(value):
            issues.extend(schema(item, index_path(path, index)))
        return issues

    return define("set", _is_kind(ContainerKind.SET))(
        message, [members, *(validations or ())]
    )
