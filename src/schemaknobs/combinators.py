"""Combinators: validators that change the pass/fail semantics of others.

All combinators forward ``path`` and ``origin`` unchanged to the schemas they
wrap.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from contextvars import ContextVar
from dataclasses import replace
from typing import Any

from .exceptions import SchemaDepthError
from .issues import MISSING, Issue, Origin
from .settings import get_settings
from .validator import Check, Leaf, Validator

logger = logging.getLogger(__name__)

Schema = Callable[..., list[Issue]]

# Number of lazy schemas being resolved in the current call stack
_lazy_depth: ContextVar[int] = ContextVar("schemaknobs_lazy_depth", default=0)


class _Exempting(Validator):
    """Accepts one exempt value; otherwise defers to the wrapped schema.

    When the value is not exempt, ``message`` replaces the messages of the
    wrapped schema's issues, and ``validations`` run once the wrapped schema
    passes.
    """

    def __init__(
        self,
        schema: Schema,
        message: str = "",
        validations: Iterable[Check] | None = None,
    ):
        self.schema = schema
        self.message = message
        self.validations = tuple(validations or ())

    def is_exempt(self, value: Any) -> bool:
        raise NotImplementedError

    def __call__(
        self, value: Any, path: str = "", origin: Origin = Origin.VALUE
    ) -> list[Issue]:
        if self.is_exempt(value):
            return []
        issues = list(self.schema(value, path, origin))
        if issues:
            if self.message:
                issues = [replace(issue, message=self.message) for issue in issues]
            return issues
        for validation in self.validations:
            result = validation(value, path, origin)
            if result is True:
                continue
            if result is False:
                issues.append(
                    Issue(self.message or "Invalid value", "", value, path, origin)
                )
                continue
            issues.extend(issue for issue in result if issue is not True)
        return issues


class OptionalOf(_Exempting):
    """Accepts a missing value; otherwise defers to the wrapped schema."""

    def is_exempt(self, value: Any) -> bool:
        return value is MISSING


class NullableOf(_Exempting):
    """Accepts ``None``; otherwise defers to the wrapped schema."""

    def is_exempt(self, value: Any) -> bool:
        return value is None


class AnyOf(Validator):
    """At least one schema must pass (OR logic).

    Every alternative is tried. When all of them fail, the issues of every
    alternative are reported together, in order.
    """

    def __init__(self, schemas: list[Schema]):
        self.schemas = schemas

    def __call__(
        self, value: Any, path: str = "", origin: Origin = Origin.VALUE
    ) -> list[Issue]:
        results = [schema(value, path, origin) for schema in self.schemas]
        failed = sum(1 for issues in results if issues)
        if failed != len(self.schemas):
            return []
        return [issue for issues in results for issue in issues]


class AllOf(Validator):
    """All schemas must pass (AND logic).

    Every schema runs, even after a failure, so all issues are reported.
    """

    def __init__(self, schemas: list[Schema]):
        self.schemas = schemas

    def __call__(
        self, value: Any, path: str = "", origin: Origin = Origin.VALUE
    ) -> list[Issue]:
        issues: list[Issue] = []
        for schema in self.schemas:
            issues.extend(schema(value, path, origin))
        return issues


class Not(Leaf):
    """Passes only when the wrapped schema fails."""

    def __init__(self, schema: Schema, message: str = ""):
        self.schema = schema
        super().__init__("not", self._rejected, message)

    def _rejected(self, value: Any) -> bool:
        return len(self.schema(value)) > 0


class Lazy(Validator):
    """Resolves its schema on every call.

    This is what makes self-referential schemas possible: the resolver may
    refer to a name that is only bound after the enclosing schema is built.

    Depth is the number of lazy schemas being resolved in the current call
    stack, this one included.
    """

    def __init__(self, resolve: Callable[[], Schema], max_depth: int | None = None):
        self.resolve = resolve
        self.max_depth = max_depth

    def __call__(
        self, value: Any, path: str = "", origin: Origin = Origin.VALUE
    ) -> list[Issue]:
        depth = _lazy_depth.get() + 1
        max_depth = self.max_depth or get_settings().max_depth
        if max_depth is not None and depth > max_depth:
            logger.debug(f"Lazy schema depth limit {max_depth} hit at '{path}'")
            raise SchemaDepthError(path, depth, max_depth)
        token = _lazy_depth.set(depth)
        try:
            return self.resolve()(value, path, origin)
        finally:
            _lazy_depth.reset(token)


class Transform(Validator):
    """Maps the value before handing it to the wrapped schema.

    Only the wrapped schema sees the mapped value; ``parse`` still returns the
    value it was given.
    """

    def __init__(self, schema: Schema, transformer: Callable[[Any], Any]):
        self.schema = schema
        self.transformer = transformer

    def __call__(
        self, value: Any, path: str = "", origin: Origin = Origin.VALUE
    ) -> list[Issue]:
        return self.schema(self.transformer(value), path, origin)


def optional(
    schema: Schema, message: str = "", validations: Iterable[Check] | None = None
) -> OptionalOf:
    """Allow the value to be absent.

    Args:
        schema: Schema for present values
        message: Message replacing those of the schema's issues
        validations: Extension checks run once the schema accepts a present value

    Returns:
        Validator accepting ``MISSING``
    """
    return OptionalOf(schema, message, validations)


def nullable(
    schema: Schema, message: str = "", validations: Iterable[Check] | None = None
) -> NullableOf:
    """Allow the value to be ``None``."""
    return NullableOf(schema, message, validations)


def or_(*schemas: Schema) -> AnyOf:
    """Require at least one of the schemas to pass.

    Nested ``or_`` combinators are flattened.
    """
    flat: list[Schema] = []
    for schema in schemas:
        if isinstance(schema, AnyOf):
            flat.extend(schema.schemas)
        else:
            flat.append(schema)
    return AnyOf(flat)


def and_(*schemas: Schema) -> AllOf:
    """Require every schema to pass.

    Nested ``and_`` combinators are flattened.
    """
    flat: list[Schema] = []
    for schema in schemas:
        if isinstance(schema, AllOf):
            flat.extend(schema.schemas)
        else:
            flat.append(schema)
    return AllOf(flat)


def not_(schema: Schema, message: str = "") -> Not:
    """Require the schema to fail."""
    return Not(schema, message)


def lazy(resolve: Callable[[], Schema], max_depth: int | None = None) -> Lazy:
    """Defer building a schema until a value is validated.

    Args:
        resolve: Zero-argument callable returning the schema
        max_depth: Number of nested lazy resolutions past which validation
            raises ``SchemaDepthError``; defaults to ``Settings.max_depth``

    Returns:
        Validator that resolves ``resolve()`` on every call

    Example:
        ```python
        node = object_({
            "id": number(),
            "children": lazy(lambda: array(node)),
        })
        ```
    """
    return Lazy(resolve, max_depth)


def transform(schema: Schema, transformer: Callable[[Any], Any]) -> Transform:
    """Validate ``transformer(value)`` instead of the value itself."""
    return Transform(schema, transformer)
