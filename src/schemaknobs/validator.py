"""The validator contract and the leaf constructor every schema is built on.

A validator is a callable ``(value, path="", origin=Origin.VALUE)`` that
returns a list of issues: empty when the value is valid, non-empty otherwise.
Validators hold no mutable state, so one instance can be shared between
parents, reused across calls, and called from several threads at once.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING, Any, Union

from .issues import Issue, Origin, type_name
from .settings import get_settings

if TYPE_CHECKING:
    from .combinators import AllOf, AnyOf, Not
    from .results import ParseResult

# Extension entries attached to a leaf. Returning True means "no issue";
# returning False means "one generic issue".
Check = Callable[..., Union[Sequence[Issue], bool]]
Predicate = Callable[[Any], bool]


class Validator(ABC):
    """Base class for all schemas with composable operators."""

    @abstractmethod
    def __call__(
        self, value: Any, path: str = "", origin: Origin = Origin.VALUE
    ) -> list[Issue]:
        """Validate a value.

        Args:
            value: Value to validate
            path: Accessor from the validation root to this value
            origin: Whether the value is a container key or value

        Returns:
            Issues found; empty when the value is valid
        """
        pass

    def check(self, value: Any) -> ParseResult:
        """Validate a value from the root and wrap the outcome."""
        from .results import safe_parse

        return safe_parse(self, value)

    def __and__(self, other: Callable[..., list[Issue]]) -> AllOf:
        """Combine with AND: both schemas must pass."""
        from .combinators import and_

        return and_(self, other)

    def __rand__(self, other: Callable[..., list[Issue]]) -> AllOf:
        from .combinators import and_

        return and_(other, self)

    def __or__(self, other: Callable[..., list[Issue]]) -> AnyOf:
        """Combine with OR: at least one schema must pass."""
        from .combinators import or_

        return or_(self, other)

    def __ror__(self, other: Callable[..., list[Issue]]) -> AnyOf:
        from .combinators import or_

        return or_(other, self)

    def __invert__(self) -> Not:
        """Negate this schema."""
        from .combinators import not_

        return not_(self)


class Leaf(Validator):
    """A validator built from a type tag and a predicate.

    When the predicate rejects the value, exactly one issue is reported.
    Otherwise every extension check runs, in order, and their issues are
    concatenated.
    """

    def __init__(
        self,
        type_tag: str,
        predicate: Predicate,
        message: str = "",
        validations: Iterable[Check] | None = None,
    ):
        """Initialize the leaf.

        Args:
            type_tag: Tag reported as ``expected`` on issues
            predicate: The type test
            message: Message overriding the generated one
            validations: Extension checks run once the predicate passes
        """
        self.type_tag = type_tag
        self.predicate = predicate
        self.message = message
        self.validations = tuple(validations or ())

    def __call__(
        self, value: Any, path: str = "", origin: Origin = Origin.VALUE
    ) -> list[Issue]:
        if not self.predicate(value):
            return [self._issue(value, path, origin)]

        issues: list[Issue] = []
        for validation in self.validations:
            result = validation(value, path, origin)
            if result is True:
                continue
            if result is False:
                issues.append(self._issue(value, path, origin, "Invalid value"))
                continue
            issues.extend(issue for issue in result if issue is not True)
        return issues

    def _issue(
        self, value: Any, path: str, origin: Origin, default: str | None = None
    ) -> Issue:
        message = self.message or default or get_settings().format_message(
            self.type_tag, type_name(value)
        )
        return Issue(
            message=message,
            expected=self.type_tag,
            received=value,
            path=path,
            origin=origin,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type_tag!r})"


def define(
    type_tag: str, predicate: Predicate
) -> Callable[..., Leaf]:
    """Build a validator factory from a type tag and a predicate.

    Args:
        type_tag: Tag reported as ``expected`` on issues
        predicate: The type test

    Returns:
        Factory ``(message="", validations=None) -> Leaf``

    Example:
        ```python
        even = define("even", lambda v: isinstance(v, int) and v % 2 == 0)
        even()(3)
        # [Issue(message='Expected even, received int', expected='even', ...)]
        ```
    """

    def factory(
        message: str = "", validations: Iterable[Check] | None = None
    ) -> Leaf:
        return Leaf(type_tag, predicate, message, validations)

    factory.__name__ = type_tag or "custom"
    factory.__doc__ = f"Create a '{type_tag}' validator."
    return factory
