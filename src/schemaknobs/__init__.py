"""schemaknobs - composable runtime schema validation.

A schema is a callable that checks a value and returns the list of issues it
found, so every problem can be reported rather than just the first.

Example:
    ```python
    from schemaknobs import array, integer, min_, object_, optional, safe_parse, string

    user = object_({
        "name": string(validations=[min_(1)]),
        "age": optional(integer()),
        "tags": array(string()),
    })

    result = safe_parse(user, {"name": "", "tags": ["a", 1]})
    for issue in result.issues:
        print(issue.path, issue.message)
    # name Min 1
    # tags[1] Expected string, received int
    ```
"""

from .combinators import (
    AllOf,
    AnyOf,
    Lazy,
    Not,
    NullableOf,
    OptionalOf,
    Transform,
    and_,
    lazy,
    not_,
    nullable,
    optional,
    or_,
    transform,
)
from .composites import (
    ContainerKind,
    array,
    kind_of,
    map_,
    object_,
    record,
    set_,
    strict,
    tuple_,
)
from .constraints import custom, length, max_, min_, pattern
from .exceptions import (
    ConfigurationError,
    OperationError,
    SchemaDepthError,
    SchemaknobsError,
    SchemaValidationError,
    ValidationError,
)
from .issues import MISSING, Issue, Origin, type_name
from .primitives import (
    any_,
    bigint,
    boolean,
    date,
    enums,
    func,
    instance,
    integer,
    literal,
    missing,
    never,
    none,
    nullish,
    number,
    promise,
    same_value,
    string,
    symbol,
    unknown,
)
from .results import ParseResult, is_, parse, safe_parse
from .settings import Settings, configure, get_settings, reset_settings
from .validator import Leaf, Validator, define

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Contract
    "Validator",
    "Leaf",
    "define",
    "Issue",
    "Origin",
    "MISSING",
    "type_name",
    # Primitives
    "string",
    "number",
    "boolean",
    "bigint",
    "symbol",
    "func",
    "date",
    "promise",
    "integer",
    "literal",
    "instance",
    "enums",
    "nullish",
    "none",
    "missing",
    "never",
    "any_",
    "unknown",
    "same_value",
    # Composites
    "ContainerKind",
    "kind_of",
    "array",
    "tuple_",
    "object_",
    "strict",
    "record",
    "map_",
    "set_",
    # Combinators
    "OptionalOf",
    "NullableOf",
    "AnyOf",
    "AllOf",
    "Not",
    "Lazy",
    "Transform",
    "optional",
    "nullable",
    "or_",
    "and_",
    "not_",
    "lazy",
    "transform",
    # Constraints
    "min_",
    "max_",
    "length",
    "pattern",
    "custom",
    # Results
    "ParseResult",
    "is_",
    "parse",
    "safe_parse",
    # Exceptions
    "SchemaknobsError",
    "ValidationError",
    "ConfigurationError",
    "OperationError",
    "SchemaValidationError",
    "SchemaDepthError",
    # Settings
    "Settings",
    "get_settings",
    "configure",
    "reset_settings",
]
