"""Composable Runtime Validation

Validators are small callables combined into larger ones. Each answers
`validator(value, sink=None) -> bool` and, when given a sink, explains a
failure with path-qualified rejections.

Key Features:
- Primitive and literal validators (string, number, is_, enum_of, ...)
- Unions, intersections and optional values (any_of, all_of, maybe)
- Container shapes (array_of, record_of, object_of, tuple_of)
- Tagged unions dispatching on a discriminant property
- Recursive definitions with max/skip depth limits
- Tree-wide rewrites: strict()/unstrict(), set_max_depth(), ...

Usage:
    from shapeguard.validation import (
        object_of, array_of, maybe, string, integer, RejectionsCollector,
    )

    is_user = object_of({
        "name": string,
        "tags": array_of(string),
        "age": maybe(integer),
    })

    rejections = RejectionsCollector()
    if not is_user({"name": "Ada", "tags": ["x", 1]}, rejections):
        for rejection in rejections:
            print(rejection.field_path, rejection.reason)  # tags[1] Value <1> is not a string
"""

# Contract
from .base import (
    TypeValidator,
    FunctionValidator,
    MappedRejections,
    CUSTOM_TYPE,
    register_validator,
    as_validator,
    set_validator_rejection,
    map_rejection,
    type_name,
)

# Rejections
from .rejections import (
    Rejection,
    RejectionSink,
    RejectionsCollector,
    create_rejection,
    format_path,
    literal,
    rejection_message,
    stringify,
)
from .undefined import UNDEFINED, UndefinedType

# Options and transformations
from .options import Strictness, RecursionOptions
from .transformations import Transformation, StrictnessTransformation, DepthTransformation

# Leaves
from .literals import Literal, is_, literal_type, same_value
from .primitives import (
    PrimitiveValidator,
    string,
    integer,
    float_,
    number,
    boolean,
    bytes_,
    null,
    undefined,
    any_,
    unknown,
    never,
    maybe_string,
    maybe_number,
    maybe_boolean,
    maybe_integer,
    maybe_bytes,
    null_or_undefined,
)
from .functions import IsFunction, is_function

# Combinators
from .combinators import (
    RejectionOrder,
    AllOf,
    AnyOf,
    EnumOf,
    Maybe,
    all_of,
    any_of,
    enum_of,
    maybe,
    single_or_array,
)

# Structure
from .structural import (
    ArrayOf,
    RecordOf,
    ObjectOf,
    array_of,
    record_of,
    object_of,
    tuple_of,
    strict,
    unstrict,
    is_empty_array,
    is_empty_object,
)
from .tagged import TaggedUnionOf, tagged_union_of
from .recursion import (
    RecursiveValidator,
    RecursiveReference,
    with_recursion,
    current_depth,
    set_max_depth,
    set_skip_depth,
    reset_depth_limitation,
)

# Assertions
from .errors import RejectionError
from .assertions import assert_by, check

__all__ = [
    # Contract
    "TypeValidator", "FunctionValidator", "MappedRejections", "CUSTOM_TYPE",
    "register_validator", "as_validator", "set_validator_rejection", "map_rejection", "type_name",
    # Rejections
    "Rejection", "RejectionSink", "RejectionsCollector", "create_rejection", "format_path",
    "literal", "rejection_message", "stringify", "UNDEFINED", "UndefinedType",
    # Options and transformations
    "Strictness", "RecursionOptions", "Transformation", "StrictnessTransformation", "DepthTransformation",
    # Leaves
    "Literal", "is_", "literal_type", "same_value",
    "PrimitiveValidator", "string", "integer", "float_", "number", "boolean", "bytes_", "null", "undefined",
    "any_", "unknown", "never", "maybe_string", "maybe_number", "maybe_boolean", "maybe_integer",
    "maybe_bytes", "null_or_undefined", "IsFunction", "is_function",
    # Combinators
    "RejectionOrder", "AllOf", "AnyOf", "EnumOf", "Maybe",
    "all_of", "any_of", "enum_of", "maybe", "single_or_array",
    # Structure
    "ArrayOf", "RecordOf", "ObjectOf", "array_of", "record_of", "object_of", "tuple_of",
    "strict", "unstrict", "is_empty_array", "is_empty_object",
    "TaggedUnionOf", "tagged_union_of",
    "RecursiveValidator", "RecursiveReference", "with_recursion", "current_depth",
    "set_max_depth", "set_skip_depth", "reset_depth_limitation",
    # Assertions
    "RejectionError", "assert_by", "check",
]
