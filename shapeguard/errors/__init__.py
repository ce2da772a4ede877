"""Error Handling

- ErrorCode: taxonomy of validation, configuration and internal errors
- AppError: immutable error record with metadata
- Result[T, E]: Ok/Err container returned by non-raising APIs
- Builders: one constructor per error the library produces
- ConfigurationError: raised for validator misuse

Usage:
    from shapeguard.errors import ConfigurationError

    try:
        with_recursion(factory, max_depth=-1)
    except ConfigurationError as exc:
        print(exc.code.name)
"""
from .types import (
    AppError,
    ErrorCode,
    Result,
    Ok,
    Err,
)

from .builders import (
    validation_failed,
    configuration_error,
    invalid_option,
    conflicting_options,
    uninitialized_reference,
    invalid_transformation,
    invalid_validator,
    empty_combinator,
)

from .handlers import (
    AppErrorException,
    ConfigurationError,
    raise_error,
    raise_result,
)

__all__ = [
    # Types
    "AppError",
    "ErrorCode",
    "Result",
    "Ok",
    "Err",
    # Builders
    "validation_failed",
    "configuration_error",
    "invalid_option",
    "conflicting_options",
    "uninitialized_reference",
    "invalid_transformation",
    "invalid_validator",
    "empty_combinator",
    # Exceptions
    "AppErrorException",
    "ConfigurationError",
    "raise_error",
    "raise_result",
]
