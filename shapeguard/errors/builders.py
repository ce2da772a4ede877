"""Error Builders

Ergonomic constructors for every error the library produces. Each
builder creates an AppError with the appropriate code and metadata.
"""
from typing import Any, Sequence

from .types import AppError, ErrorCode, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_failed(
    value: Any,
    rejections: Sequence[Any],
    *,
    type_name: str,
    origin: str = "",
) -> Err[AppError]:
    """Create the error returned by `check()` when a value is rejected."""
    return Err(AppError(
        code=ErrorCode.E2000_VALIDATION_GENERIC,
        message=f"Value does not match {type_name}",
        origin=origin,
        metadata={
            "type": type_name,
            "value": value,
            "rejection_count": len(rejections),
            "rejections": [rejection.to_dict() for rejection in rejections],
        },
    ))


# =============================================================================
# Configuration Errors (E7xxx)
# =============================================================================

def configuration_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E7000_CONFIGURATION_GENERIC,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> AppError:
    """Create configuration (library misuse) error."""
    return AppError(
        code=code,
        message=message,
        origin=origin,
        metadata={k: v for k, v in metadata.items() if v is not None},
        cause=cause,
    )


def invalid_option(
    option: str, value: Any, reason: str, origin: str = "", cause: Exception | None = None
) -> AppError:
    return configuration_error(
        f"Invalid `{origin or 'validator'}` {option}. [{value!r}] {reason}",
        code=ErrorCode.E7001_INVALID_OPTION,
        origin=origin,
        cause=cause,
        option=option,
        value=repr(value),
    )


def conflicting_options(first: str, second: str, origin: str = "") -> AppError:
    return configuration_error(
        f"`{origin or 'validator'}` {first} cannot be used at the same time with {second}",
        code=ErrorCode.E7002_CONFLICTING_OPTIONS,
        origin=origin,
        options=[first, second],
    )


def uninitialized_reference(origin: str = "with_recursion") -> AppError:
    return configuration_error(
        "Recursive validation reference must not be called before initialization",
        code=ErrorCode.E7003_UNINITIALIZED_REFERENCE,
        origin=origin,
    )


def invalid_transformation(transformation: Any, reason: str, origin: str = "") -> AppError:
    return configuration_error(
        f"Invalid transformation: {reason}",
        code=ErrorCode.E7004_INVALID_TRANSFORMATION,
        origin=origin,
        transformation=repr(transformation),
    )


def invalid_validator(candidate: Any, origin: str = "") -> AppError:
    return configuration_error(
        f"Expected a validator or a predicate, got {type(candidate).__name__}",
        code=ErrorCode.E7005_INVALID_VALIDATOR,
        origin=origin,
        candidate=repr(candidate),
    )


def empty_combinator(name: str) -> AppError:
    return configuration_error(
        f"`{name}` requires at least one argument",
        code=ErrorCode.E7006_EMPTY_COMBINATOR,
        origin=name,
    )
