"""Exception Boundary

Converts AppErrors into exceptions for code paths that raise instead
of returning Results: configuration errors always raise, and callers
of `check()` may opt into raising with `raise_result`.
"""
from __future__ import annotations

from shapeguard.logging import get_logger

from .types import AppError, ErrorCode, Result, T

log = get_logger("shapeguard.errors")


class AppErrorException(Exception):
    """Exception wrapper for AppError."""

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code


class ConfigurationError(AppErrorException, ValueError):
    """Raised when a validator is constructed or used incorrectly."""


def raise_error(error: AppError) -> None:
    """Raise AppError as the matching exception.

    Usage:
        if depth < 0:
            raise_error(invalid_option("max_depth", depth, "must not be negative"))
    """
    log.debug(
        "raising_error",
        error_code=error.code.name,
        category=error.code.category,
        origin=error.origin,
    )
    if error.code.category == "configuration":
        raise ConfigurationError(error) from error.cause
    raise AppErrorException(error) from error.cause


def raise_result(result: Result[T, AppError]) -> T:
    """Return the Ok value, or raise the Err's AppError.

    Usage:
        value = raise_result(check(is_user, payload))
    """
    if result.is_err():
        raise_error(result.unwrap_err())
    return result.unwrap()
