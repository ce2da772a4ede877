"""Assertions and Results

Two ways to turn a verdict into control flow:

- assert_by: build a function that raises when a value is rejected
- check: return Ok(value) or Err(AppError) with the rejections in metadata

Usage:
    assert_user = assert_by(is_user)
    assert_user(payload)  # raises RejectionError

    result = check(is_user, payload)
    if result.is_err():
        log.info("invalid_user", **result.unwrap_err().metadata)
"""
from __future__ import annotations

from typing import Any, Callable

from shapeguard.errors import AppError, Ok, Result, validation_failed
from shapeguard.logging import validation_logger

from .base import as_validator
from .errors import RejectionError
from .rejections import Rejection, RejectionsCollector

log = validation_logger()

ErrorFactory = Callable[[Any, list[Rejection]], BaseException]
Assertion = Callable[[Any], None]


def _default_error(property_type: str) -> ErrorFactory:
    def factory(value: Any, rejections: list[Rejection]) -> RejectionError:
        return RejectionError(message=f"Value does not match {property_type}", value=value,
            rejections=rejections, property_type=property_type)
    return factory


def assert_by(validator: Any, err_factory: ErrorFactory | None = None) -> Assertion:
    """Assertion raising `err_factory(value, rejections)` for rejected values.

    Args:
        validator: Validator or one-argument predicate
        err_factory: Builds the exception from the value and every collected
            rejection. Defaults to RejectionError.
    """
    checked = as_validator(validator, origin="assert_by")
    factory = err_factory or _default_error(checked.type_name)

    def assertion(value: Any) -> None:
        rejections = RejectionsCollector()
        if checked(value, rejections): return
        log.debug("assertion_failed", property_type=checked.type_name, rejection_count=len(rejections))
        raise factory(value, rejections.to_list())

    return assertion


def check(validator: Any, value: Any) -> Result[Any, AppError]:
    """Validate without raising: Ok(value), or Err with the rejections."""
    checked = as_validator(validator, origin="check")
    rejections = RejectionsCollector()
    if checked(value, rejections):
        return Ok(value)
    return validation_failed(value, rejections.to_list(), type_name=checked.type_name, origin="check")
