"""shapeguard: composable runtime type validation.

Usage:
    from shapeguard import object_of, number, string, assert_by

    assert_point = assert_by(object_of({"x": number, "y": number, "label": string}))
    assert_point({"x": 1, "y": 2.5, "label": "origin"})
"""
from shapeguard.errors import AppError, ConfigurationError, Err, ErrorCode, Ok, Result
from shapeguard.logging import configure_logging
from shapeguard.validation import *  # noqa: F401,F403
from shapeguard.validation import __all__ as _validation_all

__version__ = "0.1.0"

__all__ = [
    *_validation_all,
    "AppError", "ConfigurationError", "Err", "ErrorCode", "Ok", "Result",
    "configure_logging",
]
