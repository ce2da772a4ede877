"""Callable validators."""
from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any

from shapeguard.errors import ConfigurationError, invalid_option

from .base import TypeValidator, join_types
from .rejections import RejectionSink, create_rejection, literal, rejection_message

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def required_positional_count(fn: Any) -> int | None:
    """Positional parameters without defaults, or None when the signature is unavailable."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None
    return sum(1 for parameter in signature.parameters.values()
        if parameter.kind in _POSITIONAL and parameter.default is inspect.Parameter.empty)


@dataclass(frozen=True, eq=False, repr=False)
class IsFunction(TypeValidator):
    """A callable, optionally with exactly `arg_count` required positional parameters."""
    arg_count: int | None = None

    def _describe(self) -> str:
        if self.arg_count is None: return "(...args) => *"
        if self.arg_count == 1: return "(arg) => *"
        return f"({join_types([f'arg{index}' for index in range(1, self.arg_count + 1)], ', ')}) => *"

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        if not callable(value):
            if sink is not None: sink(create_rejection(rejection_message("Value {} is not a function", value), self.type_name))
            return False
        if self.arg_count is None:
            return True

        count = required_positional_count(value)
        if count == self.arg_count: return True
        if sink is not None:
            name = getattr(value, "__name__", type(value).__name__)
            sink(create_rejection(rejection_message("Function [{}] expected to have {} parameters, but has {} instead",
                literal(name), literal(str(self.arg_count)), literal("an unknown number" if count is None else str(count))),
                self.type_name))
        return False


def is_function(arg_count: int | None = None) -> IsFunction:
    """Validator for callables.

    Raises:
        ConfigurationError: When `arg_count` is not a non-negative integer
    """
    if arg_count is not None and (not isinstance(arg_count, int) or isinstance(arg_count, bool) or arg_count < 0):
        raise ConfigurationError(invalid_option(
            "arg_count", arg_count, "must be a non-negative integer", origin="is_function"))
    return IsFunction(arg_count)
