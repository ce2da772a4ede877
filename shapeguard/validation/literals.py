"""Literal Values

Same-value equality, literal descriptors and the `is_` validator.

Two values are the same when they are the identical object, or when both
have the same primitive type (str, int, float, bool, bytes) and are equal,
with NaN equal to NaN and 0.0 different from -0.0. So 1, 1.0 and True are
three different literals.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable

from .base import TypeValidator
from .rejections import RejectionSink, create_rejection, rejection_message
from .undefined import UNDEFINED

_PRIMITIVES = (str, int, float, bool, bytes)


def same_value_key(value: Any) -> Hashable:
    """Hashable key such that two values are the same iff their keys are equal."""
    kind = type(value)
    if kind not in _PRIMITIVES:
        return ("id", id(value))
    if kind is float:
        if math.isnan(value): return (float, "nan")
        if value == 0: return (float, "-0" if math.copysign(1.0, value) < 0 else "+0")
    return (kind, value)


def same_value(first: Any, second: Any) -> bool:
    return first is second or same_value_key(first) == same_value_key(second)


def literal_type(value: Any) -> str:
    """Descriptor of a literal, as it would appear in source."""
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, Enum):
        return f"{type(value).__name__}.{value.name}"
    if isinstance(value, str):
        return _quote(value)
    if value is None or isinstance(value, (bool, int, float, bytes)):
        return repr(value)
    if callable(value):
        name = getattr(value, "__name__", "")
        return f"is({'' if name == '<lambda>' else name}(...) => *)"
    if isinstance(value, (list, tuple)):
        return "is([ ... ])"
    if isinstance(value, Mapping):
        return "is({ ... })"
    return f"is({type(value).__name__} {{ ... }})"


def _quote(text: str) -> str:
    for quote in ("'", '"', "`"):
        if quote not in text: return f"{quote}{text}{quote}"
    return repr(text)


@dataclass(frozen=True, eq=False, repr=False)
class Literal(TypeValidator):
    """Accepts only the same value as `expected`."""
    expected: Any

    def _describe(self) -> str:
        return literal_type(self.expected)

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        if same_value(value, self.expected): return True
        if sink is not None:
            sink(create_rejection(
                rejection_message("Value {} is not equal to {}", value, self.expected), self.type_name))
        return False


def is_(expected: Any) -> Literal:
    """Validator accepting only `expected` (same-value equality)."""
    return Literal(expected)
