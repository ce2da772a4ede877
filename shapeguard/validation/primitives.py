"""Primitive Validators

One validator per runtime kind. The seven leaf kinds are disjoint:

- string: str
- integer: int (bool excluded)
- float_: float
- boolean: bool
- bytes_: bytes
- null: None
- undefined: the UNDEFINED sentinel (an absent key or position)

Plus `number` (int or float), `any_`/`unknown` (everything), `never`
(nothing), and prebuilt optional variants.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .base import TypeValidator
from .combinators import maybe
from .rejections import RejectionSink, create_rejection, literal, rejection_message
from .undefined import UNDEFINED


@dataclass(frozen=True, eq=False, repr=False)
class PrimitiveValidator(TypeValidator):
    """Leaf validator for one runtime kind.

    Rejections carry an empty path; the enclosing validator adds the key.
    """
    name: str
    accepts: Callable[[Any], bool]
    reason: str = "Value {} is not a {}"

    def _describe(self) -> str:
        return self.name

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        if self.accepts(value): return True
        if sink is not None: sink(create_rejection(rejection_message(self.reason, value, literal(self.name)), self.name))
        return False


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


string = PrimitiveValidator("string", lambda value: isinstance(value, str))
integer = PrimitiveValidator("integer", _is_integer)
float_ = PrimitiveValidator("float", lambda value: isinstance(value, float))
number = PrimitiveValidator("number", lambda value: _is_integer(value) or isinstance(value, float))
boolean = PrimitiveValidator("boolean", lambda value: isinstance(value, bool))
bytes_ = PrimitiveValidator("bytes", lambda value: isinstance(value, bytes))
null = PrimitiveValidator("None", lambda value: value is None, reason="Value {} is not {}")
undefined = PrimitiveValidator("undefined", lambda value: value is UNDEFINED, reason="Value {} is not {}")

any_ = PrimitiveValidator("*", lambda value: True)
unknown = any_
never = PrimitiveValidator("X (never)", lambda value: False, reason="Value {} is not allowed ({})")

maybe_string = maybe(string)
maybe_number = maybe(number)
maybe_boolean = maybe(boolean)
maybe_integer = maybe(integer)
maybe_bytes = maybe(bytes_)
null_or_undefined = maybe(null)
