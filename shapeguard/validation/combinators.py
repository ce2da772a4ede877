"""Combinators

- all_of: every validator must accept (intersection)
- any_of: at least one validator must accept (union)
- enum_of: the value must be one of the listed literals
- maybe: undefined (and optionally None) or the wrapped type
- single_or_array: a value or an array of such values
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from shapeguard.errors import ConfigurationError, empty_combinator

from .base import TypeValidator, as_validator, as_validators, join_types, transform_children
from .literals import literal_type, same_value_key
from .rejections import Rejection, RejectionSink, create_rejection, literal, rejection_message
from .structural import array_of
from .transformations import Transformation
from .undefined import UNDEFINED


class RejectionOrder(str, Enum):
    """Order in which a failed union reports its branches' rejections."""
    DEEPEST_FIRST = "deepest-first"
    BRANCH_ORDER = "branch-order"


@dataclass(frozen=True, eq=False, repr=False)
class AllOf(TypeValidator):
    """All validators must accept.

    Without a sink validation stops at the first failure. With a sink
    every validator runs so all reasons surface.
    """
    validators: tuple[TypeValidator, ...]

    def _describe(self) -> str:
        return join_types([validator.type_name for validator in self.validators], " & ")

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        if sink is None:
            return all(validator(value) for validator in self.validators)
        results = [validator(value, sink) for validator in self.validators]
        return all(results)

    def transform(self, transformation: Transformation) -> TypeValidator:
        if (validators := transform_children(self.validators, transformation)) is None: return self
        return replace(self, validators=validators)


@dataclass(frozen=True, eq=False, repr=False)
class AnyOf(TypeValidator):
    """At least one validator must accept (evaluated left to right, lazily).

    Rejections of the attempted branches are buffered and reported only
    when every branch failed.
    """
    validators: tuple[TypeValidator, ...]
    rejection_order: RejectionOrder = RejectionOrder.DEEPEST_FIRST

    def _describe(self) -> str:
        return join_types([validator.type_name for validator in self.validators], " | ")

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        if sink is None:
            return any(validator(value) for validator in self.validators)

        rejections: list[Rejection] = []
        if any(validator(value, rejections.append) for validator in self.validators): return True

        if self.rejection_order is RejectionOrder.DEEPEST_FIRST:
            rejections.sort(key=lambda rejection: len(rejection.path), reverse=True)
        for rejection in rejections:
            sink(rejection)
        return False

    def transform(self, transformation: Transformation) -> TypeValidator:
        if (validators := transform_children(self.validators, transformation)) is None: return self
        return replace(self, validators=validators)


@dataclass(frozen=True, eq=False, repr=False)
class EnumOf(TypeValidator):
    """The value must be one of `values` (same-value equality, set lookup)."""
    values: tuple[Any, ...]
    keys: frozenset

    def __init__(self, *values: Any):
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "keys", frozenset(same_value_key(value) for value in values))

    def _describe(self) -> str:
        return join_types([literal_type(value) for value in self.values], " | ")

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        if same_value_key(value) in self.keys: return True
        if sink is not None:
            options = ", ".join(literal_type(option) for option in self.values)
            sink(create_rejection(
                rejection_message("Value {} is not one of {}", value, literal(options)), self.type_name))
        return False


@dataclass(frozen=True, eq=False, repr=False)
class Maybe(TypeValidator):
    """Undefined, None when `include_null`, or a value accepted by `validator`."""
    validator: TypeValidator
    include_null: bool = False

    @property
    def _accepted_type(self) -> str:
        return f"{self.validator.type_name} | None" if self.include_null else self.validator.type_name

    def _describe(self) -> str:
        return f"?({self._accepted_type})"

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        if value is UNDEFINED or (self.include_null and value is None): return True
        if sink is None: return self.validator(value)

        rejections: list[Rejection] = []
        if self.validator(value, rejections.append): return True

        template = "Value {} is not undefined, None, nor {}" if self.include_null else "Value {} is not undefined nor {}"
        sink(create_rejection(rejection_message(template, value, literal(self._accepted_type)), self.type_name))
        for rejection in rejections:
            sink(rejection)
        return False

    def transform(self, transformation: Transformation) -> TypeValidator:
        if (validator := self.validator.transform(transformation)) is self.validator: return self
        return replace(self, validator=validator)


def all_of(*validators: Any) -> AllOf:
    """Validator accepting values every one of `validators` accepts.

    Raises:
        ConfigurationError: When called without validators
    """
    if not validators:
        raise ConfigurationError(empty_combinator("all_of"))
    return AllOf(as_validators(validators, origin="all_of"))


def any_of(*validators: Any, rejection_order: RejectionOrder = RejectionOrder.DEEPEST_FIRST) -> AnyOf:
    """Validator accepting values at least one of `validators` accepts.

    Args:
        validators: Validators or one-argument predicates
        rejection_order: DEEPEST_FIRST sorts rejections by descending path
            length (ties keep branch order); BRANCH_ORDER keeps branch order

    Raises:
        ConfigurationError: When called without validators
    """
    if not validators:
        raise ConfigurationError(empty_combinator("any_of"))
    return AnyOf(as_validators(validators, origin="any_of"), RejectionOrder(rejection_order))


def enum_of(*values: Any) -> EnumOf:
    """Validator accepting only the listed literals.

    Usage:
        color = enum_of("red", "green", "blue")
        color("red")  # True
    """
    if not values:
        raise ConfigurationError(empty_combinator("enum_of"))
    return EnumOf(*values)


def maybe(validator: Any, include_null: bool = False) -> Maybe:
    return Maybe(as_validator(validator, origin="maybe"), include_null)


def single_or_array(validator: Any) -> AnyOf:
    """A value accepted by `validator`, or an array of such values."""
    element = as_validator(validator, origin="single_or_array")
    return any_of(element, array_of(element))


