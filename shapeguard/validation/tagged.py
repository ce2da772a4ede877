"""Tagged Unions

Dispatch on a discriminant property: the value's `tag_key` selects exactly
one branch validator, and only that branch runs.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Hashable

from shapeguard.errors import ConfigurationError, empty_combinator, invalid_option
from shapeguard.logging import validation_logger

from .base import TypeValidator, as_validator, join_types, transform_children
from .literals import same_value_key
from .rejections import RejectionSink, create_rejection, literal, rejection_message
from .transformations import Transformation
from .undefined import UNDEFINED

log = validation_logger()


@dataclass(frozen=True, eq=False, repr=False)
class TaggedUnionOf(TypeValidator):
    """Mapping validated by the branch registered for its tag value.

    Tags match with same-value equality, so `1` and `True` are different tags.
    """
    tag_key: Hashable
    branches: tuple[tuple[Any, TypeValidator], ...]

    @cached_property
    def _by_tag(self) -> dict[Hashable, TypeValidator]:
        return {same_value_key(tag): validator for tag, validator in self.branches}

    def union_spec(self) -> dict[Any, TypeValidator]:
        """Copy of the resolved tag-to-validator map, for building larger unions."""
        return dict(self.branches)

    def _describe(self) -> str:
        return join_types([validator.type_name for _, validator in self.branches], " | ")

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        if not isinstance(value, Mapping):
            if sink is not None: sink(create_rejection(rejection_message("Value {} is not an object", value), self.type_name))
            return False

        tag = value.get(self.tag_key, UNDEFINED)
        validator = self._by_tag.get(same_value_key(tag))
        if validator is None:
            if sink is not None:
                sink(create_rejection(rejection_message("Value {} has an invalid tag {}", value, tag), self.type_name))
            return False

        if sink is None: return validator(value)
        return validator(value, lambda rejection: sink(rejection.with_reason(
            rejection_message("Validation for tag {} failed:\n{}", tag, literal(rejection.reason)))))

    def transform(self, transformation: Transformation) -> TypeValidator:
        validators = transform_children([validator for _, validator in self.branches], transformation)
        if validators is None: return self
        return TaggedUnionOf(self.tag_key, tuple((tag, validator)
            for (tag, _), validator in zip(self.branches, validators)))


def tagged_union_of(tag_key: Hashable, *specs: Mapping[Any, Any]) -> TaggedUnionOf:
    """Validator dispatching on `value[tag_key]`.

    Args:
        tag_key: Key of the discriminant property
        specs: Mappings of tag value to validator. Later specs override
            tags already registered by earlier ones.

    Usage:
        is_shape = tagged_union_of("kind",
            {"circle": object_of({"kind": is_("circle"), "radius": number})},
            is_polygon.union_spec(),
        )

    Raises:
        ConfigurationError: Without specs, or when a spec is not a mapping
    """
    if not specs:
        raise ConfigurationError(empty_combinator("tagged_union_of"))

    branches: dict[Hashable, tuple[Any, TypeValidator]] = {}
    for spec in specs:
        if not isinstance(spec, Mapping):
            raise ConfigurationError(invalid_option("spec", spec, "must be a mapping", origin="tagged_union_of"))
        for tag, validator in spec.items():
            key = same_value_key(tag)
            if key in branches:
                log.warning("tagged_union_tag_overridden", tag_key=str(tag_key), tag=repr(tag))
            branches[key] = (tag, as_validator(validator, origin="tagged_union_of"))

    return TaggedUnionOf(tag_key, tuple(branches.values()))
