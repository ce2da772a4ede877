"""Validator Contract

Every validator is a callable `validator(value, sink=None) -> bool`:
- returns the verdict, which never depends on whether a sink is given
- calls `sink` zero times on success and at least once on failure
- carries a type descriptor (`type_name`), computed lazily on first use
- derives a memoized one-argument predicate (`as_predicate()`)
- rebuilds itself under a transformation (`transform()`), identity by default

Combinators subclass TypeValidator directly. Plain functions become
validators through `register_validator`, and combinator inputs are
normalized with `as_validator`, which also lifts bare predicates.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from typing import TYPE_CHECKING, Any, Callable, Iterable, Sequence

from shapeguard.config import settings
from shapeguard.errors import ConfigurationError, invalid_validator

from .rejections import Rejection, RejectionSink, create_rejection, rejection_message

if TYPE_CHECKING:
    from .transformations import Transformation

CUSTOM_TYPE = "* (Custom type)"

ValidatorFunction = Callable[[Any, "RejectionSink | None"], bool]
TypeDescription = str | Callable[[], str]


class TypeValidator(ABC):
    """Base class for validators.

    Validators are immutable: `transform` and the strictness/depth helpers
    return new validators. They compare and hash by identity.
    """

    @abstractmethod
    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        """Check `value`, reporting rejections to `sink` on failure."""

    @abstractmethod
    def _describe(self) -> str:
        """Compute the type descriptor. Called at most once per instance."""

    @cached_property
    def type_name(self) -> str:
        """Human-readable description of the accepted values."""
        return self._describe()

    def describe(self) -> str:
        return self.type_name

    @cached_property
    def _predicate(self) -> Callable[[Any], bool]:
        return lambda value: self.validate(value)

    def as_predicate(self) -> Callable[[Any], bool]:
        """One-argument predicate, the same object on every call."""
        return self._predicate

    def transform(self, transformation: Transformation) -> TypeValidator:
        return self

    def __call__(self, value: Any, sink: RejectionSink | None = None) -> bool:
        return self.validate(value, sink)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.type_name}>"


class FunctionValidator(TypeValidator):
    """Validator backed by a `(value, sink) -> bool` function.

    Usage:
        def is_even(value, sink=None):
            if isinstance(value, int) and value % 2 == 0: return True
            if sink is not None: sink(create_rejection(rejection_message("Value {} is odd", value), "even"))
            return False

        even = register_validator(is_even, "even")
    """

    def __init__(self, fn: ValidatorFunction, type_description: TypeDescription,
                 transform: Callable[[Transformation], TypeValidator] | None = None):
        self._fn = fn
        self._type_description = type_description
        self._transform = transform

    @property
    def function(self) -> ValidatorFunction:
        return self._fn

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        return bool(self._fn(value, sink))

    def _describe(self) -> str:
        description = self._type_description
        return description() if callable(description) else description

    def transform(self, transformation: Transformation) -> TypeValidator:
        if self._transform is None: return self
        return self._transform(transformation)


def register_validator(fn: ValidatorFunction, type_description: TypeDescription,
                       transform: Callable[[Transformation], TypeValidator] | None = None) -> FunctionValidator:
    """Decorate a `(value, sink) -> bool` function into a validator.

    Args:
        fn: Check that reports its own rejections to the sink
        type_description: Descriptor, or a zero-argument function computing it on first use
        transform: Optional transformation hook; without it the validator transforms to itself
    """
    return FunctionValidator(fn, type_description, transform)


def type_name(validator: Any) -> str:
    """Descriptor of a validator, or `* (<function name>)` for a bare predicate."""
    if isinstance(validator, TypeValidator):
        return validator.type_name
    name = getattr(validator, "__name__", None)
    if not name or name == "<lambda>":
        return CUSTOM_TYPE
    return f"* ({name})"


def as_validator(candidate: Any, origin: str = "as_validator") -> TypeValidator:
    """Normalize a combinator input into a TypeValidator.

    Validators pass through. A one-argument predicate is lifted into a
    validator that emits a generic rejection when the predicate is false.

    Raises:
        ConfigurationError: When the candidate is neither
    """
    if isinstance(candidate, TypeValidator):
        return candidate
    if callable(candidate):
        return set_validator_rejection(candidate)
    raise ConfigurationError(invalid_validator(candidate, origin=origin))


def as_validators(candidates: Iterable[Any], origin: str) -> tuple[TypeValidator, ...]:
    return tuple(as_validator(candidate, origin) for candidate in candidates)


def transform_children(validators: Sequence[TypeValidator],
                       transformation: Transformation) -> tuple[TypeValidator, ...] | None:
    """Transformed validators, or None when none of them changed."""
    transformed = tuple(validator.transform(transformation) for validator in validators)
    if all(new is old for new, old in zip(transformed, validators)):
        return None
    return transformed


def set_validator_rejection(predicate: Callable[[Any], Any],
                            rejection_factory: Callable[[Any], Rejection] | None = None,
                            type_description: str | None = None) -> FunctionValidator:
    """Wrap a one-argument predicate so it reports a rejection when it fails.

    Args:
        predicate: Function returning a truthy value for accepted values
        rejection_factory: Builds the rejection from the failed value
        type_description: Descriptor; defaults to `type_name(predicate)`
    """
    description = type_description or type_name(predicate)
    if rejection_factory is None:
        def rejection_factory(value: Any) -> Rejection:
            return create_rejection(rejection_message("Value {} failed validation", value), description)

    def validate(value: Any, sink: RejectionSink | None) -> bool:
        if predicate(value): return True
        if sink is not None: sink(rejection_factory(value))
        return False

    return register_validator(validate, description)


class MappedRejections(TypeValidator):
    """Validator whose rejections pass through `projection(value, rejection)`."""

    def __init__(self, inner: TypeValidator, projection: Callable[[Any, Rejection], Rejection],
                 type_description: str | None = None):
        self.inner = inner
        self.projection = projection
        self._type_description = type_description

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        if sink is None: return self.inner(value)
        return self.inner(value, lambda rejection: sink(self.projection(value, rejection)))

    def _describe(self) -> str:
        return self._type_description or self.inner.type_name

    def transform(self, transformation: Transformation) -> TypeValidator:
        if (inner := self.inner.transform(transformation)) is self.inner: return self
        return MappedRejections(inner, self.projection, self._type_description)


def map_rejection(validator: Any, projection: Callable[[Any, Rejection], Rejection],
                  type_description: str | None = None) -> MappedRejections:
    return MappedRejections(as_validator(validator, origin="map_rejection"), projection, type_description)


# ============================================================================
# Descriptor helpers
# ============================================================================

def elide(items: Sequence[str], limit: int | None = None) -> list[str]:
    """First two, `...`, last two when there are more than `limit` items."""
    limit = settings.MAX_DISPLAYED_TYPES if limit is None else limit
    if len(items) <= limit:
        return list(items)
    return [*items[:2], "...", *items[-2:]]


def join_types(names: Sequence[str], separator: str) -> str:
    return separator.join(elide(names))
