"""Recursive Validators

`with_recursion(factory)` calls `factory` with a forward reference and ties
the knot once the factory returns:

    is_tree = with_recursion(lambda tree: object_of({
        "value": number,
        "children": array_of(tree),
    }))

Every call of a forward reference counts one level of recursion depth.
The depth is a context variable shared by all recursive validators, so
mutually recursive definitions bound each other, and it is restored on
every exit path. `max_depth` rejects values nested that deep, `skip_depth`
accepts them without looking further.
"""
from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Callable

from shapeguard.errors import ConfigurationError, invalid_option, uninitialized_reference
from shapeguard.logging import recursion_logger

from .base import TypeValidator, as_validator
from .options import RecursionOptions
from .rejections import RejectionSink, create_rejection
from .transformations import DepthTransformation, StrictnessTransformation, Transformation

log = recursion_logger()

RECURSIVE_REFERENCE_TYPE = "↻(Recursive)"

_recursion_depth: ContextVar[int] = ContextVar("shapeguard_recursion_depth", default=0)

RecursionFactory = Callable[["RecursiveReference"], Any]


def current_depth() -> int:
    """Recursion depth of the validation running in this context (0 outside one)."""
    return _recursion_depth.get()


class RecursiveReference(TypeValidator):
    """Forward reference handed to a recursion factory.

    Calling it before the factory has returned raises ConfigurationError.
    """

    def __init__(self) -> None:
        self._owner: RecursiveValidator | None = None

    def _describe(self) -> str:
        return RECURSIVE_REFERENCE_TYPE

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        owner = self._owner
        if owner is None:
            raise ConfigurationError(uninitialized_reference())

        depth = _recursion_depth.get() + 1
        token = _recursion_depth.set(depth)
        try:
            options = owner.options
            if options.max_depth is not None and depth >= options.max_depth:
                log.debug("recursion_max_depth_reached", depth=depth, max_depth=options.max_depth)
                if sink is not None:
                    sink(create_rejection(f"Recursion max depth reached at {options.max_depth}", owner.type_name))
                return False
            if options.skip_depth is not None and depth >= options.skip_depth:
                return True
            return owner.definition(value, sink)
        finally:
            _recursion_depth.reset(token)


class RecursiveValidator(TypeValidator):
    """Validator produced by `with_recursion`.

    Attributes:
        factory: Builds the definition from a forward reference
        options: Depth limits checked by the forward references
        definition: The validator the factory returned
    """

    def __init__(self, factory: RecursionFactory, options: RecursionOptions):
        self.factory = factory
        self.options = options
        reference = RecursiveReference()
        self.definition = as_validator(factory(reference), origin="with_recursion")
        reference._owner = self

    def _describe(self) -> str:
        return f"↻({self.definition.type_name})"

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        return self.definition(value, sink)

    def transform(self, transformation: Transformation) -> TypeValidator:
        options = self.options
        match transformation:
            case DepthTransformation(options=requested):
                options = requested
            case StrictnessTransformation():
                pass

        # References transform to themselves, so this only reports whether the tree would change.
        if options == self.options and self.definition.transform(transformation) is self.definition:
            return self

        factory = self.factory
        return RecursiveValidator(
            lambda reference: as_validator(factory(reference), origin="with_recursion").transform(transformation),
            options)

    def set_max_depth(self, depth: int) -> TypeValidator:
        return set_max_depth(self, depth)

    def set_skip_depth(self, depth: int) -> TypeValidator:
        return set_skip_depth(self, depth)

    def reset_depth_limitation(self) -> TypeValidator:
        return reset_depth_limitation(self)


def with_recursion(factory: RecursionFactory, *, max_depth: int | None = None,
                   skip_depth: int | None = None) -> RecursiveValidator:
    """Build a self-referential validator.

    Args:
        factory: Receives the forward reference, returns the definition
        max_depth: Reject once this many references are nested
        skip_depth: Accept without descending once this many references are nested

    Raises:
        ConfigurationError: On invalid or conflicting depth options, or a
            factory that is not callable
    """
    if not callable(factory):
        raise ConfigurationError(invalid_option("factory", factory, "is not callable", origin="with_recursion"))
    return RecursiveValidator(factory, RecursionOptions.parse(max_depth=max_depth, skip_depth=skip_depth))


def set_max_depth(validator: Any, depth: int) -> TypeValidator:
    """Same tree, every recursive definition in it limited to `depth` with max_depth."""
    options = RecursionOptions.parse(max_depth=depth) if depth is not None else _missing_depth("max_depth")
    return as_validator(validator, origin="set_max_depth").transform(DepthTransformation(options))


def set_skip_depth(validator: Any, depth: int) -> TypeValidator:
    """Same tree, every recursive definition in it limited to `depth` with skip_depth."""
    options = RecursionOptions.parse(skip_depth=depth) if depth is not None else _missing_depth("skip_depth")
    return as_validator(validator, origin="set_skip_depth").transform(DepthTransformation(options))


def reset_depth_limitation(validator: Any) -> TypeValidator:
    """Same tree, with no depth limit on any recursive definition."""
    return as_validator(validator, origin="reset_depth_limitation").transform(DepthTransformation(RecursionOptions()))


def _missing_depth(option: str) -> RecursionOptions:
    raise ConfigurationError(invalid_option(option, None, "is not an integer", origin="with_recursion"))
