"""Structural Validators

Shape checks over containers. Rejections of a nested value get the key
or index of that value appended to their path.

- array_of: every element of a list/tuple
- record_of: every entry of a mapping (and optionally every key)
- object_of: named properties of a mapping, or positions of a list/tuple
- tuple_of: strict positional shape
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from functools import cached_property
from typing import Any, Hashable

from shapeguard.errors import ConfigurationError, invalid_option

from .base import TypeValidator, as_validator, elide, register_validator, transform_children
from .options import Strictness
from .rejections import (
    RejectionSink,
    create_rejection,
    keyed,
    literal,
    path_key,
    rejection_message,
)
from .transformations import DepthTransformation, StrictnessTransformation, Transformation
from .undefined import UNDEFINED

_SEQUENCES = (list, tuple)


def _reject(sink: RejectionSink | None, template: str, value: Any, property_type: str) -> bool:
    if sink is not None: sink(create_rejection(rejection_message(template, value), property_type))
    return False


@dataclass(frozen=True, eq=False, repr=False)
class ArrayOf(TypeValidator):
    """A list or tuple whose every element `element` accepts.

    Validation stops at the first failing element.
    """
    element: TypeValidator

    def _describe(self) -> str:
        return f"ArrayOf({self.element.type_name})"

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        if not isinstance(value, _SEQUENCES):
            return _reject(sink, "Value {} is not an array", value, self.type_name)
        return all(self.element(item, keyed(sink, index)) for index, item in enumerate(value))

    def transform(self, transformation: Transformation) -> TypeValidator:
        if (element := self.element.transform(transformation)) is self.element: return self
        return replace(self, element=element)


@dataclass(frozen=True, eq=False, repr=False)
class RecordOf(TypeValidator):
    """A mapping whose every value (and key, when `key_validator` is set) is valid."""
    value_validator: TypeValidator
    key_validator: TypeValidator | None = None

    def _describe(self) -> str:
        key_type = "*" if self.key_validator is None else self.key_validator.type_name
        return f"{{ [{key_type}]: {self.value_validator.type_name} }}"

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        if not isinstance(value, Mapping):
            return _reject(sink, "Value {} is not an object", value, self.type_name)

        for key, item in value.items():
            if self.key_validator is not None and not self.key_validator(key, _invalid_key(sink, key)):
                return False
            if not self.value_validator(item, keyed(sink, path_key(key))):
                return False
        return True

    def transform(self, transformation: Transformation) -> TypeValidator:
        children = [self.value_validator] if self.key_validator is None else [self.value_validator, self.key_validator]
        if (transformed := transform_children(children, transformation)) is None: return self
        return replace(self, value_validator=transformed[0],
            key_validator=transformed[1] if self.key_validator is not None else None)


def _invalid_key(sink: RejectionSink | None, key: Any) -> RejectionSink | None:
    if sink is None:
        return None
    return lambda rejection: sink(rejection.with_reason(
        rejection_message("Invalid record key {}: {}", key, literal(rejection.reason))))


@dataclass(frozen=True, eq=False, repr=False)
class ObjectOf(TypeValidator):
    """Named properties of a mapping, or positions of a list/tuple in tuple mode.

    Missing keys and positions are validated as UNDEFINED. When strict, keys
    outside the property spec are rejected as redundant, and tuples must match the
    property spec length. A locked validator keeps its strictness through bulk
    strict()/unstrict() rewrites of an enclosing validator.
    """
    properties: tuple[tuple[Hashable, TypeValidator], ...]
    strictness: Strictness = Strictness.UNSTRICT
    is_tuple: bool = False

    @property
    def is_strict(self) -> bool:
        return self.strictness.is_strict

    @property
    def is_locked(self) -> bool:
        return self.strictness.is_locked

    @cached_property
    def _keys(self) -> frozenset:
        return frozenset(key for key, _ in self.properties)

    def property_spec(self) -> dict[Hashable, TypeValidator] | list[TypeValidator]:
        """Copy of the property spec this validator was built from (validators normalized)."""
        if self.is_tuple:
            return [validator for _, validator in self.properties]
        return dict(self.properties)

    def _describe(self) -> str:
        if self.is_tuple:
            entries = elide([validator.type_name for _, validator in self.properties])
            if not self.is_strict: entries.append("...*[]")
            return f"[ {', '.join(entries)} ]" if entries else "[]"

        entries = elide([f"{_literal_key(key)}: {validator.type_name}" for key, validator in self.properties])
        if not self.is_strict: entries.append("[*]: *")
        return f"{{ {', '.join(entries)} }}" if entries else "{}"

    def validate(self, value: Any, sink: RejectionSink | None = None) -> bool:
        if self.is_tuple and not isinstance(value, _SEQUENCES):
            return _reject(sink, "Value {} is not an array", value, self.type_name)
        if not self.is_tuple and not isinstance(value, Mapping):
            return _reject(sink, "Value {} is not an object", value, self.type_name)

        valid = True
        for key, validator in self.properties:
            if validator(self._property(value, key), keyed(sink, path_key(key))): continue
            if sink is None: return False
            valid = False

        if self.is_strict:
            valid = self._check_redundant(value, sink) and valid
        return valid

    def _property(self, value: Any, key: Hashable) -> Any:
        if self.is_tuple:
            return value[key] if key < len(value) else UNDEFINED
        return value.get(key, UNDEFINED)

    def _check_redundant(self, value: Any, sink: RejectionSink | None) -> bool:
        if self.is_tuple:
            if len(value) == len(self.properties): return True
            if sink is not None:
                sink(create_rejection(rejection_message("Value {} has length {}, expected {}",
                    value, literal(str(len(value))), literal(str(len(self.properties)))), self.type_name))
            return False

        valid = True
        for key in value:
            if key in self._keys: continue
            if sink is None: return False
            sink(create_rejection(
                rejection_message("Object has redundant key {}, and failed strict validation", key),
                self.type_name, (path_key(key),)))
            valid = False
        return valid

    def transform(self, transformation: Transformation) -> TypeValidator:
        validators = transform_children([validator for _, validator in self.properties], transformation)
        strictness = self.strictness

        match transformation:
            case StrictnessTransformation(strictness=requested):
                if requested.overrides_lock or not self.strictness.is_locked:
                    strictness = requested.normalized()
            case DepthTransformation():
                pass

        if validators is None and strictness is self.strictness: return self
        properties = self.properties if validators is None else tuple(
            (key, validator) for (key, _), validator in zip(self.properties, validators))
        return replace(self, properties=properties, strictness=strictness)

    def strict(self) -> TypeValidator:
        """This validator and every unlocked nested object validator, made strict."""
        return strict(self)

    def unstrict(self) -> TypeValidator:
        """This validator and every unlocked nested object validator, made non-strict."""
        return unstrict(self)

    def lock(self) -> ObjectOf:
        """Same strictness, immune to bulk rewrites. Nested validators are unaffected."""
        if self.is_locked: return self
        return replace(self, strictness=self.strictness.locked())

    def unlock(self) -> ObjectOf:
        if not self.is_locked: return self
        return replace(self, strictness=self.strictness.unlocked())


def _literal_key(key: Hashable) -> str:
    if isinstance(key, str) and key.isidentifier():
        return key
    return f'"{key}"'


def array_of(element: Any) -> ArrayOf:
    return ArrayOf(as_validator(element, origin="array_of"))


def record_of(value_validator: Any, key_validator: Any = None) -> RecordOf:
    """Validator for a homogeneous mapping.

    Usage:
        scores = record_of(number, key_validator=string)
        scores({"alice": 3, "bob": 4.5})  # True
    """
    return RecordOf(as_validator(value_validator, origin="record_of"),
        None if key_validator is None else as_validator(key_validator, origin="record_of"))


def object_of(property_spec: Mapping[Hashable, Any] | list | tuple, *,
              strict: Strictness | bool | str | None = None) -> ObjectOf:
    """Validator for an object (mapping spec) or tuple (list/tuple spec) shape.

    Args:
        property_spec: Mapping of key to validator, or sequence of validators
        strict: Strictness, or True/False. Objects default to non-strict,
            tuples to strict.

    Usage:
        is_point = object_of({"x": number, "y": number}, strict=True)
        is_point({"x": 1, "y": 2})          # True
        is_point({"x": 1, "y": 2, "z": 3})  # False

    Raises:
        ConfigurationError: On an unsupported property spec or strictness
    """
    if isinstance(property_spec, Mapping):
        is_tuple, entries = False, list(property_spec.items())
    elif isinstance(property_spec, _SEQUENCES):
        is_tuple, entries = True, list(enumerate(property_spec))
    else:
        raise ConfigurationError(invalid_option(
            "property_spec", property_spec, "must be a mapping or a list", origin="object_of"))

    strictness = Strictness.coerce(strict, default=Strictness.STRICT if is_tuple else Strictness.UNSTRICT)
    properties = tuple((key, as_validator(validator, origin="object_of")) for key, validator in entries)
    return ObjectOf(properties, strictness, is_tuple)


def tuple_of(*validators: Any) -> ObjectOf:
    """Strict positional shape: `tuple_of(string, number)` accepts `["a", 1]`."""
    return object_of(list(validators), strict=True)


def strict(validator: Any) -> TypeValidator:
    """Rewrite every unlocked object validator in the tree as strict."""
    return as_validator(validator, origin="strict").transform(StrictnessTransformation(Strictness.STRICT))


def unstrict(validator: Any) -> TypeValidator:
    """Rewrite every unlocked object validator in the tree as non-strict."""
    return as_validator(validator, origin="unstrict").transform(StrictnessTransformation(Strictness.UNSTRICT))


def _is_empty_array(value: Any, sink: RejectionSink | None) -> bool:
    if not isinstance(value, _SEQUENCES):
        return _reject(sink, "Value {} is not an array", value, "[]")
    if value:
        return _reject(sink, "Array {} is not empty", value, "[]")
    return True


def _is_empty_object(value: Any, sink: RejectionSink | None) -> bool:
    if not isinstance(value, Mapping):
        return _reject(sink, "Value {} is not an object", value, "{}")
    if value:
        return _reject(sink, "Object {} is not empty", value, "{}")
    return True


is_empty_array = register_validator(_is_empty_array, "[]")
is_empty_object = register_validator(_is_empty_object, "{}")
