"""Unit tests for the validator contract and its construction helpers."""

from __future__ import annotations

from typing import Any

import pytest

from shapeguard.errors import ConfigurationError, ErrorCode
from shapeguard.validation import (
    CUSTOM_TYPE,
    FunctionValidator,
    MappedRejections,
    RejectionsCollector,
    TypeValidator,
    as_validator,
    create_rejection,
    map_rejection,
    number,
    object_of,
    register_validator,
    set_validator_rejection,
    strict,
    string,
    type_name,
)
from shapeguard.validation.base import elide, join_types


def _is_even(value: Any, sink: Any = None) -> bool:
    if isinstance(value, int) and value % 2 == 0:
        return True
    if sink is not None:
        sink(create_rejection(f"{value} is odd", "even"))
    return False


def is_positive(value: Any) -> bool:
    return isinstance(value, int) and value > 0


def test_register_validator_builds_a_full_validator(rejections: RejectionsCollector) -> None:
    even = register_validator(_is_even, "even")

    assert isinstance(even, FunctionValidator)
    assert even(2) is True
    assert even(3, rejections) is False
    assert [r.reason for r in rejections] == ["3 is odd"]
    assert even.type_name == even.describe() == "even"
    assert even.transform(object()) is even  # type: ignore[arg-type]


def test_lazy_descriptor_is_resolved_once() -> None:
    calls: list[int] = []

    def describe() -> str:
        calls.append(1)
        return "even"

    even = register_validator(_is_even, describe)

    assert calls == []
    assert even.type_name == "even"
    assert even.describe() == "even"
    assert calls == [1]


def test_as_predicate_is_memoized_per_validator() -> None:
    predicate = string.as_predicate()

    assert string.as_predicate() is predicate
    assert predicate("a") is True
    assert predicate(1) is False
    assert number.as_predicate() is not predicate


def test_as_validator_passes_validators_through() -> None:
    assert as_validator(string) is string


def test_as_validator_lifts_bare_predicates(rejections: RejectionsCollector) -> None:
    positive = as_validator(is_positive)

    assert isinstance(positive, TypeValidator)
    assert positive.type_name == "* (is_positive)"
    assert positive(1) is True
    assert positive(-1, rejections) is False
    assert rejections[0].reason == "Value <-1> failed validation"
    assert rejections[0].property_type == "* (is_positive)"
    assert as_validator(lambda value: True).type_name == CUSTOM_TYPE


def test_as_validator_rejects_non_callables() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        as_validator(42)

    assert exc_info.value.code is ErrorCode.E7005_INVALID_VALIDATOR


def test_type_name_of_validators_and_predicates() -> None:
    assert type_name(string) == "string"
    assert type_name(is_positive) == "* (is_positive)"
    assert type_name(lambda value: True) == CUSTOM_TYPE


def test_set_validator_rejection_uses_the_factory(rejections: RejectionsCollector) -> None:
    positive = set_validator_rejection(
        is_positive,
        lambda value: create_rejection(f"{value} must be positive", "positive"),
        "positive",
    )

    assert positive(0, rejections) is False
    assert positive.type_name == "positive"
    assert rejections[0].reason == "0 must be positive"


def test_map_rejection_projects_every_rejection(rejections: RejectionsCollector) -> None:
    shouting = map_rejection(string, lambda value, rejection: rejection.with_reason(rejection.reason.upper()))

    assert shouting("a", rejections) is True
    assert shouting(5, rejections) is False
    assert rejections[0].reason == "VALUE <5> IS NOT A STRING"
    assert shouting.type_name == "string"
    assert map_rejection(string, lambda value, rejection: rejection, "text").type_name == "text"


def test_map_rejection_forwards_transformations() -> None:
    mapped = map_rejection(object_of({"a": number}), lambda value, rejection: rejection)
    strict_mapped = strict(mapped)

    assert strict_mapped is not mapped
    assert isinstance(strict_mapped, MappedRejections)
    assert mapped({"a": 1, "b": 2}) is True
    assert strict_mapped({"a": 1, "b": 2}) is False


def test_transform_returns_self_when_nothing_changes() -> None:
    mapped = map_rejection(string, lambda value, rejection: rejection)

    assert strict(mapped) is mapped
    assert strict(string) is string


def test_validators_compare_by_identity() -> None:
    first = object_of({"a": number})
    second = object_of({"a": number})

    assert first != second
    assert len({first, second, first}) == 2


def test_elision_keeps_first_two_and_last_two() -> None:
    names = ["a", "b", "c", "d", "e", "f"]

    assert elide(names) == ["a", "b", "...", "e", "f"]
    assert elide(names[:5]) == names[:5]
    assert join_types(names, " | ") == "a | b | ... | e | f"
