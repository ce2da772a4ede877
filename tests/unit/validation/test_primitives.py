"""Unit tests for primitive validators."""

from __future__ import annotations

import pytest

from shapeguard.validation import (
    UNDEFINED,
    RejectionsCollector,
    any_,
    boolean,
    bytes_,
    float_,
    integer,
    maybe_number,
    maybe_string,
    never,
    null,
    null_or_undefined,
    number,
    string,
    undefined,
    unknown,
)

LEAVES = {
    "string": (string, "a"),
    "integer": (integer, 1),
    "float": (float_, 1.5),
    "boolean": (boolean, True),
    "bytes": (bytes_, b"a"),
    "None": (null, None),
    "undefined": (undefined, UNDEFINED),
}


@pytest.mark.parametrize("kind", LEAVES)
def test_leaf_kinds_are_disjoint(kind: str) -> None:
    validator, _ = LEAVES[kind]

    for other, (_, sample) in LEAVES.items():
        assert validator(sample) is (other == kind)


def test_booleans_are_not_numbers() -> None:
    assert number(1) and number(1.5)
    assert not number(True)
    assert not integer(False)
    assert not number("1")


@pytest.mark.parametrize(
    ("validator", "value", "reason"),
    [
        (string, 5, "Value <5> is not a string"),
        (number, "5", "Value <'5'> is not a number"),
        (boolean, None, "Value <None> is not a boolean"),
        (null, UNDEFINED, "Value <undefined> is not None"),
        (undefined, None, "Value <None> is not undefined"),
        (never, 1, "Value <1> is not allowed (X (never))"),
    ],
)
def test_leaf_rejections(validator, value, reason: str, rejections: RejectionsCollector) -> None:
    assert validator(value, rejections) is False
    assert len(rejections) == 1
    assert rejections[0].reason == reason
    assert rejections[0].property_type == validator.type_name
    assert rejections[0].path == ()


def test_accepted_values_emit_nothing(rejections: RejectionsCollector) -> None:
    assert string("a", rejections)
    assert any_(object(), rejections)
    assert len(rejections) == 0


def test_any_and_never() -> None:
    assert unknown is any_
    assert any_.type_name == "*"
    assert all(any_(value) for value in (None, UNDEFINED, 0, "", [], {}))
    assert never.type_name == "X (never)"
    assert not any(never(value) for value in (None, UNDEFINED, 0, "", [], {}))


def test_prebuilt_optionals() -> None:
    assert maybe_string(UNDEFINED)
    assert maybe_string("a")
    assert not maybe_string(None)
    assert maybe_string.type_name == "?(string)"
    assert maybe_number.type_name == "?(number)"
    assert null_or_undefined(None) and null_or_undefined(UNDEFINED)
    assert not null_or_undefined(0)
