"""Unit tests for same-value equality and literal validators."""

from __future__ import annotations

from enum import Enum

import pytest

from shapeguard.validation import RejectionsCollector, UNDEFINED, is_, literal_type, same_value


class Color(Enum):
    RED = "red"


class Point:
    pass


def handler() -> None:
    pass


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ("a", "a", True),
        (1, 1, True),
        (float("nan"), float("nan"), True),
        (0.0, -0.0, False),
        (-0.0, -0.0, True),
        (1, 1.0, False),
        (1, True, False),
        (b"x", b"x", True),
        (None, None, True),
        (UNDEFINED, None, False),
        ([1], [1], False),
    ],
)
def test_same_value(first: object, second: object, expected: bool) -> None:
    assert same_value(first, second) is expected


def test_same_value_holds_for_identical_objects() -> None:
    items = [1]

    assert same_value(items, items)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("a", "'a'"),
        ("it's", '"it\'s"'),
        ("it's \"quoted\"", "`it's \"quoted\"`"),
        (1, "1"),
        (1.5, "1.5"),
        (True, "True"),
        (None, "None"),
        (b"x", "b'x'"),
        (UNDEFINED, "undefined"),
        (Color.RED, "Color.RED"),
        (handler, "is(handler(...) => *)"),
        ([1, 2], "is([ ... ])"),
        ({"a": 1}, "is({ ... })"),
        (Point(), "is(Point { ... })"),
    ],
)
def test_literal_type(value: object, expected: str) -> None:
    assert literal_type(value) == expected


def test_literal_type_falls_back_to_repr_when_every_quote_is_used() -> None:
    text = "'\"`"

    assert literal_type(text) == repr(text)


def test_is_accepts_only_the_same_value(rejections: RejectionsCollector) -> None:
    is_a = is_("a")

    assert is_a("a") is True
    assert is_(1)(True) is False
    assert is_(float("nan"))(float("nan")) is True
    assert is_a("b", rejections) is False
    assert len(rejections) == 1
    assert rejections[0].reason == "Value <'b'> is not equal to <'a'>"
    assert rejections[0].property_type == "'a'"
    assert rejections[0].path == ()
