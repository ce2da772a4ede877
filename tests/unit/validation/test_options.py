"""Unit tests for strictness values and recursion options."""

from __future__ import annotations

import pydantic
import pytest

from shapeguard.errors import ConfigurationError, ErrorCode
from shapeguard.validation.options import RecursionOptions, Strictness
from shapeguard.validation.transformations import StrictnessTransformation


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, Strictness.STRICT),
        (False, Strictness.UNSTRICT),
        ("strict-locked", Strictness.STRICT_LOCKED),
        ("strict-unlocked", Strictness.STRICT),
        ("unstrict-unlocked", Strictness.UNSTRICT),
        (Strictness.UNSTRICT_LOCKED, Strictness.UNSTRICT_LOCKED),
    ],
)
def test_coerce_normalizes_user_values(value: object, expected: Strictness) -> None:
    assert Strictness.coerce(value) is expected


def test_coerce_uses_the_default_for_none() -> None:
    assert Strictness.coerce(None) is Strictness.UNSTRICT
    assert Strictness.coerce(None, default=Strictness.STRICT) is Strictness.STRICT


def test_invalid_strictness_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        Strictness.coerce("sometimes")

    assert exc_info.value.code is ErrorCode.E7004_INVALID_TRANSFORMATION


def test_request_keeps_lock_overrides() -> None:
    requested = Strictness.request("strict-unlocked")

    assert requested is Strictness.STRICT_UNLOCKED
    assert requested.overrides_lock
    assert requested.normalized() is Strictness.STRICT
    assert StrictnessTransformation("unstrict-unlocked").strictness is Strictness.UNSTRICT_UNLOCKED


def test_lock_round_trip() -> None:
    assert Strictness.STRICT.locked() is Strictness.STRICT_LOCKED
    assert Strictness.UNSTRICT.locked() is Strictness.UNSTRICT_LOCKED
    assert Strictness.STRICT_LOCKED.unlocked() is Strictness.STRICT
    assert Strictness.STRICT_LOCKED.is_strict and Strictness.STRICT_LOCKED.is_locked
    assert not Strictness.UNSTRICT_LOCKED.is_strict


def test_recursion_options_parse() -> None:
    assert RecursionOptions.parse(max_depth=2).max_depth == 2
    assert RecursionOptions.parse({"skip_depth": 0}).skip_depth == 0
    assert not RecursionOptions.parse().is_limited
    assert RecursionOptions.parse(max_depth=None, skip_depth=3).is_limited


def test_recursion_options_are_mutually_exclusive() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        RecursionOptions.parse(max_depth=1, skip_depth=1)

    assert exc_info.value.code is ErrorCode.E7002_CONFLICTING_OPTIONS
    with pytest.raises(pydantic.ValidationError):
        RecursionOptions(max_depth=1, skip_depth=1)


@pytest.mark.parametrize(
    ("options", "reason"),
    [
        ({"max_depth": -1}, "must not be negative"),
        ({"skip_depth": 1.5}, "is not an integer"),
        ({"max_depth": "2"}, "is not an integer"),
        ({"max_depth": True}, "is not an integer"),
        ({"depth": 2}, "is not a known option"),
    ],
)
def test_invalid_recursion_options(options: dict, reason: str) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        RecursionOptions.parse(options)

    assert exc_info.value.code is ErrorCode.E7001_INVALID_OPTION
    assert reason in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)
