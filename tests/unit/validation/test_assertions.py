"""Unit tests for assertions, results and the rejection error."""

from __future__ import annotations

import pytest

from shapeguard.errors import AppErrorException, ErrorCode, raise_result
from shapeguard.validation import (
    RejectionError,
    array_of,
    assert_by,
    check,
    number,
    object_of,
    string,
)

is_user = object_of({"name": string, "tags": array_of(string)})


class TestAssertBy:
    def test_passes_valid_values(self) -> None:
        assert assert_by(is_user)({"name": "Ada", "tags": []}) is None

    def test_raises_rejection_error(self) -> None:
        with pytest.raises(RejectionError) as exc_info:
            assert_by(is_user)({"name": 5, "tags": ["x", 1]})

        error = exc_info.value
        assert error.message == f"Value does not match {is_user.type_name}"
        assert error.property_type == is_user.type_name
        assert [r.field_path for r in error.rejections] == ["name", "tags[1]"]
        assert str(error) == f"{error.message} (2 rejections)"

    def test_single_rejection_message(self) -> None:
        with pytest.raises(RejectionError, match=r"^name: Value <5> is not a string$"):
            assert_by(is_user)({"name": 5, "tags": []})

    def test_custom_error_factory(self) -> None:
        seen = []

        def factory(value, rejections):
            seen.append((value, rejections))
            return TypeError("bad user")

        with pytest.raises(TypeError, match="bad user"):
            assert_by(is_user, factory)({"name": 1, "tags": []})

        assert seen[0][0] == {"name": 1, "tags": []}
        assert len(seen[0][1]) == 1

    def test_accepts_predicates(self) -> None:
        with pytest.raises(RejectionError):
            assert_by(lambda value: value > 0)(-1)


class TestRejectionError:
    @pytest.fixture
    def error(self) -> RejectionError:
        with pytest.raises(RejectionError) as exc_info:
            assert_by(is_user)({"name": 5, "tags": ["x", 1, 2]})
        return exc_info.value

    def test_groups_rejections_by_field(self, error: RejectionError) -> None:
        assert list(error.field_errors) == ["name", "tags[1]"]
        assert error.first_rejection is error.rejections[0]
        assert error.get_rejections_for_field("tags[1]")[0].reason == "Value <1> is not a string"

    def test_to_dict(self, error: RejectionError) -> None:
        payload = error.to_dict()["error"]

        assert payload["type"] == "rejection_error"
        assert payload["error_count"] == 2
        assert payload["errors"][0] == {"field": "name", "reason": "Value <5> is not a string", "property_type": "string"}

    def test_to_app_error(self, error: RejectionError) -> None:
        app_error = error.to_app_error()

        assert app_error.code is ErrorCode.E2000_VALIDATION_GENERIC
        assert app_error.metadata["error_count"] == 2

    def test_empty_error(self) -> None:
        error = RejectionError("nothing collected")

        assert str(error) == "nothing collected"
        assert error.first_rejection is None


class TestCheck:
    def test_ok(self) -> None:
        result = check(number, 3)

        assert result.is_ok()
        assert result.unwrap() == 3
        assert raise_result(result) == 3

    def test_err_carries_the_rejections(self) -> None:
        result = check(is_user, {"name": 5, "tags": []})

        assert result.is_err()
        error = result.unwrap_err()
        assert error.code is ErrorCode.E2000_VALIDATION_GENERIC
        assert error.origin == "check"
        assert error.metadata["rejection_count"] == 1
        assert error.metadata["rejections"][0]["path"] == ["name"]
        assert result.unwrap_or("fallback") == "fallback"

    def test_raise_result(self) -> None:
        with pytest.raises(AppErrorException) as exc_info:
            raise_result(check(string, 1))

        assert exc_info.value.code is ErrorCode.E2000_VALIDATION_GENERIC
