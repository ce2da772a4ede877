"""Validator Options

- Strictness: whether object/tuple validators forbid unspecified keys,
  and whether that choice is locked against bulk rewrites
- RecursionOptions: depth limits of a recursive validator, validated
  with a strict pydantic model
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from shapeguard.errors import ConfigurationError, conflicting_options, invalid_option, invalid_transformation
from shapeguard.logging import recursion_logger

log = recursion_logger()


class Strictness(str, Enum):
    """Strictness of an object/tuple validator.

    `STRICT_UNLOCKED` and `UNSTRICT_UNLOCKED` are requests only: applied in a
    bulk rewrite they override locks, and the validator ends up unlocked.
    """
    STRICT = "strict"
    UNSTRICT = "unstrict"
    STRICT_LOCKED = "strict-locked"
    UNSTRICT_LOCKED = "unstrict-locked"
    STRICT_UNLOCKED = "strict-unlocked"
    UNSTRICT_UNLOCKED = "unstrict-unlocked"

    @property
    def is_strict(self) -> bool:
        return self in (Strictness.STRICT, Strictness.STRICT_LOCKED, Strictness.STRICT_UNLOCKED)

    @property
    def is_locked(self) -> bool:
        return self in (Strictness.STRICT_LOCKED, Strictness.UNSTRICT_LOCKED)

    @property
    def overrides_lock(self) -> bool:
        return self in (Strictness.STRICT_UNLOCKED, Strictness.UNSTRICT_UNLOCKED)

    def locked(self) -> Strictness:
        return Strictness.STRICT_LOCKED if self.is_strict else Strictness.UNSTRICT_LOCKED

    def unlocked(self) -> Strictness:
        return Strictness.STRICT if self.is_strict else Strictness.UNSTRICT

    def normalized(self) -> Strictness:
        """The state a validator holds after this strictness is applied."""
        return self.unlocked() if self.overrides_lock else self

    @classmethod
    def coerce(cls, value: Strictness | bool | str | None, default: Strictness | None = None) -> Strictness:
        """Normalize a user-supplied strictness (bool, string or member)."""
        if value is None:
            return (default or cls.UNSTRICT).normalized()
        return cls.request(value).normalized()

    @classmethod
    def request(cls, value: Strictness | bool | str) -> Strictness:
        """Parse a strictness request, keeping the lock-override variants."""
        if isinstance(value, bool):
            return cls.STRICT if value else cls.UNSTRICT
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(invalid_transformation(
                value, f"{value!r} is not a valid strictness", origin="object_of")) from None


class RecursionOptions(BaseModel):
    """Depth limits for `with_recursion`.

    - max_depth: nested recursive calls allowed before rejecting the value
    - skip_depth: nested recursive calls allowed before accepting the value
      without looking further

    The two are mutually exclusive. Both must be non-negative integers.
    """
    model_config = ConfigDict(strict=True, frozen=True, extra="forbid")

    max_depth: int | None = Field(default=None, ge=0)
    skip_depth: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _exclusive_limits(self) -> RecursionOptions:
        if self.max_depth is not None and self.skip_depth is not None:
            raise ValueError("max_depth and skip_depth are mutually exclusive")
        return self

    @property
    def is_limited(self) -> bool:
        return self.max_depth is not None or self.skip_depth is not None

    @classmethod
    def parse(cls, options: RecursionOptions | dict[str, Any] | None = None, **kwargs: Any) -> RecursionOptions:
        """Build validated options, raising ConfigurationError on misuse."""
        if isinstance(options, RecursionOptions) and not kwargs:
            return options
        data = {**(options.model_dump() if isinstance(options, RecursionOptions) else options or {}), **kwargs}
        data = {key: value for key, value in data.items() if value is not None}

        if "max_depth" in data and "skip_depth" in data:
            log.debug("invalid_recursion_options", reason="conflicting", **data)
            raise ConfigurationError(conflicting_options("max_depth", "skip_depth", origin="with_recursion"))

        try:
            return cls(**data)
        except ValidationError as exc:
            error = exc.errors()[0]
            option = str(error["loc"][0]) if error["loc"] else "options"
            log.debug("invalid_recursion_options", option=option, error_type=error["type"])
            raise ConfigurationError(invalid_option(
                option, error.get("input"), _describe_option_error(error),
                origin="with_recursion", cause=exc)) from exc


def _describe_option_error(error: dict[str, Any]) -> str:
    match error["type"]:
        case "greater_than_equal":
            return "must not be negative"
        case "int_type":
            return "is not an integer"
        case "extra_forbidden":
            return "is not a known option"
        case _:
            return error.get("msg", "is invalid")
