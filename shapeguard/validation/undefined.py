"""The `undefined` runtime kind.

Structural validators hand `UNDEFINED` to a property validator when the
key or position is absent, which is what lets `maybe(...)` mark a
property as optional.
"""
from __future__ import annotations

from typing import Final


class UndefinedType:
    """Singleton marker for an absent value."""

    __slots__ = ()
    _instance: UndefinedType | None = None

    def __new__(cls) -> UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = UndefinedType()
