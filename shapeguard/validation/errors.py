"""Rejection Errors

Exception raised by `assert_by` when a value fails validation. Carries the
rejected value and every collected rejection, with JSON paths.

Error Format:
{
    "error": {
        "type": "rejection_error",
        "message": "Value does not match { name: string, [*]: * }",
        "property_type": "{ name: string, [*]: * }",
        "error_count": 1,
        "errors": [
            {
                "field": "name",
                "reason": "Value <5> is not a string",
                "property_type": "string"
            }
        ]
    }
}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from shapeguard.errors import AppError, ErrorCode

from .rejections import Rejection


@dataclass(eq=False)
class RejectionError(Exception):
    """A value was rejected by a validator.

    Attributes:
        message: Summary of the failure
        value: The rejected value
        rejections: Rejections in the order the validator reported them
        property_type: Descriptor of the validator that rejected the value
    """
    message: str
    value: Any = None
    rejections: list[Rejection] = field(default_factory=list)
    property_type: str = ""

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.rejections: return self.message
        if len(self.rejections) == 1: return f"{(r := self.rejections[0]).field_path}: {r.reason}"
        return f"{self.message} ({len(self.rejections)} rejections)"

    @property
    def field_errors(self) -> dict[str, list[Rejection]]:
        """Group rejections by JSON path."""
        result: dict[str, list[Rejection]] = {}
        for rejection in self.rejections: result.setdefault(rejection.field_path, []).append(rejection)
        return result

    @property
    def first_rejection(self) -> Rejection | None: return self.rejections[0] if self.rejections else None

    def get_rejections_for_field(self, field_path: str) -> list[Rejection]:
        return [r for r in self.rejections if r.field_path == field_path]

    def to_app_error(self) -> AppError:
        """Convert to AppError for the error handling system."""
        if len(self.rejections) == 1:
            r = self.rejections[0]
            return AppError(code=ErrorCode.E2000_VALIDATION_GENERIC, message=f"{r.field_path}: {r.reason}",
                origin="assert_by", metadata={"field": r.field_path, "property_type": r.property_type})
        return AppError(code=ErrorCode.E2000_VALIDATION_GENERIC, message=self.message, origin="assert_by",
            metadata={"property_type": self.property_type, "error_count": len(self.rejections),
                "errors": [_rejection_dict(r) for r in self.rejections]})

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs and error reports."""
        return {"error": {"type": "rejection_error", "message": self.message, "property_type": self.property_type,
            "error_count": len(self.rejections), "errors": [_rejection_dict(r) for r in self.rejections]}}


def _rejection_dict(rejection: Rejection) -> dict[str, Any]:
    return {"field": rejection.field_path, "reason": rejection.reason, "property_type": rejection.property_type}
