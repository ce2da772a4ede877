"""Rejection Model

A rejection explains one validation failure: the path of the failing
property (innermost first), the reason, and the descriptor of the
validator that rejected it. Validators report rejections through an
optional sink, any callable accepting one Rejection.

Rendering of rejected values lives here too: values print as `<repr>`
with containers cut after a few items and one nesting level.
"""
from __future__ import annotations

import reprlib
from dataclasses import dataclass, replace
from itertools import islice
from typing import Any, Callable, Iterator, Sequence, overload

from shapeguard.config import settings

PathKey = str | int
RejectionSink = Callable[["Rejection"], None]


@dataclass(frozen=True, slots=True)
class Rejection:
    """Why a value failed validation.

    - path: keys of the failed property, from the innermost out
    - reason: human-readable explanation
    - property_type: descriptor of the validator that rejected the value
    """
    path: tuple[PathKey, ...]
    reason: str
    property_type: str

    def with_key(self, key: PathKey) -> Rejection:
        """Copy with `key` appended, as the call stack unwinds outward."""
        return replace(self, path=(*self.path, key))

    def with_reason(self, reason: str) -> Rejection:
        return replace(self, reason=reason)

    @property
    def field_path(self) -> str:
        """JSON path from the validated root, e.g. `users[0].email`."""
        return format_path(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {"path": list(self.path), "reason": self.reason, "property_type": self.property_type}


def format_path(path: Sequence[PathKey]) -> str:
    """Format an innermost-first rejection path as an outermost-first JSON path."""
    if not path: return "$"
    parts = []
    for segment in reversed(path):
        if isinstance(segment, int): parts.append(f"[{segment}]")
        elif parts: parts.append(f".{segment}")
        else: parts.append(str(segment))
    return "".join(parts)


def create_rejection(reason: str, property_type: str, path: Sequence[PathKey] = ()) -> Rejection:
    return Rejection(path=tuple(path), reason=reason, property_type=property_type)


@overload
def keyed(sink: None, key: PathKey) -> None: ...
@overload
def keyed(sink: RejectionSink, key: PathKey) -> RejectionSink: ...
def keyed(sink: RejectionSink | None, key: PathKey) -> RejectionSink | None:
    """Wrap `sink` so every forwarded rejection gets `key` appended to its path."""
    if sink is None:
        return None
    return lambda rejection: sink(rejection.with_key(key))


def path_key(key: Any) -> PathKey:
    """Integer-like string keys become ints, other strings stay, anything else is stringified."""
    if isinstance(key, int) and not isinstance(key, bool):
        return key
    if isinstance(key, str):
        return int(key) if key.isdecimal() and key.isascii() else key
    return str(key)


class RejectionsCollector:
    """A sink that also keeps every rejection passed to it, in order.

    Call it (or `append`) to add a rejection; iterate, index or `to_list()`
    to read them back. The collected list cannot be reordered or deleted from.

    Usage:
        rejections = RejectionsCollector()
        if not is_user(payload, rejections):
            for rejection in rejections:
                print(rejection.field_path, rejection.reason)
    """

    __slots__ = ("_rejections",)

    def __init__(self) -> None:
        self._rejections: list[Rejection] = []

    def __call__(self, rejection: Rejection) -> None:
        self.append(rejection)

    def append(self, rejection: Rejection) -> None:
        if not isinstance(rejection, Rejection):
            raise TypeError(f"Expected Rejection, got {type(rejection).__name__}")
        self._rejections.append(rejection)

    @overload
    def __getitem__(self, index: int) -> Rejection: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[Rejection, ...]: ...
    def __getitem__(self, index: int | slice) -> Rejection | tuple[Rejection, ...]:
        if isinstance(index, slice):
            return tuple(self._rejections[index])
        return self._rejections[index]

    def __iter__(self) -> Iterator[Rejection]:
        return iter(tuple(self._rejections))

    def __len__(self) -> int:
        return len(self._rejections)

    def __repr__(self) -> str:
        return f"RejectionsCollector({self._rejections!r})"

    def to_list(self) -> list[Rejection]:
        return self._rejections.copy()


# ============================================================================
# Value rendering
# ============================================================================

class _RawText(str):
    """Text that `rejection_message` inserts as-is."""
    __slots__ = ()


def literal(text: str) -> _RawText:
    """Mark a string to be printed verbatim by `rejection_message`."""
    return _RawText(text)


class _ValueRepr(reprlib.Repr):
    """reprlib.Repr that keeps mapping insertion order."""

    def repr_dict(self, x: dict, level: int) -> str:
        if not x: return "{}"
        if level <= 0: return "{...}"
        pieces = [f"{self.repr1(key, level - 1)}: {self.repr1(value, level - 1)}"
            for key, value in islice(x.items(), self.maxdict)]
        if len(x) > self.maxdict: pieces.append("...")
        return "{" + ", ".join(pieces) + "}"


def _value_repr() -> _ValueRepr:
    value_repr = _ValueRepr()
    value_repr.maxlevel = 2
    value_repr.maxdict = value_repr.maxlist = value_repr.maxtuple = settings.MAX_INSPECTED_ITEMS
    value_repr.maxset = value_repr.maxfrozenset = value_repr.maxdeque = settings.MAX_INSPECTED_ITEMS
    value_repr.maxstring = value_repr.maxother = settings.MAX_INSPECTED_STRING
    return value_repr


_repr = _value_repr()


def stringify(value: Any) -> str:
    """Render a value for a rejection reason."""
    if isinstance(value, _RawText):
        return str(value)
    return f"<{_repr.repr(value)}>"


def rejection_message(template: str, *values: Any) -> str:
    """Fill `{}` placeholders with rendered values.

    Usage:
        rejection_message("Value {} is not a {}", 5, literal("string"))
        # "Value <5> is not a string"
    """
    return template.format(*(stringify(value) for value in values))
