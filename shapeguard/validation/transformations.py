"""Transformations

A transformation asks a validator tree to rebuild itself with a property
changed. The set is closed: composites `match` on the variants they
understand and forward every transformation to their children.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .options import RecursionOptions, Strictness


@dataclass(frozen=True, slots=True)
class StrictnessTransformation:
    """Set the strictness of every (unlocked) object/tuple validator."""
    strictness: Strictness

    def __init__(self, strictness: Strictness | bool | str):
        object.__setattr__(self, "strictness", Strictness.request(strictness))


@dataclass(frozen=True, slots=True)
class DepthTransformation:
    """Replace the depth limits of every recursive validator."""
    options: RecursionOptions


Transformation = Union[StrictnessTransformation, DepthTransformation]
