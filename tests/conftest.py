"""Shared fixtures for shapeguard tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from shapeguard.validation import RejectionsCollector
from shapeguard.validation.recursion import current_depth

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def rejections() -> RejectionsCollector:
    return RejectionsCollector()


@pytest.fixture(autouse=True)
def _balanced_recursion_depth() -> Iterator[None]:
    assert current_depth() == 0
    yield
    assert current_depth() == 0


@pytest.fixture
def library_logger() -> Iterator[logging.Logger]:
    """The `shapeguard` stdlib logger, restored after the test."""
    logger = logging.getLogger("shapeguard")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield logger
    logger.handlers, logger.level, logger.propagate = handlers, level, propagate
