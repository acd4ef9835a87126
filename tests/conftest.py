"""Shared pytest fixtures and test helpers for sllist tests."""

from __future__ import annotations

from collections.abc import Generator, Iterable
from typing import Any

import pytest

from sllist import SingleLinkedList, reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Isolate every test from ``SLLIST_*`` env vars and cached settings."""
    for name in ("SLLIST_DEBUG_CHECKS", "SLLIST_VERBOSE", "SLLIST_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def debug_checks(monkeypatch: pytest.MonkeyPatch) -> None:
    """Turn on position-ownership checks for the duration of a test."""
    monkeypatch.setenv("SLLIST_DEBUG_CHECKS", "true")
    reset_settings()


@pytest.fixture
def numbers() -> SingleLinkedList[int]:
    """The list ``[1, 2, 3]``."""
    return SingleLinkedList([1, 2, 3])


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class Boom(Exception):
    """Raised on purpose by test helpers."""


def failing_after(values: Iterable[Any], count: int) -> Generator[Any]:
    """Yield the first *count* items of *values*, then raise :class:`Boom`."""
    for index, value in enumerate(values):
        if index == count:
            raise Boom(f"failed after {count} items")
        yield value
    raise Boom(f"failed after {count} items")


class CopyBomb:
    """Element whose deep copy always fails."""

    def __init__(self, tag: str) -> None:
        self.tag = tag

    def __deepcopy__(self, memo: dict[int, Any]) -> CopyBomb:
        raise Boom(f"cannot copy {self.tag}")
