"""Chain node — the passive value holder behind every list.

INVARIANT: following ``next`` never revisits a node; the chain ends in None.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _SentinelValue:
    """Marker stored in the sentinel node; never handed out as an element."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<sentinel>"


SENTINEL_VALUE: Any = _SentinelValue()


@dataclass(slots=True, eq=False)
class Node(Generic[T]):
    """A stored element plus the link to its successor."""

    value: T
    next: Node[T] | None = None

    @classmethod
    def sentinel(cls) -> Node[T]:
        return cls(SENTINEL_VALUE)

    @property
    def is_sentinel(self) -> bool:
        return self.value is SENTINEL_VALUE
