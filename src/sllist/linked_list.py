"""SingleLinkedList — a forward list rooted at a sentinel node.

The sentinel never carries an element; its ``next`` link is the first real
node. Because every position has a node in front of it (the sentinel in
front of the first element), insertion and removal are always expressed
as "after this position", including at the front of an empty list.

Bulk construction, ``assign`` and ``deepcopy`` build a complete chain in a
temporary list and only then swap it in, so a failure while reading or
copying the source leaves the receiving list as it was.

INVARIANT: ``_size`` equals the number of nodes reachable from ``_head.next``.
"""

from __future__ import annotations

import copy
import logging
import reprlib
from collections.abc import Generator, Iterable
from typing import Any, Generic, Self, TypeVar

from sllist.config.settings import get_settings
from sllist.errors import (
    EmptyListError,
    ForeignIteratorError,
    InvalidIteratorError,
    NoSuccessorError,
)
from sllist.iterators import BasicIterator, ConstIterator, Iterator
from sllist.node import Node
from sllist.operators import equal, greater, greater_equal, less, less_equal, not_equal

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SingleLinkedList(Generic[T]):
    """Singly-linked sequence with O(1) front and insert/erase-after operations.

    Usage::

        items = SingleLinkedList([1, 2, 3])
        items.insert_after(items.before_begin(), 0)
        it = items.erase_after(items.begin())  # now [0, 2, 3], it.value == 2
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        self._head: Node[T] = Node.sentinel()
        self._size = 0
        if values is not None:
            self.swap(self._build(values))

    def __del__(self) -> None:
        head = getattr(self, "_head", None)
        if head is None:
            return
        node = head.next
        head.next = None
        while node is not None:
            node.next, node = None, node.next
        self._size = 0

    @staticmethod
    def _build(values: Iterable[T]) -> SingleLinkedList[T]:
        """Copy *values* into a fresh list, front to back.

        If the source raises, the fresh list is dropped and the error
        propagates.
        """
        built: SingleLinkedList[T] = SingleLinkedList()
        tail = built._head
        try:
            for value in values:
                tail.next = Node(value)
                tail = tail.next
                built._size += 1
        except Exception:
            logger.debug(
                "Bulk build aborted after %d nodes",
                built._size,
                extra={"op": "build", "size": built._size},
            )
            raise
        return built

    # --- Copy and swap ---

    def assign(self, values: Iterable[T]) -> Self:
        """Replace the contents with a copy of *values*.

        Self-assignment is a no-op. If reading *values* fails, the list
        keeps its previous contents.
        """
        if values is self:
            return self
        self.swap(self._build(values))
        return self

    def swap(self, other: SingleLinkedList[T]) -> None:
        """Exchange chains and sizes with *other* in constant time.

        Each list keeps its own sentinel, so before-begin iterators stay
        attached to the list they came from.
        """
        if not isinstance(other, SingleLinkedList):
            msg = f"Cannot swap SingleLinkedList with {type(other).__name__}"
            raise TypeError(msg)
        self._head.next, other._head.next = other._head.next, self._head.next
        self._size, other._size = other._size, self._size

    def copy(self) -> Self:
        """Return a new list with new nodes holding the same elements."""
        return self.__copy__()

    def __copy__(self) -> Self:
        return type(self)(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        result = type(self)()
        memo[id(self)] = result
        result.swap(self._build(copy.deepcopy(value, memo) for value in self))
        return result

    # --- Size ---

    def get_size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    # --- Front operations ---

    def push_front(self, value: T) -> None:
        self._head.next = Node(value, self._head.next)
        self._size += 1

    def pop_front(self) -> T:
        """Remove the first element and return it.

        Raises:
            EmptyListError: If the list is empty.
        """
        first = self._head.next
        if first is None:
            logger.debug(
                "pop_front() on an empty list",
                extra={"op": "pop_front", "error_code": EmptyListError.code},
            )
            msg = "pop_front() on an empty list"
            raise EmptyListError(msg)
        self._head.next = first.next
        first.next = None
        self._size -= 1
        return first.value

    def clear(self) -> None:
        if self._size:
            logger.debug(
                "Clearing %d nodes",
                self._size,
                extra={"op": "clear", "size": self._size},
            )
        while self._head.next is not None:
            self.pop_front()

    # --- Iterators ---

    def begin(self) -> Iterator[T]:
        """Iterator on the first element, equal to ``end()`` when empty."""
        if self._size == 0:
            return self.end()
        return Iterator._at(self._head.next)

    def end(self) -> Iterator[T]:
        return Iterator._at(None)

    def cbegin(self) -> ConstIterator[T]:
        if self._size == 0:
            return self.cend()
        return ConstIterator._at(self._head.next)

    def cend(self) -> ConstIterator[T]:
        return ConstIterator._at(None)

    def before_begin(self) -> Iterator[T]:
        """Iterator on the sentinel; advancing it once gives ``begin()``."""
        return Iterator._at(self._head)

    def cbefore_begin(self) -> ConstIterator[T]:
        return ConstIterator._at(self._head)

    def __iter__(self) -> Generator[T]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    # --- Positional operations ---

    def _node_at(self, pos: BasicIterator[T], op: str) -> Node[T]:
        """Resolve *pos* to its node, rejecting the end iterator."""
        node = pos._node
        if node is None:
            logger.debug(
                "%s() called with the end iterator",
                op,
                extra={"op": op, "error_code": InvalidIteratorError.code},
            )
            msg = f"{op}() needs a position before end()"
            raise InvalidIteratorError(msg)
        if get_settings().debug_checks and not self._owns(node):
            logger.debug(
                "%s() called with a position from another list",
                op,
                extra={"op": op, "error_code": ForeignIteratorError.code},
            )
            msg = f"{op}() was given a position that does not belong to this list"
            raise ForeignIteratorError(msg)
        return node

    def _owns(self, target: Node[T]) -> bool:
        node: Node[T] | None = self._head
        while node is not None:
            if node is target:
                return True
            node = node.next
        return False

    def insert_after(self, pos: BasicIterator[T], value: T) -> Iterator[T]:
        """Insert *value* right after *pos* and return an iterator on it.

        Raises:
            InvalidIteratorError: If *pos* is the end iterator.
            ForeignIteratorError: If debug checks are on and *pos* belongs
                to another list.
        """
        node = self._node_at(pos, "insert_after")
        inserted = Node(value, node.next)
        node.next = inserted
        self._size += 1
        return Iterator._at(inserted)

    def erase_after(self, pos: BasicIterator[T]) -> Iterator[T]:
        """Remove the element right after *pos*.

        Returns an iterator on the element that now follows *pos*, which
        is ``end()`` when the last element was removed.

        Raises:
            InvalidIteratorError: If *pos* is the end iterator.
            NoSuccessorError: If nothing follows *pos*.
            ForeignIteratorError: If debug checks are on and *pos* belongs
                to another list.
        """
        node = self._node_at(pos, "erase_after")
        doomed = node.next
        if doomed is None:
            logger.debug(
                "erase_after() called on the last position",
                extra={"op": "erase_after", "error_code": NoSuccessorError.code},
            )
            msg = "erase_after() needs a position that has a successor"
            raise NoSuccessorError(msg)
        node.next = doomed.next
        doomed.next = None
        self._size -= 1
        return Iterator._at(node.next)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return equal(self, other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return not_equal(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return less(self, other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return greater(self, other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return less_equal(self, other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return greater_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
