"""Forward cursors over a list's node chain.

Two capabilities share one implementation in :class:`BasicIterator`:

- :class:`Iterator` reads and writes the element it points at.
- :class:`ConstIterator` only reads it.

An ``Iterator`` converts to a ``ConstIterator``; the reverse raises
``TypeError``. Cursors never own nodes and never rewrite links.

INVARIANT: a cursor is the sentinel (before-begin), a real node, or None (end).
"""

from __future__ import annotations

import logging
import reprlib
from typing import Any, ClassVar, Generic, Self, TypeVar

from sllist.errors import InvalidIteratorError
from sllist.node import Node

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BasicIterator(Generic[T]):
    """Shared cursor logic for both iterator capabilities."""

    __slots__ = ("_node",)

    _mutable: ClassVar[bool] = False

    def __init__(self, other: BasicIterator[T] | None = None) -> None:
        if other is None:
            self._node: Node[T] | None = None
            return
        if not isinstance(other, BasicIterator):
            msg = f"Cannot build {type(self).__name__} from {type(other).__name__}"
            raise TypeError(msg)
        if self._mutable and not other._mutable:
            msg = f"Cannot build a mutable {type(self).__name__} from {type(other).__name__}"
            raise TypeError(msg)
        self._node = other._node

    @classmethod
    def _at(cls, node: Node[T] | None) -> Self:
        """Wrap *node* directly. Reserved for the owning list."""
        it = cls.__new__(cls)
        it._node = node
        return it

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        """Compare by successor identity.

        Two cursors are equal when both are at the end, or when the nodes
        they reference share the same ``next`` object. Two different nodes
        that both end their chains therefore compare equal.
        """
        if not isinstance(other, BasicIterator):
            return NotImplemented
        if self._node is None and other._node is None:
            return True
        if self._node is None or other._node is None:
            return False
        return self._node.next is other._node.next

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    # --- Traversal ---

    def advance(self) -> Self:
        """Move to the next position and return this iterator."""
        if self._node is None:
            logger.debug(
                "advance() called on the end iterator",
                extra={"op": "advance", "error_code": InvalidIteratorError.code},
            )
            msg = "Cannot advance past the end of the list"
            raise InvalidIteratorError(msg)
        self._node = self._node.next
        return self

    def post_advance(self) -> Self:
        """Move to the next position and return a copy of the prior one."""
        prior = self.__copy__()
        self.advance()
        return prior

    # --- Access ---

    def _checked_node(self) -> Node[T]:
        node = self._node
        if node is None:
            logger.debug(
                "dereference of the end iterator",
                extra={"op": "value", "error_code": InvalidIteratorError.code},
            )
            msg = "Cannot dereference the end iterator"
            raise InvalidIteratorError(msg)
        if node.is_sentinel:
            logger.debug(
                "dereference of the before-begin iterator",
                extra={"op": "value", "error_code": InvalidIteratorError.code},
            )
            msg = "Cannot dereference the before-begin iterator"
            raise InvalidIteratorError(msg)
        return node

    @property
    def value(self) -> T:
        """The element at the current position."""
        return self._checked_node().value

    def __copy__(self) -> Self:
        return type(self)._at(self._node)

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        node = self._node
        if node is None:
            where = "end"
        elif node.is_sentinel:
            where = "before_begin"
        else:
            where = f"value={node.value!r}"
        return f"{type(self).__name__}({where})"


class ConstIterator(BasicIterator[T]):
    """Read-only cursor."""

    __slots__ = ()


class Iterator(BasicIterator[T]):
    """Cursor that can also replace the element it points at."""

    __slots__ = ()

    _mutable = True

    @BasicIterator.value.setter
    def value(self, new_value: Any) -> None:
        self._checked_node().value = new_value
