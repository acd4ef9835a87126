"""Free operators over lists: swap, equality and lexicographic ordering.

``SingleLinkedList`` rich comparisons delegate here. Ordering uses only
``<`` on elements; equality uses only ``==``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sllist.linked_list import SingleLinkedList

_END = object()


def swap(lhs: SingleLinkedList[Any], rhs: SingleLinkedList[Any]) -> None:
    """Exchange the contents of *lhs* and *rhs* in constant time."""
    lhs.swap(rhs)


def equal(lhs: SingleLinkedList[Any], rhs: SingleLinkedList[Any]) -> bool:
    """Same object, or same size and pairwise-equal elements in order.

    Sizes are compared first, so lists of different length never touch
    their elements.
    """
    if lhs is rhs:
        return True
    if lhs.get_size() != rhs.get_size():
        return False
    return all(a == b for a, b in zip(lhs, rhs, strict=True))


def not_equal(lhs: SingleLinkedList[Any], rhs: SingleLinkedList[Any]) -> bool:
    return not equal(lhs, rhs)


def less(lhs: SingleLinkedList[Any], rhs: SingleLinkedList[Any]) -> bool:
    """Lexicographic ``<``.

    The first position where the elements differ decides. When one list
    runs out first it is the smaller one.
    """
    right = iter(rhs)
    for a in lhs:
        b = next(right, _END)
        if b is _END:
            return False
        if a < b:
            return True
        if b < a:
            return False
    return next(right, _END) is not _END


def greater(lhs: SingleLinkedList[Any], rhs: SingleLinkedList[Any]) -> bool:
    return not less(lhs, rhs) and not equal(lhs, rhs)


def less_equal(lhs: SingleLinkedList[Any], rhs: SingleLinkedList[Any]) -> bool:
    return less(lhs, rhs) or equal(lhs, rhs)


def greater_equal(lhs: SingleLinkedList[Any], rhs: SingleLinkedList[Any]) -> bool:
    return not less(lhs, rhs)
