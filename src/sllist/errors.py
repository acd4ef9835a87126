"""Exceptions raised for caller contract violations.

Every type also derives from the closest builtin, so code written against
``IndexError``/``ValueError`` keeps catching them. Checks always run before
any link is rewritten: a raising operation leaves the list untouched.
"""

from __future__ import annotations


class SllistError(Exception):
    """Base class for all sllist errors."""

    code: str = "SLLIST_ERROR"


class EmptyListError(SllistError, IndexError):
    """Front removal on an empty list."""

    code = "EMPTY_LIST"


class InvalidIteratorError(SllistError, ValueError):
    """An iterator was used at a position that does not support the operation.

    Raised when dereferencing or advancing the end iterator, dereferencing
    the before-begin iterator, or inserting/erasing after the end iterator.
    """

    code = "INVALID_ITERATOR"


class NoSuccessorError(SllistError, IndexError):
    """``erase_after`` on a position that has nothing after it."""

    code = "NO_SUCCESSOR"


class ForeignIteratorError(SllistError, ValueError):
    """A position handed to a list does not belong to that list.

    Only detected while the ``debug_checks`` setting is enabled.
    """

    code = "FOREIGN_ITERATOR"
