"""sllist — a singly-linked list with a before-begin sentinel.

Constant-time front insertion and removal, constant-time insertion and
removal after any position, and forward-only iterators.
"""

from sllist.config import SllistSettings, configure_logging, get_settings, reset_settings
from sllist.errors import (
    EmptyListError,
    ForeignIteratorError,
    InvalidIteratorError,
    NoSuccessorError,
    SllistError,
)
from sllist.iterators import BasicIterator, ConstIterator, Iterator
from sllist.linked_list import SingleLinkedList
from sllist.node import Node
from sllist.operators import (
    equal,
    greater,
    greater_equal,
    less,
    less_equal,
    not_equal,
    swap,
)

__version__ = "0.1.0"

__all__ = [
    "BasicIterator",
    "ConstIterator",
    "EmptyListError",
    "ForeignIteratorError",
    "InvalidIteratorError",
    "Iterator",
    "NoSuccessorError",
    "Node",
    "SingleLinkedList",
    "SllistError",
    "SllistSettings",
    "configure_logging",
    "equal",
    "get_settings",
    "greater",
    "greater_equal",
    "less",
    "less_equal",
    "not_equal",
    "reset_settings",
    "swap",
]
