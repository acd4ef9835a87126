"""Tests for the chain node and the sentinel marker."""

from sllist.node import SENTINEL_VALUE, Node


class TestNode:
    def test_defaults_to_no_successor(self) -> None:
        node = Node(1)
        assert node.value == 1
        assert node.next is None
        assert not node.is_sentinel

    def test_explicit_successor(self) -> None:
        tail = Node(2)
        head = Node(1, tail)
        assert head.next is tail

    def test_sentinel(self) -> None:
        node: Node[int] = Node.sentinel()
        assert node.is_sentinel
        assert node.value is SENTINEL_VALUE
        assert repr(SENTINEL_VALUE) == "<sentinel>"

    def test_identity_equality(self) -> None:
        """Nodes are distinct positions even when they hold equal values."""
        assert Node(1) != Node(1)

    def test_slotted(self) -> None:
        assert not hasattr(Node(1), "__dict__")
