"""Max binary heaps stored as linked binary tree nodes."""

from __future__ import annotations

from collections.abc import Iterable

from .analysis import is_complete
from .node import Node


def _parents_exceed_children(node: Node) -> bool:
    for child in (node.left, node.right):
        if child is None:
            continue
        if node.value <= child.value or not _parents_exceed_children(child):
            return False
    return True


def is_heap(tree: Node | None) -> bool:
    """True if ``tree`` is complete and every parent is strictly greater than its children."""
    if tree is None or not is_complete(tree):
        return False
    return _parents_exceed_children(tree)


class MaxHeap:
    """A max binary heap; the largest value sits at the root."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def _node_at(self, position: int) -> Node:
        """Return the node at 1-based level-order ``position``."""
        node = self.root
        assert node is not None
        for bit in bin(position)[3:]:
            child = node.right if bit == "1" else node.left
            assert child is not None
            node = child
        return node

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return the node that ends up holding it."""
        self._size += 1
        if self.root is None:
            self.root = Node(value)
            return self.root
        position = self._size
        parent = self._node_at(position // 2)
        node = Node(value, parent)
        if position % 2:
            parent.right = node
        else:
            parent.left = node
        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node

    def extract(self) -> int:
        """Remove and return the largest value.

        Raises IndexError if the heap is empty.
        """
        if self.root is None:
            raise IndexError("extract from an empty heap")
        top = self.root.value
        if self._size == 1:
            self.root = None
            self._size = 0
            return top
        last = self._node_at(self._size)
        self.root.value = last.value
        last.detach()
        self._size -= 1
        self._sift_down(self.root)
        return top

    @staticmethod
    def _sift_down(node: Node) -> None:
        while node.left is not None:
            if node.right is None or node.left.value > node.right.value:
                child = node.left
            else:
                child = node.right
            if node.value > child.value:
                break
            node.value, child.value = child.value, node.value
            node = child

    def drain_sorted(self) -> list[int]:
        """Empty the heap, returning its values in descending order."""
        return [self.extract() for _ in range(self._size)]

    def __len__(self) -> int:
        return self._size