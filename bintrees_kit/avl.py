"""Self-balancing AVL trees built on plain binary tree nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from .analysis import rotate_left, rotate_right
from .bst import is_bst, search
from .node import Node


def is_avl(tree: Node | None) -> bool:
    """True if ``tree`` is a search tree whose subtrees differ in height by at most one."""
    if tree is None or not is_bst(tree):
        return False

    def balanced(node: Node | None) -> bool:
        if node is None:
            return True
        return abs(node.balance()) <= 1 and balanced(node.left) and balanced(node.right)

    return balanced(tree)


def _middle(size: int) -> int:
    """Index of the root value: the lower middle for even sizes."""
    return (size - 1) // 2


def _build(values: Sequence[int], parent: Node | None) -> Node | None:
    if not values:
        return None
    middle = _middle(len(values))
    node = Node(values[middle], parent)
    node.left = _build(values[:middle], node)
    node.right = _build(values[middle + 1:], node)
    return node


def sorted_array_to_avl(values: Sequence[int]) -> Node | None:
    """Build a balanced tree from sorted ``values`` without any rotation.

    Returns None for an empty sequence.
    """
    return _build(list(values), None)


class AVLTree:
    """A binary search tree kept height-balanced; duplicate values are not stored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            if search(self.root, value) is None:
                self.insert(value)

    def _rebalance(self, node: Node) -> Node:
        factor = node.balance()
        if factor > 1:
            assert node.left is not None
            if node.left.balance() < 0:
                rotate_left(node.left)
            return rotate_right(node)
        if factor < -1:
            assert node.right is not None
            if node.right.balance() > 0:
                rotate_right(node.right)
            return rotate_left(node)
        return node

    def _rebalance_upwards(self, start: Node | None) -> None:
        node = start
        while node is not None:
            node = self._rebalance(node)
            if node.parent is None:
                self.root = node
            node = node.parent

    def insert(self, value: int) -> Node:
        """Insert ``value``, rebalance, and return the new node.

        Raises ValueError if the value is already present.
        """
        if self.root is None:
            self.root = Node(value)
            self._size = 1
            return self.root
        node = self.root
        while True:
            if value == node.value:
                raise ValueError(f"value {value!r} already in tree")
            child = node.left if value < node.value else node.right
            if child is None:
                break
            node = child
        new = Node(value, node)
        if value < node.value:
            node.left = new
        else:
            node.right = new
        self._size += 1
        self._rebalance_upwards(node)
        return new

    def remove(self, value: int) -> None:
        """Remove ``value`` and rebalance the tree.

        A node with two children takes the value of its in-order successor.
        Raises KeyError if the value is absent.
        """
        node = search(self.root, value)
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None
        self._size -= 1
        self._rebalance_upwards(parent)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and search(self.root, value) is not None

    def __iter__(self) -> Iterator[int]:
        if self.root is not None:
            yield from self.root.inorder()

    def __len__(self) -> int:
        return self._size