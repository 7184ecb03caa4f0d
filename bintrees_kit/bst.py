"""Binary search trees with unique integer values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .node import Node


def is_bst(tree: Node | None) -> bool:
    """True if ``tree`` is a binary search tree with strictly ordered, unique values."""
    if tree is None:
        return False

    def within(node: Node | None, low: int | None, high: int | None) -> bool:
        if node is None:
            return True
        if (low is not None and node.value <= low) or (
            high is not None and node.value >= high
        ):
            return False
        return within(node.left, low, node.value) and within(
            node.right, node.value, high
        )

    return within(tree, None, None)


def search(tree: Node | None, value: int) -> Node | None:
    """Return the node of the search tree ``tree`` holding ``value``, or None."""
    node = tree
    while node is not None:
        if node.value == value:
            return node
        node = node.left if value < node.value else node.right
    return None


class BinarySearchTree:
    """An unbalanced binary search tree; duplicate values are not stored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            if value not in self:
                self.insert(value)

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return its new node.

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
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, node)
                    self._size += 1
                    return node.left
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(value, node)
                    self._size += 1
                    return node.right
                node = node.right

    def search(self, value: int) -> Node | None:
        return search(self.root, value)

    def remove(self, value: int) -> None:
        """Remove ``value``; a node with two children takes its in-order successor's value.

        Raises KeyError if the value is absent.
        """
        node = self.search(value)
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

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def __iter__(self) -> Iterator[int]:
        if self.root is not None:
            yield from self.root.inorder()

    def __len__(self) -> int:
        return self._size