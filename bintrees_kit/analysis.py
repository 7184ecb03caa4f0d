"""Breadth-first traversal, completeness, rotations and common ancestors."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .node import Node


def _lineage(node: Node) -> Iterator[Node]:
    """Yield ``node`` and then each of its ancestors up to the root."""
    current: Node | None = node
    while current is not None:
        yield current
        current = current.parent


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the deepest node that is an ancestor of both nodes, or None.

    A node counts as its own ancestor. Nodes from different trees have no
    common ancestor.
    """
    if first is None or second is None:
        return None
    ancestors_of_first = set(_lineage(first))
    return next((node for node in _lineage(second) if node in ancestors_of_first), None)


def levelorder(tree: Node | None) -> Iterator[int]:
    """Yield the values of ``tree`` level by level, left to right."""
    if tree is None:
        return
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def is_complete(tree: Node | None) -> bool:
    """True if every level is filled except possibly the last, filled from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True


def _replace_in_parent(old: Node, new: Node, parent: Node | None) -> None:
    new.parent = parent
    if parent is not None:
        if parent.left is old:
            parent.left = new
        else:
            parent.right = new


def rotate_left(tree: Node) -> Node:
    """Rotate ``tree`` to the left and return the new subtree root.

    Raises ValueError if the node has no right child.
    """
    pivot = tree.right
    if pivot is None:
        raise ValueError("cannot rotate left: node has no right child")
    moved = pivot.left
    tree.right = moved
    if moved is not None:
        moved.parent = tree
    pivot.left = tree
    parent = tree.parent
    tree.parent = pivot
    _replace_in_parent(tree, pivot, parent)
    return pivot


def rotate_right(tree: Node) -> Node:
    """Rotate ``tree`` to the right and return the new subtree root.

    Raises ValueError if the node has no left child.
    """
    pivot = tree.left
    if pivot is None:
        raise ValueError("cannot rotate right: node has no left child")
    moved = pivot.right
    tree.left = moved
    if moved is not None:
        moved.parent = tree
    pivot.right = tree
    parent = tree.parent
    tree.parent = pivot
    _replace_in_parent(tree, pivot, parent)
    return pivot