"""Binary tree node with structural queries and depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator


def _levels(node: Node | None) -> int:
    """Number of levels below and including ``node`` (0 for no node)."""
    if node is None:
        return 0
    return 1 + max(_levels(node.left), _levels(node.right))


class Node:
    """A node of a binary tree holding an integer value.

    Creating a node records its parent but does not attach it to the
    parent; assign it to ``parent.left`` or ``parent.right`` or use
    :meth:`insert_left` / :meth:`insert_right`.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def _ancestors(self) -> Iterator[Node]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child moves below it."""
        new = Node(value, self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child moves below it."""
        new = Node(value, self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def detach(self) -> Node:
        """Remove this subtree from its parent and return it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        self.parent = None
        return self

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        yield self.value
        for child in self._children():
            yield from child.preorder()

    def inorder(self) -> Iterator[int]:
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        for child in self._children():
            yield from child.postorder()
        yield self.value

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        return _levels(self) - 1

    def depth(self) -> int:
        """Number of edges up to the root."""
        return sum(1 for _ in self._ancestors())

    def size(self) -> int:
        return 1 + sum(child.size() for child in self._children())

    def leaves(self) -> int:
        if self.is_leaf():
            return 1
        return sum(child.leaves() for child in self._children())

    def internal_nodes(self) -> int:
        """Count nodes that have at least one child."""
        if self.is_leaf():
            return 0
        return 1 + sum(child.internal_nodes() for child in self._children())

    def balance(self) -> int:
        """Height of the left subtree minus height of the right subtree."""
        return _levels(self.left) - _levels(self.right)

    def is_full(self) -> bool:
        """True if every node has either zero or two children."""
        if self.is_leaf():
            return True
        if self.left is not None and self.right is not None:
            return self.left.is_full() and self.right.is_full()
        return False

    def is_perfect(self) -> bool:
        """True if the tree is full and all leaves share one level."""
        return self.size() == 2 ** (self.height() + 1) - 1

    def sibling(self) -> Node | None:
        parent = self.parent
        if parent is None or parent.left is None or parent.right is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Node | None:
        if self.parent is None:
            return None
        return self.parent.sibling()