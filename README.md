# bintrees-kit

bintrees-kit is a small binary tree toolkit with no dependencies. Each node
links to its parent and to its left and right children. The package builds a
binary search tree, a self-balancing AVL tree and a max binary heap on top of
those nodes. It also provides traversals, shape checks, rotations and an ASCII
tree printer.

## Installation

```
pip install .
```

To get pytest for the test suite, install the `test` extra with
`pip install .[test]`.

## Building trees by hand

```python
from bintrees_kit.node import Node
from bintrees_kit.printing import print_tree

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
root.insert_right(128)   # 402 moves down to become the right child of 128

print_tree(root)
print(list(root.preorder()), root.height(), root.size(), root.leaves())
print(right.is_leaf(), root.is_root(), left.sibling())
```

`Node(value, parent=None)` records the parent it is given. It does not attach
itself to that parent. To attach a node, assign it to `parent.left` or
`parent.right`, or create it with `insert_left` or `insert_right`.

Each `Node` provides the following:

- **Traversals:** the generators `preorder()`, `inorder()` and `postorder()`.
- **Measures:** `height()` counts edges down to the deepest leaf. `depth()` counts edges up to the root. There are also `size()`, `leaves()` and `internal_nodes()`, which counts nodes that have at least one child. `balance()` gives the height of the left subtree minus that of the right.
- **Checks:** `is_leaf()`, `is_root()`, `is_full()` and `is_perfect()`.
- **Relatives:** `sibling()` and `uncle()`. Each returns `None` when there is no such node.
- **Unlinking:** `detach()` unlinks a subtree from its parent and returns it.

`bintrees_kit.printing.format_tree(tree)` returns the drawing as a string,
with one line per level. `print_tree(tree, file=None)` writes the same drawing
to `file`, or to standard output if no file is given.

## Tree algorithms

`bintrees_kit.analysis` provides these functions:

- `levelorder(tree)` yields values breadth-first, from left to right.
- `is_complete(tree)` checks whether the tree is complete.
- `lowest_common_ancestor(first, second)` returns the deepest node shared by both nodes' lines of ancestors. A node counts as its own ancestor. The result is `None` if the nodes belong to different trees.
- `rotate_left(tree)` and `rotate_right(tree)` return the new subtree root. They raise `ValueError` if the required child is missing.

## Search trees and heaps

```python
from bintrees_kit.bst import BinarySearchTree, is_bst, search
from bintrees_kit.avl import AVLTree, is_avl, sorted_array_to_avl
from bintrees_kit.heap import MaxHeap, is_heap

bst = BinarySearchTree([98, 402, 12, 46, 128, 256, 512, 50, 68, 89])
bst.remove(128)
print(list(bst), 68 in bst, len(bst), bst.search(50))

avl = AVLTree([98, 402, 12, 46, 128, 256, 512, 50, 68, 89, 21])
avl.remove(46)
print(list(avl), is_avl(avl.root), 21 in avl)

balanced = sorted_array_to_avl([1, 2, 3, 4, 5, 6, 7])
print(balanced.value, is_avl(balanced))

heap = MaxHeap([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
print(heap.extract(), is_heap(heap.root))
print(heap.drain_sorted())  # the remaining values, largest first
```

`BinarySearchTree` and `AVLTree` behave as follows:

- Their constructors skip duplicate values.
- `insert` raises `ValueError` when the value is already present.
- `remove` raises `KeyError` when the value is absent.
- When a removed node has two children, the node takes the value of its in-order successor.
- Iterating over either tree yields the values in ascending order.

`AVLTree` rebalances itself after every insertion and removal.

`MaxHeap` keeps duplicates. `extract` raises `IndexError` when the heap is
empty.

You can run `is_bst`, `is_avl` and `is_heap` on any tree of `Node` objects.
`search(tree, value)` works on any search tree of nodes.

## Demo

```
bintrees-demo [sample|insert-left|insert-right|leaf|root]
```

Each demonstration prints an example tree:

- `sample` (the default) prints a seven-node tree.
- `insert-left` and `insert-right` show a small tree before and after child insertions.
- `leaf` and `root` print a tree, then report for three of its nodes whether each is a leaf or a root.