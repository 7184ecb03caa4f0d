"""Command-line demonstrations of building and inspecting binary trees."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from .node import Node
from .printing import print_tree


def build_sample_tree() -> Node:
    """Build the seven-node tree used by the default demonstration."""
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _small_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    return root


def _grown_right_tree() -> Node:
    root = _small_tree()
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _show_sample() -> None:
    print_tree(build_sample_tree())


def _show_insert_left() -> None:
    root = _small_tree()
    print_tree(root)
    print()
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root)


def _show_insert_right() -> None:
    root = _small_tree()
    print_tree(root)
    print()
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root)


def _report(check: str, nodes: Sequence[Node], predicate: Callable[[Node], bool]) -> None:
    for node in nodes:
        print(f"Is {node.value} a {check}: {int(predicate(node))}")


def _show_leaf() -> None:
    root = _grown_right_tree()
    print_tree(root)
    _report("leaf", [root, root.right, root.right.right], Node.is_leaf)


def _show_root() -> None:
    root = _grown_right_tree()
    print_tree(root)
    _report("root", [root, root.right, root.right.right], Node.is_root)


_DEMOS: dict[str, Callable[[], None]] = {
    "sample": _show_sample,
    "insert-left": _show_insert_left,
    "insert-right": _show_insert_right,
    "leaf": _show_leaf,
    "root": _show_root,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bintrees-demo", description="Draw example binary trees."
    )
    parser.add_argument(
        "demo", nargs="?", default="sample", choices=sorted(_DEMOS),
        help="which demonstration to run (default: sample)",
    )
    args = parser.parse_args(argv)
    _DEMOS[args.demo]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())