"""ASCII rendering of binary trees."""

from __future__ import annotations

import sys
from typing import TextIO

from .node import Node


def _label(value: int) -> str:
    return f"({value:03d})"


def _write(row: list[str], start: int, text: str) -> None:
    end = start + len(text)
    if len(row) < end:
        row.extend(" " * (end - len(row)))
    row[start:end] = text


def _draw(node: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw ``node`` into ``rows`` and return the width it occupies."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = _label(node.value)
    width = len(label)
    left = _draw(node.left, offset, depth + 1, rows)
    right = _draw(node.right, offset + left + width, depth + 1, rows)
    _write(rows[depth], offset + left, label)
    if depth:
        above = rows[depth - 1]
        if is_left:
            _write(above, offset + left + width // 2, "-" * (width + right))
        else:
            _write(above, offset - width // 2, "-" * (left + width))
        _write(above, offset + left + width // 2, ".")
    return left + width + right


def format_tree(tree: Node | None) -> str:
    """Return the drawing of ``tree``, one newline-terminated line per level."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]
    _draw(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ").ljust(2) + "\n" for row in rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(format_tree(tree))