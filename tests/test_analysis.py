import pytest

from bintrees_kit.analysis import (
    is_complete,
    levelorder,
    lowest_common_ancestor,
    rotate_left,
    rotate_right,
)
from bintrees_kit.demo import build_sample_tree
from bintrees_kit.node import Node


def _check_links(node):
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
            _check_links(child)


def test_levelorder_sample_tree():
    assert list(levelorder(build_sample_tree())) == [98, 12, 402, 6, 16, 256, 512]


def test_levelorder_empty():
    assert list(levelorder(None)) == []


def test_levelorder_visits_every_node_once():
    root = build_sample_tree()
    root.left.left.insert_right(7)
    values = list(levelorder(root))
    assert sorted(values) == sorted(root.preorder())
    assert values[0] == root.value


def test_lca_same_node():
    root = build_sample_tree()
    assert lowest_common_ancestor(root.left, root.left) is root.left


def test_lca_siblings():
    root = build_sample_tree()
    assert lowest_common_ancestor(root.left.left, root.left.right) is root.left


def test_lca_across_subtrees():
    root = build_sample_tree()
    assert lowest_common_ancestor(root.left.left, root.right.right) is root


def test_lca_ancestor_and_descendant():
    root = build_sample_tree()
    assert lowest_common_ancestor(root.right, root.right.left) is root.right
    assert lowest_common_ancestor(root.right.left, root.right) is root.right


def test_lca_different_trees_and_none():
    first = build_sample_tree()
    second = build_sample_tree()
    assert lowest_common_ancestor(first.left, second.left) is None
    assert lowest_common_ancestor(None, first) is None
    assert lowest_common_ancestor(first, None) is None


def test_is_complete_cases():
    root = build_sample_tree()
    assert is_complete(root) is True
    assert is_complete(Node(1)) is True
    assert is_complete(None) is False


def test_is_complete_left_only_child():
    root = Node(1)
    root.insert_left(2)
    assert is_complete(root) is True


def test_is_complete_right_only_child():
    root = Node(1)
    root.insert_right(2)
    assert is_complete(root) is False


def test_rotate_left_keeps_inorder_and_links():
    root = build_sample_tree()
    before = list(root.inorder())
    old_right = root.right
    new_root = rotate_left(root)
    assert new_root is old_right
    assert new_root.parent is None
    assert new_root.left is root
    assert list(new_root.inorder()) == before
    _check_links(new_root)


def test_rotate_right_keeps_inorder_and_links():
    root = build_sample_tree()
    before = list(root.inorder())
    old_left = root.left
    new_root = rotate_right(root)
    assert new_root is old_left
    assert new_root.right is root
    assert list(new_root.inorder()) == before
    _check_links(new_root)


def test_rotations_are_inverse():
    root = build_sample_tree()
    before = list(root.preorder())
    back = rotate_right(rotate_left(root))
    assert back is root
    assert list(back.preorder()) == before
    _check_links(back)


def test_rotation_of_inner_node_updates_parent():
    root = build_sample_tree()
    old_inner = root.right
    pivot = rotate_left(old_inner)
    assert root.right is pivot
    assert pivot.parent is root
    _check_links(root)


def test_rotation_without_child_raises():
    leaf = Node(5)
    with pytest.raises(ValueError):
        rotate_left(leaf)
    with pytest.raises(ValueError):
        rotate_right(leaf)