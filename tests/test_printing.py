import io

from bintrees_kit.node import Node
from bintrees_kit.printing import format_tree, print_tree


def sample_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def test_sample_drawing():
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert format_tree(sample_tree()) == expected


def test_empty_tree_draws_nothing():
    assert format_tree(None) == ""
    buffer = io.StringIO()
    print_tree(None, buffer)
    assert buffer.getvalue() == ""


def test_single_node():
    assert format_tree(Node(5)) == "(005)\n"


def test_negative_value_label():
    assert format_tree(Node(-7)) == "(-07)\n"


def test_one_line_per_level():
    root = sample_tree()
    text = format_tree(root)
    lines = text.splitlines()
    assert len(lines) == root.height() + 1
    assert all(line == line.rstrip() for line in lines)


def test_every_value_is_drawn_once():
    root = sample_tree()
    text = format_tree(root)
    for value in root.preorder():
        assert text.count(f"({value:03d})") == 1


def test_bottom_row_lists_leaves_in_order():
    root = sample_tree()
    bottom = format_tree(root).splitlines()[-1]
    assert bottom.split() == [f"({v:03d})" for v in root.inorder() if v in (6, 16, 256, 512)]


def test_print_tree_matches_format_tree():
    root = sample_tree()
    root.right.left.detach()
    buffer = io.StringIO()
    print_tree(root, buffer)
    assert buffer.getvalue() == format_tree(root)


def test_print_tree_defaults_to_stdout(capsys):
    root = Node(1)
    root.insert_left(2)
    print_tree(root)
    assert capsys.readouterr().out == format_tree(root)


def test_left_chain_connector_marks():
    root = Node(1)
    root.insert_left(2)
    top, bottom = format_tree(root).splitlines()
    assert top.lstrip().startswith(".")
    assert top.endswith("(001)")
    assert bottom == "(002)"