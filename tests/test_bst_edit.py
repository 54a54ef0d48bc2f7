import pytest

from algosuite.bst_edit import delete_node, trim_bst
from algosuite.tree_build import (
    TreeNode,
    bst_from_preorder,
    sorted_array_to_bst,
    tree_from_level_order,
    tree_to_level_order,
)
from algosuite.tree_query import is_valid_bst

VALUES = [1, 3, 4, 6, 8, 10, 12, 15, 17, 20]


def _inorder(root):
    stack, node = [], root
    while stack or node:
        while node:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


@pytest.mark.parametrize("key", VALUES)
def test_delete_each_key_from_balanced_tree(key):
    root = delete_node(sorted_array_to_bst(VALUES), key)
    assert is_valid_bst(root)
    assert list(_inorder(root)) == [v for v in VALUES if v != key]


@pytest.mark.parametrize("key", [8, 3, 10, 1, 6, 14, 4, 7, 13])
def test_delete_each_key_from_preorder_tree(key):
    preorder = [8, 3, 1, 6, 4, 7, 10, 14, 13]
    root = delete_node(bst_from_preorder(preorder), key)
    assert is_valid_bst(root)
    assert list(_inorder(root)) == sorted(v for v in preorder if v != key)


def test_delete_missing_key_leaves_tree_unchanged():
    original = sorted_array_to_bst(VALUES)
    before = tree_to_level_order(original)
    result = delete_node(original, 5)
    assert result is original
    assert tree_to_level_order(result) == before


def test_delete_only_node_and_empty_tree():
    assert delete_node(TreeNode(5), 5) is None
    assert delete_node(None, 5) is None


def test_delete_root_with_one_child_promotes_child():
    root = tree_from_level_order([5, 3])
    child = root.left
    assert delete_node(root, 5) is child


@pytest.mark.parametrize("low,high", [(1, 20), (4, 12), (5, 5), (0, 3), (16, 30), (8, 8)])
def test_trim_keeps_exactly_the_range(low, high):
    root = trim_bst(sorted_array_to_bst(VALUES), low, high)
    assert is_valid_bst(root)
    assert list(_inorder(root)) == [v for v in VALUES if low <= v <= high]


def test_trim_full_range_keeps_root():
    root = sorted_array_to_bst(VALUES)
    before = tree_to_level_order(root)
    assert trim_bst(root, VALUES[0], VALUES[-1]) is root
    assert tree_to_level_order(root) == before


def test_trim_empty_range_gives_none():
    assert trim_bst(sorted_array_to_bst(VALUES), 21, 30) is None
    assert trim_bst(None, 0, 1) is None


def test_trim_example():
    root = tree_from_level_order([1, 0, 2])
    assert tree_to_level_order(trim_bst(root, 1, 2)) == [1, None, 2]