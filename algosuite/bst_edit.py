"""Structural edits on binary search trees: deletion and range trimming."""

from __future__ import annotations

from typing import Optional

from .tree_build import TreeNode


def _detach(node: TreeNode) -> Optional[TreeNode]:
    """Return the subtree that replaces ``node`` once it is removed."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    rightmost = node.left
    while rightmost.right:
        rightmost = rightmost.right
    rightmost.right = node.right
    return node.left


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove the node holding ``key`` from a binary search tree and return the root."""
    if root is None:
        return None
    if root.val == key:
        return _detach(root)
    node: Optional[TreeNode] = root
    while node:
        if key < node.val:
            if node.left is not None and node.left.val == key:
                node.left = _detach(node.left)
                break
            node = node.left
        else:
            if node.right is not None and node.right.val == key:
                node.right = _detach(node.right)
                break
            node = node.right
    return root


def trim_bst(root: Optional[TreeNode], low: int, high: int) -> Optional[TreeNode]:
    """Drop every node whose value lies outside ``[low, high]``, keeping BST order."""
    while root and not low <= root.val <= high:
        root = root.left if root.val > high else root.right
    if root is None:
        return None
    node: Optional[TreeNode] = root
    while node:
        while node.left and node.left.val < low:
            node.left = node.left.right
        node = node.left
    node = root
    while node:
        while node.right and node.right.val > high:
            node.right = node.right.left
        node = node.right
    return root