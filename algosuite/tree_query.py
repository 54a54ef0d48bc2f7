"""Read-only queries on binary trees and binary search trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from .tree_build import TreeNode


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of levels in the tree."""
    if root is None:
        return 0
    depth = 0
    level: deque[TreeNode] = deque([root])
    while level:
        depth += 1
        for _ in range(len(level)):
            node = level.popleft()
            if node.left:
                level.append(node.left)
            if node.right:
                level.append(node.right)
    return depth


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    pending = [(p, q)]
    while pending:
        a, b = pending.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        pending.append((a.right, b.right))
        pending.append((a.left, b.left))
    return True


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether the inorder traversal of the tree is strictly increasing."""
    stack: list[TreeNode] = []
    node = root
    previous: Optional[int] = None
    while stack or node:
        while node:
            stack.append(node)
            node = node.left
        node = stack.pop()
        if previous is not None and previous >= node.val:
            return False
        previous = node.val
        node = node.right
    return True


def _spine_length(node: Optional[TreeNode], side: str) -> int:
    length = 0
    while node:
        length += 1
        node = getattr(node, side)
    return length


def count_nodes(root: Optional[TreeNode]) -> int:
    """Count the nodes of a complete binary tree in O(log^2 n) steps."""
    if root is None:
        return 0
    left_height = _spine_length(root, "left")
    if left_height == _spine_length(root, "right"):
        return (1 << left_height) - 1
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def lowest_common_ancestor_bst(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest common ancestor of ``p`` and ``q`` in a binary search tree."""
    while root:
        if root.val > p.val and root.val > q.val:
            root = root.left
        elif root.val < p.val and root.val < q.val:
            root = root.right
        else:
            return root
    return None


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest common ancestor of nodes ``p`` and ``q`` in any binary tree.

    If only one of the nodes is in the tree, that node is returned; if neither
    is, the result is ``None``.
    """
    if root is None:
        return None
    parents: dict[TreeNode, Optional[TreeNode]] = {root: None}
    stack = [root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                parents[child] = node
                stack.append(child)
    if p not in parents:
        return q if q in parents else None
    if q not in parents:
        return p
    ancestors = set()
    walker: Optional[TreeNode] = p
    while walker is not None:
        ancestors.add(walker)
        walker = parents[walker]
    walker = q
    while walker not in ancestors:
        walker = parents[walker]
    return walker


def binary_tree_paths(root: Optional[TreeNode]) -> list[str]:
    """Return every root-to-leaf path as values joined by ``->``, left paths first."""
    if root is None:
        return []
    paths: list[str] = []
    stack = [(root, str(root.val))]
    while stack:
        node, path = stack.pop()
        if node.left is None and node.right is None:
            paths.append(path)
            continue
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, f"{path}->{child.val}"))
    return paths


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    heights: dict[Optional[TreeNode], int] = {}
    diameter = 0
    stack: list[tuple[Optional[TreeNode], bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if node is None:
            continue
        if children_done:
            left = heights.get(node.left, 0)
            right = heights.get(node.right, 0)
            diameter = max(diameter, left + right)
            heights[node] = 1 + max(left, right)
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))
    return diameter


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding ``val`` in a binary search tree, or ``None``."""
    while root:
        if root.val == val:
            return root
        root = root.left if val < root.val else root.right
    return None