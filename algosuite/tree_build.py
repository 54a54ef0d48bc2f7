"""Binary tree node type and constructors from traversals and sorted data."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def tree_from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order list where ``None`` marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def tree_to_level_order(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Serialise a tree to a level-order list with trailing ``None`` values trimmed."""
    result: list[Optional[int]] = []
    pending: deque[Optional[TreeNode]] = deque([root])
    while pending:
        node = pending.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        pending.append(node.left)
        pending.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def bst_from_preorder(preorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a binary search tree from its preorder traversal."""
    index = 0

    def build(bound: Optional[int]) -> Optional[TreeNode]:
        nonlocal index
        if index == len(preorder) or (bound is not None and preorder[index] > bound):
            return None
        node = TreeNode(preorder[index])
        index += 1
        node.left = build(node.val)
        node.right = build(bound)
        return node

    return build(None)


def _positions(values: Sequence[int]) -> dict[int, int]:
    return {value: position for position, value in enumerate(values)}


def _check_lengths(first: Sequence[int], second: Sequence[int]) -> None:
    if len(first) != len(second):
        raise ValueError("traversals must have the same length")


def build_tree_pre_in(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a binary tree from its preorder and inorder traversals."""
    _check_lengths(preorder, inorder)
    where = _positions(inorder)
    next_root = iter(preorder)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        node = TreeNode(next(next_root))
        split = where[node.val]
        node.left = build(start, split - 1)
        node.right = build(split + 1, end)
        return node

    return build(0, len(inorder) - 1)


def build_tree_in_post(inorder: Sequence[int], postorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a binary tree from its inorder and postorder traversals."""
    _check_lengths(inorder, postorder)
    where = _positions(inorder)
    next_root = reversed(postorder)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        node = TreeNode(next(next_root))
        split = where[node.val]
        node.right = build(split + 1, end)
        node.left = build(start, split - 1)
        return node

    return build(0, len(inorder) - 1)


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced binary search tree from a sorted sequence."""

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low > high:
            return None
        mid = low + (high - low) // 2
        node = TreeNode(nums[mid])
        node.left = build(low, mid - 1)
        node.right = build(mid + 1, high)
        return node

    return build(0, len(nums) - 1)


def construct_from_pre_post(
    preorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a full binary tree from its preorder and postorder traversals."""
    _check_lengths(preorder, postorder)
    where = _positions(postorder)

    def build(pre_start: int, pre_end: int, post_start: int, post_end: int) -> Optional[TreeNode]:
        if pre_start > pre_end:
            return None
        node = TreeNode(preorder[pre_start])
        if pre_start == pre_end:
            return node
        split = where[preorder[pre_start + 1]]
        left_size = split - post_start + 1
        node.left = build(pre_start + 1, pre_start + left_size, post_start, split)
        node.right = build(pre_start + left_size + 1, pre_end, split + 1, post_end - 1)
        return node

    return build(0, len(preorder) - 1, 0, len(postorder) - 1)