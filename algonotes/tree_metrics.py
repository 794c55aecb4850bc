"""Measurements and comparisons on binary trees."""

from __future__ import annotations

from typing import Optional

from algonotes.nodes import TreeNode


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Whether two trees have the same shape and the same values."""
    stack = [(p, q)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        stack.append((a.right, b.right))
        stack.append((a.left, b.left))
    return True


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest root-to-leaf path."""
    if root is None:
        return 0
    depth = 1
    level = [root]
    while level:
        if any(node.left is None and node.right is None for node in level):
            return depth
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
        depth += 1
    return depth


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Whether every node's subtrees differ in height by at most one."""

    def height(node: Optional[TreeNode]) -> Optional[int]:
        if node is None:
            return 0
        left = height(node.left)
        if left is None:
            return None
        right = height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return 1 + max(left, right)

    return height(root) is not None


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Largest sum of values along any path between two nodes."""
    if root is None:
        raise ValueError("tree is empty")
    best = root.val

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(gain(node.left), 0)
        right = max(gain(node.right), 0)
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """The deepest node having both ``p`` and ``q`` (matched by value) below or at it."""
    targets = {p.val, q.val}

    def find(node: Optional[TreeNode]) -> Optional[TreeNode]:
        if node is None:
            return None
        if node.val in targets:
            return node
        left = find(node.left)
        right = find(node.right)
        if left is None:
            return right
        if right is None:
            return left
        return node

    return find(root)


def diameter(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def max_width(root: Optional[TreeNode]) -> int:
    """Widest level, counting the gaps between its outermost nodes."""
    if root is None:
        return 0
    widest = 0
    level: list[tuple[TreeNode, int]] = [(root, 0)]
    while level:
        first = level[0][1]
        normalised = [(node, pos - first) for node, pos in level]
        widest = max(widest, normalised[-1][1] + 1)
        level = []
        for node, pos in normalised:
            if node.left is not None:
                level.append((node.left, 2 * pos + 1))
            if node.right is not None:
                level.append((node.right, 2 * pos + 2))
    return widest