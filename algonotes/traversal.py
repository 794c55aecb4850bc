"""Binary tree traversals: level orders, depth-first orders and views."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator
from typing import Optional

from algonotes.nodes import TreeNode


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    """Yield the nodes of each level, left to right, top to bottom."""
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values level by level, top to bottom."""
    return [[node.val for node in level] for level in _levels(root)]


def level_order_bottom(root: Optional[TreeNode]) -> list[list[int]]:
    """Values level by level, bottom to top."""
    return level_order(root)[::-1]


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values level by level, alternating left-to-right and right-to-left."""
    return [
        values if depth % 2 == 0 else values[::-1]
        for depth, values in enumerate(level_order(root))
    ]


def vertical_traversal(root: Optional[TreeNode]) -> list[list[int]]:
    """Values column by column from leftmost, ordered by row then value."""
    columns: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    if root is None:
        return []
    queue = deque([(root, 0, 0)])
    while queue:
        node, row, col = queue.popleft()
        columns[col].append((row, node.val))
        if node.left is not None:
            queue.append((node.left, row + 1, col - 1))
        if node.right is not None:
            queue.append((node.right, row + 1, col + 1))
    return [[val for _, val in sorted(columns[col])] for col in sorted(columns)]


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in root-left-right order."""
    out: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        out.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return out


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left-root-right order."""
    out: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            out.append(node.val)
            node = node.right
    return out


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left-right-root order."""
    out: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        out.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return out[::-1]


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """The rightmost value of each level, top to bottom."""
    return [level[-1].val for level in _levels(root)]


def bottom_left_value(root: Optional[TreeNode]) -> int:
    """The leftmost value of the deepest level."""
    if root is None:
        raise ValueError("tree is empty")
    last: list[TreeNode] = []
    for last in _levels(root):
        pass
    return last[0].val