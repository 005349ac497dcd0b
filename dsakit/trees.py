"""Traversals, measurements and construction of binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional

from dsakit.nodes import TreeNode


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    """Yield the nodes of each level, from the root down, left to right."""
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child is not None]


def inorder_traversal(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in left-node-right order."""
    values: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def preorder_traversal(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in node-left-right order."""
    values: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def level_order(root: Optional[TreeNode]) -> list[list[Any]]:
    """Return the values grouped by level, each level left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def right_side_view(root: Optional[TreeNode]) -> list[Any]:
    """Return the rightmost value of every level."""
    return [level[-1].val for level in _levels(root)]


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of levels in the tree."""
    return sum(1 for _ in _levels(root))


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return whether every node's subtrees differ in height by at most one."""

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
    """Return the largest sum along any path between two nodes of the tree."""
    if root is None:
        raise ValueError("an empty tree has no paths")
    best = root.val

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between two nodes."""
    diameter = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal diameter
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        diameter = max(diameter, left + right)
        return 1 + max(left, right)

    height(root)
    return diameter


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the tree."""
    return sum(len(level) for level in _levels(root))


def width_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the widest level, counting the gaps between its end nodes."""
    if root is None:
        return 0
    widest = 0
    level = [(root, 0)]
    while level:
        base = level[0][1]
        widest = max(widest, level[-1][1] - base + 1)
        following = []
        for node, index in level:
            index -= base
            if node.left is not None:
                following.append((node.left, 2 * index + 1))
            if node.right is not None:
                following.append((node.right, 2 * index + 2))
        level = following
    return widest


def _position(inorder: Sequence[Any], value: Any, start: int, end: int) -> int:
    try:
        return inorder.index(value, start, end)
    except ValueError:
        raise ValueError(f"traversals disagree: {value!r} is out of place") from None


def build_tree_from_preorder_inorder(
    preorder: Iterable[Any], inorder: Iterable[Any]
) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder traversals."""
    pre = list(preorder)
    ino = list(inorder)
    if len(pre) != len(ino):
        raise ValueError("traversals have different lengths")
    values = iter(pre)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start >= end:
            return None
        value = next(values)
        pos = _position(ino, value, start, end)
        node = TreeNode(value)
        node.left = build(start, pos)
        node.right = build(pos + 1, end)
        return node

    return build(0, len(ino))


def build_tree_from_inorder_postorder(
    inorder: Iterable[Any], postorder: Iterable[Any]
) -> Optional[TreeNode]:
    """Rebuild a tree from its inorder and postorder traversals."""
    ino = list(inorder)
    post = list(postorder)
    if len(post) != len(ino):
        raise ValueError("traversals have different lengths")
    values = reversed(post)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start >= end:
            return None
        value = next(values)
        pos = _position(ino, value, start, end)
        node = TreeNode(value)
        node.right = build(pos + 1, end)
        node.left = build(start, pos)
        return node

    return build(0, len(ino))


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the deepest node having both p and q (matched by value) beneath it."""
    if root is None:
        return None
    if root.val == p.val or root.val == q.val:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def distance_k(root: Optional[TreeNode], target: Optional[TreeNode], k: int) -> list[Any]:
    """Return the values of all nodes exactly k edges away from target."""
    if root is None or target is None:
        return []
    parents: dict[TreeNode, Optional[TreeNode]] = {root: None}
    for level in _levels(root):
        for node in level:
            for child in (node.left, node.right):
                if child is not None:
                    parents[child] = node

    visited = {target}
    frontier = deque([target])
    for _ in range(k):
        if not frontier:
            break
        following: deque[TreeNode] = deque()
        for node in frontier:
            for neighbour in (node.left, node.right, parents.get(node)):
                if neighbour is not None and neighbour not in visited:
                    visited.add(neighbour)
                    following.append(neighbour)
        frontier = following
    return [node.val for node in frontier]