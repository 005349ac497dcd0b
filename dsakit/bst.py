"""Operations on binary search trees."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from typing import Any, Optional

from dsakit.nodes import TreeNode
from dsakit.trees import inorder_traversal, preorder_traversal


def kth_smallest(root: Optional[TreeNode], k: int) -> Any:
    """Return the k-th smallest value (counting from 1) in the tree."""
    values = inorder_traversal(root)
    if not 1 <= k <= len(values):
        raise ValueError(f"k must lie between 1 and {len(values)}")
    return values[k - 1]


def bst_lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node that lies between p and q in the search tree."""
    node = root
    while node is not None:
        if p.val < node.val and q.val < node.val:
            node = node.left
        elif p.val > node.val and q.val > node.val:
            node = node.right
        else:
            return node
    return None


def delete_node(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Remove the node holding key, if any, and return the new root."""
    if root is None:
        return None
    if key < root.val:
        root.left = delete_node(root.left, key)
    elif key > root.val:
        root.right = delete_node(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.val = successor.val
        root.right = delete_node(root.right, successor.val)
    return root


def find_target(root: Optional[TreeNode], k: Any) -> bool:
    """Return whether two different nodes hold values that add up to k."""
    seen = set()
    for value in preorder_traversal(root):
        if k - value in seen:
            return True
        seen.add(value)
    return False


def search_bst(root: Optional[TreeNode], val: Any) -> Optional[TreeNode]:
    """Return the node holding val, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.left if val < node.val else node.right
    return node


def insert_into_bst(root: Optional[TreeNode], val: Any) -> TreeNode:
    """Insert val as a new leaf and return the root."""
    new_node = TreeNode(val)
    if root is None:
        return new_node
    node = root
    while True:
        if val == node.val:
            raise ValueError(f"{val!r} is already in the tree")
        side = "left" if val < node.val else "right"
        child = getattr(node, side)
        if child is None:
            setattr(node, side, new_node)
            return root
        node = child


def closest_nodes(root: Optional[TreeNode], queries: Iterable[Any]) -> list[tuple[Any, Any]]:
    """For each query, return (largest value <= it, smallest value >= it), -1 where none."""
    values = inorder_traversal(root)
    result = []
    for query in queries:
        index = bisect_left(values, query)
        ceiling = values[index] if index < len(values) else -1
        if index < len(values) and values[index] == query:
            floor = query
        elif index > 0:
            floor = values[index - 1]
        else:
            floor = -1
        result.append((floor, ceiling))
    return result