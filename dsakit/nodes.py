"""Node types for binary trees and singly linked lists, with builders."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

_END = object()


@dataclass(eq=False, repr=False)
class TreeNode:
    """A binary tree node."""

    val: Any = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


@dataclass(eq=False, repr=False)
class ListNode:
    """A singly linked list node."""

    val: Any = 0
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def tree_from_level_order(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from level-order values, where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def tree_to_level_order(root: Optional[TreeNode]) -> list[Any]:
    """Return the level-order values of a tree, without trailing None markers."""
    values: list[Any] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            values.append(None)
            continue
        values.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while values and values[-1] is None:
        values.pop()
    return values


def list_from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding the given values in order."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_to_values(head: Optional[ListNode]) -> list[Any]:
    """Return the values of a linked list in order."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values