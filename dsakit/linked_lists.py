"""Operations on singly linked lists."""

from __future__ import annotations

from typing import Optional

from dsakit.nodes import ListNode


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle begins, or None if the list has no cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            slow = head
            while slow is not fast:
                slow = slow.next
                fast = fast.next
            return slow
    return None


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a linked list in place and return the new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove the middle node (index len // 2) and return the head."""
    if head is None:
        raise ValueError("cannot delete the middle of an empty list")
    if head.next is None:
        return None
    previous = head
    slow = head.next
    fast = head.next.next
    while fast is not None and fast.next is not None:
        previous = slow
        slow = slow.next
        fast = fast.next.next
    previous.next = slow.next
    slow.next = None
    return head