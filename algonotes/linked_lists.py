"""Linked list algorithms."""

from __future__ import annotations

from typing import Optional

from algonotes.nodes import ListNode


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Whether the list reads the same forwards and backwards."""
    slow = fast = head
    first_half: list[int] = []
    while fast is not None and fast.next is not None:
        first_half.append(slow.val)
        slow = slow.next
        fast = fast.next.next
    if fast is not None:
        slow = slow.next
    second_half = list(slow) if slow is not None else []
    return first_half[::-1] == second_half