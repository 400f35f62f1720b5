"""Singly linked list nodes and merging of sorted lists."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any
    next: Optional[ListNode] = None


def build_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding values in order; empty input gives None."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[Any]:
    """Values of a linked list from head to tail."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def merge_two_lists(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list, reusing their nodes.

    On equal values the node from l2 comes first.
    """
    sentinel = ListNode(None)
    tail = sentinel
    while l1 is not None and l2 is not None:
        if l1.val < l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return sentinel.next