"""Singly linked list and node-level algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A list node; nodes compare by identity."""

    value: Any = 0
    next: Optional[Node] = field(default=None, repr=False)


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    while head is not None:
        yield head
        head = head.next


def length(head: Optional[Node]) -> int:
    """Number of nodes reachable from ``head`` (which must be acyclic)."""
    return sum(1 for _ in _nodes(head))


def has_cycle(head: Optional[Node]) -> bool:
    """Detect a cycle with the tortoise-and-hare walk."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def make_cycle(head: Optional[Node], position: int) -> None:
    """Link the tail back to the node at 1-based ``position``."""
    target = None
    tail = None
    for index, node in enumerate(_nodes(head), start=1):
        if index == position:
            target = node
        tail = node
    if target is None or tail is None:
        raise IndexError(f"no node at position {position}")
    tail.next = target


def remove_cycle(head: Optional[Node]) -> bool:
    """Break a cycle if there is one; return whether one was removed."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return False

    slow = head
    if slow is fast:
        while fast.next is not head:
            fast = fast.next
    else:
        while slow.next is not fast.next:
            slow = slow.next
            fast = fast.next
    fast.next = None
    return True


def intersection_value(first: Optional[Node], second: Optional[Node]) -> Any:
    """Value of the first node shared by both chains, or None."""
    first_length, second_length = length(first), length(second)
    longer, shorter = (first, second) if first_length > second_length else (second, first)
    for _ in range(abs(first_length - second_length)):
        longer = longer.next
    while longer is not None and shorter is not None:
        if longer is shorter:
            return longer.value
        longer = longer.next
        shorter = shorter.next
    return None


class LinkedList:
    """A singly linked list exposing its ``head`` node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for value in values:
            self.insert_at_tail(value)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _nodes(self.head))

    def __len__(self) -> int:
        return length(self.head)

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def insert_at_head(self, value: Any) -> None:
        self.head = Node(value, self.head)

    def insert_at_tail(self, value: Any) -> None:
        new = Node(value)
        if self.head is None:
            self.head = new
            return
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = new

    def insert_at(self, position: int, value: Any) -> None:
        """Insert so that ``value`` ends up at 1-based ``position``."""
        if position == 1:
            self.insert_at_head(value)
            return
        if position < 1:
            raise IndexError(f"position {position} out of range")
        previous = self.head
        for _ in range(position - 2):
            if previous is None:
                break
            previous = previous.next
        if previous is None:
            raise IndexError(f"position {position} out of range")
        previous.next = Node(value, previous.next)

    def delete_head(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        removed = self.head
        self.head = removed.next
        return removed.value

    def delete(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        previous = None
        for node in _nodes(self.head):
            if node.value == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return
            previous = node
        raise ValueError(f"{value!r} not in list")

    def reverse(self) -> None:
        previous = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def reverse_in_groups(self, k: int) -> None:
        """Reverse each successive run of ``k`` nodes, including a short last run."""
        if k < 1:
            raise ValueError("group size must be positive")
        new_head = None
        previous_tail = None
        current = self.head
        while current is not None:
            group_head = current
            previous = None
            for _ in range(k):
                if current is None:
                    break
                current.next, previous, current = previous, current, current.next
            if previous_tail is None:
                new_head = previous
            else:
                previous_tail.next = previous
            previous_tail = group_head
        self.head = new_head

    def rotate(self, k: int) -> None:
        """Move the last ``k`` nodes (modulo the length) to the front."""
        size = len(self)
        if size == 0:
            return
        k %= size
        if k == 0:
            return
        new_tail = self.head
        for _ in range(size - k - 1):
            new_tail = new_tail.next
        new_head = new_tail.next
        old_tail = new_head
        while old_tail.next is not None:
            old_tail = old_tail.next
        old_tail.next = self.head
        new_tail.next = None
        self.head = new_head

    def even_after_odd(self) -> None:
        """Regroup so nodes at odd positions precede those at even positions."""
        if self.head is None or self.head.next is None:
            return
        odd = self.head
        even = even_head = odd.next
        while even is not None and even.next is not None:
            odd.next = even.next
            odd = odd.next
            even.next = odd.next
            even = even.next
        odd.next = even_head