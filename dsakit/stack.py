"""Stack helpers; a stack is a list whose top is its last element."""

from typing import Any


def insert_at_bottom(stack: list[Any], value: Any) -> list[Any]:
    """Place ``value`` beneath every item of ``stack`` and return the stack."""
    held = []
    while stack:
        held.append(stack.pop())
    stack.append(value)
    while held:
        stack.append(held.pop())
    return stack