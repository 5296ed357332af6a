"""Binary search over sorted sequences."""

from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in the ascending ``items``, or -1 if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = (low + high) // 2
        candidate = items[middle]
        if candidate == key:
            return middle
        if candidate > key:
            high = middle - 1
        else:
            low = middle + 1
    return -1