"""Sorted multiset with bound queries."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from collections.abc import Iterable, Iterator
from typing import Any, Optional


class Multiset:
    """A sorted collection that keeps duplicate values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = sorted(values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value: Any) -> bool:
        return self.count(value) > 0

    def __repr__(self) -> str:
        return f"Multiset({self._items!r})"

    def add(self, value: Any) -> None:
        insort(self._items, value)

    def count(self, value: Any) -> int:
        return bisect_right(self._items, value) - bisect_left(self._items, value)

    def remove_all(self, value: Any) -> int:
        """Remove every copy of ``value``; return how many were removed."""
        start = bisect_left(self._items, value)
        end = bisect_right(self._items, value)
        del self._items[start:end]
        return end - start

    def remove_one(self, value: Any) -> None:
        """Remove a single copy of ``value``."""
        index = bisect_left(self._items, value)
        if index == len(self._items) or self._items[index] != value:
            raise KeyError(value)
        del self._items[index]

    def lower_bound(self, value: Any) -> Optional[Any]:
        """Smallest element not less than ``value``, or None."""
        index = bisect_left(self._items, value)
        return self._items[index] if index < len(self._items) else None

    def upper_bound(self, value: Any) -> Optional[Any]:
        """Smallest element greater than ``value``, or None."""
        index = bisect_right(self._items, value)
        return self._items[index] if index < len(self._items) else None