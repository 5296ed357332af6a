"""Lexicographic permutation generation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


def next_permutation(items: Iterable[Any]) -> Optional[list[Any]]:
    """Return the next lexicographic arrangement, or None after the last one."""
    seq = list(items)
    pivot = len(seq) - 2
    while pivot >= 0 and seq[pivot] >= seq[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        return None
    successor = len(seq) - 1
    while seq[successor] <= seq[pivot]:
        successor -= 1
    seq[pivot], seq[successor] = seq[successor], seq[pivot]
    seq[pivot + 1 :] = reversed(seq[pivot + 1 :])
    return seq


def sorted_permutations(items: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """Yield each distinct arrangement of ``items`` in lexicographic order."""
    current: Optional[list[Any]] = sorted(items)
    while current is not None:
        yield tuple(current)
        current = next_permutation(current)