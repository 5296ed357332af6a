"""Demonstrations of the standard container behaviours."""

from __future__ import annotations

import argparse
import heapq
from collections import deque
from collections.abc import Sequence
from typing import Optional


def list_demo() -> list[str]:
    """Output lines of the double-ended list walkthrough."""
    values = deque(range(10))
    lines = [str(values[0]), "", str(values[-1]), "", ""]
    values.pop()
    values.popleft()
    lines.extend(str(v) for v in values)
    lines.append("")
    values.reverse()
    lines.extend(str(v) for v in values)
    lines.append("")
    lines.extend(str(v) for v in sorted(values))
    return lines


def queue_demo() -> list[str]:
    """Output lines of the first-in first-out queue walkthrough."""
    queue = deque([10, 20, 30, 40, 50])
    lines = [str(queue[0]), str(queue[-1]), "", ""]
    while queue:
        lines.append(str(queue.popleft()))
    return lines


def priority_queue_demo() -> list[str]:
    """Output lines of the max-priority queue walkthrough."""
    heap: list[int] = []
    for value in (10, 20, 50, 30, 40):
        heapq.heappush(heap, -value)
    lines = []
    while heap:
        lines.append(str(-heapq.heappop(heap)))
    return lines


_DEMOS = {
    "list": list_demo,
    "queue": queue_demo,
    "priority": priority_queue_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run container demonstrations.")
    parser.add_argument(
        "demo",
        nargs="?",
        choices=[*_DEMOS, "all"],
        default="all",
        help="which demonstration to run",
    )
    args = parser.parse_args(argv)
    chosen = list(_DEMOS.values()) if args.demo == "all" else [_DEMOS[args.demo]]
    for index, demo in enumerate(chosen):
        if index:
            print()
            print()
        for line in demo():
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())