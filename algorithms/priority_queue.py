"""
priority_queue.py — Min-priority queue without decrease-key
============================================================
Binary heap (heapq) of (priority, insertion_no, item) triples.  The
insertion counter makes ties come out in insertion order and keeps heapq
from ever comparing two items directly.

There is no decrease-key: to lower a node's priority, enqueue it again.
The old entry stays in the heap and consumers skip it when it surfaces
(it is "stale" once the node has been finalised).
"""

import heapq
import itertools
from typing import Generic, List, Tuple, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):

    def __init__(self):
        self._heap: List[Tuple[float, int, T]] = []
        self._counter = itertools.count()

    def enqueue(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def dequeue(self) -> T:
        """Pop the item with the smallest priority.  Raises IndexError when empty."""
        if not self._heap:
            raise IndexError("dequeue from an empty priority queue")
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
