"""Binary-heap priority frontier with lazy invalidation.

The frontier never updates or removes an entry in place: a vertex whose
tentative distance improves is simply inserted again. Callers compare
the extracted priority against their own distance map and skip entries
that are stale.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Iterator, List, Tuple

from ..domain.models import VertexId

# (priority, insertion sequence, vertex); the sequence keeps ids out of
# comparisons and makes equal priorities come out in insertion order.
_Entry = Tuple[float, int, VertexId]


class PriorityFrontier:
    """Min-priority queue of ``(vertex, priority)`` pairs.

    ``insert`` and ``extract_min`` are O(log n). Multiple pending entries
    for the same vertex are allowed.
    """

    __slots__ = ("_heap", "_counter")

    def __init__(self) -> None:
        self._heap: List[_Entry] = []
        self._counter: Iterator[int] = itertools.count()

    def insert(self, vertex: VertexId, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), vertex))

    def extract_min(self) -> Tuple[VertexId, float]:
        """Remove and return the pending entry with the smallest priority.

        Raises:
            IndexError: If the frontier is empty.
        """
        if not self._heap:
            raise IndexError("extract_min from an empty frontier")
        priority, _, vertex = heapq.heappop(self._heap)
        return vertex, priority

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"PriorityFrontier(pending={len(self._heap)})"
