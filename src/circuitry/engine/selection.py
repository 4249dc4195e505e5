"""Edge generation and bounded shortest-edge selection.

``select_shortest_edges`` keeps only the ``capacity`` smallest edges out
of all n(n-1)/2 pairs using a capacity-bounded max-heap, so the scan is
O(P log K) instead of sorting every pair.
"""

from __future__ import annotations

import heapq
import logging
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice

from circuitry.core.point import Edge, Point
from circuitry.engine.distance import edge_sort_key, squared_distance

logger = logging.getLogger(__name__)

# heapq is a min-heap; negating the sort key puts the largest kept edge on top.
_HeapEntry = tuple[int, int, int]


def pair_count(n: int) -> int:
    """Number of unordered pairs among ``n`` points."""
    return n * (n - 1) // 2 if n > 1 else 0


def iter_edges(points: Sequence[Point]) -> Iterator[Edge]:
    """Yield every unordered pair exactly once, in ``(i, j)`` index order."""
    n = len(points)
    for i in range(n):
        p = points[i]
        for j in range(i + 1, n):
            yield Edge(distance=squared_distance(p, points[j]), u=i, v=j)


def sorted_edges(points: Sequence[Point]) -> list[Edge]:
    """All edges sorted ascending by distance (ties by index pair)."""
    edges = sorted(iter_edges(points), key=edge_sort_key)
    logger.debug("Sorted %d edges for %d points", len(edges), len(points))
    return edges


def select_shortest_edges(points: Sequence[Point], capacity: int) -> list[Edge]:
    """Select the ``capacity`` globally shortest edges.

    Every candidate is pushed onto the bounded heap; once the heap holds
    more than ``capacity`` entries the largest is evicted. The result is
    the same whatever order the pairs are generated in.

    Args:
        points: Loaded points, index = identity
        capacity: Maximum number of edges to keep (K)

    Returns:
        Up to ``capacity`` edges, ascending by distance

    Raises:
        ValueError: If capacity is negative
    """
    if capacity < 0:
        raise ValueError(f"capacity must be >= 0, got {capacity}")
    if capacity == 0:
        return []

    heap: list[_HeapEntry] = []
    for edge in iter_edges(points):
        entry = (-edge.distance, -edge.u, -edge.v)
        if len(heap) < capacity:
            heapq.heappush(heap, entry)
        else:
            # Push, then drop the largest retained edge.
            heapq.heappushpop(heap, entry)

    selected = sorted(
        (Edge(distance=-d, u=-u, v=-v) for d, u, v in heap),
        key=edge_sort_key,
    )
    logger.debug(
        "Selected %d of %d edges (capacity=%d)",
        len(selected),
        pair_count(len(points)),
        capacity,
    )
    return selected


def merge_bounded(partials: Iterable[Sequence[Edge]], capacity: int) -> list[Edge]:
    """Merge ascending bounded selections into one bounded selection.

    Each partial must already be sorted ascending (as returned by
    ``select_shortest_edges`` over a subset of pairs). The streaming
    k-way merge keeps the result equal to a single global selection.
    """
    if capacity < 0:
        raise ValueError(f"capacity must be >= 0, got {capacity}")
    merged = heapq.merge(*partials, key=edge_sort_key)
    return list(islice(merged, capacity))
