"""Greedy spanning walk (Kruskal): connect everything, shortest edge first."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from circuitry.core.point import Edge
from circuitry.engine.clustering import DisjointSetForest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpanningResult:
    """Outcome of a spanning walk.

    Attributes:
        point_count: Number of points the forest was built over
        merges: Successful unions performed
        last_merge: Edge that caused the final successful union, None if none happened
    """

    point_count: int
    merges: int
    last_merge: Edge | None

    @property
    def is_connected(self) -> bool:
        return self.point_count <= 1 or self.merges == self.point_count - 1


def walk_spanning(edges: Iterable[Edge], n: int) -> SpanningResult:
    """Apply ascending edges to a fresh forest until it is one component.

    Args:
        edges: Edges sorted ascending by distance
        n: Number of points

    Returns:
        SpanningResult; ``last_merge`` is None when ``n < 2``
    """
    forest = DisjointSetForest(n)
    target = n - 1
    merges = 0
    last_merge: Edge | None = None

    if target > 0:
        for edge in edges:
            if forest.union(edge.u, edge.v):
                merges += 1
                last_merge = edge
                if merges == target:
                    break

    logger.debug("Spanning walk: %d merges over %d points, last=%s", merges, n, last_merge)
    return SpanningResult(point_count=n, merges=merges, last_merge=last_merge)
