"""Circuit analysis pipelines.

Two independent runs over the same points, each with its own forest:

- ``connect_shortest``: keep the K shortest edges, union them, and
  multiply the sizes of the largest circuits.
- ``final_connection``: walk all edges shortest first until every point
  is joined, and report the pair that closed the last gap.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from circuitry.config import AnalysisConfig
from circuitry.core.point import Edge, Point
from circuitry.engine.clustering import (
    DisjointSetForest,
    component_sizes,
    largest_product,
)
from circuitry.engine.selection import select_shortest_edges, sorted_edges
from circuitry.engine.spanning import walk_spanning

logger = logging.getLogger(__name__)

NO_MERGE_SENTINEL = 0


@dataclass(frozen=True)
class CircuitReport:
    """Result of the shortest-edge clustering pass.

    Attributes:
        capacity: Edge capacity K the selection ran with
        edges_used: Number of edges actually selected
        merges: Unions that joined two separate circuits
        component_sizes: All circuit sizes, largest first
        product: Product of the largest ``top_components`` sizes
    """

    capacity: int
    edges_used: int
    merges: int
    component_sizes: tuple[int, ...]
    product: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "capacity": self.capacity,
            "edges_used": self.edges_used,
            "merges": self.merges,
            "component_sizes": list(self.component_sizes),
            "product": self.product,
        }


@dataclass(frozen=True)
class ConnectionReport:
    """Result of the full spanning walk.

    Attributes:
        merges: Successful unions performed
        last_merge: Edge that completed the spanning forest, None if fewer than two points
        x_product: Product of the x-coordinates of ``last_merge``'s endpoints, 0 without one
    """

    merges: int
    last_merge: Edge | None
    x_product: int

    def to_dict(self) -> dict[str, Any]:
        last = None
        if self.last_merge is not None:
            last = {
                "u": self.last_merge.u,
                "v": self.last_merge.v,
                "distance": self.last_merge.distance,
            }
        return {"merges": self.merges, "last_merge": last, "x_product": self.x_product}


class CircuitAnalyzer:
    """Runs both analyses over a fixed, already-validated point list."""

    def __init__(
        self,
        points: Sequence[Point],
        config: AnalysisConfig | None = None,
    ) -> None:
        self._points = tuple(points)
        self._config = config or AnalysisConfig()

    def connect_shortest(self, capacity: int | None = None) -> CircuitReport:
        """Join the ``capacity`` shortest edges and size the resulting circuits.

        Args:
            capacity: Edge capacity K; defaults to ``config.edge_capacity``

        Returns:
            CircuitReport with the product of the largest circuit sizes
        """
        k = self._config.edge_capacity if capacity is None else capacity
        edges = select_shortest_edges(self._points, k)

        forest = DisjointSetForest(len(self._points))
        merges = sum(1 for edge in edges if forest.union(edge.u, edge.v))

        sizes = component_sizes(forest)
        product = largest_product(sizes, self._config.top_components)
        logger.debug(
            "Shortest-edge pass: %d edges, %d merges, %d circuits, product=%d",
            len(edges),
            merges,
            len(sizes),
            product,
        )
        return CircuitReport(
            capacity=k,
            edges_used=len(edges),
            merges=merges,
            component_sizes=tuple(sizes),
            product=product,
        )

    def final_connection(self) -> ConnectionReport:
        """Connect every point shortest edge first and report the closing pair."""
        result = walk_spanning(sorted_edges(self._points), len(self._points))

        if result.last_merge is None:
            logger.debug("No merge available for %d points", len(self._points))
            return ConnectionReport(merges=0, last_merge=None, x_product=NO_MERGE_SENTINEL)

        a = self._points[result.last_merge.u]
        b = self._points[result.last_merge.v]
        return ConnectionReport(
            merges=result.merges,
            last_merge=result.last_merge,
            x_product=a.x * b.x,
        )

    def solve(self, part: int) -> str:
        """Answer for ``part`` 1 (circuit product) or 2 (final connection), as text."""
        if part == 1:
            return str(self.connect_shortest().product)
        if part == 2:
            return str(self.final_connection().x_product)
        raise ValueError(f"Invalid part specified: {part}")
