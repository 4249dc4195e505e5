"""Distance oracle and the total order over edges.

Distances are squared Euclidean distances on integer coordinates, so they
are exact Python ints. Ordering goes through ``edge_sort_key`` rather than
operator overloading: distance first, then the index pair, which makes
every sort and heap in the engine reproducible.
"""

from __future__ import annotations

from collections.abc import Sequence

from circuitry.core.point import Edge, Point


def squared_distance(a: Point, b: Point) -> int:
    """Return ``dx² + dy² + dz²`` between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    dz = a.z - b.z
    return dx * dx + dy * dy + dz * dz


def make_edge(points: Sequence[Point], i: int, j: int) -> Edge:
    """Build the edge between points ``i`` and ``j`` with ``u < v``."""
    if i == j:
        raise ValueError(f"An edge needs two distinct points, got {i} twice")
    u, v = (i, j) if i < j else (j, i)
    return Edge(distance=squared_distance(points[u], points[v]), u=u, v=v)


def edge_sort_key(edge: Edge) -> tuple[int, int, int]:
    """Ascending sort key: distance, then lower index, then higher index."""
    return (edge.distance, edge.u, edge.v)


def compare_edges(a: Edge, b: Edge) -> int:
    """Three-way comparison consistent with ``edge_sort_key``.

    Returns -1, 0 or 1. Equal distances compare equal on that component
    and fall through to the index pair.
    """
    ka = edge_sort_key(a)
    kb = edge_sort_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0
