"""Analysis engine: distances, edge selection, union-find and spanning walk."""

from circuitry.engine.analysis import CircuitAnalyzer, CircuitReport, ConnectionReport
from circuitry.engine.clustering import (
    Component,
    DisjointSetForest,
    component_sizes,
    components,
    largest_product,
)
from circuitry.engine.distance import compare_edges, edge_sort_key, make_edge, squared_distance
from circuitry.engine.selection import (
    iter_edges,
    merge_bounded,
    pair_count,
    select_shortest_edges,
    sorted_edges,
)
from circuitry.engine.spanning import SpanningResult, walk_spanning

__all__ = [
    "CircuitAnalyzer",
    "CircuitReport",
    "Component",
    "ConnectionReport",
    "DisjointSetForest",
    "SpanningResult",
    "compare_edges",
    "component_sizes",
    "components",
    "edge_sort_key",
    "iter_edges",
    "largest_product",
    "make_edge",
    "merge_bounded",
    "pair_count",
    "select_shortest_edges",
    "sorted_edges",
    "squared_distance",
    "walk_spanning",
]
