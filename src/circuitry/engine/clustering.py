"""Disjoint-set forest and component-size aggregation.

Shared by the shortest-edge clustering pass and the spanning walk; each
run builds its own forest.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class DisjointSetForest:
    """Union-Find over point indices ``0..n-1`` with path compression and union by rank.

    Indices outside ``[0, n)`` are a programming error and raise IndexError.
    """

    __slots__ = ("_parent", "_rank", "_components")

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"forest size must be >= 0, got {n}")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._components = n

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def component_count(self) -> int:
        """Number of disjoint sets currently in the forest."""
        return self._components

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._parent):
            raise IndexError(f"index {i} out of range for forest of size {len(self._parent)}")

    def find(self, i: int) -> int:
        """Find root of ``i``, re-pointing every node on the path at the root."""
        self._check(i)
        parent = self._parent

        root = i
        while parent[root] != root:
            root = parent[root]

        while parent[i] != root:
            parent[i], i = root, parent[i]
        return root

    def union(self, i: int, j: int) -> bool:
        """Merge the sets containing ``i`` and ``j``.

        Returns:
            True if two separate sets were merged, False if already joined
        """
        ri, rj = self.find(i), self.find(j)
        if ri == rj:
            return False

        rank = self._rank
        if rank[ri] < rank[rj]:
            self._parent[ri] = rj
        elif rank[ri] > rank[rj]:
            self._parent[rj] = ri
        else:
            self._parent[rj] = ri
            rank[ri] += 1

        self._components -= 1
        return True

    def connected(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)

    def groups(self) -> dict[int, list[int]]:
        """Member indices of every set, keyed by root, each list in index order."""
        result: dict[int, list[int]] = {}
        for i in range(len(self._parent)):
            result.setdefault(self.find(i), []).append(i)
        return result


@dataclass(frozen=True)
class Component:
    """A maximal set of indices sharing a root."""

    root: int
    size: int


def components(forest: DisjointSetForest) -> list[Component]:
    """Every component of the forest, largest first (ties by root)."""
    result = sorted(
        (Component(root=root, size=len(members)) for root, members in forest.groups().items()),
        key=lambda c: (-c.size, c.root),
    )
    logger.debug("%d components over %d points", len(result), len(forest))
    return result


def component_sizes(forest: DisjointSetForest) -> list[int]:
    """Component sizes sorted descending. Always sums to ``len(forest)``."""
    return [c.size for c in components(forest)]


def largest_product(sizes: list[int], count: int = 3) -> int:
    """Product of the ``count`` largest sizes.

    Only sizes that exist are multiplied: a single component of size n
    gives n, and no components at all give the empty product 1.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    return math.prod(sorted(sizes, reverse=True)[:count])
