"""Point and edge value types.

A point's identity is its position in the loaded sequence; nothing else
about it is stored. Edges refer to points by that index.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A junction box position in 3-D integer space."""

    x: int
    y: int
    z: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Edge:
    """
    Unordered pair of point indices with their squared distance.

    Attributes:
        distance: Squared Euclidean distance between the two points
        u: Lower point index
        v: Higher point index
    """

    distance: int
    u: int
    v: int

    def as_pair(self) -> tuple[int, int]:
        return (self.u, self.v)
