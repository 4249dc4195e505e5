"""Core value types for circuitry."""

from circuitry.core.point import Edge, Point

__all__ = ["Edge", "Point"]
