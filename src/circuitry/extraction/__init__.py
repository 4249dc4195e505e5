"""Input parsing for point lists."""

from circuitry.extraction.points import PointParseError, load_points, parse_points

__all__ = ["PointParseError", "load_points", "parse_points"]
