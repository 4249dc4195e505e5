"""circuitry - shortest-edge circuit analysis for 3-D junction boxes."""

from circuitry.config import AnalysisConfig
from circuitry.core import Edge, Point
from circuitry.engine import CircuitAnalyzer, CircuitReport, ConnectionReport
from circuitry.extraction import PointParseError, load_points, parse_points

__version__ = "0.1.0"

__all__ = [
    "AnalysisConfig",
    "CircuitAnalyzer",
    "CircuitReport",
    "ConnectionReport",
    "Edge",
    "Point",
    "PointParseError",
    "load_points",
    "parse_points",
]
