"""Point loader: raw ``x,y,z`` text into an ordered list of points."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from circuitry.core.point import Point

logger = logging.getLogger(__name__)

_FIELD_COUNT = 3
_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


class PointParseError(ValueError):
    """A point record could not be parsed.

    Attributes:
        line_number: 1-based line of the offending record
        line: The raw record text
    """

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason} ({line!r})")


def parse_point(line: str, line_number: int = 1) -> Point:
    """Parse a single ``x,y,z`` record."""
    parts = line.split(",")
    if len(parts) != _FIELD_COUNT:
        raise PointParseError(
            line_number, line, f"expected {_FIELD_COUNT} fields, got {len(parts)}"
        )

    coords: list[int] = []
    for part in parts:
        field = part.strip()
        if not _INTEGER_PATTERN.fullmatch(field):
            raise PointParseError(line_number, line, f"non-integer coordinate {field!r}")
        coords.append(int(field))

    return Point(*coords)


def parse_points(text: str) -> list[Point]:
    """Parse one point per line, skipping blank lines.

    Args:
        text: Input with records like ``162,817,812``

    Returns:
        Points in input order; list position is the point's index

    Raises:
        PointParseError: If any non-blank line is malformed
    """
    points: list[Point] = []
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        points.append(parse_point(line, line_number))

    logger.debug("Parsed %d points", len(points))
    return points


def load_points(path: str | Path) -> list[Point]:
    """Read and parse a point file."""
    return parse_points(Path(path).read_text(encoding="utf-8"))
