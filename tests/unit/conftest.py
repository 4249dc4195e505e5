"""Shared fixtures for circuit analysis tests."""

from __future__ import annotations

import pytest

from circuitry.core.point import Point

# Two pairs of nearby boxes on the x axis: A-B and C-D are 1 apart, B-C is 9 apart.
LINE_POINTS = [Point(0, 0, 0), Point(1, 0, 0), Point(10, 0, 0), Point(11, 0, 0)]

SAMPLE_INPUT = """\
162,817,812
57,618,57
906,360,560
592,479,940
352,342,300
466,668,158
542,29,236
431,825,988
739,650,466
52,470,668
216,146,977
819,987,18
117,168,530
805,96,715
346,949,466
970,615,88
941,993,340
862,61,35
984,92,344
425,690,689
"""


@pytest.fixture
def line_points() -> list[Point]:
    return list(LINE_POINTS)


@pytest.fixture
def sample_input() -> str:
    return SAMPLE_INPUT
