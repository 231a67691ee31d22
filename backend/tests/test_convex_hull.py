"""Tests for the Graham scan convex hull builder."""

from __future__ import annotations

import math
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from starcut.services.hull import convex_hull  # type: ignore
from starcut.services.primitives import polygon_signed_area  # type: ignore


def test_square_hull_is_ccw_from_lowest_leftmost_point() -> None:
    """Four square corners come back counter-clockwise starting at (0, 0)."""
    square = [(1.0, 1.0), (0.0, 0.0), (0.0, 1.0), (1.0, 0.0)]
    assert convex_hull(square) == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


def test_interior_and_collinear_points_are_dropped() -> None:
    points = [
        (0.0, 0.0),
        (2.0, 0.0),
        (1.0, 0.0),  # on the bottom edge
        (2.0, 2.0),
        (0.0, 2.0),
        (0.0, 1.0),  # on the left edge
        (1.0, 1.0),  # interior
    ]
    assert convex_hull(points) == [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]


def test_pivot_tie_break_prefers_smallest_x() -> None:
    hull = convex_hull([(3.0, 0.0), (1.0, 0.0), (2.0, 3.0)])
    assert hull[0] == (1.0, 0.0)


def test_fewer_than_three_points_are_returned_unchanged() -> None:
    assert convex_hull([(1.0, 2.0), (3.0, 4.0)]) == [(1.0, 2.0), (3.0, 4.0)]
    assert convex_hull([]) == []


def test_collinear_input_collapses() -> None:
    """A fully collinear set has no area and yields fewer than three points."""
    hull = convex_hull([(0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (3.0, 3.0)])
    assert len(hull) < 3


def test_regular_polygon_hull_keeps_every_vertex_ccw() -> None:
    n = 7
    pts = [(math.cos(2 * math.pi * i / n), math.sin(2 * math.pi * i / n)) for i in range(n)]
    hull = convex_hull(list(reversed(pts)))
    assert len(hull) == n
    assert polygon_signed_area(hull) > 0.0


def test_duplicate_points_do_not_break_the_scan() -> None:
    points = [(0.0, 0.0), (0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (1.0, 1.0), (0.0, 1.0)]
    assert convex_hull(points) == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
