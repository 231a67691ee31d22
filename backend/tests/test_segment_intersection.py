"""
Tests for the segment intersector.

The intersector uses the parametric two-line formula with a small
tolerance on the segment parameters.  Parallel and collinear inputs
never produce a point.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from starcut.services.intersection import (  # type: ignore
    find_segment_pair_intersections,
    segment_intersection,
)


def test_crossing_segments_meet_in_the_middle() -> None:
    hit = segment_intersection((0.0, 0.0), (2.0, 2.0), (0.0, 2.0), (2.0, 0.0))
    assert hit is not None
    assert hit == pytest.approx((1.0, 1.0))


def test_parallel_segments_do_not_intersect() -> None:
    assert segment_intersection((0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0)) is None


def test_collinear_overlap_is_not_reported() -> None:
    """Overlapping collinear segments are treated as non-intersecting."""
    assert segment_intersection((0.0, 0.0), (2.0, 0.0), (1.0, 0.0), (3.0, 0.0)) is None


def test_crossing_beyond_segment_bounds_needs_extend() -> None:
    """Lines y=x and y=3-x meet at (1.5, 1.5), outside the first segment."""
    args = ((0.0, 0.0), (1.0, 1.0), (3.0, 0.0), (2.0, 1.0))
    assert segment_intersection(*args) is None
    hit = segment_intersection(*args, extend=True)
    assert hit == pytest.approx((1.5, 1.5))


def test_shared_endpoint_counts_as_intersection() -> None:
    hit = segment_intersection((0.0, 0.0), (1.0, 0.0), (1.0, 0.0), (1.0, 1.0))
    assert hit == pytest.approx((1.0, 0.0))


def test_parameter_tolerance() -> None:
    """Crossings a hair past an endpoint are accepted; clear misses are not."""
    near = segment_intersection((0.0, 0.0), (1.0, 0.0), (1.000001, -1.0), (1.000001, 1.0))
    assert near == pytest.approx((1.000001, 0.0))
    far = segment_intersection((0.0, 0.0), (1.0, 0.0), (1.001, -1.0), (1.001, 1.0))
    assert far is None


def test_pairwise_intersections_are_deduplicated() -> None:
    first = [((0.0, 0.0), (2.0, 2.0))]
    second = [((0.0, 2.0), (2.0, 0.0)), ((2.0, 0.0), (0.0, 2.0))]
    hits = find_segment_pair_intersections(first, second)
    assert len(hits) == 1
    assert hits[0] == pytest.approx((1.0, 1.0))
