"""
Line and segment intersection.

``segment_intersection`` implements the parametric two-line formula.
Given segments ``(p1, p2)`` and ``(p3, p4)`` the denominator

    D = (y4 - y3)(x2 - x1) - (x4 - x3)(y2 - y1)

vanishes for parallel or collinear lines, in which case no point is
reported.  Collinear overlaps are deliberately not resolved into an
overlap region; callers treat them as "no intersection".
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .primitives import (
    MERGE_THRESHOLD,
    ORIENTATION_EPS,
    SEGMENT_PARAM_EPS,
    Point2D,
    is_too_close,
)

Segment2D = Tuple[Point2D, Point2D]


def segment_intersection(
    p1: Point2D,
    p2: Point2D,
    p3: Point2D,
    p4: Point2D,
    extend: bool = False,
) -> Optional[Point2D]:
    """Intersect segment ``p1p2`` with segment ``p3p4``.

    Args:
        p1, p2: Endpoints of the first segment.
        p3, p4: Endpoints of the second segment.
        extend: When True the segments are treated as infinite lines and
            any parameter values are accepted.  When False both
            parameters must lie in ``[0, 1]`` give or take
            ``SEGMENT_PARAM_EPS``.

    Returns:
        The intersection point, or ``None`` for parallel/collinear
        inputs and for crossings outside the segment bounds.
    """
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3
    x4, y4 = p4

    denom = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if abs(denom) < ORIENTATION_EPS:
        return None

    ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denom
    ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denom

    if not extend:
        lo = -SEGMENT_PARAM_EPS
        hi = 1.0 + SEGMENT_PARAM_EPS
        if ua < lo or ua > hi or ub < lo or ub > hi:
            return None

    return (x1 + ua * (x2 - x1), y1 + ua * (y2 - y1))


def find_segment_pair_intersections(
    segments_a: Sequence[Segment2D],
    segments_b: Sequence[Segment2D],
    threshold: float = MERGE_THRESHOLD,
) -> List[Point2D]:
    """Intersect every segment of ``segments_a`` with every one of ``segments_b``.

    Points closer than ``threshold`` to an already collected point are
    dropped, so the result is free of near-duplicates and ordered by
    discovery.
    """
    found: List[Point2D] = []
    for a0, a1 in segments_a:
        for b0, b1 in segments_b:
            hit = segment_intersection(a0, a1, b0, b1)
            if hit is None:
                continue
            if not is_too_close(hit, found, threshold):
                found.append(hit)
    return found


__all__ = [
    "Segment2D",
    "segment_intersection",
    "find_segment_pair_intersections",
]
