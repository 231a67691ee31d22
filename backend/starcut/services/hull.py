"""
Convex hull construction (Graham scan).

The hull is returned counter-clockwise, starting from the pivot: the
point with the smallest ``y`` (ties broken by the smallest ``x``).
Points collinear with the pivot are ordered nearest first during the
angular sort, and the scan only keeps strict left turns, so collinear
boundary points are dropped from the result.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import List, Sequence

from .primitives import Point2D, distance, orientation


def _pivot_index(points: Sequence[Point2D]) -> int:
    best = 0
    for i in range(1, len(points)):
        x, y = points[i]
        bx, by = points[best]
        if y < by or (y == by and x < bx):
            best = i
    return best


def convex_hull(points: Sequence[Point2D]) -> List[Point2D]:
    """Return the counter-clockwise convex hull of ``points``.

    Inputs with fewer than three points are returned unchanged (as a
    list).  Degenerate inputs, such as fully collinear point sets, may
    produce a hull with fewer than three points; callers must check the
    length before treating the result as a polygon.
    """
    pts = [(float(x), float(y)) for x, y in points]
    if len(pts) < 3:
        return pts

    pivot_idx = _pivot_index(pts)
    pivot = pts[pivot_idx]
    rest = pts[:pivot_idx] + pts[pivot_idx + 1:]

    def compare(a: Point2D, b: Point2D) -> int:
        turn = orientation(pivot, a, b)
        if turn == 0.0:
            da = distance(pivot, a)
            db = distance(pivot, b)
            if da < db:
                return -1
            if da > db:
                return 1
            return 0
        # A left turn pivot -> a -> b means a has the smaller polar angle.
        return -1 if turn > 0.0 else 1

    rest.sort(key=cmp_to_key(compare))

    stack: List[Point2D] = [pivot]
    for candidate in rest:
        while len(stack) >= 2 and orientation(stack[-2], stack[-1], candidate) <= 0.0:
            stack.pop()
        stack.append(candidate)
    return stack


__all__ = ["convex_hull"]
