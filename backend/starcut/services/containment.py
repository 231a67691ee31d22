"""
Containment tests used to filter star-polygon crossings.

``is_inside_region`` decides whether a candidate crossing lies within
the region a star can plausibly occupy.  Two regions are used:

- plain: the convex hull of the vertices as given;
- expanded: the convex hull of the vertices scaled outward around their
  centroid.  This is used for stars with ``skip > 1`` that cross
  themselves, so that legitimate crossings near the star's points are
  never discarded.

Point-in-polygon uses horizontal ray casting, with points lying on an
edge counted as inside.
"""

from __future__ import annotations

from typing import List, Sequence

from .classifier import has_self_intersections
from .hull import convex_hull
from .primitives import Point2D, centroid, is_point_on_segment
from .settings import DEFAULT_HULL_EXPANSION_FACTOR


def point_in_polygon(point: Point2D, polygon: Sequence[Point2D]) -> bool:
    """Return True if ``point`` is inside or on the boundary of ``polygon``.

    Polygons with fewer than three points contain nothing.
    """
    n = len(polygon)
    if n < 3:
        return False

    for i in range(n):
        if is_point_on_segment(point, polygon[i], polygon[(i + 1) % n]):
            return True

    x, y = point
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if (yi > y) != (yj > y):
            x_cross = (xj - xi) * (y - yi) / (yj - yi) + xi
            if x < x_cross:
                inside = not inside
        j = i
    return inside


def expanded_hull(
    vertices: Sequence[Point2D], factor: float = DEFAULT_HULL_EXPANSION_FACTOR
) -> List[Point2D]:
    """Scale ``vertices`` around their centroid by ``factor`` and hull the result."""
    if not vertices:
        return []
    cx, cy = centroid(vertices)
    scaled = [(cx + (x - cx) * factor, cy + (y - cy) * factor) for x, y in vertices]
    return convex_hull(scaled)


def uses_expanded_hull(vertex_count: int, skip: int) -> bool:
    """Return True when crossings of this star are tested against the expanded hull."""
    return skip > 1 and has_self_intersections(vertex_count, skip)


def containment_region(
    vertices: Sequence[Point2D],
    skip: int,
    expansion_factor: float = DEFAULT_HULL_EXPANSION_FACTOR,
) -> List[Point2D]:
    """Return the hull that candidate crossings of this star are tested against.

    The result may hold fewer than three points for degenerate input, in
    which case nothing is contained.
    """
    if uses_expanded_hull(len(vertices), skip):
        return expanded_hull(vertices, expansion_factor)
    return convex_hull(vertices)


def is_inside_region(
    point: Point2D,
    vertices: Sequence[Point2D],
    skip: int,
    expansion_factor: float = DEFAULT_HULL_EXPANSION_FACTOR,
) -> bool:
    """Return True if ``point`` lies in the containment region of the star.

    Args:
        point: Candidate crossing.
        vertices: Vertex sequence of the star, in traversal order.
        skip: Skip value as supplied by the caller (not normalised).
        expansion_factor: Outward scale used for self-intersecting stars.
    """
    return point_in_polygon(point, containment_region(vertices, skip, expansion_factor))


__all__ = [
    "point_in_polygon",
    "expanded_hull",
    "uses_expanded_hull",
    "containment_region",
    "is_inside_region",
]
