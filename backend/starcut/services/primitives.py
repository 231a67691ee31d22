"""
Planar numeric primitives shared by the star-cut services.

Points are plain ``(x, y)`` tuples of floats.  Nothing in this module
logs or mutates its inputs, so the helpers can be called freely from
the hull builder, the containment tester and the star-cut driver.

The tolerance constants defined here are used throughout the package:

- ``ORIENTATION_EPS`` – orientation values and intersection
  denominators below this magnitude are treated as exactly zero.
- ``SEGMENT_PARAM_EPS`` – slack allowed on the ``[0, 1]`` segment
  parameters when intersecting segments.
- ``ON_SEGMENT_EPS`` – distance under which a point counts as lying on
  a polygon edge.
- ``MERGE_THRESHOLD`` – distance under which two computed points are
  considered the same point.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple

Point2D = Tuple[float, float]

ORIENTATION_EPS: float = 1e-10
SEGMENT_PARAM_EPS: float = 1e-5
ON_SEGMENT_EPS: float = 1e-5
MERGE_THRESHOLD: float = 0.001


def as_point(value: Sequence[float]) -> Point2D:
    """Coerce any two-element sequence into a float tuple."""
    return (float(value[0]), float(value[1]))


def distance(p: Point2D, q: Point2D) -> float:
    """Return the Euclidean distance between ``p`` and ``q``."""
    return math.hypot(q[0] - p[0], q[1] - p[1])


def distance_to_segment(p: Point2D, a: Point2D, b: Point2D) -> float:
    """Return the shortest distance from ``p`` to the segment ``ab``.

    The projection of ``p`` onto the supporting line is clamped to the
    segment.  A zero-length segment degrades to a point distance.
    """
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    l2 = dx * dx + dy * dy
    if l2 == 0.0:
        return distance(p, a)
    t = ((p[0] - a[0]) * dx + (p[1] - a[1]) * dy) / l2
    t = max(0.0, min(1.0, t))
    return distance(p, (a[0] + t * dx, a[1] + t * dy))


def orientation(p: Point2D, q: Point2D, r: Point2D) -> float:
    """Return the signed turn of the ordered triplet ``(p, q, r)``.

    The value is the cross product of ``pq`` and ``qr``.  It is positive
    when the triplet turns counter-clockwise, negative for a clockwise
    turn and exactly ``0.0`` when its magnitude is below
    ``ORIENTATION_EPS``.
    """
    val = (q[0] - p[0]) * (r[1] - q[1]) - (q[1] - p[1]) * (r[0] - q[0])
    if abs(val) < ORIENTATION_EPS:
        return 0.0
    return val


def is_point_on_segment(
    p: Point2D, a: Point2D, b: Point2D, eps: float = ON_SEGMENT_EPS
) -> bool:
    """Return True if ``p`` lies on segment ``ab`` within ``eps``.

    The perpendicular distance is measured with the cross product and the
    projection parameter must fall inside ``[-eps, 1 + eps]``.
    """
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    length = math.hypot(dx, dy)
    if length < eps:
        return distance(p, a) < eps
    cross = dx * (p[1] - a[1]) - dy * (p[0] - a[0])
    if abs(cross) / length > eps:
        return False
    t = ((p[0] - a[0]) * dx + (p[1] - a[1]) * dy) / (length * length)
    return -eps <= t <= 1.0 + eps


def is_too_close(
    point: Point2D, existing: Iterable[Point2D], threshold: float = MERGE_THRESHOLD
) -> bool:
    """Return True if ``point`` is within ``threshold`` of any existing point."""
    for other in existing:
        if distance(point, other) < threshold:
            return True
    return False


def polygon_signed_area(points: Sequence[Point2D]) -> float:
    """Return the signed area of a closed polygon (shoelace formula).

    Positive for counter-clockwise order, negative for clockwise and zero
    for fewer than three points.
    """
    n = len(points)
    if n < 3:
        return 0.0
    area = 0.0
    for i in range(n):
        x0, y0 = points[i]
        x1, y1 = points[(i + 1) % n]
        area += x0 * y1 - x1 * y0
    return 0.5 * area


def centroid(points: Sequence[Point2D]) -> Point2D:
    """Return the arithmetic mean of ``points``.

    Raises:
        ValueError: If ``points`` is empty.
    """
    if not points:
        raise ValueError("centroid of an empty point set is undefined")
    sx = 0.0
    sy = 0.0
    for x, y in points:
        sx += x
        sy += y
    n = len(points)
    return (sx / n, sy / n)


__all__ = [
    "Point2D",
    "ORIENTATION_EPS",
    "SEGMENT_PARAM_EPS",
    "ON_SEGMENT_EPS",
    "MERGE_THRESHOLD",
    "as_point",
    "distance",
    "distance_to_segment",
    "orientation",
    "is_point_on_segment",
    "is_too_close",
    "polygon_signed_area",
    "centroid",
]
