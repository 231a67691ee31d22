"""
Vertex generation for regular, star and Euclidean-rhythm polygons.

These helpers produce the vertex sequences fed to the star-cut driver.
Points are evenly spaced on a circle, starting on the +X axis and
progressing counter-clockwise.  The star shape itself is never baked
into the vertex order: ``build_star_vertices`` emits plain angular order
and the driver reads the skip to decide which vertices are connected.
``star_traversal`` is provided for callers that need the drawing order
of the star outline.
"""

from __future__ import annotations

import logging
import math
from typing import List

import numpy as np

from .classifier import InvalidParameterError, coerce_int
from .primitives import Point2D

logger = logging.getLogger(__name__)


def _circle_points(radius: float, n: int) -> List[Point2D]:
    angles = np.arange(n, dtype=float) * (2.0 * math.pi / n)
    xs = np.cos(angles) * radius
    ys = np.sin(angles) * radius
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def build_star_vertices(radius: float, n: int, k: int = 1) -> List[Point2D]:
    """Return ``n`` points evenly spaced on a circle of radius ``radius / 2``.

    Args:
        radius: Diameter of the circumscribed circle.
        n: Number of points.
        k: Skip of the star the points will be used for.  Accepted for
            signature symmetry with callers; it does not change the
            positions or their order.

    Raises:
        InvalidParameterError: If ``n`` is not a positive integer.
    """
    count = coerce_int(n, "n")
    if count < 1:
        raise InvalidParameterError(f"n must be >= 1, got {count}")
    return _circle_points(float(radius) / 2.0, count)


def star_component_count(n: int, k: int) -> int:
    """Return the number of disjoint closed figures traced by ``{n/k}``."""
    return math.gcd(n, k)


def star_traversal(n: int, k: int) -> List[int]:
    """Return the vertex indices visited when tracing ``{n/k}`` from vertex 0.

    The walk advances by ``k`` until it reaches a vertex it has already
    visited.  When that vertex is 0 the loop is closed by repeating it,
    so a pentagram yields ``[0, 2, 4, 1, 3, 0]``.  For ``gcd(n, k) > 1``
    only the first of the disjoint figures is traced.
    """
    visited: List[int] = []
    seen = set()
    current = 0
    while current not in seen:
        seen.add(current)
        visited.append(current)
        current = (current + k) % n
    if visited and current == 0:
        visited.append(0)
    return visited


def euclidean_rhythm(n: int, k: int) -> List[bool]:
    """Distribute ``k`` pulses as evenly as possible over ``n`` steps.

    Pulse ``i`` lands on step ``floor(i * n / k)``.  ``k <= 0`` yields no
    pulses and ``k >= n`` fills every step.
    """
    if k <= 0:
        return [False] * n
    if k >= n:
        return [True] * n
    pattern = [False] * n
    step = n / k
    for i in range(k):
        pattern[int(math.floor(i * step)) % n] = True
    return pattern


def euclidean_vertices(radius: float, n: int, k: int) -> List[Point2D]:
    """Return the circle points selected by :func:`euclidean_rhythm`.

    The full ``n``-gon lies on a circle of radius ``radius``.  Selected
    points are sorted by ``atan2`` angle, i.e. starting from the
    negative X axis side and sweeping counter-clockwise.
    """
    pattern = euclidean_rhythm(n, k)
    circle = _circle_points(float(radius), n)
    selected = [pt for pt, pulse in zip(circle, pattern) if pulse]
    if not selected:
        logger.debug("Euclidean pattern n=%s k=%s selected no vertices", n, k)
        return []
    selected.sort(key=lambda p: math.atan2(p[1], p[0]))
    return selected


__all__ = [
    "build_star_vertices",
    "star_component_count",
    "star_traversal",
    "euclidean_rhythm",
    "euclidean_vertices",
]
