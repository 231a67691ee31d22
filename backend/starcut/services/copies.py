"""
Intersections between transformed copies of one polygon.

A layer draws several copies of the same base polygon.  Copy ``i`` is
scaled by ``step_scale ** i`` (optionally multiplied by ``alt_scale`` on
every ``alt_step_n``-th copy) and rotated by ``starting_angle + i *
angle`` degrees around the origin.  The crossings between every pair of
distinct copies become extra vertices for the layer.  Crossings within a
single copy are the business of :mod:`.star_cuts`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .intersection import Segment2D, find_segment_pair_intersections
from .primitives import MERGE_THRESHOLD, Point2D, is_too_close
from .star_cuts import star_edges

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CopyTransform:
    """Scale and rotation (radians) applied to one copy."""

    index: int
    scale: float
    angle: float


def copy_transforms(
    copies: int,
    step_scale: float = 1.0,
    angle: float = 0.0,
    starting_angle: float = 0.0,
    alt_scale: Optional[float] = None,
    alt_step_n: Optional[int] = None,
) -> List[CopyTransform]:
    """Return the transform of each copy in a layer.

    Args:
        copies: Number of copies.
        step_scale: Geometric scale step between consecutive copies.
        angle: Rotation step between consecutive copies, in degrees.
        starting_angle: Rotation of the first copy, in degrees.
        alt_scale: Extra factor applied to every ``alt_step_n``-th copy
            (1-based).  Ignored unless both alternate values are given.
        alt_step_n: Period of the alternate scale.
    """
    transforms: List[CopyTransform] = []
    use_alt = alt_scale is not None and alt_step_n is not None and alt_step_n > 0
    for i in range(max(0, copies)):
        scale = step_scale ** i
        if use_alt and (i + 1) % alt_step_n == 0:
            scale *= alt_scale
        degrees = starting_angle + i * angle
        transforms.append(CopyTransform(index=i, scale=scale, angle=math.radians(degrees)))
    return transforms


def transform_vertices(vertices: Sequence[Point2D], scale: float, angle: float) -> List[Point2D]:
    """Scale then rotate ``vertices`` about the origin."""
    if not vertices:
        return []
    arr = np.asarray(vertices, dtype=float).reshape(-1, 2) * scale
    cos_t = math.cos(angle)
    sin_t = math.sin(angle)
    rot = np.array([[cos_t, -sin_t], [sin_t, cos_t]])
    moved = arr @ rot.T
    return [(float(x), float(y)) for x, y in moved]


def polygon_segments(vertices: Sequence[Point2D], skip: int = 1) -> List[Segment2D]:
    """Return the drawn segments of a polygon.

    ``skip <= 1`` yields the closed outline; larger values yield the
    star edges ``i -> (i + skip) mod n``.
    """
    n = len(vertices)
    if n < 2:
        return []
    if skip > 1:
        return [(vertices[i], vertices[j]) for i, j in star_edges(n, skip)]
    return [(vertices[i], vertices[(i + 1) % n]) for i in range(n)]


def compute_copy_intersections(
    vertices: Sequence[Point2D],
    copies: int,
    step_scale: float = 1.0,
    angle: float = 0.0,
    starting_angle: float = 0.0,
    skip: int = 1,
    alt_scale: Optional[float] = None,
    alt_step_n: Optional[int] = None,
    threshold: float = MERGE_THRESHOLD,
) -> List[Point2D]:
    """Return the de-duplicated crossings between every pair of copies.

    Fewer than two copies, or fewer than two base vertices, yield an
    empty list.
    """
    if copies < 2 or len(vertices) < 2:
        return []
    base = [(float(x), float(y)) for x, y in vertices]
    transforms = copy_transforms(copies, step_scale, angle, starting_angle, alt_scale, alt_step_n)
    segments = [
        polygon_segments(transform_vertices(base, t.scale, t.angle), skip) for t in transforms
    ]

    found: List[Point2D] = []
    for i in range(len(segments)):
        for j in range(i + 1, len(segments)):
            for hit in find_segment_pair_intersections(segments[i], segments[j], threshold):
                if not is_too_close(hit, found, threshold):
                    found.append(hit)
    logger.debug(
        "Copy intersections: %d copies, %d segments each, %d points",
        copies,
        len(segments[0]),
        len(found),
    )
    return found


__all__ = [
    "CopyTransform",
    "copy_transforms",
    "transform_vertices",
    "polygon_segments",
    "compute_copy_intersections",
]
