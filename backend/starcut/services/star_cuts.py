"""
Star-cut driver: self-intersection points of a star polygon.

Given a vertex sequence and a skip value, the star consists of the
directed edges ``i -> (i + skip) mod n``.  Every unordered pair of edges
that do not share an endpoint index is intersected as segments; crossings
are kept when they fall inside the containment region (see
:mod:`.containment`) and are not within the merge threshold of an input
vertex or of a point already kept.  Results come back in discovery
order, which is the nested ``(i, j)`` loop order over the edge list, so
identical inputs always give identical outputs.

Invalid input never raises out of :func:`compute_star_cuts`; it is
logged and an empty list is returned, which the caller treats as
"nothing to draw".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .classifier import InvalidParameterError, coerce_int
from .containment import containment_region, point_in_polygon, uses_expanded_hull
from .intersection import segment_intersection
from .primitives import (
    MERGE_THRESHOLD,
    Point2D,
    as_point,
    distance,
    distance_to_segment,
    is_too_close,
)
from .settings import StarCutSettings

logger = logging.getLogger(__name__)

MIN_STAR_VERTICES: int = 4

# Distance under which a validated point counts as lying on an outline edge.
ON_EDGE_TOLERANCE: float = 1e-10


def star_edges(n: int, skip: int) -> List[Tuple[int, int]]:
    """Return the ``n`` directed star edges ``(i, (i + skip) mod n)``."""
    return [(i, (i + skip) % n) for i in range(n)]


def _shares_endpoint(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] in b or a[1] in b


def _validate_driver_input(vertices: Sequence[Any], skip: Any) -> Tuple[List[Point2D], int]:
    if vertices is None or len(vertices) < MIN_STAR_VERTICES:
        count = 0 if vertices is None else len(vertices)
        raise InvalidParameterError(
            f"need at least {MIN_STAR_VERTICES} vertices for intersections, got {count}"
        )
    skip_int = coerce_int(skip, "skip")
    if skip_int < 1:
        raise InvalidParameterError(f"skip must be >= 1, got {skip_int}")
    return [as_point(v) for v in vertices], skip_int


def compute_star_cuts(
    vertices: Sequence[Sequence[float]],
    skip: int,
    settings: Optional[StarCutSettings] = None,
    log: Optional[logging.Logger] = None,
) -> List[Point2D]:
    """Return every valid, de-duplicated self-intersection of a star polygon.

    Args:
        vertices: Vertex sequence in traversal order.  At least four
            points are required.
        skip: Skip value defining the star edges.  It is used as given
            (not normalised) both for the edges and for selecting the
            containment region.
        settings: Merge threshold, hull expansion and debug tracing.
            Defaults to :class:`StarCutSettings` defaults.
        log: Logger receiving diagnostics.  Defaults to this module's
            logger.

    Returns:
        Intersection points in discovery order.  Empty for invalid or
        degenerate input.
    """
    cfg = settings or StarCutSettings()
    out = log or logger
    try:
        pts, skip_int = _validate_driver_input(vertices, skip)
    except InvalidParameterError as exc:
        out.warning("Skipping star cuts: %s", exc)
        return []

    n = len(pts)
    edges = star_edges(n, skip_int)
    region = containment_region(pts, skip_int, cfg.hull_expansion_factor)
    if cfg.debug:
        out.debug(
            "Star cuts: n=%d skip=%d mode=%s region=%d points",
            n,
            skip_int,
            "expanded" if uses_expanded_hull(n, skip_int) else "plain",
            len(region),
        )

    found: List[Point2D] = []
    candidates = 0
    for a in range(n):
        edge_a = edges[a]
        for b in range(a + 1, n):
            edge_b = edges[b]
            if _shares_endpoint(edge_a, edge_b):
                continue
            hit = segment_intersection(
                pts[edge_a[0]], pts[edge_a[1]], pts[edge_b[0]], pts[edge_b[1]]
            )
            if hit is None:
                continue
            candidates += 1
            if not point_in_polygon(hit, region):
                if cfg.debug:
                    out.debug("Edge %s x %s at %s outside region", edge_a, edge_b, hit)
                continue
            if is_too_close(hit, pts, cfg.merge_threshold):
                if cfg.debug:
                    out.debug("Edge %s x %s at %s rejected: on a vertex", edge_a, edge_b, hit)
                continue
            if is_too_close(hit, found, cfg.merge_threshold):
                continue
            found.append(hit)
            if cfg.debug:
                out.debug("Edge %s x %s -> accepted %s", edge_a, edge_b, hit)

    if cfg.debug:
        out.debug("Star cuts: %d candidate crossings, %d kept", candidates, len(found))
    return found


@dataclass
class StarCutValidation:
    """Quality report for a set of computed star cuts.

    Attributes:
        total_intersections: Number of points checked.
        are_valid: False as soon as any issue is recorded.
        too_close_to_vertex: Points nearer than the threshold to a vertex.
        too_close_to_edge: Points near, but not on, an outline edge.
        too_close_to_other: Pairs of points nearer than the threshold.
        issues: One dictionary per finding.
    """

    total_intersections: int
    are_valid: bool = True
    too_close_to_vertex: int = 0
    too_close_to_edge: int = 0
    too_close_to_other: int = 0
    issues: List[Dict[str, Any]] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "totalIntersections": self.total_intersections,
            "areValid": self.are_valid,
            "tooCloseToVertex": self.too_close_to_vertex,
            "tooCloseToEdge": self.too_close_to_edge,
            "tooCloseToOther": self.too_close_to_other,
            "issues": list(self.issues),
        }


def validate_star_cuts(
    points: Sequence[Sequence[float]],
    vertices: Sequence[Sequence[float]],
    threshold: float = MERGE_THRESHOLD,
) -> StarCutValidation:
    """Check computed cuts against the vertices, the outline and each other.

    The outline is the closed polygon through ``vertices`` in the given
    order.  A point lying exactly on an outline edge is expected and is
    not reported; a point merely close to one is.
    """
    cuts = [as_point(p) for p in points]
    verts = [as_point(v) for v in vertices]
    report = StarCutValidation(total_intersections=len(cuts))
    n = len(verts)

    for i, cut in enumerate(cuts):
        for j, vertex in enumerate(verts):
            d = distance(cut, vertex)
            if d < threshold:
                report.are_valid = False
                report.too_close_to_vertex += 1
                report.issues.append(
                    {"type": "too_close_to_vertex", "intersection": i, "vertex": j, "distance": d}
                )
        for j in range(n):
            d = distance_to_segment(cut, verts[j], verts[(j + 1) % n])
            if d >= ON_EDGE_TOLERANCE and d < threshold:
                report.are_valid = False
                report.too_close_to_edge += 1
                report.issues.append(
                    {
                        "type": "too_close_to_edge",
                        "intersection": i,
                        "edge": [j, (j + 1) % n],
                        "distance": d,
                    }
                )
        for j in range(i + 1, len(cuts)):
            d = distance(cut, cuts[j])
            if d < threshold:
                report.are_valid = False
                report.too_close_to_other += 1
                report.issues.append(
                    {"type": "too_close_to_other", "intersection1": i, "intersection2": j, "distance": d}
                )
    return report


def debug_star_cuts(
    vertices: Sequence[Sequence[float]],
    skip: int,
    settings: Optional[StarCutSettings] = None,
    log: Optional[logging.Logger] = None,
) -> Dict[str, Any]:
    """Run :func:`compute_star_cuts` with tracing on and log a full report.

    Debug tracing is enabled for this call only; the supplied settings
    are not modified.

    Returns:
        A dictionary with ``vertices``, ``intersections`` and
        ``validation`` (a :class:`StarCutValidation`).
    """
    out = log or logger
    base = settings or StarCutSettings()
    traced = replace(base, debug=True)
    verts = [as_point(v) for v in vertices] if vertices is not None else []
    out.info("Star cuts debug: %d vertices, skip %s", len(verts), skip)
    for i, (x, y) in enumerate(verts):
        out.info("  vertex %d: (%.4f, %.4f)", i, x, y)
    intersections = compute_star_cuts(verts, skip, settings=traced, log=out)
    for i, (x, y) in enumerate(intersections):
        out.info("  intersection %d: (%.4f, %.4f)", i, x, y)
    validation = validate_star_cuts(intersections, verts, base.merge_threshold)
    out.info(
        "Star cuts debug: valid=%s issues=%d", validation.are_valid, len(validation.issues)
    )
    return {"vertices": verts, "intersections": intersections, "validation": validation}


__all__ = [
    "MIN_STAR_VERTICES",
    "star_edges",
    "compute_star_cuts",
    "StarCutValidation",
    "validate_star_cuts",
    "debug_star_cuts",
]
