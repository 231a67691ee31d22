"""
API routes for star polygons and their self-intersection cuts.

The endpoints expose the star-cut services: classifying a star
descriptor, generating regular star vertices, computing and validating
the cuts of an arbitrary vertex sequence, serving the cuts of regular
stars through the in-memory cache, and building Euclidean-rhythm
polygons.  Settings are read from the environment once per request so
that ``STARCUT_*`` variables can be changed without restarting.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from fastapi import APIRouter, HTTPException, Path, Query

from .models import (
    EuclideanRequest,
    EuclideanResponse,
    Point,
    SelfIntersectionResponse,
    StarCutsRequest,
    StarCutsResponse,
    StarVerticesRequest,
    StarVerticesResponse,
    ValidateCutsRequest,
    ValidateCutsResponse,
)
from ..services.classifier import has_self_intersections, normalize_skip
from ..services.containment import uses_expanded_hull
from ..services.cut_cache import StarCutCacheKey, get_cuts_from_cache, put_cuts_in_cache
from ..services.primitives import Point2D
from ..services.settings import load_settings
from ..services.star_cuts import compute_star_cuts, validate_star_cuts
from ..services.star_vertices import (
    build_star_vertices,
    euclidean_rhythm,
    euclidean_vertices,
    star_component_count,
    star_traversal,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_points(points: Sequence[Point2D]) -> List[Point]:
    return [Point(x=x, y=y) for x, y in points]


def _to_tuples(points: Sequence[Point]) -> List[Point2D]:
    return [(p.x, p.y) for p in points]


@router.get("/stars/self-intersections", response_model=SelfIntersectionResponse)
async def get_self_intersections(
    n: int = Query(..., ge=3, description="Vertex count"),
    k: int = Query(..., ge=1, description="Skip value"),
) -> SelfIntersectionResponse:
    """Classify the star ``{n/k}``."""
    return SelfIntersectionResponse(
        n=n,
        k=k,
        normalizedSkip=normalize_skip(n, k),
        components=star_component_count(n, k),
        selfIntersecting=has_self_intersections(n, k),
    )


@router.post("/stars/vertices", response_model=StarVerticesResponse)
async def create_star_vertices(body: StarVerticesRequest) -> StarVerticesResponse:
    """Generate the points of a regular star and its drawing order."""
    points = build_star_vertices(body.radius, body.n, body.k)
    return StarVerticesResponse(
        points=_to_points(points),
        traversal=star_traversal(body.n, body.k),
    )


@router.post("/stars/cuts", response_model=StarCutsResponse)
async def create_star_cuts(body: StarCutsRequest) -> StarCutsResponse:
    """Compute the self-intersections of an arbitrary vertex sequence.

    Fewer than four vertices is not an error: the response simply holds
    no points.
    """
    settings = load_settings()
    vertices = _to_tuples(body.vertices)
    try:
        cuts = compute_star_cuts(vertices, body.skip, settings=settings)
    except Exception as exc:
        logger.exception("star cuts failed for skip=%s: %s", body.skip, exc)
        raise HTTPException(status_code=500, detail=f"Failed to compute star cuts: {exc}")
    mode = "expanded" if uses_expanded_hull(len(vertices), body.skip) else "plain"
    return StarCutsResponse(
        points=_to_points(cuts),
        metadata={
            "count": len(cuts),
            "skip": body.skip,
            "vertexCount": len(vertices),
            "mode": mode,
        },
    )


@router.get("/stars/{n}/{k}/cuts", response_model=StarCutsResponse)
async def get_regular_star_cuts(
    n: int = Path(..., ge=4, le=360, description="Vertex count"),
    k: int = Path(..., ge=1, description="Skip value"),
    radius: float = Query(400.0, gt=0.0, description="Diameter of the circumscribed circle"),
) -> StarCutsResponse:
    """Return the cuts of the regular star ``{n/k}``, served from cache when possible."""
    settings = load_settings()
    key = StarCutCacheKey(
        n=n,
        skip=k,
        radius=radius,
        merge_threshold=settings.merge_threshold,
        hull_expansion_factor=settings.hull_expansion_factor,
    )
    cuts = get_cuts_from_cache(key)
    cached = cuts is not None
    if cuts is None:
        try:
            cuts = compute_star_cuts(build_star_vertices(radius, n, k), k, settings=settings)
        except Exception as exc:
            logger.exception("regular star cuts failed for n=%s k=%s: %s", n, k, exc)
            raise HTTPException(status_code=500, detail=f"Failed to compute star cuts: {exc}")
        put_cuts_in_cache(key, cuts)
    return StarCutsResponse(
        points=_to_points(cuts),
        metadata={
            "count": len(cuts),
            "skip": k,
            "vertexCount": n,
            "radius": radius,
            "mode": "expanded" if uses_expanded_hull(n, k) else "plain",
            "cached": cached,
        },
    )


@router.post("/stars/cuts/validate", response_model=ValidateCutsResponse)
async def validate_cuts(body: ValidateCutsRequest) -> ValidateCutsResponse:
    """Report cuts that sit too close to a vertex, an outline edge or each other."""
    report = validate_star_cuts(
        _to_tuples(body.points), _to_tuples(body.vertices), body.threshold
    )
    return ValidateCutsResponse(**report.as_dict())


@router.post("/stars/euclidean", response_model=EuclideanResponse)
async def create_euclidean_polygon(body: EuclideanRequest) -> EuclideanResponse:
    """Select ``k`` of ``n`` circle points following a Euclidean rhythm.

    ``radius`` is used as given here, whereas ``/stars/vertices`` treats
    it as a diameter.
    """
    return EuclideanResponse(
        pattern=euclidean_rhythm(body.n, body.k),
        points=_to_points(euclidean_vertices(body.radius, body.n, body.k)),
    )
