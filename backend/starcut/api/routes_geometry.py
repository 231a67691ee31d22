"""
API routes for the planar geometry building blocks.

These endpoints expose the convex hull, the star containment test and
the two-segment intersector directly.  They are mostly useful for
visual debugging of the star-cut pipeline from the client.
"""

from __future__ import annotations

from fastapi import APIRouter

from .models import (
    ContainsRequest,
    ContainsResponse,
    HullRequest,
    HullResponse,
    IntersectRequest,
    IntersectResponse,
    Point,
)
from ..services.containment import is_inside_region, uses_expanded_hull
from ..services.hull import convex_hull
from ..services.intersection import segment_intersection
from ..services.primitives import polygon_signed_area
from ..services.settings import load_settings

router = APIRouter()


@router.post("/geometry/hull", response_model=HullResponse)
async def create_hull(body: HullRequest) -> HullResponse:
    """Return the counter-clockwise convex hull of the given points."""
    hull = convex_hull([(p.x, p.y) for p in body.points])
    return HullResponse(
        hull=[Point(x=x, y=y) for x, y in hull],
        area=polygon_signed_area(hull),
    )


@router.post("/geometry/contains", response_model=ContainsResponse)
async def contains_point(body: ContainsRequest) -> ContainsResponse:
    """Test a point against the containment region of a star."""
    factor = body.expansionFactor
    if factor is None:
        factor = load_settings().hull_expansion_factor
    vertices = [(p.x, p.y) for p in body.vertices]
    inside = is_inside_region((body.point.x, body.point.y), vertices, body.skip, factor)
    mode = "expanded" if uses_expanded_hull(len(vertices), body.skip) else "plain"
    return ContainsResponse(inside=inside, mode=mode)


@router.post("/geometry/intersect", response_model=IntersectResponse)
async def intersect_segments(body: IntersectRequest) -> IntersectResponse:
    """Intersect two segments, or their supporting lines when ``extend`` is set."""
    hit = segment_intersection(
        (body.p1.x, body.p1.y),
        (body.p2.x, body.p2.y),
        (body.p3.x, body.p3.y),
        (body.p4.x, body.p4.y),
        extend=body.extend,
    )
    if hit is None:
        return IntersectResponse(point=None)
    return IntersectResponse(point=Point(x=hit[0], y=hit[1]))
