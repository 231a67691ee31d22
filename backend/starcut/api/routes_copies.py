"""
API route for intersections between copies of a polygon.

A layer repeats one base polygon several times with a scale step and a
rotation step.  This endpoint returns the points where those copies
cross each other.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from .models import CopyIntersectionsRequest, CopyIntersectionsResponse, Point
from ..services.copies import compute_copy_intersections
from ..services.settings import load_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/copies/intersections", response_model=CopyIntersectionsResponse)
async def create_copy_intersections(body: CopyIntersectionsRequest) -> CopyIntersectionsResponse:
    """Compute the crossings between every pair of copies in a layer."""
    settings = load_settings()
    try:
        points = compute_copy_intersections(
            [(p.x, p.y) for p in body.vertices],
            copies=body.copies,
            step_scale=body.stepScale,
            angle=body.angle,
            starting_angle=body.startingAngle,
            skip=body.skip,
            alt_scale=body.altScale,
            alt_step_n=body.altStepN,
            threshold=settings.merge_threshold,
        )
    except Exception as exc:
        logger.exception("copy intersections failed: %s", exc)
        raise HTTPException(status_code=500, detail=f"Failed to compute copy intersections: {exc}")
    return CopyIntersectionsResponse(
        points=[Point(x=x, y=y) for x, y in points],
        count=len(points),
    )
