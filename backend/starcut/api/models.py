"""
Pydantic data models for the star-cut API.

These models define the shapes of requests and responses used by the
backend.  Points travel as ``{"x": ..., "y": ...}`` objects.  Range
checks that belong to the HTTP contract (for example ``n >= 3``) are
declared here so that FastAPI rejects bad input with a 422 before any
geometry runs; the services themselves stay lenient.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Point(BaseModel):
    """Single 2D point."""

    x: float
    y: float


class SelfIntersectionResponse(BaseModel):
    """Classification of a star descriptor {n/k}."""

    n: int = Field(..., description="Vertex count")
    k: int = Field(..., description="Skip as requested")
    normalizedSkip: int = Field(..., description="Skip folded into (0, n/2]")
    components: int = Field(..., description="Number of disjoint figures, gcd(n, k)")
    selfIntersecting: bool = Field(..., description="Whether the star crosses itself")


class StarVerticesRequest(BaseModel):
    """Request body for generating regular star vertices."""

    radius: float = Field(
        ..., gt=0.0, description="Diameter of the circumscribed circle; points sit at radius / 2"
    )
    n: int = Field(..., ge=3, le=360, description="Number of vertices")
    k: int = Field(default=1, ge=1, description="Skip of the star (does not move the points)")


class StarVerticesResponse(BaseModel):
    """Regular polygon points plus the star drawing order."""

    points: List[Point] = Field(..., description="Points in angular order")
    traversal: List[int] = Field(..., description="Vertex indices in star drawing order")


class StarCutsRequest(BaseModel):
    """Request body for computing the cuts of an arbitrary vertex sequence."""

    vertices: List[Point] = Field(..., description="Vertex sequence in traversal order")
    skip: int = Field(..., ge=1, description="Skip value defining the star edges")


class StarCutsResponse(BaseModel):
    """Self-intersection points of a star."""

    points: List[Point] = Field(..., description="Intersection points in discovery order")
    metadata: Dict[str, Any] = Field(
        ..., description="Count, skip, vertex count and containment mode"
    )


class ValidateCutsRequest(BaseModel):
    """Request body for checking a set of cuts against their polygon."""

    points: List[Point] = Field(..., description="Previously computed cuts")
    vertices: List[Point] = Field(..., description="Vertices of the polygon outline")
    threshold: float = Field(default=0.001, gt=0.0, description="Proximity threshold")


class ValidateCutsResponse(BaseModel):
    """Quality report for a set of cuts."""

    totalIntersections: int
    areValid: bool
    tooCloseToVertex: int
    tooCloseToEdge: int
    tooCloseToOther: int
    issues: List[Dict[str, Any]] = Field(default_factory=list)


class EuclideanRequest(BaseModel):
    """Request body for a Euclidean-rhythm polygon."""

    radius: float = Field(
        ..., gt=0.0, description="Radius of the circle; unlike /stars/vertices this is not halved"
    )
    n: int = Field(..., ge=1, le=360, description="Total number of steps")
    k: int = Field(..., ge=0, description="Number of pulses")


class EuclideanResponse(BaseModel):
    """Pulse pattern and the selected points."""

    pattern: List[bool]
    points: List[Point]


class HullRequest(BaseModel):
    """Request body for a convex hull."""

    points: List[Point]


class HullResponse(BaseModel):
    """Counter-clockwise hull starting from the lowest, leftmost point."""

    hull: List[Point]
    area: float = Field(..., description="Signed area of the hull (positive for CCW)")


class ContainsRequest(BaseModel):
    """Request body for a containment test."""

    point: Point
    vertices: List[Point]
    skip: int = Field(default=1, ge=1)
    expansionFactor: Optional[float] = Field(
        default=None, gt=0.0, description="Override of the hull expansion factor"
    )


class ContainsResponse(BaseModel):
    inside: bool
    mode: str = Field(..., description="'expanded' or 'plain'")


class IntersectRequest(BaseModel):
    """Request body for a two-segment intersection."""

    p1: Point
    p2: Point
    p3: Point
    p4: Point
    extend: bool = Field(default=False, description="Treat the segments as infinite lines")


class IntersectResponse(BaseModel):
    point: Optional[Point] = None


class CopyIntersectionsRequest(BaseModel):
    """Request body for crossings between copies of one polygon."""

    vertices: List[Point] = Field(..., description="Base polygon vertices")
    copies: int = Field(..., ge=0, le=64, description="Number of copies in the layer")
    stepScale: float = Field(default=1.0, gt=0.0, description="Scale step between copies")
    angle: float = Field(default=0.0, description="Rotation step between copies (degrees)")
    startingAngle: float = Field(default=0.0, description="Rotation of the first copy (degrees)")
    skip: int = Field(default=1, ge=1, description="Star skip of the base polygon")
    altScale: Optional[float] = Field(default=None, gt=0.0)
    altStepN: Optional[int] = Field(default=None, ge=1)


class CopyIntersectionsResponse(BaseModel):
    points: List[Point]
    count: int
