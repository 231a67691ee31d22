"""
Tests for the star-cut driver and its validation helpers.

Regular stars are built directly from cos/sin so that the expected
crossing counts and radii can be derived by hand:

- {5/2} has 5 crossings on a circle of radius R·cos(72°)/cos(36°);
- {7/2} has 7 crossings and {7/3} has 14 (two rings of 7);
- {6/2} (two triangles) has 6 crossings.
"""

from __future__ import annotations

import logging
import math
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from starcut.services.containment import point_in_polygon  # type: ignore
from starcut.services.hull import convex_hull  # type: ignore
from starcut.services.primitives import distance, distance_to_segment  # type: ignore
from starcut.services.settings import StarCutSettings  # type: ignore
from starcut.services.star_cuts import (  # type: ignore
    compute_star_cuts,
    debug_star_cuts,
    star_edges,
    validate_star_cuts,
)


def regular_polygon(n: int, radius: float) -> list[tuple[float, float]]:
    return [
        (radius * math.cos(2 * math.pi * i / n), radius * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ]


def test_star_edges_wrap_around() -> None:
    assert star_edges(5, 2) == [(0, 2), (1, 3), (2, 4), (3, 0), (4, 1)]


def test_pentagram_yields_inner_pentagon() -> None:
    """Five vertices on a circle of radius 200 with skip 2 give five crossings."""
    vertices = regular_polygon(5, 200.0)
    cuts = compute_star_cuts(vertices, 2)
    assert len(cuts) == 5

    expected_radius = 200.0 * math.cos(math.radians(72)) / math.cos(math.radians(36))
    hull = convex_hull(vertices)
    for p in cuts:
        assert math.hypot(*p) == pytest.approx(expected_radius, rel=1e-9)
        assert point_in_polygon(p, hull)
        # Strictly inside: well away from every hull edge
        for i in range(len(hull)):
            assert distance_to_segment(p, hull[i], hull[(i + 1) % len(hull)]) > 1.0


@pytest.mark.parametrize(
    "n, skip, expected",
    [
        (5, 2, 5),
        (7, 2, 7),
        (7, 3, 14),
        (6, 2, 6),
        (4, 2, 1),  # both diagonals meet once in the centre
    ],
)
def test_regular_star_crossing_counts(n: int, skip: int, expected: int) -> None:
    assert len(compute_star_cuts(regular_polygon(n, 100.0), skip)) == expected


def test_square_diagonals_meet_at_centre() -> None:
    cuts = compute_star_cuts(regular_polygon(4, 1.0), 2)
    assert len(cuts) == 1
    assert cuts[0] == pytest.approx((0.0, 0.0), abs=1e-12)


@pytest.mark.parametrize("n", [4, 5, 6, 9])
def test_convex_polygon_has_no_cuts(n: int) -> None:
    assert compute_star_cuts(regular_polygon(n, 50.0), 1) == []


def test_results_are_deterministic() -> None:
    vertices = regular_polygon(11, 123.0)
    first = compute_star_cuts(vertices, 4)
    second = compute_star_cuts(list(vertices), 4)
    assert first == second
    assert len(first) > 0


def test_no_two_results_are_within_merge_threshold() -> None:
    for n, skip in [(5, 2), (7, 3), (9, 4), (12, 5), (10, 3)]:
        cuts = compute_star_cuts(regular_polygon(n, 10.0), skip)
        for i in range(len(cuts)):
            for j in range(i + 1, len(cuts)):
                assert distance(cuts[i], cuts[j]) >= 0.001


def test_vertex_order_defines_the_outline() -> None:
    """Pentagon points listed in star order with skip 1 trace a pentagram."""
    pentagon = regular_polygon(5, 200.0)
    star_order = [pentagon[i] for i in (0, 2, 4, 1, 3)]
    assert len(compute_star_cuts(star_order, 1)) == 5


def test_skip_is_used_modulo_vertex_count() -> None:
    vertices = regular_polygon(5, 200.0)
    assert compute_star_cuts(vertices, 7) == compute_star_cuts(vertices, 2)


def test_merge_threshold_comes_from_settings() -> None:
    """Neighbouring crossings (about 90 apart) merge; opposite ones (about 145) do not."""
    vertices = regular_polygon(5, 200.0)
    cuts = compute_star_cuts(vertices, 2, settings=StarCutSettings(merge_threshold=100.0))
    assert len(cuts) == 2


def test_crossings_on_input_vertices_are_dropped() -> None:
    """Edges that only touch at a repeated vertex do not produce a cut there."""
    vertices = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)]
    cuts = compute_star_cuts(vertices, 2)
    assert cuts == [pytest.approx((0.5, 0.5))]
    for c in cuts:
        assert all(distance(c, v) >= 0.001 for v in vertices)


@pytest.mark.parametrize("vertices", [[], [(0.0, 0.0)], regular_polygon(3, 1.0)])
def test_too_few_vertices_returns_empty(
    vertices: list, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="starcut.services.star_cuts"):
        assert compute_star_cuts(vertices, 2) == []
    assert any("at least 4 vertices" in rec.getMessage() for rec in caplog.records)


@pytest.mark.parametrize("skip", [0, -2, 2.5, "2"])
def test_invalid_skip_returns_empty(skip: object) -> None:
    assert compute_star_cuts(regular_polygon(5, 1.0), skip) == []


def test_debug_tracing_goes_to_injected_logger(caplog: pytest.LogCaptureFixture) -> None:
    sink = logging.getLogger("tests.starcut.sink")
    with caplog.at_level(logging.DEBUG, logger="tests.starcut.sink"):
        compute_star_cuts(regular_polygon(5, 1.0), 2, settings=StarCutSettings(debug=True), log=sink)
    messages = [rec.getMessage() for rec in caplog.records if rec.name == "tests.starcut.sink"]
    assert any("mode=expanded" in m for m in messages)
    assert any("5 kept" in m for m in messages)


def test_no_tracing_without_debug(caplog: pytest.LogCaptureFixture) -> None:
    sink = logging.getLogger("tests.starcut.quiet")
    with caplog.at_level(logging.DEBUG, logger="tests.starcut.quiet"):
        compute_star_cuts(regular_polygon(5, 1.0), 2, log=sink)
    assert not [rec for rec in caplog.records if rec.name == "tests.starcut.quiet"]


def test_validation_accepts_pentagram_cuts() -> None:
    vertices = regular_polygon(5, 200.0)
    report = validate_star_cuts(compute_star_cuts(vertices, 2), vertices)
    assert report.total_intersections == 5
    assert report.are_valid
    assert report.issues == []


def test_validation_flags_points_near_vertices_and_each_other() -> None:
    square = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
    report = validate_star_cuts([(10.0005, 10.0), (5.0, 5.0), (5.0, 5.0002)], square)
    assert not report.are_valid
    assert report.too_close_to_vertex == 1
    assert report.too_close_to_other == 1
    kinds = {issue["type"] for issue in report.issues}
    assert {"too_close_to_vertex", "too_close_to_other"} <= kinds


def test_validation_distinguishes_on_edge_from_near_edge() -> None:
    square = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
    on_edge = validate_star_cuts([(5.0, 0.0)], square)
    assert on_edge.are_valid
    near_edge = validate_star_cuts([(5.0, 0.0005)], square)
    assert near_edge.too_close_to_edge == 1
    assert near_edge.as_dict()["tooCloseToEdge"] == 1


def test_debug_star_cuts_reports_everything(caplog: pytest.LogCaptureFixture) -> None:
    settings = StarCutSettings()
    with caplog.at_level(logging.DEBUG, logger="starcut.services.star_cuts"):
        result = debug_star_cuts(regular_polygon(5, 200.0), 2, settings=settings)
    assert len(result["intersections"]) == 5
    assert result["validation"].are_valid
    # The caller's settings are left untouched
    assert settings.debug is False
    assert any("candidate crossings" in rec.getMessage() for rec in caplog.records)
