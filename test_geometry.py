"""
Test Wipe Geometry Engine
=========================

Cut line parameters and boundary crossings.

Usage:
    pytest test_geometry.py
"""

import pytest

from slidewipe_view.geometry import (
    IntersectionPair,
    LineParams,
    Point,
    Rect,
    compute_intersections,
    compute_line,
    compute_wipe_geometry,
    edge_crossings,
    intercept,
    slope,
)

RECT = Rect.from_size(100, 50)


def on_boundary(point: Point, rect: Rect, tol: float = 1e-9) -> bool:
    on_vertical = abs(point.x - rect.min_x) < tol or abs(point.x - rect.max_x) < tol
    on_horizontal = abs(point.y - rect.min_y) < tol or abs(point.y - rect.max_y) < tol
    return (on_vertical or on_horizontal) and rect.contains(point, tolerance=tol)


def test_slope_is_aspect_ratio():
    assert slope(RECT) == 0.5
    assert slope(Rect.from_size(50, 100)) == 2.0


def test_slope_zero_width_is_guarded():
    assert slope(Rect.from_size(0, 50)) == 0.0


def test_intercept_endpoints_and_midpoint():
    assert intercept(0.0, RECT) == -50
    assert intercept(0.5, RECT) == 0
    assert intercept(1.0, RECT) == 50
    assert intercept(0.25, RECT) == -25


def test_intercept_clamps_progress():
    assert intercept(-1.0, RECT) == -50
    assert intercept(2.0, RECT) == 50


def test_intercept_is_linear_in_progress():
    for i in range(11):
        p = i / 10
        assert intercept(p, RECT) == pytest.approx(-50 + 100 * p)


def test_slope_does_not_depend_on_progress():
    slopes = {compute_line(RECT, p / 4).slope for p in range(5)}
    assert slopes == {0.5}


def test_diagonal_at_half_progress():
    line = compute_line(RECT, 0.5)
    assert line == LineParams(slope=0.5, intercept=0.0)

    pair = compute_intersections(RECT, line)
    assert pair.points == (Point(0, 0), Point(100, 50))


def test_zero_progress_touches_top_right_corner_only():
    line = compute_line(RECT, 0.0)
    assert line.intercept == -50

    # Right and top edge formulas both land on the corner
    crossings = edge_crossings(RECT, line)
    assert crossings == [Point(100, 0), Point(100, 0)]
    for point in crossings:
        assert point.y == RECT.min_y and point.x == RECT.max_x

    # A single distinct point is not a visible cut
    assert compute_intersections(RECT, line).is_empty


def test_full_progress_touches_bottom_left_corner_only():
    line = compute_line(RECT, 1.0)
    assert edge_crossings(RECT, line) == [Point(0, 50), Point(0, 50)]
    assert compute_intersections(RECT, line).is_empty


def test_quarter_progress_crosses_top_and_right():
    pair = compute_intersections(RECT, compute_line(RECT, 0.25))
    assert set(pair) == {Point(100, 25), Point(50, 0)}


def test_horizontal_line_skips_top_and_bottom():
    crossings = edge_crossings(RECT, LineParams(slope=0.0, intercept=10.0))
    assert crossings == [Point(0, 10), Point(100, 10)]


def test_intersections_have_zero_or_two_boundary_points():
    rects = [
        Rect.from_size(100, 50),
        Rect.from_size(50, 100),
        Rect.from_size(640, 480),
        Rect.from_size(1, 1),
        Rect(10, 20, 110, 70),
    ]
    for rect in rects:
        for i in range(101):
            pair = compute_intersections(rect, compute_line(rect, i / 100))
            assert len(pair) in (0, 2)
            for point in pair:
                assert on_boundary(point, rect)
            if len(pair) == 2:
                assert pair.points[0].key() != pair.points[1].key()


def test_offset_rect_uses_local_space():
    rect = Rect(10, 20, 110, 70)
    pair = compute_intersections(rect, compute_line(rect, 0.5))
    assert pair.points == (Point(10, 20), Point(110, 70))


def test_degenerate_rects_give_empty_pair():
    for rect in (Rect.from_size(0, 50), Rect.from_size(100, 0), Rect.from_size(0, 0)):
        line = compute_line(rect, 0.3)
        assert compute_intersections(rect, line).is_empty


def test_intersection_pair_rejects_single_point():
    with pytest.raises(ValueError):
        IntersectionPair(points=(Point(0, 0),))


def test_pipeline_is_idempotent():
    for p in (0.0, 0.1, 0.5, 0.73, 1.0):
        assert compute_wipe_geometry(RECT, p) == compute_wipe_geometry(RECT, p)
