"""
Geometry Engine Module
======================

Pure functions mapping (viewport, progress) to the diagonal cut line and
its boundary crossings.

Design:
- Stateless, total over its inputs (no exceptions for bad input)
- Slope is tied to the viewport's aspect ratio; progress only moves the
  intercept, so the line sweeps corner to corner as progress goes 0 -> 1
- Computations run in the rectangle's local space and are translated back
"""

from typing import List

from slidewipe_view.geometry.shapes import IntersectionPair, LineParams, Point, Rect


def clamp_progress(progress: float) -> float:
    """Clamp a progress value to [0, 1]."""
    return max(0.0, min(1.0, float(progress)))


def slope(rect: Rect) -> float:
    """
    Slope of the cut line (height / width).

    Returns 0.0 for a zero-width rectangle instead of dividing by zero.
    """
    if rect.width == 0:
        return 0.0
    return rect.height / rect.width


def intercept(progress: float, rect: Rect) -> float:
    """
    Vertical offset of the cut line for a progress value.

    Linear in progress: -height at 0, 0 at 0.5, +height at 1.
    """
    p = clamp_progress(progress)
    return (p - 0.5) * 2 * rect.height


def compute_line(rect: Rect, progress: float) -> LineParams:
    """Line parameters for the given viewport and progress."""
    return LineParams(slope=slope(rect), intercept=intercept(progress, rect))


def edge_crossings(rect: Rect, line: LineParams) -> List[Point]:
    """
    Raw candidate crossings of the line with each boundary edge.

    Edges are tested in order left, right, top, bottom. A candidate is kept
    only if it falls inside the edge's finite extent (inclusive). Top and
    bottom are skipped for a horizontal line. Duplicates are NOT removed.

    Args:
        rect: Viewport rectangle
        line: Cut line in the rectangle's local space

    Returns:
        List of points in the rectangle's coordinate space
    """
    width, height = rect.width, rect.height
    m, c = line.slope, line.intercept
    points: List[Point] = []

    # Left edge (local x = 0)
    y_left = c
    if 0 <= y_left <= height:
        points.append(Point(rect.min_x, rect.min_y + y_left))

    # Right edge (local x = width)
    y_right = m * width + c
    if 0 <= y_right <= height:
        points.append(Point(rect.max_x, rect.min_y + y_right))

    if m != 0:
        # Top edge (local y = 0)
        x_top = -c / m
        if 0 <= x_top <= width:
            points.append(Point(rect.min_x + x_top, rect.min_y))

        # Bottom edge (local y = height)
        x_bottom = (height - c) / m
        if 0 <= x_bottom <= width:
            points.append(Point(rect.min_x + x_bottom, rect.max_y))

    return points


def compute_intersections(rect: Rect, line: LineParams) -> IntersectionPair:
    """
    Boundary crossings of the cut line, reduced to an IntersectionPair.

    Steps:
    1. Collect edge crossings
    2. Drop duplicates (coordinates equal at 3-decimal precision), which
       happens when the line runs exactly through a corner
    3. With more than two left, keep the two extremes in (x, y) order
    4. With fewer than two left, the cut is not visible: empty pair

    Args:
        rect: Viewport rectangle (degenerate rectangles give an empty pair)
        line: Cut line in the rectangle's local space

    Returns:
        Empty pair or exactly two distinct points
    """
    if rect.is_degenerate:
        return IntersectionPair.empty()

    seen = set()
    unique: List[Point] = []
    for point in edge_crossings(rect, line):
        key = point.key()
        if key not in seen:
            seen.add(key)
            unique.append(point)

    if len(unique) > 2:
        unique.sort(key=lambda p: (p.x, p.y))
        unique = [unique[0], unique[-1]]

    if len(unique) < 2:
        return IntersectionPair.empty()

    return IntersectionPair(points=tuple(unique))
