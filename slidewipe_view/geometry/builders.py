"""
Geometry Builders Module
========================

Consumers of the engine output: mask polygon, divider segment, handle anchor.

Design:
- Pure functions, independent of each other (no ordering between them)
- Degrade gracefully on an empty IntersectionPair:
  no mask, no divider, handle at the viewport center
- WipeGeometry bundles one full pass for the rendering layer
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from slidewipe_view.geometry.engine import (
    clamp_progress,
    compute_intersections,
    compute_line,
)
from slidewipe_view.geometry.shapes import (
    IntersectionPair,
    LineParams,
    MaskPolygon,
    Point,
    Rect,
)

# Corners within this distance above the line still count as below it
BELOW_LINE_TOLERANCE = 0.5

DividerSegment = Tuple[Point, Point]


def is_on_or_below(point: Point, rect: Rect, line: LineParams) -> bool:
    """True if point is on the cut line or below it (larger y)."""
    local_x = point.x - rect.min_x
    local_y = point.y - rect.min_y
    return local_y >= line.y_at(local_x) - BELOW_LINE_TOLERANCE


def compute_mask_polygon(
    rect: Rect,
    line: LineParams,
    intersections: IntersectionPair,
) -> Optional[MaskPolygon]:
    """
    Polygon covering the viewport on or below the cut line.

    Vertex set is the intersection pair plus every corner on or below the
    line. The half-plane/rectangle intersection is convex, so sorting by
    angle around the centroid yields a simple traversal.

    Args:
        rect: Viewport rectangle
        line: Cut line the intersections were computed from
        intersections: Boundary crossings of the line

    Returns:
        MaskPolygon, or None when there is no visible cut
    """
    if intersections.is_empty:
        return None

    candidates: List[Point] = list(intersections)
    candidates.extend(
        corner for corner in rect.corners if is_on_or_below(corner, rect, line)
    )

    seen = set()
    vertices: List[Point] = []
    for point in candidates:
        key = point.key()
        if key not in seen:
            seen.add(key)
            vertices.append(point)

    if len(vertices) < 3:
        return None

    cx = sum(p.x for p in vertices) / len(vertices)
    cy = sum(p.y for p in vertices) / len(vertices)
    vertices.sort(key=lambda p: math.atan2(p.y - cy, p.x - cx))

    return MaskPolygon(vertices=tuple(vertices))


def compute_divider_segment(intersections: IntersectionPair) -> Optional[DividerSegment]:
    """Segment between the two crossings, or None when there is no cut."""
    if len(intersections) != 2:
        return None
    return intersections.points[0], intersections.points[1]


def compute_handle_anchor(rect: Rect, intersections: IntersectionPair) -> Point:
    """Midpoint of the crossings; viewport center when there is no cut."""
    if len(intersections) != 2:
        return rect.center
    p1, p2 = intersections.points
    return Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)


@dataclass(frozen=True)
class WipeGeometry:
    """
    Immutable snapshot of one geometry pass for a (rect, progress) pair.

    Attributes:
        rect: Viewport the geometry was computed for
        progress: Clamped progress value
        line: Cut line parameters
        intersections: Boundary crossings
        mask: Polygon revealing the masked visual (None = nothing revealed)
        divider: Divider segment (None = no divider)
        handle: Handle anchor point
    """

    rect: Rect
    progress: float
    line: LineParams
    intersections: IntersectionPair
    mask: Optional[MaskPolygon]
    divider: Optional[DividerSegment]
    handle: Point

    @property
    def has_cut(self) -> bool:
        return not self.intersections.is_empty

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'rect': {
                'min_x': self.rect.min_x,
                'min_y': self.rect.min_y,
                'max_x': self.rect.max_x,
                'max_y': self.rect.max_y,
            },
            'progress': self.progress,
            'line': {'slope': self.line.slope, 'intercept': self.line.intercept},
            'intersections': [list(p) for p in self.intersections],
            'mask': [list(p) for p in self.mask.vertices] if self.mask else None,
            'divider': [list(p) for p in self.divider] if self.divider else None,
            'handle': list(self.handle),
        }


def compute_wipe_geometry(rect: Rect, progress: float) -> WipeGeometry:
    """
    Run the full geometry pipeline.

    Pure: identical inputs always produce equal snapshots.
    """
    line = compute_line(rect, progress)
    intersections = compute_intersections(rect, line)
    return WipeGeometry(
        rect=rect,
        progress=clamp_progress(progress),
        line=line,
        intersections=intersections,
        mask=compute_mask_polygon(rect, line, intersections),
        divider=compute_divider_segment(intersections),
        handle=compute_handle_anchor(rect, intersections),
    )
