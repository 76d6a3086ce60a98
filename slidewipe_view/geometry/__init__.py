"""
Geometry Layer
==============

Bounded Context: Diagonal cut geometry for the wipe comparison.

Responsibilities:
- Viewport, line, point and polygon value objects
- Cut line parameters and boundary crossings
- Mask polygon, divider segment and handle anchor
- NO state, NO drawing, NO logging

Design Philosophy:
- Pure functions
- Immutable data structures
- Total functions: degenerate input degrades, never raises
"""

from slidewipe_view.geometry.shapes import (
    IntersectionPair,
    LineParams,
    MaskPolygon,
    Point,
    Rect,
)
from slidewipe_view.geometry.engine import (
    clamp_progress,
    compute_intersections,
    compute_line,
    edge_crossings,
    intercept,
    slope,
)
from slidewipe_view.geometry.builders import (
    BELOW_LINE_TOLERANCE,
    WipeGeometry,
    compute_divider_segment,
    compute_handle_anchor,
    compute_mask_polygon,
    compute_wipe_geometry,
)

__all__ = [
    "Rect",
    "Point",
    "LineParams",
    "IntersectionPair",
    "MaskPolygon",
    "WipeGeometry",
    "BELOW_LINE_TOLERANCE",
    "clamp_progress",
    "slope",
    "intercept",
    "compute_line",
    "edge_crossings",
    "compute_intersections",
    "compute_mask_polygon",
    "compute_divider_segment",
    "compute_handle_anchor",
    "compute_wipe_geometry",
]
