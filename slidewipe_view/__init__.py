"""
Slidewipe View
==============

Bounded Context: Diagonal before/after wipe comparison of two images.

Design Philosophy:
- Separation of Concerns: Geometry, Control, Rendering separated
- Geometry is pure and total; degenerate input degrades, never raises
- One mutable value (progress), owned by the control layer

Architecture:

    slidewipe_view/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── shapes.py      # Rect, Point, LineParams, IntersectionPair, MaskPolygon
    │   ├── engine.py      # slope, intercept, boundary crossings
    │   └── builders.py    # mask polygon, divider, handle anchor, WipeGeometry
    │
    ├── control/           # Progress state (stateful)
    │   └── progress.py    # ProgressController
    │
    ├── rendering/         # Drawing (stateless)
    │   └── compositor.py  # WipeCompositor
    │
    ├── logging/           # Structured JSON logs
    ├── config.py          # WipeStyle, WipeConfig
    ├── pipeline.py        # WipeView, render_sweep
    └── interactive.py     # OpenCV mouse-drag host loop

Usage:

    # 1. Geometry (pure)
    from slidewipe_view import Rect, compute_wipe_geometry

    geometry = compute_wipe_geometry(Rect.from_size(100, 50), progress=0.5)
    geometry.divider   # (Point(0, 0), Point(100, 50))

    # 2. Drag (stateful)
    from slidewipe_view import ProgressController

    controller = ProgressController(initial_progress=0.3)
    controller.update_from_drag(current_width=200, drag_x=50)  # 0.75

    # 3. Render (host)
    from slidewipe_view import WipeView, WipeStyle

    view = WipeView(style=WipeStyle(divider_width=3))
    frame = view.render(lhs, rhs)
"""

# Geometry Layer (immutable, stateless)
from slidewipe_view.geometry import (
    IntersectionPair,
    LineParams,
    MaskPolygon,
    Point,
    Rect,
    WipeGeometry,
    compute_divider_segment,
    compute_handle_anchor,
    compute_intersections,
    compute_line,
    compute_mask_polygon,
    compute_wipe_geometry,
)

# Control Layer (stateful)
from slidewipe_view.control import ProgressController

# Configuration
from slidewipe_view.config import WipeConfig, WipeStyle

# Rendering Layer (stateless)
from slidewipe_view.rendering import WipeCompositor, load_image

# Pipeline (orchestration)
from slidewipe_view.pipeline import WipeView, interpolate_progress, render_sweep

__all__ = [
    # Geometry
    "Rect",
    "Point",
    "LineParams",
    "IntersectionPair",
    "MaskPolygon",
    "WipeGeometry",
    "compute_line",
    "compute_intersections",
    "compute_mask_polygon",
    "compute_divider_segment",
    "compute_handle_anchor",
    "compute_wipe_geometry",
    # Control
    "ProgressController",
    # Config
    "WipeStyle",
    "WipeConfig",
    # Rendering
    "WipeCompositor",
    "load_image",
    # Pipeline
    "WipeView",
    "interpolate_progress",
    "render_sweep",
]

__version__ = "1.0.0"
