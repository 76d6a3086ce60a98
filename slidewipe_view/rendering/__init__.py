"""
Rendering Layer
===============

Bounded Context: Wipe frame drawing.

Responsibilities:
- Composite the two images through the mask polygon
- Draw the divider and the handle (circle + icon)
- Load source images

Non-responsibilities:
- Geometry (handled by geometry layer)
- Progress state (handled by control layer)

Design:
- Stateless drawing functions
- Uses supervision and OpenCV drawing utilities
- Configurable styles (WipeStyle)
"""

from slidewipe_view.rendering.compositor import WipeCompositor, load_image

__all__ = [
    "WipeCompositor",
    "load_image",
]
