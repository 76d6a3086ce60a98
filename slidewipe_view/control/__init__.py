"""
Control Layer
=============

Bounded Context: Progress state driven by drag input.

Responsibilities:
- Own the current progress (the only mutable state of a wipe)
- Map horizontal drag coordinates to progress

Non-responsibilities:
- Gesture capture (host)
- Geometry (handled by geometry layer)
"""

from slidewipe_view.control.progress import ProgressController

__all__ = [
    "ProgressController",
]
