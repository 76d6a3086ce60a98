"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<action>

    component: geometry, progress, frame, config, image, video, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - geometry.*: Cut geometry states worth noting
    - progress.*: Progress controller updates
    - frame.* / video.*: Rendering output
    - config.* / image.*: Inputs loaded from disk
    - error.*: Error conditions
    """

    # ========== Geometry Events ==========
    GEOMETRY_DEGENERATE = "geometry.degenerate"
    """Viewport has zero width or height; nothing but the base image is drawn."""

    GEOMETRY_NO_CUT = "geometry.no_cut"
    """Cut line touches the viewport in fewer than two points."""

    # ========== Progress Events ==========
    PROGRESS_INITIALIZED = "progress.initialized"
    """Controller created with its initial progress."""

    PROGRESS_UPDATED = "progress.updated"
    """Progress changed by a drag or an explicit set."""

    PROGRESS_DRAG_IGNORED = "progress.drag_ignored"
    """Drag received while the viewport had no width."""

    # ========== Rendering Events ==========
    FRAME_RENDERED = "frame.rendered"
    """Composited frame produced."""

    VIDEO_WRITTEN = "video.written"
    """Sweep video written to disk."""

    # ========== Input Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file parsed and validated."""

    IMAGE_LOADED = "image.loaded"
    """Source image decoded."""

    INDICATOR_ICON_LOADED = "image.indicator_loaded"
    """Handle icon decoded."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Configuration file missing or invalid."""

    IMAGE_LOAD_ERROR = "error.image_load"
    """Image file missing or undecodable."""

    CLI_ERROR = "error.cli"
    """Command failed at the CLI boundary."""
