"""
Wipe View Pipeline Module
=========================

Bounded Context: Orchestration of the wipe comparison.

Design:
- Explicit render function: the host calls render() whenever the viewport
  or the progress changes (no reactivity in the core)
- Progress lives in the ProgressController; geometry is recomputed per call
- Animation is the host's job: render_sweep() interpolates progress over
  frames and calls the core once per frame

Dependencies:
- supervision (VideoInfo, VideoSink)
- numpy (frames)
- slidewipe_view.geometry / control / rendering
"""

from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np
import supervision as sv

from slidewipe_view.config import WipeStyle
from slidewipe_view.control.progress import ProgressController
from slidewipe_view.geometry import Rect, WipeGeometry, compute_wipe_geometry
from slidewipe_view.logging import LogEvent, StructuredLogger, create_logger
from slidewipe_view.rendering.compositor import WipeCompositor


class WipeView:
    """
    Host-facing wipe view: progress state, geometry and drawing.

    Usage:
        view = WipeView(style=WipeStyle(initial_progress=0.3))

        # Pointer events
        view.drag(x=event_x, width=frame_width)

        # Every layout pass / tick
        frame = view.render(lhs, rhs)
    """

    def __init__(
        self,
        style: Optional[WipeStyle] = None,
        controller: Optional[ProgressController] = None,
        compositor: Optional[WipeCompositor] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Initialize view with injected collaborators.

        Args:
            style: Visual options (default: WipeStyle())
            controller: Progress owner (default: seeded from style.initial_progress)
            compositor: Drawing layer (default: built from style)
            logger: Structured logger (default: "pipeline" component)
        """
        self.style = style or WipeStyle()
        self.logger = logger or create_logger("pipeline")
        self.controller = controller or ProgressController(
            initial_progress=self.style.initial_progress
        )
        self.compositor = compositor or WipeCompositor(style=self.style)

    @property
    def progress(self) -> float:
        return self.controller.progress

    def set_progress(self, value: float) -> float:
        return self.controller.set_progress(value)

    def drag(self, x: float, width: float) -> float:
        """Forward a horizontal drag coordinate to the controller."""
        return self.controller.update_from_drag(current_width=width, drag_x=x)

    def geometry_for(self, rect: Rect) -> WipeGeometry:
        """Geometry snapshot for the viewport at the current progress."""
        geometry = compute_wipe_geometry(rect, self.controller.progress)

        if rect.is_degenerate:
            self.logger.debug(
                event=LogEvent.GEOMETRY_DEGENERATE,
                message="Viewport has no area",
                metadata={'size_wh': [rect.width, rect.height]},
            )
        elif not geometry.has_cut:
            self.logger.debug(
                event=LogEvent.GEOMETRY_NO_CUT,
                message="Cut line does not cross the viewport",
                metadata={'progress': geometry.progress},
            )
        return geometry

    def render(
        self,
        lhs: np.ndarray,
        rhs: np.ndarray,
        size_wh: Optional[Tuple[int, int]] = None,
    ) -> np.ndarray:
        """
        Draw one frame at the current progress.

        Args:
            lhs: Image revealed below the cut line
            rhs: Base image
            size_wh: Output size (default: lhs size)

        Returns:
            Composited BGR frame
        """
        if size_wh is None:
            size_wh = (lhs.shape[1], lhs.shape[0])

        geometry = self.geometry_for(Rect.from_size(*size_wh))
        frame = self.compositor.compose(lhs, rhs, geometry)

        self.logger.debug(
            event=LogEvent.FRAME_RENDERED,
            message="Rendered frame",
            metadata={'progress': geometry.progress, 'size_wh': list(size_wh)},
        )
        return frame


def interpolate_progress(start: float, end: float, frames: int) -> List[float]:
    """
    Linearly spaced progress values from start to end (both included).

    Raises:
        ValueError: If frames < 1
    """
    if frames < 1:
        raise ValueError(f"frames must be >= 1, got {frames}")
    if frames == 1:
        return [float(start)]
    return [float(v) for v in np.linspace(start, end, frames)]


def render_sweep(
    view: WipeView,
    lhs: np.ndarray,
    rhs: np.ndarray,
    output_path: str,
    frames: int = 60,
    start: float = 0.0,
    end: float = 1.0,
    fps: int = 30,
    size_wh: Optional[Tuple[int, int]] = None,
) -> str:
    """
    Write a video that sweeps the cut line from start to end progress.

    The view's progress is left at the last frame's value.

    Returns:
        Path of the written video
    """
    if fps < 1:
        raise ValueError(f"fps must be >= 1, got {fps}")

    if size_wh is None:
        size_wh = (lhs.shape[1], lhs.shape[0])
    width, height = size_wh

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    video_info = sv.VideoInfo(width=width, height=height, fps=fps)

    values = interpolate_progress(start, end, frames)
    with sv.VideoSink(target_path=output_path, video_info=video_info) as sink:
        for value in values:
            view.set_progress(value)
            sink.write_frame(view.render(lhs, rhs, size_wh=size_wh))

    view.logger.info(
        event=LogEvent.VIDEO_WRITTEN,
        message="Sweep video written",
        metadata={'path': output_path, 'frames': len(values), 'fps': fps,
                  'start': start, 'end': end},
    )
    return output_path
