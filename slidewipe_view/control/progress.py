"""
Progress Controller Module
==========================

Stateful owner of the wipe progress.

Design:
- Encapsulates the only mutable value of the wipe (progress in [0, 1])
- Clamps on every write, never rejects
- Drag mapping is inverted: x = 0 -> progress 1, x = width -> progress 0
- Caller serializes updates (single logical thread of control)
"""

from typing import Optional

from slidewipe_view.geometry.engine import clamp_progress
from slidewipe_view.logging import LogEvent, StructuredLogger, create_logger


class ProgressController:
    """
    Holds the current progress and maps horizontal drags onto it.

    Usage:
        controller = ProgressController(initial_progress=0.3)

        # Each pointer event
        progress = controller.update_from_drag(current_width=640, drag_x=event_x)
    """

    def __init__(
        self,
        initial_progress: float = 0.5,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Initialize controller state.

        Args:
            initial_progress: Starting progress (clamped to [0, 1])
            logger: Structured logger (default: "controller" component)
        """
        self.logger = logger or create_logger("controller")
        self._initial = clamp_progress(initial_progress)
        self._progress = self._initial

        self.logger.debug(
            event=LogEvent.PROGRESS_INITIALIZED,
            message="Progress controller created",
            metadata={'requested': initial_progress, 'progress': self._initial},
        )

    @property
    def progress(self) -> float:
        """Current progress in [0, 1]."""
        return self._progress

    @property
    def initial_progress(self) -> float:
        return self._initial

    def update_from_drag(self, current_width: float, drag_x: float) -> float:
        """
        Map a horizontal drag coordinate to progress.

        Args:
            current_width: Viewport width at the time of the event
            drag_x: Pointer x relative to the viewport's left edge

        Returns:
            New progress (unchanged when the viewport has no width)
        """
        if current_width <= 0:
            self.logger.debug(
                event=LogEvent.PROGRESS_DRAG_IGNORED,
                message="Drag ignored on zero-width viewport",
                metadata={'width': current_width, 'x': drag_x},
            )
            return self._progress

        x = max(0.0, min(float(current_width), float(drag_x)))
        self._store(1.0 - x / current_width, source="drag")
        return self._progress

    def set_progress(self, value: float) -> float:
        """Set progress from external configuration (clamped)."""
        self._store(clamp_progress(value), source="set")
        return self._progress

    def reset(self) -> None:
        """Restore the initial progress."""
        self._store(self._initial, source="reset")

    def _store(self, value: float, source: str) -> None:
        # Single assignment: readers see the old or the new value, never a mix
        previous = self._progress
        self._progress = value
        if previous != value:
            self.logger.debug(
                event=LogEvent.PROGRESS_UPDATED,
                message="Progress changed",
                metadata={'source': source, 'from': previous, 'to': value},
            )

    def __repr__(self) -> str:
        return f"ProgressController(progress={self._progress:.3f})"
