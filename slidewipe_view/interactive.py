"""
Interactive Host Loop
=====================

OpenCV window that drives a WipeView with the mouse.

Pressing or dragging with the left button moves the cut line (a press with
no movement counts as a drag). The frame is redrawn every tick; q or Esc
closes the window.
"""

from typing import Optional, Tuple

import cv2
import numpy as np

from slidewipe_view.pipeline import WipeView

QUIT_KEYS = {ord("q"), 27}


class InteractiveSession:
    """
    Binds a WipeView to an OpenCV window.

    The mouse callback only updates progress; drawing happens in the loop.
    """

    def __init__(
        self,
        view: WipeView,
        lhs: np.ndarray,
        rhs: np.ndarray,
        size_wh: Optional[Tuple[int, int]] = None,
        window_name: str = "slidewipe",
        tick_ms: int = 16,
    ):
        self.view = view
        self.lhs = lhs
        self.rhs = rhs
        self.size_wh = size_wh or (lhs.shape[1], lhs.shape[0])
        self.window_name = window_name
        self.tick_ms = tick_ms
        self._dragging = False

    def on_mouse(self, event: int, x: int, y: int, flags: int, param=None) -> None:
        """cv2 mouse callback."""
        if event == cv2.EVENT_LBUTTONDOWN:
            self._dragging = True
        elif event == cv2.EVENT_LBUTTONUP:
            self._dragging = False
            return
        elif event == cv2.EVENT_MOUSEMOVE:
            if not (self._dragging or flags & cv2.EVENT_FLAG_LBUTTON):
                return
        else:
            return

        self.view.drag(x=x, width=self.size_wh[0])

    def run(self) -> float:
        """
        Show the window until a quit key is pressed or it is closed.

        Returns:
            Progress at exit
        """
        cv2.namedWindow(self.window_name, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(self.window_name, self.on_mouse)
        try:
            while True:
                frame = self.view.render(self.lhs, self.rhs, size_wh=self.size_wh)
                cv2.imshow(self.window_name, frame)

                key = cv2.waitKey(self.tick_ms) & 0xFF
                if key in QUIT_KEYS:
                    break
                if cv2.getWindowProperty(self.window_name, cv2.WND_PROP_VISIBLE) < 1:
                    break
        finally:
            cv2.destroyWindow(self.window_name)

        return self.view.progress
