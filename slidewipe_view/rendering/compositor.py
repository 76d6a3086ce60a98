"""
Wipe Compositor Module
======================

Pure drawing layer for the wipe comparison.

Design:
- Stateless per frame: inputs are never mutated, a new frame is returned
- No geometry logic: everything comes from a WipeGeometry snapshot
- Stacking order: rhs, lhs through the mask, divider, handle, icon

Dependencies:
- opencv (resize, polygon fill, circles, icon decoding)
- supervision (Color, Point, line drawing)
- numpy (arrays)
"""

from pathlib import Path
from typing import Optional

import cv2
import numpy as np
import supervision as sv

from slidewipe_view.config import WipeStyle
from slidewipe_view.geometry import Point, WipeGeometry
from slidewipe_view.logging import LogEvent, StructuredLogger, create_logger


def load_image(path: Path, logger: Optional[StructuredLogger] = None) -> np.ndarray:
    """
    Read a BGR image from disk.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If OpenCV cannot decode the file
    """
    path = Path(path)
    error: Optional[Exception] = None
    image = None
    if not path.exists():
        error = FileNotFoundError(f"Image not found: {path}")
    else:
        image = cv2.imread(str(path), cv2.IMREAD_COLOR)
        if image is None:
            error = ValueError(f"Could not decode image: {path}")

    if error is not None:
        if logger is not None:
            logger.error(
                event=LogEvent.IMAGE_LOAD_ERROR,
                message="Image load failed",
                exc_info=error,
                metadata={'path': str(path)},
            )
        raise error

    if logger is not None:
        logger.info(
            event=LogEvent.IMAGE_LOADED,
            message="Image loaded",
            metadata={'path': str(path), 'size_wh': [image.shape[1], image.shape[0]]},
        )
    return image


def fit_to_frame(image: np.ndarray, width: int, height: int) -> np.ndarray:
    """Stretch an image to fill the frame (3-channel BGR)."""
    if image.ndim == 2:
        image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    elif image.shape[2] == 4:
        image = cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)

    if image.shape[1] == width and image.shape[0] == height:
        return image
    return cv2.resize(image, (width, height), interpolation=cv2.INTER_LINEAR)


def default_indicator_glyph(size: int) -> np.ndarray:
    """
    Coverage mask of the built-in icon: two arrows pointing from the center
    towards the bottom-left and top-right corners.
    """
    glyph = np.zeros((size, size), dtype=np.uint8)
    if size < 4:
        return glyph

    margin = max(1, size // 8)
    center = (size // 2, size // 2)
    thickness = max(1, size // 11)
    cv2.arrowedLine(glyph, center, (size - 1 - margin, margin), 255, thickness,
                    cv2.LINE_AA, tipLength=0.45)
    cv2.arrowedLine(glyph, center, (margin, size - 1 - margin), 255, thickness,
                    cv2.LINE_AA, tipLength=0.45)
    return glyph


def glyph_from_image(image: np.ndarray, size: int) -> np.ndarray:
    """
    Coverage mask of a custom icon, scaled to fit a size x size box.

    The alpha channel is the shape when present; otherwise dark pixels are.
    """
    if image.ndim == 3 and image.shape[2] == 4:
        coverage = image[:, :, 3]
    else:
        gray = image if image.ndim == 2 else cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
        coverage = 255 - gray

    glyph = np.zeros((size, size), dtype=np.uint8)
    src_h, src_w = coverage.shape[:2]
    if size == 0 or src_h == 0 or src_w == 0:
        return glyph

    scale = min(size / src_w, size / src_h)
    new_w = max(1, int(round(src_w * scale)))
    new_h = max(1, int(round(src_h * scale)))
    scaled = cv2.resize(coverage, (new_w, new_h), interpolation=cv2.INTER_AREA)

    top = (size - new_h) // 2
    left = (size - new_w) // 2
    glyph[top:top + new_h, left:left + new_w] = scaled
    return glyph


class WipeCompositor:
    """
    Draws a wipe frame from two images and a geometry snapshot.

    Usage:
        compositor = WipeCompositor(style=WipeStyle(divider_width=3))
        geometry = compute_wipe_geometry(Rect.from_size(w, h), progress)
        frame = compositor.compose(lhs, rhs, geometry)
    """

    def __init__(
        self,
        style: Optional[WipeStyle] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Initialize compositor with style configuration.

        Args:
            style: Visual options (default: WipeStyle())
            logger: Structured logger (default: "compositor" component)

        Raises:
            FileNotFoundError: If style.indicator_image does not exist
            ValueError: If style.indicator_image cannot be decoded
        """
        self.style = style or WipeStyle()
        self.logger = logger or create_logger("compositor")

        self.divider_color = self.style.divider_sv_color
        self.indicator_color = self.style.indicator_sv_color
        self.indicator_image_color = self.style.indicator_image_sv_color
        self.glyph = self._build_glyph()

    def _build_glyph(self) -> np.ndarray:
        size = self.style.indicator_image_width
        if self.style.indicator_image is None:
            return default_indicator_glyph(size)

        path = self.style.indicator_image
        if not path.exists():
            raise FileNotFoundError(f"Indicator image not found: {path}")
        icon = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        if icon is None:
            raise ValueError(f"Could not decode indicator image: {path}")

        self.logger.info(
            event=LogEvent.INDICATOR_ICON_LOADED,
            message="Indicator icon loaded",
            metadata={'path': str(path), 'size': size},
        )
        return glyph_from_image(icon, size)

    def compose(
        self,
        lhs: np.ndarray,
        rhs: np.ndarray,
        geometry: WipeGeometry,
    ) -> np.ndarray:
        """
        Draw the full wipe frame.

        Args:
            lhs: Image revealed on and below the cut line
            rhs: Base image
            geometry: Geometry snapshot for this frame (rect sets the size)

        Returns:
            New BGR frame of the rect's size. A degenerate rect has no
            drawable area, so an unmodified copy of rhs (at its own size)
            is returned instead.
        """
        width = int(round(geometry.rect.width))
        height = int(round(geometry.rect.height))
        if width <= 0 or height <= 0:
            return rhs.copy()

        base = fit_to_frame(rhs, width, height)
        top = fit_to_frame(lhs, width, height)

        frame = self.draw_masked(base, top, geometry)
        frame = self.draw_divider(frame, geometry)
        frame = self.draw_handle(frame, geometry.handle)
        return frame

    def draw_masked(
        self,
        base: np.ndarray,
        top: np.ndarray,
        geometry: WipeGeometry,
    ) -> np.ndarray:
        """Blend top over base inside the mask polygon (no mask = base only)."""
        if geometry.mask is None:
            return base.copy()

        mask = np.zeros(base.shape[:2], dtype=np.uint8)
        polygon = np.round(geometry.mask.to_array()).astype(np.int32)
        cv2.fillPoly(mask, [polygon.reshape((-1, 1, 2))], color=255)

        return np.where(mask[:, :, None] > 0, top, base).astype(base.dtype)

    def draw_divider(self, frame: np.ndarray, geometry: WipeGeometry) -> np.ndarray:
        """Stroke the divider along the cut line."""
        if geometry.divider is None or self.style.divider_width == 0:
            return frame

        start, end = geometry.divider
        return sv.draw_line(
            scene=frame,
            start=sv.Point(x=start.x, y=start.y),
            end=sv.Point(x=end.x, y=end.y),
            color=self.divider_color,
            thickness=self.style.divider_width,
        )

    def draw_handle(self, frame: np.ndarray, anchor: Point) -> np.ndarray:
        """Draw the filled handle circle with its icon centered on anchor."""
        diameter = self.style.indicator_width
        center = (int(round(anchor.x)), int(round(anchor.y)))

        if diameter > 0:
            cv2.circle(
                frame,
                center,
                diameter // 2,
                self.indicator_color.as_bgr(),
                thickness=-1,
                lineType=cv2.LINE_AA,
            )

        return self._draw_glyph(frame, center)

    def _draw_glyph(self, frame: np.ndarray, center: tuple) -> np.ndarray:
        size = self.glyph.shape[0]
        if size == 0:
            return frame

        height, width = frame.shape[:2]
        left = center[0] - size // 2
        top = center[1] - size // 2

        # Clip the glyph box to the frame
        x0, y0 = max(left, 0), max(top, 0)
        x1, y1 = min(left + size, width), min(top + size, height)
        if x0 >= x1 or y0 >= y1:
            return frame

        alpha = self.glyph[y0 - top:y1 - top, x0 - left:x1 - left].astype(np.float32) / 255.0
        alpha = alpha[:, :, None]
        tint = np.array(self.indicator_image_color.as_bgr(), dtype=np.float32)

        region = frame[y0:y1, x0:x1].astype(np.float32)
        frame[y0:y1, x0:x1] = (region * (1.0 - alpha) + tint * alpha).astype(frame.dtype)
        return frame
