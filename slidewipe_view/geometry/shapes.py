"""
Geometric Shapes Module
========================

Value objects for the wipe geometry - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Coordinates are floats in the viewport's coordinate space
- Degenerate rectangles are representable (callers decide what to do)
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Tuple

# Coordinates are compared at this many decimals when deduplicating points
POINT_KEY_DECIMALS = 3


class Point(NamedTuple):
    """(x, y) point in the viewport's coordinate space."""

    x: float
    y: float

    def key(self) -> Tuple[float, float]:
        """Rounded identity used to collapse numerically equal points."""
        return (round(self.x, POINT_KEY_DECIMALS), round(self.y, POINT_KEY_DECIMALS))


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned viewport rectangle.

    Attributes:
        min_x: Left edge
        min_y: Top edge (y grows downwards, image convention)
        max_x: Right edge
        max_y: Bottom edge

    Invariants:
        - width > 0 and height > 0 for a usable viewport
        - Zero or negative extents are allowed and reported by is_degenerate
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_size(cls, width: float, height: float) -> "Rect":
        """Rectangle with its origin at (0, 0)."""
        return cls(min_x=0.0, min_y=0.0, max_x=float(width), max_y=float(height))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    @property
    def corners(self) -> Tuple[Point, Point, Point, Point]:
        """Corners as bottom-right, bottom-left, top-right, top-left."""
        return (
            Point(self.max_x, self.max_y),
            Point(self.min_x, self.max_y),
            Point(self.max_x, self.min_y),
            Point(self.min_x, self.min_y),
        )

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, point: Point, tolerance: float = 1e-9) -> bool:
        """Inclusive containment test."""
        return (
            self.min_x - tolerance <= point.x <= self.max_x + tolerance
            and self.min_y - tolerance <= point.y <= self.max_y + tolerance
        )


@dataclass(frozen=True)
class LineParams:
    """
    Cut line y = slope * x + intercept, in the rectangle's local space.

    Local space has its origin at the rectangle's (min_x, min_y) corner, so
    the same parameters describe the cut for any placement of the viewport.
    """

    slope: float
    intercept: float

    def y_at(self, x: float) -> float:
        """Local y of the line at local x."""
        return self.slope * x + self.intercept


@dataclass(frozen=True)
class IntersectionPair:
    """
    Boundary crossings of the cut line: either empty or exactly two points.
    """

    points: Tuple[Point, ...] = ()

    def __post_init__(self):
        """Validate invariants."""
        if len(self.points) not in (0, 2):
            raise ValueError(
                f"IntersectionPair must hold 0 or 2 points, got {len(self.points)}"
            )

    @classmethod
    def empty(cls) -> "IntersectionPair":
        return cls(points=())

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)


@dataclass(frozen=True)
class MaskPolygon:
    """
    Convex polygon covering the part of the viewport on or below the cut line.

    Vertices are unique and ordered by angle around their centroid; the
    closing edge runs from the last vertex back to the first.
    """

    vertices: Tuple[Point, ...]

    def __post_init__(self):
        """Validate vertex count."""
        if len(self.vertices) < 3:
            raise ValueError(
                f"Polygon must have at least 3 vertices, got {len(self.vertices)}"
            )

    def ring(self) -> Tuple[Point, ...]:
        """Closed traversal (first vertex repeated at the end)."""
        return self.vertices + (self.vertices[0],)

    def to_array(self) -> np.ndarray:
        """Nx2 float array of the (open) vertex list, for drawing."""
        return np.array([[p.x, p.y] for p in self.vertices], dtype=np.float64)

    def __len__(self) -> int:
        return len(self.vertices)
