"""Points, rectangles, the camera and distance helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position or size in floating-point pixels."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def contains(self, point: Point) -> bool:
        """Return True if the point lies inside the rectangle, edges included."""
        return (
            self.x <= point.x <= self.x + self.w
            and self.y <= point.y <= self.y + self.h
        )

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.w
            and self.x + self.w > other.x
            and self.y < other.y + other.h
            and self.y + self.h > other.y
        )

    def scaled(self, factor: float) -> Rect:
        """Return a copy with every coordinate multiplied by ``factor``."""
        return Rect(self.x * factor, self.y * factor, self.w * factor, self.h * factor)


@dataclass
class Camera:
    """The world position shown at the top-left corner of the screen."""

    pos: Point = field(default_factory=Point)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)