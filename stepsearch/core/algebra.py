from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple
import math
import numpy as np


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    @staticmethod
    def from_iterable(values: Iterable[float]) -> Point2D:
        arr = np.asarray(list(values), dtype=float).reshape(2)
        return Point2D(float(arr[0]), float(arr[1]))

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point2D:
        return Point2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Point2D:
        return self.__mul__(scalar)

    def norm(self) -> float:
        return float(math.hypot(self.x, self.y))

    def distance_xy(self, other) -> float:
        return distance_xy(self, other)

    def offset_polar(self, distance: float, angle: float) -> Point2D:
        return Point2D(self.x + distance * math.cos(angle), self.y + distance * math.sin(angle))

    @staticmethod
    def zero() -> Point2D:
        return Point2D(0.0, 0.0)


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle, bounds inclusive."""

    x_min: float = 0.0
    x_max: float = 0.0
    y_min: float = 0.0
    y_max: float = 0.0

    @staticmethod
    def around(center, half_width: float, half_height: float | None = None) -> Rectangle:
        if half_height is None:
            half_height = half_width
        return Rectangle(center.x - half_width, center.x + half_width,
                         center.y - half_height, center.y + half_height)

    def width(self) -> float:
        return self.x_max - self.x_min

    def height(self) -> float:
        return self.y_max - self.y_min

    def contains(self, point) -> bool:
        return self.x_min <= point.x <= self.x_max and self.y_min <= point.y <= self.y_max

    def is_space_available(self, point) -> bool:
        return self.contains(point)

    def bounds(self) -> Tuple[float, float, float, float]:
        return self.x_min, self.x_max, self.y_min, self.y_max


@dataclass(frozen=True)
class Circle:
    center: Point2D
    radius: float

    def contains(self, point, margin: float = 0.0) -> bool:
        """Check if a 2D point is inside the circle grown by `margin`."""
        return distance_xy(self.center, point) <= (self.radius + margin)

    def intersects(self, other: Circle, margin: float = 0.0) -> bool:
        return distance_xy(self.center, other.center) < (self.radius + other.radius + margin)


#================= Helpers =================#

def distance_xy(a, b) -> float:
    return float(math.hypot(a.x - b.x, a.y - b.y))


def heading_xy(from_point, to_point) -> float:
    return math.atan2(to_point.y - from_point.y, to_point.x - from_point.x)


def wrap_angle(angle: float) -> float:
    return (angle + math.pi) % (2.0 * math.pi) - math.pi

#============================================#
