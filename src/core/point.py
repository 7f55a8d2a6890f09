# core/point.py
from dataclasses import dataclass
from typing import Iterator

from core.utils import fmax, fmin, ieee_div
from core.vector import Vector


@dataclass(frozen=True)
class Point:
    """
    An immutable position in 3D space.

    Points translate by Vectors (Point + Vector -> Point) and differ by
    Vectors (Point - Point -> Vector). They have no length or direction.
    """
    x: float
    y: float
    z: float

    @staticmethod
    def rep(v: float) -> "Point":
        return Point(v, v, v)

    def __eq__(self, other) -> bool:
        # component-wise, so a NaN component never compares equal
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector) -> "Point":
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __radd__(self, other: Vector) -> "Point":
        if not isinstance(other, Vector):
            return NotImplemented
        return self + other

    def __sub__(self, other: "Point") -> Vector:
        if not isinstance(other, Point):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, t: float) -> "Point":
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Point(self.x * t, self.y * t, self.z * t)

    __rmul__ = __mul__

    def __truediv__(self, t: float) -> "Point":
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Point(ieee_div(self.x, t), ieee_div(self.y, t), ieee_div(self.z, t))

    def min(self, other: "Point") -> "Point":
        """Component-wise minimum."""
        return Point(fmin(self.x, other.x), fmin(self.y, other.y), fmin(self.z, other.z))

    def max(self, other: "Point") -> "Point":
        """Component-wise maximum."""
        return Point(fmax(self.x, other.x), fmax(self.y, other.y), fmax(self.z, other.z))

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y}, {self.z})"
