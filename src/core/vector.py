# core/vector.py
import math
from dataclasses import dataclass
from typing import Iterator

from core.utils import ieee_div


@dataclass(frozen=True)
class Vector:
    """
    An immutable 3D direction/displacement supporting arithmetic, dot and
    cross products, and normalization.

    Every operator returns a new Vector, so `v += w` rebinds `v` and never
    touches a value shared elsewhere.
    """
    x: float
    y: float
    z: float

    @staticmethod
    def rep(v: float) -> "Vector":
        return Vector(v, v, v)

    def __eq__(self, other) -> bool:
        # component-wise, so a NaN component never compares equal
        if not isinstance(other, Vector):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, t: float) -> "Vector":
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Vector(self.x * t, self.y * t, self.z * t)

    __rmul__ = __mul__

    def __truediv__(self, t: float) -> "Vector":
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Vector(ieee_div(self.x, t), ieee_div(self.y, t), ieee_div(self.z, t))

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector") -> "Vector":
        """Right-handed cross product."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        """Squared length; skips the square root when only comparing magnitudes."""
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector":
        """
        Returns the unit vector self / length(). A zero vector has no
        direction and normalizes to NaN components.
        """
        return self / self.length()

    def __repr__(self) -> str:
        return f"Vector({self.x}, {self.y}, {self.z})"
