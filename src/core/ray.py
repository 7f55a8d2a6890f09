# core/ray.py
from dataclasses import dataclass

from core.point import Point
from core.vector import Vector


@dataclass(frozen=True)
class Ray:
    """
    Represents a ray in 3D space with an origin and direction.

    The direction is stored as given; it is not normalized and may even be
    zero.
    """
    origin: Point
    direction: Vector

    def get_point(self, t: float) -> Point:
        """
        Returns the point along the ray at parameter t. Negative values lie
        behind the origin.
        """
        return self.origin + self.direction * t
