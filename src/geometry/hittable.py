# geometry/hittable.py
from dataclasses import dataclass
from typing import Optional

from core.bbox import BBox
from core.point import Point
from core.ray import Ray
from core.vector import Vector


@dataclass(frozen=True)
class Intersection:
    """
    Records details of a ray-primitive intersection.
    """
    distance: float  # Ray parameter at the hit
    ray: Ray
    n: Vector        # Surface normal at the hit
    uv: Point        # Local surface coordinate

    def hit_point(self) -> Point:
        """
        The hit position, always derived from the ray and the distance.
        """
        return self.ray.get_point(self.distance)

    def normal(self) -> Vector:
        return self.n

    def local(self) -> Point:
        return self.uv


class Primitive:
    """
    Abstract class for geometric shapes that can be intersected by a ray.
    """
    def get_bounds(self) -> BBox:
        raise NotImplementedError("get_bounds() must be implemented by subclasses.")

    def intersect(self, ray: Ray, previous_best_distance: float) -> Optional[Intersection]:
        """
        Returns the intersection with the ray, or None if there is none or it
        lies farther away than previous_best_distance.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")
