# core/bbox.py
from dataclasses import dataclass
from functools import reduce
from typing import Tuple

from core.point import Point
from core.ray import Ray
from core.utils import FLOAT_MAX, fmax, fmin, ieee_div


@dataclass(frozen=True)
class BBox:
    """
    An axis-aligned bounding box.

    A box whose minimum exceeds its maximum on some axis is empty; a box
    touching the FLOAT_MAX sentinel is unbounded. All operations return new
    boxes.
    """
    minimum: Point
    maximum: Point

    @staticmethod
    def empty() -> "BBox":
        """The identity for extend(): encloses nothing."""
        return BBox(Point.rep(FLOAT_MAX), Point.rep(-FLOAT_MAX))

    @staticmethod
    def full() -> "BBox":
        return BBox(Point.rep(-FLOAT_MAX), Point.rep(FLOAT_MAX))

    def extend(self, other: "BBox") -> "BBox":
        """Returns the smallest box enclosing both self and other."""
        return BBox(self.minimum.min(other.minimum), self.maximum.max(other.maximum))

    def extend_point(self, p: Point) -> "BBox":
        return BBox(self.minimum.min(p), self.maximum.max(p))

    def intersect(self, ray: Ray) -> Tuple[float, float]:
        """
        Slab test. Returns the parameter interval (t_enter, t_exit) during
        which the ray lies inside all three slabs; the ray hits the box only
        if t_enter <= t_exit.

        A zero direction component yields infinite slab distances, which the
        NaN-ignoring min/max fold into the right interval.
        """
        near = []
        far = []
        for a in ("x", "y", "z"):
            o = getattr(ray.origin, a)
            d = getattr(ray.direction, a)
            t0 = ieee_div(getattr(self.minimum, a) - o, d)
            t1 = ieee_div(getattr(self.maximum, a) - o, d)
            near.append(fmin(t0, t1))
            far.append(fmax(t0, t1))
        return reduce(fmax, near), reduce(fmin, far)

    def is_unbound(self) -> bool:
        """True if any face sits at the FLOAT_MAX sentinel used by full()."""
        return (
            any(c == FLOAT_MAX for c in self.maximum)
            or any(c == -FLOAT_MAX for c in self.minimum)
        )

    def contains(self, other: "BBox") -> bool:
        return self.extend(other) == self

    def contains_point(self, p: Point) -> bool:
        return self.extend_point(p) == self

    def is_empty(self) -> bool:
        return any(lo > hi for lo, hi in zip(self.minimum, self.maximum))
