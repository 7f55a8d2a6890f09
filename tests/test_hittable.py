"""Unit tests for the hit record and the primitive contract."""

from typing import Optional

import pytest

from core.bbox import BBox
from core.point import Point
from core.ray import Ray
from core.vector import Vector
from geometry import Intersection, Primitive


class BoxPrimitive(Primitive):
    """Minimal primitive used to exercise the contract end to end."""

    def __init__(self, bounds: BBox):
        self.bounds = bounds

    def get_bounds(self) -> BBox:
        return self.bounds

    def intersect(self, ray: Ray, previous_best_distance: float) -> Optional[Intersection]:
        t_enter, t_exit = self.bounds.intersect(ray)
        if t_enter > t_exit or t_enter < 0.0 or t_enter >= previous_best_distance:
            return None
        return Intersection(t_enter, ray, -ray.direction.normalize(), Point(0.0, 0.0, 0.0))


class TestIntersection:
    """Tests for the hit record."""

    def test_projections(self):
        ray = Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))
        n = Vector(0.0, 0.0, -1.0)
        uv = Point(0.25, 0.75, 0.0)
        hit = Intersection(4.0, ray, n, uv)
        assert hit.hit_point() == Point(0.0, 0.0, -1.0)
        assert hit.normal() == n
        assert hit.local() == uv

    def test_hit_point_is_derived_from_ray(self):
        ray = Ray(Point(1.0, 2.0, 3.0), Vector(0.5, -1.0, 2.0))
        hit = Intersection(3.0, ray, Vector(0.0, 1.0, 0.0), Point(0.0, 0.0, 0.0))
        assert hit.hit_point() == ray.get_point(3.0)


class TestPrimitiveContract:
    """Tests for the Primitive capability."""

    def test_base_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Primitive().get_bounds()
        with pytest.raises(NotImplementedError):
            Primitive().intersect(Ray(Point(0.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0)), 1.0)

    def test_primitive_reports_hit(self, unit_box):
        prim = BoxPrimitive(unit_box)
        ray = Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))
        hit = prim.intersect(ray, float("inf"))
        assert hit is not None
        assert hit.distance == 4.0
        assert prim.get_bounds().contains_point(hit.hit_point())

    def test_primitive_rejects_farther_hit(self, unit_box):
        prim = BoxPrimitive(unit_box)
        ray = Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))
        assert prim.intersect(ray, 3.0) is None

    def test_closest_hit_across_primitives(self):
        """previous_best_distance lets farther primitives be skipped."""
        near = BoxPrimitive(BBox(Point(-1.0, -1.0, 0.0), Point(1.0, 1.0, 1.0)))
        far = BoxPrimitive(BBox(Point(-1.0, -1.0, 5.0), Point(1.0, 1.0, 6.0)))
        ray = Ray(Point(0.0, 0.0, -2.0), Vector(0.0, 0.0, 1.0))

        best = None
        for prim in (far, near):
            hit = prim.intersect(ray, best.distance if best else float("inf"))
            if hit is not None:
                best = hit
        assert best.distance == 2.0

    def test_bounds_accumulate(self):
        prims = [
            BoxPrimitive(BBox(Point(0.0, 0.0, 0.0), Point(1.0, 1.0, 1.0))),
            BoxPrimitive(BBox(Point(-3.0, 2.0, 0.5), Point(-2.0, 4.0, 0.75))),
        ]
        bounds = BBox.empty()
        for prim in prims:
            bounds = bounds.extend(prim.get_bounds())
        assert bounds == BBox(Point(-3.0, 0.0, 0.0), Point(1.0, 4.0, 1.0))
