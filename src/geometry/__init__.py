from geometry.hittable import Intersection, Primitive

__all__ = ["Intersection", "Primitive"]
