from core.vector import Vector
from core.point import Point
from core.color import Color
from core.ray import Ray
from core.bbox import BBox

__all__ = ["Vector", "Point", "Color", "Ray", "BBox"]
