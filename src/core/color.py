# core/color.py
from dataclasses import dataclass
from typing import Iterator

from core.utils import fmax, fmin, ieee_div


@dataclass(frozen=True)
class Color:
    """
    An immutable RGB radiance/reflectance triple.

    Arithmetic is component-wise and unbounded; clamp() is the only
    operation that restricts channels to the displayable [0, 1] range.
    """
    r: float
    g: float
    b: float

    @staticmethod
    def rep(v: float) -> "Color":
        return Color(v, v, v)

    def __eq__(self, other) -> bool:
        # component-wise, so a NaN component never compares equal
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b

    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other):
        # Scalar multiplication.
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        # Channel-wise filtering by another color.
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return NotImplemented

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Color":
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Color(ieee_div(self.r, t), ieee_div(self.g, t), ieee_div(self.b, t))

    def clamp(self) -> "Color":
        """Clamps every channel into [0, 1]. NaN channels clamp to 0."""
        return Color(
            fmin(1.0, fmax(0.0, self.r)),
            fmin(1.0, fmax(0.0, self.g)),
            fmin(1.0, fmax(0.0, self.b))
        )

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"
