"""Basic 2D geometry used for layout and bounds."""

import operator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A 2D point supporting element-wise and scalar arithmetic."""

    x: float = 0.0
    y: float = 0.0

    def _combine(self, other, op):
        if isinstance(other, Point):
            return Point(op(self.x, other.x), op(self.y, other.y))
        if isinstance(other, (int, float)):
            return Point(op(self.x, other), op(self.y, other))
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    width: float = 0.0
    height: float = 0.0


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    position: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)