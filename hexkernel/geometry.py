"""Pixel-space points and segments."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from .config import POINT_EPSILON

SQRT3 = math.sqrt(3.0)
Mat2 = Tuple[Tuple[float, float], Tuple[float, float]]
PointLike = Union["Point", Sequence[float]]


@dataclass(frozen=True, eq=False)
class Point:
    """A 2D position in pixel space.

    Two points are equal when both components differ by less than
    :data:`~hexkernel.config.POINT_EPSILON`.  Because equality is
    approximate, points are not hashable.
    """

    x: float
    y: float

    @classmethod
    def from_xy(cls, xy: Sequence[float]) -> "Point":
        """Build a point from a two-element sequence ``(x, y)``."""
        if len(xy) != 2:
            raise ValueError(f"expected 2 values for a point, got {len(xy)}")
        return cls(float(xy[0]), float(xy[1]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (abs(self.x - other.x) < POINT_EPSILON
                and abs(self.y - other.y) < POINT_EPSILON)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


def as_point(value: PointLike) -> Point:
    """Return ``value`` as a :class:`Point`, coercing ``(x, y)`` sequences."""
    if isinstance(value, Point):
        return value
    return Point.from_xy(value)


@dataclass(frozen=True)
class PointPair:
    """An ordered pair of points, e.g. the two ends of a hex edge."""

    a: Point
    b: Point

    @classmethod
    def from_coords(cls, coords: Sequence[float]) -> "PointPair":
        """Build from four values ``(ax, ay, bx, by)``."""
        if len(coords) != 4:
            raise ValueError(f"expected 4 values for a point pair, got {len(coords)}")
        return cls(Point(float(coords[0]), float(coords[1])),
                   Point(float(coords[2]), float(coords[3])))

    @classmethod
    def from_points(cls, a: PointLike, b: PointLike) -> "PointPair":
        return cls(as_point(a), as_point(b))

    def to_array(self) -> Tuple[float, float, float, float]:
        """Flatten back to ``(ax, ay, bx, by)``."""
        return self.a.x, self.a.y, self.b.x, self.b.y
