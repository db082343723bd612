"""Orientation presets and the pixel <-> axial transform."""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, replace
from typing import Iterable, List, NamedTuple, Union

import numpy as np

from .config import DIRECTION_COUNT
from .coordinates import Coordinates, EdgeCoordinates, round_many
from .geometry import SQRT3, Mat2, Point, PointLike, PointPair, as_point


@dataclass(frozen=True)
class Orientation:
    """Matrix pair and corner angle describing a hex tiling.

    ``mat2screen`` maps axial ``(q, r)`` to pixel offsets in units of the
    tile radius and ``mat2coord`` maps back.  ``start_angle`` is the angle
    of vertex 0 in multiples of 60 degrees.
    """

    mat2screen: Mat2
    mat2coord: Mat2
    start_angle: float


POINTY_TOP = Orientation(
    mat2screen=((SQRT3, SQRT3 / 2.0), (0.0, 1.5)),
    mat2coord=((SQRT3 / 3.0, -1.0 / 3.0), (0.0, 2.0 / 3.0)),
    start_angle=0.5,
)

FLAT_TOP = Orientation(
    mat2screen=((1.5, 0.0), (SQRT3 / 2.0, SQRT3)),
    mat2coord=((2.0 / 3.0, 0.0), (-1.0 / 3.0, SQRT3 / 3.0)),
    start_angle=0.0,
)


class BoundingBox(NamedTuple):
    """Axis-aligned rectangle around a hex, in pixels."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Layout:
    """Orientation, per-axis tile radius and pixel origin.

    Vertices are wound counter-clockwise on a y-down screen: the offset of
    vertex ``i`` lies at angle ``pi * (start_angle - i) / 3``.  Edge ``i``
    runs from vertex ``i`` to vertex ``i + 1``, so with :data:`POINTY_TOP`
    edge ``i`` faces neighbour direction ``i``::

            * 2
        3 *   * 1
        4 *   * 0
            * 5

    Layouts are immutable; :meth:`move_to` and :meth:`scale` return new
    instances.
    """

    orientation: Orientation
    radius: Point
    origin: Point

    def __post_init__(self) -> None:
        # Frozen, so coerced values go through object.__setattr__
        object.__setattr__(self, "radius", as_point(self.radius))
        object.__setattr__(self, "origin", as_point(self.origin))
        if self.radius.x == 0 or self.radius.y == 0:
            raise ValueError(f"radius components must be non-zero, got {self.radius}")

    @classmethod
    def new(cls, orientation: Orientation, radius: PointLike, origin: PointLike) -> "Layout":
        return cls(orientation, radius, origin)

    # ------------------------------------------------------------------
    # Single hex queries
    # ------------------------------------------------------------------

    def vertex_offset(self, index: int) -> Point:
        """Offset of vertex ``index`` (range 0..6) from the hex center."""
        angle = math.pi * (self.orientation.start_angle - index) / 3.0
        return Point(self.radius.x * math.cos(angle), self.radius.y * math.sin(angle))

    def coord_at(self, p: PointLike) -> Coordinates:
        """Return the hex containing pixel ``p``."""
        p = as_point(p)
        mat = self.orientation.mat2coord
        px = (p.x - self.origin.x) / self.radius.x
        py = (p.y - self.origin.y) / self.radius.y
        q = mat[0][0] * px + mat[0][1] * py
        r = mat[1][0] * px + mat[1][1] * py
        return Coordinates.round(q, r)

    def center_of_hex(self, c: Coordinates) -> Point:
        """Return the pixel center of hex ``c``."""
        mat = self.orientation.mat2screen
        x = (mat[0][0] * c.q + mat[0][1] * c.r) * self.radius.x
        y = (mat[1][0] * c.q + mat[1][1] * c.r) * self.radius.y
        return Point(x + self.origin.x, y + self.origin.y)

    def vertices_of_hex(self, c: Coordinates) -> List[Point]:
        center = self.center_of_hex(c)
        return [center + self.vertex_offset(i) for i in range(DIRECTION_COUNT)]

    def vertices_of_edge(self, e: EdgeCoordinates) -> PointPair:
        """Return the two end points of edge ``e``."""
        center = self.center_of_hex(e.coord)
        return PointPair(center + self.vertex_offset(e.index),
                         center + self.vertex_offset((e.index + 1) % DIRECTION_COUNT))

    def edge_towards(self, c: Coordinates, index: int) -> PointPair:
        return self.vertices_of_edge(EdgeCoordinates(c, index))

    def all_edges_of_hex(self, c: Coordinates) -> List[PointPair]:
        """Return all six edges of ``c``, computing each vertex once."""
        center = self.center_of_hex(c)
        starts: List[Point] = [center] * DIRECTION_COUNT
        ends: List[Point] = [center] * DIRECTION_COUNT
        for i in range(DIRECTION_COUNT):
            p = center + self.vertex_offset(i)
            starts[i] = p
            ends[(i + 5) % DIRECTION_COUNT] = p
        return [PointPair(a, b) for a, b in zip(starts, ends)]

    def bounding_box_of(self, c: Coordinates) -> BoundingBox:
        """Return the axis-aligned box around hex ``c``.

        The extremes are found by scanning all six vertices, so the result
        holds for any orientation and for negative radii.
        """
        vertices = self.vertices_of_hex(c)
        xs = [v.x for v in vertices]
        ys = [v.y for v in vertices]
        x1, y1 = min(xs), min(ys)
        return BoundingBox(x1, y1, max(xs) - x1, max(ys) - y1)

    # ------------------------------------------------------------------
    # Derived layouts
    # ------------------------------------------------------------------

    def move_to(self, origin: PointLike) -> "Layout":
        return replace(self, origin=as_point(origin))

    def scale(self, factor: Union[float, PointLike]) -> "Layout":
        """Return a layout whose radius is multiplied by ``factor``.

        ``factor`` is either a number applied to both axes or a per-axis
        ``(sx, sy)`` pair.
        """
        if isinstance(factor, bool):
            raise TypeError("scale factor must be a number or an (sx, sy) pair, not bool")
        if isinstance(factor, numbers.Real):
            s = Point(float(factor), float(factor))
        else:
            s = as_point(factor)
        return replace(self, radius=Point(self.radius.x * s.x, self.radius.y * s.y))

    # ------------------------------------------------------------------
    # Batch queries
    # ------------------------------------------------------------------

    def centers_of_hexes(self, coords: Union[Iterable[Coordinates], np.ndarray]) -> np.ndarray:
        """Vectorised :meth:`center_of_hex`.

        ``coords`` is an iterable of :class:`Coordinates` or an ``(N, 2)``
        array of ``(q, r)`` rows.  Returns an ``(N, 2)`` float array.
        """
        qr = _as_rows(coords, dtype=np.float64)
        mat = np.asarray(self.orientation.mat2screen, dtype=np.float64)
        xy = qr @ mat.T
        xy *= (self.radius.x, self.radius.y)
        xy += (self.origin.x, self.origin.y)
        return xy

    def coords_at_points(self, points: Union[Iterable[PointLike], np.ndarray]) -> np.ndarray:
        """Vectorised :meth:`coord_at`.

        Returns an ``(N, 2)`` integer array of ``(q, r)`` rows.
        """
        xy = _as_rows(points, dtype=np.float64)
        xy = (xy - (self.origin.x, self.origin.y)) / (self.radius.x, self.radius.y)
        mat = np.asarray(self.orientation.mat2coord, dtype=np.float64)
        qr = xy @ mat.T
        return round_many(qr[:, 0], qr[:, 1])


def _as_rows(values, dtype) -> np.ndarray:
    """Coerce coordinates, points or an array into an ``(N, 2)`` array."""
    if isinstance(values, np.ndarray):
        arr = values.astype(dtype, copy=True)
    else:
        rows = []
        for v in values:
            if isinstance(v, Coordinates):
                rows.append((v.q, v.r))
            else:
                rows.append(as_point(v).to_tuple())
        arr = np.array(rows, dtype=dtype)
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected an (N, 2) array, got shape {arr.shape}")
    return arr
