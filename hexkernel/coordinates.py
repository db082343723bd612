"""Axial hex coordinates and the tile-grid algebra built on them.

Axial coordinates address a hex with two integers ``(q, r)``.  The third
cube coordinate ``s`` is implied by ``q + r + s == 0`` and is never stored::

                 q
             --7
          --
       --
      |
      |
      v
      r

Directions are numbered counter-clockwise starting at East, see
:data:`DIRECTIONS`.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .config import DIRECTION_COUNT, LINE_NUDGE


class InvalidDirectionError(ValueError):
    """Raised for a direction or edge index outside ``[0, 6)``."""

    def __init__(self, direction: int) -> None:
        super().__init__(f"Invalid direction: {direction}")
        self.direction = direction


def _round_half_away(x: float) -> float:
    # Python's round() is half-to-even; grid snapping wants half away from zero.
    # abs(x) - floor(abs(x)) is exact, unlike floor(abs(x) + 0.5).
    a = abs(x)
    f = math.floor(a)
    if a - f >= 0.5:
        f += 1
    return math.copysign(f, x)


def _round_half_away_many(x: np.ndarray) -> np.ndarray:
    a = np.abs(x)
    f = np.floor(a)
    return np.copysign(f + (a - f >= 0.5), x)


def _interpolate(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


@dataclass(frozen=True, order=True)
class Coordinates:
    """An immutable axial coordinate ``(q, r)``."""

    q: int  # column
    r: int  # row

    @classmethod
    def at(cls, q: int, r: int) -> "Coordinates":
        """Create a coordinate at the given location."""
        return cls(q, r)

    @property
    def s(self) -> int:
        """The implicit cube coordinate ``-q - r``."""
        return -self.q - self.r

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: "Coordinates") -> "Coordinates":
        if not isinstance(other, Coordinates):
            return NotImplemented
        return Coordinates(self.q + other.q, self.r + other.r)

    def __sub__(self, other: "Coordinates") -> "Coordinates":
        if not isinstance(other, Coordinates):
            return NotImplemented
        return Coordinates(self.q - other.q, self.r - other.r)

    def __mul__(self, k: int) -> "Coordinates":
        if not isinstance(k, numbers.Integral) or isinstance(k, bool):
            return NotImplemented
        k = int(k)
        return Coordinates(self.q * k, self.r * k)

    __rmul__ = __mul__

    def __neg__(self) -> "Coordinates":
        return Coordinates(-self.q, -self.r)

    # ------------------------------------------------------------------
    # Grid queries
    # ------------------------------------------------------------------

    def length(self) -> int:
        """Distance from the origin, in tiles."""
        return (abs(self.q) + abs(self.r) + abs(-self.q - self.r)) // 2

    def distance_to(self, other: "Coordinates") -> int:
        """Distance to ``other``, in tiles."""
        return (self - other).length()

    @staticmethod
    def unit(d: int) -> "Coordinates":
        """Return the unit vector for direction ``d`` (range 0..6).

        Raises :class:`InvalidDirectionError` when ``d`` is out of range.
        """
        if not 0 <= d < DIRECTION_COUNT:
            raise InvalidDirectionError(d)
        return DIRECTIONS[d]

    def neighbour(self, d: int) -> "Coordinates":
        """Return the neighbouring coordinate in direction ``d`` (range 0..6)."""
        return self + Coordinates.unit(d)

    def neighbours(self) -> List["Coordinates"]:
        """Return the six neighbours in direction order."""
        return [self + u for u in DIRECTIONS]

    @classmethod
    def round(cls, q: float, r: float) -> "Coordinates":
        """Snap fractional axial coordinates to the nearest hex.

        Each cube component is rounded on its own, then the one with the
        largest rounding error is rebuilt from the other two.  Ties are
        broken in the order q, r, s.
        """
        if not (math.isfinite(q) and math.isfinite(r)):
            raise ValueError(f"cannot round non-finite coordinates ({q!r}, {r!r})")

        s = -q - r
        rq = _round_half_away(q)
        rr = _round_half_away(r)
        rs = _round_half_away(s)

        dq = abs(rq - q)
        dr = abs(rr - r)
        ds = abs(rs - s)

        if dq > dr and dq > ds:
            rq = -rr - rs
        elif dr > ds:
            rr = -rq - rs

        return cls(int(rq), int(rr))

    def line_to(self, other: "Coordinates") -> List["Coordinates"]:
        """Coordinates composing a line from here to ``other``, both inclusive.

        The result always holds ``distance_to(other) + 1`` entries.
        """
        n = self.distance_to(other)
        if n == 0:
            return [self]
        # Nudging q only keeps samples on a shared edge on a consistent side,
        # c.f. http://www.redblobgames.com/grids/hexagons/#line-drawing
        q0 = self.q + LINE_NUDGE
        q1 = other.q + LINE_NUDGE
        return [
            Coordinates.round(_interpolate(q0, q1, i / n),
                              _interpolate(self.r, other.r, i / n))
            for i in range(n + 1)
        ]

    def to_tuple(self) -> Tuple[int, int]:
        return self.q, self.r


# Counter-clockwise, starting East
DIRECTIONS: Tuple[Coordinates, ...] = (
    Coordinates(1, 0),   # E
    Coordinates(1, -1),  # NE
    Coordinates(0, -1),  # NW
    Coordinates(-1, 0),  # W
    Coordinates(-1, 1),  # SW
    Coordinates(0, 1),   # SE
)


@dataclass(frozen=True)
class EdgeCoordinates:
    """One of the six edges of a hex: the owning hex plus an edge index."""

    coord: Coordinates
    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < DIRECTION_COUNT:
            raise InvalidDirectionError(self.index)


def round_many(q: np.ndarray, r: np.ndarray) -> np.ndarray:
    """Vectorised :meth:`Coordinates.round`.

    ``q`` and ``r`` are broadcast together and flattened.  Returns an
    ``(N, 2)`` ``int64`` array of ``(q, r)`` rows using the same tie-break
    order as the scalar version.
    """
    fq = np.asarray(q, dtype=np.float64).ravel()
    fr = np.asarray(r, dtype=np.float64).ravel()
    fq, fr = np.broadcast_arrays(fq, fr)
    if not (np.all(np.isfinite(fq)) and np.all(np.isfinite(fr))):
        raise ValueError("cannot round non-finite coordinates")
    fs = -fq - fr

    rq = _round_half_away_many(fq)
    rr = _round_half_away_many(fr)
    rs = _round_half_away_many(fs)

    dq = np.abs(rq - fq)
    dr = np.abs(rr - fr)
    ds = np.abs(rs - fs)

    fix_q = (dq > dr) & (dq > ds)
    fix_r = ~fix_q & (dr > ds)
    rq = np.where(fix_q, -rr - rs, rq)
    rr = np.where(fix_r, -rq - rs, rr)

    return np.stack([rq, rr], axis=1).astype(np.int64)
